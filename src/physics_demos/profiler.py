# MIT License (see LICENSE)
"""
Timing of the two phases of a demo tick.

A Simulation given a Profiler wraps every tick's substep loop in a
``physics`` section and every kept history sample in a ``sampling``
section, and counts the substeps each tick executed. Nothing is timed when
no profiler is attached.

Example:
    profiler = Profiler()
    sim = DampedPendulum(params, initial, profiler=profiler)
    sim.start()
    run_for(sim, 5.0)
    print(profiler.stats.summary())
    print(profiler.stats.substeps_per_tick())
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator
import time


@dataclass
class ProfileStats:
    """
    Per-section durations (seconds) and per-tick substep counts.
    """
    timings: dict[str, list[float]] = field(default_factory=dict)
    substeps: list[int] = field(default_factory=list)

    def add(self, name: str, dt: float) -> None:
        self.timings.setdefault(name, []).append(dt)

    def add_tick(self, n: int) -> None:
        """Record how many substeps one tick ran."""
        self.substeps.append(n)

    def substeps_per_tick(self) -> float:
        if not self.substeps:
            return 0.0
        return sum(self.substeps) / len(self.substeps)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to {'n', 'total_ms', 'mean_ms', 'max_ms'}.
        """
        out = {}
        for name, times in self.timings.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """Section timer and substep counter attached to one simulation."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under ``name``, also when it raises."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - start)

    def reset(self) -> None:
        self.stats = ProfileStats()
