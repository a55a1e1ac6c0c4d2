# MIT License (see LICENSE)
"""
Snapshot consumers for drawing or logging a running demo.

A renderer sees a demo only through ``Simulation.snapshot()``. Energies,
momenta and forces arrive precomputed there, so no renderer touches the
physics state or repeats a physical calculation.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Any, Mapping, TextIO
import sys

from ..io.ingest import snapshot_to_record

if TYPE_CHECKING:
    from ..demos.base import Simulation


class RendererAdapter(ABC):
    """
    Frame protocol shared by every display backend.

    A frame is opened with the demo time, receives one snapshot and is then
    closed. ``render`` runs the three calls for a simulation in one go:

        renderer.render(sim)
    """

    frames_drawn: int = 0

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """Open a frame stamped with simulated time ``time`` (s)."""
        ...

    @abstractmethod
    def draw_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render(self, sim: "Simulation") -> None:
        self.begin_frame(sim.time)
        self.draw_snapshot(sim.snapshot())
        self.end_frame()
        self.frames_drawn += 1


class DebugRenderer(RendererAdapter):
    """
    Prints one ``name=value`` line per frame.

    Vectors are flattened to ``<name>_x`` / ``<name>_y`` first, so those are
    the names to select in ``fields``. Selected names missing from a
    snapshot are skipped.

    Example:
        DebugRenderer(fields=("theta", "omega", "e_total")).render(pendulum)

    prints
        t=1.2500 theta=-0.1032 omega=0.4411 e_total=0.0122
    """

    def __init__(
        self,
        output: TextIO | None = None,
        fields: tuple[str, ...] | None = None,
        precision: int = 4,
    ):
        self.output = output or sys.stdout
        self.fields = fields
        self.precision = precision
        self._parts: list[str] = []

    def _format(self, name: str, value: Any) -> str:
        if isinstance(value, float):
            return f"{name}={value:.{self.precision}f}"
        return f"{name}={value}"

    def begin_frame(self, time: float) -> None:
        self._parts = [self._format("t", float(time))]

    def draw_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        record = snapshot_to_record(snapshot)
        wanted = self.fields if self.fields is not None else tuple(k for k in record if k != "t")
        self._parts.extend(self._format(k, record[k]) for k in wanted if k in record)

    def end_frame(self) -> None:
        print(" ".join(self._parts), file=self.output, flush=True)


class NullRenderer(RendererAdapter):
    """Draws nothing; lets a host loop run with rendering switched off."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Keeps a copy of each frame's snapshot for replay or plotting.

    Each entry of ``frames`` is ``{"time": t, "snapshot": {...}}``. With
    ``max_frames`` set, the oldest frames are dropped once the cap is hit.

    Example:
        renderer = BufferedRenderer()
        while not sim.finished:
            sim.tick(1 / 60)
            renderer.render(sim)
        energy = renderer.series("e_total")
    """

    def __init__(self, max_frames: int | None = None):
        self.max_frames = max_frames
        self.frames: deque[dict] = deque(maxlen=max_frames)
        self._pending: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._pending = {"time": time, "snapshot": None}

    def draw_snapshot(self, snapshot: Mapping[str, Any]) -> None:
        if self._pending is not None:
            self._pending["snapshot"] = dict(snapshot)

    def end_frame(self) -> None:
        if self._pending is None:
            return
        self.frames.append(self._pending)
        self._pending = None

    def series(self, name: str) -> list[Any]:
        """Values of one snapshot key across the kept frames."""
        return [f["snapshot"][name] for f in self.frames if f["snapshot"] and name in f["snapshot"]]

    def clear(self) -> None:
        self.frames.clear()
