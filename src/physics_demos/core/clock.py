# MIT License (see LICENSE)
"""
Fixed-substep time keeping.

The host (a UI frame callback, a game loop, a test) reports how much wall
clock time has passed; the clock turns that into a whole number of fixed
physics substeps. Integration accuracy therefore does not depend on the
display frame rate:

    1. The elapsed time is clamped to ``max_frame_dt`` so a long pause
       (background tab, breakpoint) does not produce one huge step.
    2. The clamped time is added to an accumulator.
    3. Substeps of ``sim_dt`` are taken while the accumulator holds at least
       one substep; the remainder carries into the next tick.

The number of substeps per tick is bounded by ceil(max_frame_dt / sim_dt)
plus one carried substep.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable
import logging
import math

from ..constants import MAX_FRAME_DT, TIME_EPS
from ..errors import require_positive

logger = logging.getLogger(__name__)


class Ticker(ABC):
    """
    Anything the host loop can drive with elapsed wall-clock seconds.

    A simulation implements this; the host does not need to know about
    substeps, integrators or sampling.
    """

    @abstractmethod
    def tick(self, elapsed: float) -> int:
        """
        Consume ``elapsed`` seconds of wall-clock time.

        Returns:
            Number of physics substeps executed.
        """
        ...


class FixedStepClock:
    """
    Accumulator that converts variable frame deltas into fixed substeps.

    Attributes:
        sim_dt: Physics substep in seconds of simulated time.
        max_frame_dt: Upper bound on the wall-clock time consumed per advance().
        time_scale: Simulated seconds per wall-clock second (the orbit demo
            runs many times faster than real time).
    """

    def __init__(
        self,
        sim_dt: float,
        max_frame_dt: float = MAX_FRAME_DT,
        time_scale: float = 1.0,
    ) -> None:
        require_positive("sim_dt", sim_dt)
        require_positive("max_frame_dt", max_frame_dt)
        require_positive("time_scale", time_scale)
        self.sim_dt = float(sim_dt)
        self.max_frame_dt = float(max_frame_dt)
        self.time_scale = float(time_scale)
        self.accumulator = 0.0

    def reset(self) -> None:
        """Drop any carried remainder."""
        self.accumulator = 0.0

    def advance(self, elapsed: float, step: Callable[[float], bool | None]) -> int:
        """
        Run as many fixed substeps as ``elapsed`` (plus the carry) allows.

        Args:
            elapsed: Wall-clock seconds since the previous call.
            step: Called with ``sim_dt`` once per substep. Returning False
                stops the loop early (terminal condition); the remaining
                accumulated time is discarded.

        Returns:
            Number of substeps executed.
        """
        if not math.isfinite(elapsed):
            logger.warning("ignoring non-finite frame delta %r", elapsed)
            elapsed = 0.0
        elif elapsed > self.max_frame_dt:
            logger.warning(
                "frame delta %.4fs exceeds %.4fs, clamping", elapsed, self.max_frame_dt
            )
            elapsed = self.max_frame_dt
        elif elapsed < 0.0:
            elapsed = 0.0

        self.accumulator += elapsed * self.time_scale
        steps = 0
        while self.accumulator >= self.sim_dt - TIME_EPS:
            self.accumulator -= self.sim_dt
            steps += 1
            if step(self.sim_dt) is False:
                self.accumulator = 0.0
                break
        if self.accumulator < 0.0:
            self.accumulator = 0.0
        return steps


def run_for(ticker: Ticker, duration: float, frame_dt: float = 1 / 60) -> int:
    """
    Drive a ticker with constant frame deltas for ``duration`` seconds.

    Stand-in for a display loop in scripts, benchmarks and tests.

    Returns:
        Total number of substeps executed.
    """
    require_positive("frame_dt", frame_dt)
    frames = int(round(duration / frame_dt))
    total = 0
    for _ in range(frames):
        total += ticker.tick(frame_dt)
    return total
