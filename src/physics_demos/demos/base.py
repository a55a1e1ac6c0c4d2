# MIT License (see LICENSE)
"""
Common machinery for the demo simulations.

Each demo owns:
- params: a frozen dataclass of physical parameters (validated on creation).
- initial: a frozen dataclass of initial conditions.
- state: a mutable dataclass holding the instantaneous physical state.
- history: a HistoryBuffer sampled after each substep.
- clock: a FixedStepClock turning frame deltas into substeps.

Control surface (used by a UI layer, a host loop, or tests):
    reset(params, initial)   rebuild the state, clear history
    start() / pause()        set the cooperative ``running`` flag
    tick(elapsed)            host-loop entry point; no-op while paused
    step(dt, n)              manual substeps, regardless of ``running``
    snapshot()               state + derived quantities, recomputed
    export_history()         ordered list of samples

Physical end-states (planet impact, end of rail, lever stop) are not
errors: the demo records a ``Terminal`` reason, clears ``running`` and
refuses further steps until reset.
"""
from __future__ import annotations
from abc import abstractmethod
from dataclasses import asdict, replace, is_dataclass
from enum import Enum
from typing import Any, ClassVar
import logging

from ..constants import MAX_FRAME_DT
from ..core.clock import FixedStepClock, Ticker
from ..core.history import HistoryBuffer
from ..core.integrators import StepFn, get_integrator
from ..errors import ConfigurationError
from ..profiler import Profiler

logger = logging.getLogger(__name__)


class DemoKind(str, Enum):
    """The demos this package models."""
    INCLINE = "incline"
    PENDULUM = "pendulum"
    COLLISION = "collision"
    ATWOOD = "atwood"
    ORBIT = "orbit"
    SPRING_CART = "spring_cart"
    LEVER = "lever"
    DISK = "disk"
    UNIFORM = "uniform"


class Terminal(str, Enum):
    """Modeled end-states that halt a demo."""
    COLLISION = "collision"
    END_OF_TRACK = "end_of_track"
    HARD_STOP = "hard_stop"
    OBSERVATION_COMPLETE = "observation_complete"


class Simulation(Ticker):
    """
    Base class for a single demo.

    Subclasses set the class attributes and implement ``_initial_state``,
    ``_advance``, ``_sample`` and ``derived``.

    Class attributes:
        kind: DemoKind of the subclass.
        params_type / initial_type: dataclasses for parameters and initial
            conditions; default-constructed when not given.
        SIM_DT: Physics substep (s).
        SAMPLE_INTERVAL: History sampling interval (s).
        MAX_HISTORY: History capacity.
        HISTORY_FIELDS: Field names of each history sample.
        RECORD_INITIAL: Record the reset state as the first sample.
        INTEGRATOR: Name in INTEGRATORS used by ``_advance``; None for demos
            that do not integrate through the shared steppers.
    """
    kind: ClassVar[DemoKind]
    params_type: ClassVar[type]
    initial_type: ClassVar[type]
    SIM_DT: ClassVar[float] = 1 / 240
    SAMPLE_INTERVAL: ClassVar[float] = 1 / 60
    MAX_HISTORY: ClassVar[int] = 1200
    HISTORY_FIELDS: ClassVar[tuple[str, ...]] = ()
    RECORD_INITIAL: ClassVar[bool] = True
    TIME_SCALE: ClassVar[float] = 1.0
    INTEGRATOR: ClassVar[str | None] = "semi_implicit_euler"

    def __init__(
        self,
        params: Any = None,
        initial: Any = None,
        *,
        sim_dt: float | None = None,
        sample_interval: float | None = None,
        max_history: int | None = None,
        max_frame_dt: float = MAX_FRAME_DT,
        time_scale: float | None = None,
        profiler: Profiler | None = None,
        integrator: str | None = None,
    ) -> None:
        self.params = self._coerce(params, self.params_type, "params")
        self.initial = self._coerce(initial, self.initial_type, "initial")
        self.clock = FixedStepClock(
            sim_dt if sim_dt is not None else self.SIM_DT,
            max_frame_dt=max_frame_dt,
            time_scale=time_scale if time_scale is not None else self.TIME_SCALE,
        )
        self.history = HistoryBuffer(
            self.HISTORY_FIELDS,
            sample_interval if sample_interval is not None else self.SAMPLE_INTERVAL,
            max_history if max_history is not None else self.MAX_HISTORY,
        )
        self.profiler = profiler
        self.integrator_name, self.integrate = self._select_integrator(integrator)
        self.running = False
        self.reset()

    @staticmethod
    def _coerce(value: Any, expected: type, what: str) -> Any:
        if value is None:
            return expected()
        if not isinstance(value, expected):
            raise ConfigurationError(
                f"{what} must be {expected.__name__}, got {type(value).__name__}"
            )
        return value

    def _select_integrator(self, name: str | None) -> tuple[str | None, StepFn | None]:
        if name is None:
            name = self.INTEGRATOR
        elif self.INTEGRATOR is None:
            raise ConfigurationError(f"{self.kind.value} does not take an integrator")
        if name is None:
            return None, None
        return name, get_integrator(name)

    # ------------------------------------------------------------------
    # Control surface
    # ------------------------------------------------------------------

    def reset(self, params: Any = None, initial: Any = None) -> None:
        """
        Rebuild the state from parameters and initial conditions.

        Clears time, history, the clock's carry and any terminal condition,
        and leaves the demo paused.
        """
        if params is not None:
            self.params = self._coerce(params, self.params_type, "params")
        if initial is not None:
            self.initial = self._coerce(initial, self.initial_type, "initial")
        self.running = False
        self.time = 0.0
        self.steps = 0
        self.terminal: Terminal | None = None
        self.clock.reset()
        self.history.clear()
        self.state = self._initial_state()
        self._on_reset()
        if self.RECORD_INITIAL:
            self.history.force_record(self.time, **self._sample())
        logger.debug("%s reset: params=%s initial=%s", self.kind.value, self.params, self.initial)

    def update_params(self, **changes: Any) -> None:
        """
        Change parameters without resetting the state (live slider edits).

        The new parameter set is validated like a fresh one.

        Raises:
            ConfigurationError: On unknown names or rejected values.
        """
        try:
            self.params = replace(self.params, **changes)
        except TypeError as exc:
            raise ConfigurationError(f"invalid {self.kind.value} parameter update: {exc}") from None
        logger.debug("%s params updated: %s", self.kind.value, changes)

    def start(self) -> None:
        """Set the running flag; a finished demo is reset first."""
        if self.terminal is not None:
            self.reset()
        self.running = True

    def pause(self) -> None:
        """Clear the running flag; takes effect at the next tick."""
        self.running = False

    def tick(self, elapsed: float) -> int:
        """
        Host-loop entry point: advance by ``elapsed`` wall-clock seconds.

        Returns:
            Substeps executed (0 while paused or finished).
        """
        if not self.running or self.terminal is not None:
            return 0
        if self.profiler is None:
            return self.clock.advance(elapsed, self._substep)
        with self.profiler.section("physics"):
            n = self.clock.advance(elapsed, self._substep)
        self.profiler.stats.add_tick(n)
        return n

    def step(self, dt: float | None = None, n: int = 1) -> int:
        """
        Take ``n`` substeps of ``dt`` (default: the demo's substep).

        Works while paused. Stops early on a terminal condition.

        Returns:
            Substeps actually executed.
        """
        h = self.clock.sim_dt if dt is None else float(dt)
        if not h > 0:
            raise ConfigurationError(f"dt must be positive, got {dt!r}")
        start = self.steps
        for _ in range(n):
            if not self._substep(h):
                break
        return self.steps - start

    def run(self, duration: float) -> int:
        """Step for ``duration`` seconds of simulated time (tests, scripts)."""
        n = int(round(duration / self.clock.sim_dt))
        return self.step(n=n)

    @property
    def finished(self) -> bool:
        return self.terminal is not None

    def snapshot(self) -> dict[str, Any]:
        """
        Current time, state fields and derived quantities.

        Derived values are recomputed on every call; nothing is cached.
        """
        snap: dict[str, Any] = {"t": self.time}
        if is_dataclass(self.state):
            snap.update(asdict(self.state))
        snap.update(self.derived())
        snap["running"] = self.running
        snap["terminal"] = self.terminal.value if self.terminal is not None else None
        return snap

    def export_history(self) -> list[dict[str, Any]]:
        """History samples ordered by time."""
        return self.history.samples()

    # ------------------------------------------------------------------
    # Stepping internals
    # ------------------------------------------------------------------

    def _substep(self, dt: float) -> bool:
        if self.terminal is not None:
            return False
        self._advance(dt)
        self.time += dt
        self.steps += 1
        self._after_step(dt)
        if self.history.due(self.time):
            if self.profiler is not None:
                with self.profiler.section("sampling"):
                    self.history.record(self.time, **self._sample())
            else:
                self.history.record(self.time, **self._sample())
        return self.terminal is None

    def _halt(self, reason: Terminal) -> None:
        """Record a terminal condition and stop running."""
        if self.terminal is None:
            self.terminal = reason
            self.running = False
            logger.info("%s halted at t=%.4fs: %s", self.kind.value, self.time, reason.value)

    def _on_reset(self) -> None:
        """Hook for subclasses with extra bookkeeping (trails, counters)."""

    def _after_step(self, dt: float) -> None:
        """Hook run after time has advanced, before sampling."""

    @abstractmethod
    def _initial_state(self) -> Any:
        """Build the state at t = 0 from params and initial conditions."""
        ...

    @abstractmethod
    def _advance(self, dt: float) -> None:
        """Advance ``self.state`` by one substep starting at ``self.time``."""
        ...

    @abstractmethod
    def _sample(self) -> dict[str, Any]:
        """Values for one history sample (exactly HISTORY_FIELDS)."""
        ...

    @abstractmethod
    def derived(self) -> dict[str, Any]:
        """Instantaneous derived quantities for display."""
        ...
