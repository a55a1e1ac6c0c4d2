# MIT License (see LICENSE)
"""
Uniform (a = 0) and uniformly accelerated motion along a straight track.

The track is centered on x = 0; the run ends when the body passes either
end. ``analytic`` gives the closed-form x(t), v(t) to compare against.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..errors import require_positive
from .base import Simulation, DemoKind, Terminal


@dataclass(frozen=True)
class UniformParams:
    acceleration: float = 0.0
    track_length: float = 20.0

    def __post_init__(self) -> None:
        require_positive("track_length", self.track_length)


@dataclass(frozen=True)
class UniformInitial:
    position: float = 0.0
    velocity: float = 1.0


@dataclass
class UniformState:
    position: float
    velocity: float


class UniformMotion(Simulation):
    """Uniform-motion demo; explicit Euler at 1/240 s."""
    kind = DemoKind.UNIFORM
    params_type = UniformParams
    initial_type = UniformInitial
    SIM_DT = 1 / 240
    INTEGRATOR = "euler"
    SAMPLE_INTERVAL = 0.05
    MAX_HISTORY = 2000
    HISTORY_FIELDS = ("x", "v")

    def _initial_state(self) -> UniformState:
        return UniformState(position=self.initial.position, velocity=self.initial.velocity)

    def _advance(self, dt: float) -> None:
        a = self.params.acceleration
        s = self.state
        s.position, s.velocity = self.integrate(s.position, s.velocity, self.time, dt, lambda x, v, t: a)
        if abs(s.position) > 0.5 * self.params.track_length:
            self._halt(Terminal.END_OF_TRACK)

    def analytic(self, t: float) -> tuple[float, float]:
        """x(t) = x0 + v0·t + ½·a·t²,  v(t) = v0 + a·t."""
        x0, v0 = self.initial.position, self.initial.velocity
        a = self.params.acceleration
        return x0 + v0 * t + 0.5 * a * t * t, v0 + a * t

    def _sample(self) -> dict:
        return {"x": self.state.position, "v": self.state.velocity}

    def derived(self) -> dict:
        return {"acceleration": self.params.acceleration, "speed": abs(self.state.velocity)}
