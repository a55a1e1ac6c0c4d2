# MIT License (see LICENSE)
"""
Block sliding on an inclined plane with static/kinetic friction.

Coordinate x runs along the track, positive up the slope, from the bottom
(x = 0) to the top (x = track_length). Forces along the track:

    driving  F = F_applied - m·g·sin α
    normal   N = m·g·cos α + N_extra
    friction resolved by ``resolve_friction`` (stick while |F| <= μs·N)
    a = (F - friction) / m

The block decelerating through zero is snapped to rest when static friction
can hold it, so it does not jitter around the stick point. Reaching either
end of the track stops the block there and ends the run.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from ..constants import G_EARTH, STATIONARY_EPS
from ..core.forces import incline_components
from ..core.friction import FrictionResult, resolve_friction, settle, max_static_friction
from ..errors import require_positive, require_non_negative, require_friction_pair
from .base import Simulation, DemoKind, Terminal

# Below this speed a decelerating block that static friction can hold is
# snapped to rest.
SNAP_SPEED = 0.1


@dataclass(frozen=True)
class InclineParams:
    """
    Attributes:
        mass: Block mass (kg).
        applied_force: Pull along the track, positive up the slope (N).
        mu_static: Static friction coefficient.
        mu_kinetic: Kinetic friction coefficient (<= mu_static).
        angle: Incline angle (rad).
        track_length: Track length (m).
        extra_normal: Additional normal load pressing the block (N).
        g: Gravitational acceleration (m/s²).
    """
    mass: float = 1.0
    applied_force: float = 0.0
    mu_static: float = 0.3
    mu_kinetic: float = 0.2
    angle: float = math.radians(30.0)
    track_length: float = 5.0
    extra_normal: float = 0.0
    g: float = G_EARTH

    def __post_init__(self) -> None:
        require_positive("mass", self.mass)
        require_friction_pair(self.mu_static, self.mu_kinetic)
        require_positive("track_length", self.track_length)
        require_non_negative("extra_normal", self.extra_normal)
        require_positive("g", self.g)


@dataclass(frozen=True)
class InclineInitial:
    position: float = 0.0
    velocity: float = 0.0


@dataclass
class InclineState:
    position: float
    velocity: float
    acceleration: float = 0.0
    is_static: bool = True
    friction_work: float = 0.0
    external_work: float = 0.0


@dataclass(frozen=True)
class Transition:
    """A change between resting and sliding ('start' or 'stop') at time t."""
    event: str
    t: float


@dataclass(frozen=True)
class InclineForces:
    driving: float
    normal: float
    friction: FrictionResult


def incline_forces(params: InclineParams, velocity: float) -> InclineForces:
    """Resolve the forces along the track for the given velocity."""
    parallel, normal = incline_components(params.mass, params.g, params.angle)
    normal += params.extra_normal
    driving = params.applied_force - parallel
    friction = resolve_friction(
        driving, normal, velocity, params.mu_static, params.mu_kinetic, eps=STATIONARY_EPS
    )
    return InclineForces(driving=driving, normal=normal, friction=friction)


class InclinedBlock(Simulation):
    """Inclined-plane demo; semi-implicit Euler at 1/240 s."""
    kind = DemoKind.INCLINE
    params_type = InclineParams
    initial_type = InclineInitial
    SIM_DT = 1 / 240
    SAMPLE_INTERVAL = 0.1
    MAX_HISTORY = 5000
    HISTORY_FIELDS = ("x", "v", "a", "friction_work")

    def _initial_state(self) -> InclineState:
        return InclineState(position=self.initial.position, velocity=self.initial.velocity)

    def _on_reset(self) -> None:
        self.transitions: list[Transition] = []
        self.state.is_static = abs(self.state.velocity) < STATIONARY_EPS

    def _advance(self, dt: float) -> None:
        p, s = self.params, self.state
        forces = incline_forces(p, s.velocity)
        res = forces.friction
        was_static = s.is_static

        if res.is_static:
            s.velocity = 0.0
            s.acceleration = 0.0
            s.is_static = True
            friction = res.friction
        else:
            a = res.net_force / p.mass
            limit = max_static_friction(p.mu_static, forces.normal)
            if settle(s.velocity, a, forces.driving, limit, SNAP_SPEED) and (s.velocity + a * dt) * s.velocity <= 0.0:
                s.velocity = 0.0
                s.acceleration = 0.0
                s.is_static = True
                friction = forces.driving
            else:
                s.acceleration = a
                s.position, s.velocity = self.integrate(s.position, s.velocity, self.time, dt, lambda x, v, t: a)
                s.is_static = False
                friction = res.friction

        s.friction_work += abs(friction * s.velocity) * dt
        s.external_work += p.applied_force * s.velocity * dt

        end_of_track = s.position >= p.track_length or s.position < 0.0
        if end_of_track:
            s.position = min(max(s.position, 0.0), p.track_length)
            s.velocity = 0.0
            s.acceleration = 0.0
            s.is_static = True

        if was_static != s.is_static:
            event = "stop" if s.is_static else "start"
            self.transitions.append(Transition(event, self.time + dt))

        if end_of_track:
            self._halt(Terminal.END_OF_TRACK)

    def _sample(self) -> dict:
        s = self.state
        return {"x": s.position, "v": s.velocity, "a": s.acceleration, "friction_work": s.friction_work}

    def derived(self) -> dict:
        p, s = self.params, self.state
        forces = incline_forces(p, s.velocity)
        return {
            "normal_force": forces.normal,
            "driving_force": forces.driving,
            "friction_force": forces.friction.friction,
            "net_force": forces.friction.net_force,
            "acceleration": forces.friction.net_force / p.mass,
            "is_static": forces.friction.is_static,
            "kinetic_energy": 0.5 * p.mass * s.velocity ** 2,
            "friction_work": s.friction_work,
            "external_work": s.external_work,
        }

    def analytic(self, t: float) -> tuple[float, float]:
        """
        Constant-acceleration solution (x, v) from the initial conditions.

        Valid until the block stops, turns around or leaves the track.
        """
        x0, v0 = self.initial.position, self.initial.velocity
        res = incline_forces(self.params, v0).friction
        if res.is_static:
            return x0, 0.0
        a = res.net_force / self.params.mass
        return x0 + v0 * t + 0.5 * a * t * t, v0 + a * t
