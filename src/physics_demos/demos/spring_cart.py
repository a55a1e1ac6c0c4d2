# MIT License (see LICENSE)
"""
Cart running into a buffer spring on a (possibly tilted) track.

Coordinate x runs along the track toward the spring, with x = 0 where the
cart touches the uncompressed spring. The cart starts at x = -start_distance
and engages the spring once x >= 0:

    compression  δ = x + x_preload       (capped at the spring length)
    spring       F_s = -k·δ
    damper       F_d = -c·v,  c = ζ·2·sqrt(m·k)
    gravity      m·g·sin α (down the track, toward the spring)

Track friction acts on N = m·g·cos α through the static/kinetic resolver.
Bottoming out the spring, or leaving it, reverses the velocity scaled by
the coefficient of restitution. In stick mode the cart latches onto the
spring when its velocity first crosses zero during contact and then
oscillates with it.
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from ..constants import G_EARTH, STATIONARY_EPS
from ..core.forces import incline_components, spring_force, viscous_force
from ..core.friction import max_static_friction, resolve_friction, settle
from ..errors import require_positive, require_non_negative, require_friction_pair, require_unit_interval
from .base import Simulation, DemoKind, Terminal

SNAP_SPEED = 0.05
# Distance behind the start position at which the cart leaves the track (m).
TRACK_OVERRUN = 1.0


@dataclass(frozen=True)
class SpringCartParams:
    """
    Attributes:
        mass: Cart mass m (kg).
        stiffness: Spring constant k (N/m).
        damping_ratio: ζ; 1 is critical damping of the cart on the spring.
        preload: Initial compression of the spring (m).
        restitution: Coefficient of restitution at bottom-out and release.
        mu_static, mu_kinetic: Track friction coefficients.
        track_angle: Tilt of the track toward the spring (rad).
        start_distance: Distance from the cart to the spring at t = 0 (m).
        spring_length: Uncompressed spring length, the largest δ (m).
        stick: Latch the cart to the spring at the first turnaround.
        g: Gravitational acceleration (m/s²).
    """
    mass: float = 1.0
    stiffness: float = 100.0
    damping_ratio: float = 0.1
    preload: float = 0.0
    restitution: float = 0.8
    mu_static: float = 0.0
    mu_kinetic: float = 0.0
    track_angle: float = 0.0
    start_distance: float = 2.0
    spring_length: float = 1.5
    stick: bool = False
    g: float = G_EARTH

    def __post_init__(self) -> None:
        require_positive("mass", self.mass)
        require_positive("stiffness", self.stiffness)
        require_non_negative("damping_ratio", self.damping_ratio)
        require_non_negative("preload", self.preload)
        require_unit_interval("restitution", self.restitution)
        require_friction_pair(self.mu_static, self.mu_kinetic)
        require_non_negative("start_distance", self.start_distance)
        require_positive("spring_length", self.spring_length)
        require_positive("g", self.g)

    @property
    def damping(self) -> float:
        """Viscous coefficient c = ζ·2·sqrt(m·k) (N·s/m)."""
        return self.damping_ratio * 2.0 * math.sqrt(self.mass * self.stiffness)


@dataclass(frozen=True)
class SpringCartInitial:
    velocity: float = 2.0


@dataclass
class SpringCartState:
    x: float
    v: float
    in_contact: bool = False
    attached: bool = False
    max_compression: float = 0.0
    impact_velocity: float | None = None
    rebound_velocity: float | None = None


def spring_engaged(state: SpringCartState) -> bool:
    return state.attached or state.x >= 0.0


def compression(params: SpringCartParams, x: float) -> float:
    """Spring compression δ for cart position x, capped at the spring length."""
    return min(x + params.preload, params.spring_length)


class SpringCart(Simulation):
    """Spring-cart demo; semi-implicit Euler at 1/240 s."""
    kind = DemoKind.SPRING_CART
    params_type = SpringCartParams
    initial_type = SpringCartInitial
    SIM_DT = 1 / 240
    SAMPLE_INTERVAL = 0.005
    MAX_HISTORY = 10000
    HISTORY_FIELDS = ("x", "v", "spring_force", "e_kin", "e_spring")

    def _initial_state(self) -> SpringCartState:
        return SpringCartState(x=-self.params.start_distance, v=self.initial.velocity)

    def _advance(self, dt: float) -> None:
        p, s = self.params, self.state
        prev_x, prev_v = s.x, s.v
        parallel, normal = incline_components(p.mass, p.g, p.track_angle)
        driving = parallel
        delta = 0.0

        if spring_engaged(s):
            if not s.in_contact and not s.attached:
                s.in_contact = True
                s.impact_velocity = s.v
            delta = s.x + p.preload
            if delta > p.spring_length:
                delta = p.spring_length
                s.v = -p.restitution * abs(s.v)
                s.x = p.spring_length - p.preload
            driving += spring_force(p.stiffness, delta) + viscous_force(p.damping, s.v)
        else:
            s.in_contact = False

        res = resolve_friction(driving, normal, s.v, p.mu_static, p.mu_kinetic, eps=STATIONARY_EPS)
        if res.is_static:
            s.v = 0.0
        else:
            a = res.net_force / p.mass
            limit = max_static_friction(p.mu_static, normal)
            if settle(s.v, a, driving, limit, SNAP_SPEED) and (s.v + a * dt) * s.v <= 0.0:
                s.v = 0.0
            else:
                s.x, s.v = self.integrate(s.x, s.v, self.time, dt, lambda x, v, t: a)

        if s.x >= 0.0:
            s.max_compression = max(s.max_compression, delta)

        if not s.attached and prev_x >= 0.0 > s.x:
            s.v = -p.restitution * abs(s.v)
            s.in_contact = False
            if s.rebound_velocity is None:
                s.rebound_velocity = s.v

        if p.stick and not s.attached and s.in_contact and prev_v > 0.0 >= s.v:
            s.attached = True

        if s.x < -(p.start_distance + TRACK_OVERRUN):
            self._halt(Terminal.END_OF_TRACK)

    def forces(self) -> tuple[float, float]:
        """(spring force on the cart, damper force on the cart) right now."""
        p, s = self.params, self.state
        if not spring_engaged(s):
            return 0.0, 0.0
        return spring_force(p.stiffness, compression(p, s.x)), viscous_force(p.damping, s.v)

    def energies(self) -> tuple[float, float]:
        """(E_kin, E_spring)."""
        p, s = self.params, self.state
        e_kin = 0.5 * p.mass * s.v * s.v
        if not spring_engaged(s):
            return e_kin, 0.0
        delta = compression(p, s.x)
        return e_kin, 0.5 * p.stiffness * delta * delta

    def _sample(self) -> dict:
        f_spring, _ = self.forces()
        e_kin, e_spring = self.energies()
        return {
            "x": self.state.x,
            "v": self.state.v,
            "spring_force": -f_spring,
            "e_kin": e_kin,
            "e_spring": e_spring,
        }

    def derived(self) -> dict:
        s = self.state
        f_spring, f_damper = self.forces()
        e_kin, e_spring = self.energies()
        return {
            "spring_force": -f_spring,
            "damper_force": f_damper,
            "kinetic_energy": e_kin,
            "spring_energy": e_spring,
            "in_contact": spring_engaged(s),
            "attached": s.attached,
            "max_compression": s.max_compression,
            "damping": self.params.damping,
        }
