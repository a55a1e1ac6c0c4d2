# MIT License (see LICENSE)
"""
Atwood machine with the two masses on inclines and a massive pulley.

Mass A rests on an incline at angle α1, mass B on one at α2; a rope over a
uniform-disk pulley (mass M, radius R) joins them. The coordinate ``pos`` is
the displacement of A down its slope (B moves up by the same amount).

    drive       F = m1·g·sin α1 - m2·g·sin α2
    eff. mass   M_eff = m1 + m2 + ½·M      (I/R² of the disk pulley)
    normals     N1 = m1·g·cos α1,  N2 = m2·g·cos α2
    axle        F_axle = μ_axle·(m1 + m2)·g·0.1

Each slope has its own friction coefficients. The static limit is
μs_a·N1 + μs_b·N2 + F_axle and the kinetic force μk_a·N1 + μk_b·N2 + F_axle;
either is resolved as one force on the rope and then split between the
slopes and the axle in proportion to their own contributions.

Reference:
    https://en.wikipedia.org/wiki/Atwood_machine
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from ..constants import G_EARTH, STATIONARY_EPS
from ..core.forces import incline_components
from ..core.friction import FrictionResult, distribute, max_static_friction, resolve_friction_limits, settle
from ..errors import require_positive, require_non_negative, require_friction_pair
from .base import Simulation, DemoKind, Terminal

# Rest distance of each mass from the pulley (m).
BASE_DIST = 1.2
# Closest a mass may come to the pulley (m).
MIN_DIST_FROM_PULLEY = 0.15
# Fraction of the arm length a mass may travel.
ARM_TRAVEL = 0.9
# Scale of the axle friction relative to the total weight.
AXLE_LOAD_FACTOR = 0.1
SNAP_SPEED = 0.1


@dataclass(frozen=True)
class AtwoodParams:
    """
    Attributes:
        mass_a, mass_b: Masses on slope A and slope B (kg).
        angle_a, angle_b: Slope angles (rad); π/2 is a free-hanging mass.
        mu_static_a, mu_kinetic_a: Friction coefficients of slope A.
        mu_static_b, mu_kinetic_b: Friction coefficients of slope B.
        pulley_mass: Pulley disk mass M (kg).
        pulley_radius: Pulley radius R (m).
        axle_friction: Axle friction coefficient μ_axle.
        arm_length: Length of each slope (m).
        g: Gravitational acceleration (m/s²).
    """
    mass_a: float = 2.0
    mass_b: float = 1.0
    angle_a: float = math.radians(30.0)
    angle_b: float = math.radians(30.0)
    mu_static_a: float = 0.2
    mu_kinetic_a: float = 0.15
    mu_static_b: float = 0.16
    mu_kinetic_b: float = 0.12
    pulley_mass: float = 0.5
    pulley_radius: float = 0.1
    axle_friction: float = 0.0
    arm_length: float = 3.0
    g: float = G_EARTH

    def __post_init__(self) -> None:
        require_positive("mass_a", self.mass_a)
        require_positive("mass_b", self.mass_b)
        require_friction_pair(self.mu_static_a, self.mu_kinetic_a, "_a")
        require_friction_pair(self.mu_static_b, self.mu_kinetic_b, "_b")
        require_non_negative("pulley_mass", self.pulley_mass)
        require_positive("pulley_radius", self.pulley_radius)
        require_non_negative("axle_friction", self.axle_friction)
        require_positive("arm_length", self.arm_length)
        require_positive("g", self.g)

    @property
    def effective_mass(self) -> float:
        return self.mass_a + self.mass_b + 0.5 * self.pulley_mass

    @property
    def axle_force(self) -> float:
        return self.axle_friction * (self.mass_a + self.mass_b) * self.g * AXLE_LOAD_FACTOR

    def bounds(self) -> tuple[float, float]:
        """Allowed range of ``pos`` before a mass hits the pulley or rail end."""
        limit = ARM_TRAVEL * self.arm_length
        lo = max(MIN_DIST_FROM_PULLEY - BASE_DIST, -limit)
        hi = min(BASE_DIST - MIN_DIST_FROM_PULLEY, limit)
        return lo, hi


@dataclass(frozen=True)
class AtwoodInitial:
    position: float = 0.0
    velocity: float = 0.0


@dataclass
class AtwoodState:
    pos: float
    vel: float
    acc: float = 0.0
    is_static: bool = True
    pulley_angle: float = 0.0


@dataclass(frozen=True)
class AtwoodForces:
    """
    Forces along the rope. ``static_*`` and ``kinetic_*`` are the friction
    magnitudes each slope can supply; the limits include the axle.
    """
    drive: float
    normal_a: float
    normal_b: float
    static_a: float
    static_b: float
    kinetic_a: float
    kinetic_b: float
    axle: float
    friction: FrictionResult

    @property
    def static_limit(self) -> float:
        return self.static_a + self.static_b + self.axle

    def shares(self) -> list[float]:
        """Resolved friction split into (slope A, slope B, axle)."""
        if self.friction.is_static:
            weights = (self.static_a, self.static_b, self.axle)
        else:
            weights = (self.kinetic_a, self.kinetic_b, self.axle)
        return distribute(self.friction.friction, weights)


def atwood_forces(params: AtwoodParams, velocity: float) -> AtwoodForces:
    """Drive, normal loads and resolved friction for the given velocity."""
    pa, na = incline_components(params.mass_a, params.g, params.angle_a)
    pb, nb = incline_components(params.mass_b, params.g, params.angle_b)
    drive = pa - pb
    static_a = max_static_friction(params.mu_static_a, na)
    static_b = max_static_friction(params.mu_static_b, nb)
    kinetic_a = params.mu_kinetic_a * abs(na)
    kinetic_b = params.mu_kinetic_b * abs(nb)
    axle = params.axle_force
    friction = resolve_friction_limits(
        drive,
        velocity,
        static_a + static_b + axle,
        kinetic_a + kinetic_b + axle,
        eps=STATIONARY_EPS,
    )
    return AtwoodForces(
        drive=drive,
        normal_a=na,
        normal_b=nb,
        static_a=static_a,
        static_b=static_b,
        kinetic_a=kinetic_a,
        kinetic_b=kinetic_b,
        axle=axle,
        friction=friction,
    )


class AtwoodMachine(Simulation):
    """Atwood machine demo; semi-implicit Euler at 1/240 s."""
    kind = DemoKind.ATWOOD
    params_type = AtwoodParams
    initial_type = AtwoodInitial
    SIM_DT = 1 / 240
    SAMPLE_INTERVAL = 0.1
    MAX_HISTORY = 10000
    HISTORY_FIELDS = ("pos", "vel", "acc", "is_static")

    def _initial_state(self) -> AtwoodState:
        lo, hi = self.params.bounds()
        pos = min(max(self.initial.position, lo), hi)
        state = AtwoodState(pos=pos, vel=self.initial.velocity)
        state.is_static = abs(state.vel) < STATIONARY_EPS
        return state

    def _advance(self, dt: float) -> None:
        p, s = self.params, self.state
        forces = atwood_forces(p, s.vel)
        res = forces.friction

        if res.is_static:
            s.vel = 0.0
            s.acc = 0.0
            s.is_static = True
            return

        acc = res.net_force / p.effective_mass
        if settle(s.vel, acc, forces.drive, forces.static_limit, SNAP_SPEED) and (s.vel + acc * dt) * s.vel <= 0.0:
            s.vel = 0.0
            s.acc = 0.0
            s.is_static = True
            return

        s.is_static = False
        s.acc = acc
        s.pos, s.vel = self.integrate(s.pos, s.vel, self.time, dt, lambda x, v, t: acc)
        s.pulley_angle += s.vel * dt / p.pulley_radius

        lo, hi = p.bounds()
        if s.pos < lo or s.pos > hi:
            s.pos = min(max(s.pos, lo), hi)
            s.vel = 0.0
            s.acc = 0.0
            self._halt(Terminal.END_OF_TRACK)

    def _sample(self) -> dict:
        s = self.state
        return {"pos": s.pos, "vel": s.vel, "acc": s.acc, "is_static": s.is_static}

    def derived(self) -> dict:
        p, s = self.params, self.state
        forces = atwood_forces(p, s.vel)
        res = forces.friction
        acc = 0.0 if res.is_static else res.net_force / p.effective_mass
        f_a, f_b, f_axle = forces.shares()
        tension = max(0.0, p.mass_a * p.g * math.sin(p.angle_a) - f_a - p.mass_a * acc)
        return {
            "drive_force": forces.drive,
            "normal_a": forces.normal_a,
            "normal_b": forces.normal_b,
            "max_static_friction": forces.static_limit,
            "friction_force": res.friction,
            "friction_a": f_a,
            "friction_b": f_b,
            "friction_axle": f_axle,
            "axle_force": p.axle_force,
            "net_force": res.net_force,
            "acceleration": acc,
            "is_static": res.is_static,
            "tension": tension,
            "effective_mass": p.effective_mass,
            "kinetic_energy": 0.5 * p.effective_mass * s.vel ** 2,
        }
