# MIT License (see LICENSE)
"""
Satellite orbiting a planet, integrated with velocity Verlet.

The planet is fixed at the origin (its mass dwarfs the satellite's). The
satellite feels inverse-square gravity and optionally a linear drag:

    a = -μ·r / |r|³ - k·v,    μ = G·M

Initial state: the satellite starts at (R + h, 0) with speed v at flight
angle φ from the local horizontal, i.e. velocity (-v·sin φ, v·cos φ). An
optional prograde burn adds Δv along the velocity, and a nonzero
inclination foreshortens the in-plane tangential component.

Orbital elements are a derived view recomputed every few steps; the state
vector is authoritative. Dropping below 0.9·R counts as hitting the planet
and ends the run.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
import math

import numpy as np

from ..constants import EARTH_MASS, EARTH_RADIUS, GRAVITATIONAL_CONSTANT
from ..core.forces import gravitational_acceleration, linear_drag_acceleration
from ..core.invariants import angular_momentum_z
from ..core.orbital import OrbitalElements, compute_orbital_elements, circular_speed, escape_speed
from ..errors import require_positive, require_non_negative
from ..util import f64, norm, norm2
from .base import Simulation, DemoKind, Terminal

# Fraction of the planet radius below which the satellite has crashed.
IMPACT_RADIUS_FRACTION = 0.9
# Steps between orbital element updates.
ELEMENTS_EVERY = 10
# Steps between trace points.
TRACE_EVERY = 2
MAX_TRACE = 5000


@dataclass(frozen=True)
class OrbitParams:
    """
    Attributes:
        planet_mass: M (kg).
        satellite_mass: m (kg).
        planet_radius: R (m).
        drag: Linear drag coefficient k (1/s).
        G: Gravitational constant (m³·kg⁻¹·s⁻²).
    """
    planet_mass: float = EARTH_MASS
    satellite_mass: float = 1000.0
    planet_radius: float = EARTH_RADIUS
    drag: float = 0.0
    G: float = GRAVITATIONAL_CONSTANT

    def __post_init__(self) -> None:
        require_positive("planet_mass", self.planet_mass)
        require_positive("satellite_mass", self.satellite_mass)
        require_positive("planet_radius", self.planet_radius)
        require_non_negative("drag", self.drag)
        require_positive("G", self.G)

    @property
    def mu(self) -> float:
        return self.G * self.planet_mass


@dataclass(frozen=True)
class OrbitInitial:
    """
    Attributes:
        altitude: Height above the surface h (m).
        speed: Initial speed v (m/s).
        flight_angle: Angle φ of the velocity from the local horizontal (rad).
        thrust: Prograde Δv applied at t = 0 (m/s).
        inclination: Orbit inclination (rad); only its in-plane projection
            is modeled.
    """
    altitude: float = 2.0e6
    speed: float = 6900.0
    flight_angle: float = 0.0
    thrust: float = 0.0
    inclination: float = 0.0

    def __post_init__(self) -> None:
        require_non_negative("altitude", self.altitude)
        require_non_negative("speed", self.speed)
        require_non_negative("thrust", self.thrust)


@dataclass
class OrbitState:
    position: np.ndarray
    velocity: np.ndarray


def orbit_acceleration(params: OrbitParams, position: np.ndarray, velocity: np.ndarray) -> np.ndarray:
    """Gravity toward the origin plus linear drag."""
    a = gravitational_acceleration(position, params.mu)
    if params.drag > 0.0:
        a = a + linear_drag_acceleration(velocity, params.drag)
    return a


def initial_orbit_state(params: OrbitParams, initial: OrbitInitial) -> OrbitState:
    """Position and velocity at t = 0 from altitude, speed and angles."""
    r0 = params.planet_radius + initial.altitude
    v = initial.speed
    phi = initial.flight_angle
    velocity = f64([-v * math.sin(phi), v * math.cos(phi)])
    if initial.inclination != 0.0:
        velocity[1] *= math.cos(initial.inclination)
    if initial.thrust > 0.0:
        speed = norm(velocity)
        if speed > 0.0:
            velocity = velocity + velocity / speed * initial.thrust
    return OrbitState(position=f64([r0, 0.0]), velocity=velocity)


class OrbitalMotion(Simulation):
    """
    Orbit demo; velocity Verlet at 0.5 s.

    Runs 60x faster than wall-clock time by default.
    """
    kind = DemoKind.ORBIT
    params_type = OrbitParams
    initial_type = OrbitInitial
    SIM_DT = 0.5
    INTEGRATOR = "verlet"
    SAMPLE_INTERVAL = 1.0
    MAX_HISTORY = 600
    HISTORY_FIELDS = ("e_total", "angular_momentum")
    TIME_SCALE = 60.0

    def _initial_state(self) -> OrbitState:
        return initial_orbit_state(self.params, self.initial)

    def _on_reset(self) -> None:
        self.trace: deque[tuple[float, float]] = deque(maxlen=MAX_TRACE)
        self.trace.append((float(self.state.position[0]), float(self.state.position[1])))
        self.elements = self._compute_elements()

    def _compute_elements(self) -> OrbitalElements:
        return compute_orbital_elements(self.state.position, self.state.velocity, self.params.mu)

    def _advance(self, dt: float) -> None:
        p, s = self.params, self.state

        def accel(x, v, t):
            return orbit_acceleration(p, x, v)

        s.position, s.velocity = self.integrate(s.position, s.velocity, self.time, dt, accel)

        if norm(s.position) < IMPACT_RADIUS_FRACTION * p.planet_radius:
            self._halt(Terminal.COLLISION)

    def _after_step(self, dt: float) -> None:
        if self.steps % TRACE_EVERY == 0:
            self.trace.append((float(self.state.position[0]), float(self.state.position[1])))
        if self.steps % ELEMENTS_EVERY == 0:
            self.elements = self._compute_elements()

    def energies(self) -> tuple[float, float]:
        """(E_kin, E_pot) of the satellite in joules."""
        p, s = self.params, self.state
        e_kin = 0.5 * p.satellite_mass * norm2(s.velocity)
        e_pot = -p.mu * p.satellite_mass / norm(s.position)
        return e_kin, e_pot

    def angular_momentum(self) -> float:
        return angular_momentum_z(self.params.satellite_mass, self.state.position, self.state.velocity)

    def _sample(self) -> dict:
        e_kin, e_pot = self.energies()
        return {"e_total": e_kin + e_pot, "angular_momentum": self.angular_momentum()}

    def derived(self) -> dict:
        p, s = self.params, self.state
        r = norm(s.position)
        speed = norm(s.velocity)
        v_esc = escape_speed(p.mu, r)
        e_kin, e_pot = self.energies()
        return {
            "r": r,
            "altitude": r - p.planet_radius,
            "speed": speed,
            "circular_speed": circular_speed(p.mu, r),
            "escape_speed": v_esc,
            "escaping": speed >= v_esc,
            "e_kin": e_kin,
            "e_pot": e_pot,
            "e_total": e_kin + e_pot,
            "angular_momentum": self.angular_momentum(),
            "specific_energy": 0.5 * speed * speed - p.mu / r,
            "elements": self.elements,
        }
