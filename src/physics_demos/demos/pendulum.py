# MIT License (see LICENSE)
"""
Damped, sinusoidally driven pendulum.

Equation of motion (θ from the downward vertical):

    θ'' = -(g/L)·sin θ - 2β·θ' + A·sin(2π·f·t) / (m·L²)

with A the drive torque amplitude (N·m) and f its frequency (Hz). The
linearised system θ'' + 2βθ' + ω0²θ = 0 is critically damped at β = ω0 =
sqrt(g/L).

The motion can be chaotic for strong drives, so it is integrated with RK4;
θ is wrapped into (-π, π] after each step for the phase portrait.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, replace
import math

from ..constants import G_STANDARD
from ..core.forces import driven_torque
from ..errors import require_positive, require_non_negative
from ..util import wrap_angle
from .base import Simulation, DemoKind

MAX_PHASE_POINTS = 2000


def critical_beta(length: float, g: float = G_STANDARD) -> float:
    """Damping coefficient for critical damping: β = sqrt(g/L)."""
    require_positive("length", length)
    return math.sqrt(g / length)


@dataclass(frozen=True)
class PendulumParams:
    """
    Attributes:
        length: Rod length L (m).
        mass: Bob mass m (kg).
        beta: Damping coefficient β (1/s).
        drive_amplitude: Drive torque amplitude A (N·m).
        drive_frequency: Drive frequency f (Hz).
        g: Gravitational acceleration (m/s²).
    """
    length: float = 1.0
    mass: float = 1.0
    beta: float = 0.15
    drive_amplitude: float = 0.0
    drive_frequency: float = 0.5
    g: float = G_STANDARD

    def __post_init__(self) -> None:
        require_positive("length", self.length)
        require_positive("mass", self.mass)
        require_non_negative("beta", self.beta)
        require_non_negative("drive_frequency", self.drive_frequency)
        require_positive("g", self.g)

    def with_critical_damping(self) -> "PendulumParams":
        return replace(self, beta=critical_beta(self.length, self.g))


@dataclass(frozen=True)
class PendulumInitial:
    theta: float = 0.5
    omega: float = 0.0


@dataclass
class PendulumState:
    theta: float
    omega: float


def pendulum_acceleration(params: PendulumParams, theta: float, omega: float, t: float) -> float:
    """Angular acceleration θ'' for the given state and time."""
    restoring = (params.g / params.length) * math.sin(theta)
    damping = 2.0 * params.beta * omega
    drive = driven_torque(params.drive_amplitude, params.drive_frequency, t)
    return -restoring - damping + drive / (params.mass * params.length ** 2)


def pendulum_energies(params: PendulumParams, theta: float, omega: float) -> tuple[float, float]:
    """(E_kin, E_pot) with E_pot measured from the lowest point."""
    v = params.length * omega
    e_kin = 0.5 * params.mass * v * v
    e_pot = params.mass * params.g * params.length * (1.0 - math.cos(theta))
    return e_kin, e_pot


class DampedPendulum(Simulation):
    """Pendulum demo; RK4 at 1/240 s, energies sampled at 60 Hz."""
    kind = DemoKind.PENDULUM
    params_type = PendulumParams
    initial_type = PendulumInitial
    SIM_DT = 1 / 240
    INTEGRATOR = "rk4"
    SAMPLE_INTERVAL = 1 / 60
    MAX_HISTORY = 1200
    HISTORY_FIELDS = ("e_kin", "e_pot", "e_total")

    def _initial_state(self) -> PendulumState:
        return PendulumState(theta=wrap_angle(self.initial.theta), omega=self.initial.omega)

    def _on_reset(self) -> None:
        self.phase_points: deque[tuple[float, float]] = deque(maxlen=MAX_PHASE_POINTS)
        self.phase_points.append((self.state.theta, self.state.omega))

    def _advance(self, dt: float) -> None:
        p, s = self.params, self.state

        def accel(theta, omega, t):
            return pendulum_acceleration(p, theta, omega, t)

        theta, omega = self.integrate(s.theta, s.omega, self.time, dt, accel)
        s.theta = wrap_angle(theta)
        s.omega = omega

    def _after_step(self, dt: float) -> None:
        self.phase_points.append((self.state.theta, self.state.omega))

    def _sample(self) -> dict:
        e_kin, e_pot = pendulum_energies(self.params, self.state.theta, self.state.omega)
        return {"e_kin": e_kin, "e_pot": e_pot, "e_total": e_kin + e_pot}

    def derived(self) -> dict:
        p, s = self.params, self.state
        e_kin, e_pot = pendulum_energies(p, s.theta, s.omega)
        return {
            "e_kin": e_kin,
            "e_pot": e_pot,
            "e_total": e_kin + e_pot,
            "angular_acceleration": pendulum_acceleration(p, s.theta, s.omega, self.time),
            "drive_torque": driven_torque(p.drive_amplitude, p.drive_frequency, self.time),
            "critical_beta": critical_beta(p.length, p.g),
            "small_angle_period": 2.0 * math.pi * math.sqrt(p.length / p.g),
        }
