# MIT License (see LICENSE)
"""
Uniform disk spinning on a fixed axle.

    I = ½·m·R²
    α = (τ - τ_axis - c·ω) / I

The axle friction torque has magnitude μ_axis·I (a per-unit-inertia
coefficient, so μ_axis reads directly as a deceleration in rad/s²). It is
resolved like dry friction: a disk at rest stays put while the remaining
torque is within μ_axis·I. The viscous term c·ω models air drag.

The run ends after the chosen observation time.
"""
from __future__ import annotations
from dataclasses import dataclass

from ..constants import STATIONARY_EPS, TIME_EPS
from ..core.forces import viscous_force
from ..core.friction import FrictionResult, resolve_friction, settle
from ..errors import require_positive, require_non_negative
from ..util import wrap_positive
from .base import Simulation, DemoKind, Terminal

# |ω| below which a slowing disk counts as stopped (rad/s).
STOP_OMEGA = 0.05


@dataclass(frozen=True)
class DiskParams:
    """
    Attributes:
        mass: Disk mass (kg).
        radius: Disk radius (m).
        torque: Applied torque τ (N·m).
        viscous: Viscous coefficient c (N·m·s).
        axis_friction: Axle friction coefficient μ_axis (rad/s²).
        observation_time: Length of the run (s).
    """
    mass: float = 8.0
    radius: float = 0.4
    torque: float = 15.0
    viscous: float = 0.1
    axis_friction: float = 0.05
    observation_time: float = 20.0

    def __post_init__(self) -> None:
        require_positive("mass", self.mass)
        require_positive("radius", self.radius)
        require_non_negative("viscous", self.viscous)
        require_non_negative("axis_friction", self.axis_friction)
        require_positive("observation_time", self.observation_time)

    @property
    def inertia(self) -> float:
        return 0.5 * self.mass * self.radius ** 2


@dataclass(frozen=True)
class DiskInitial:
    theta: float = 0.0
    omega: float = 35.0


@dataclass
class DiskState:
    theta: float
    omega: float
    alpha: float = 0.0
    work: float = 0.0
    stop_time: float | None = None


def disk_torques(params: DiskParams, omega: float) -> tuple[float, FrictionResult]:
    """Driving torque (applied + viscous) and the resolved axle friction."""
    driving = params.torque + viscous_force(params.viscous, omega)
    friction = resolve_friction(
        driving,
        params.inertia,
        omega,
        params.axis_friction,
        params.axis_friction,
        eps=STATIONARY_EPS,
    )
    return driving, friction


class RotatingDisk(Simulation):
    """Disk demo; semi-implicit Euler at 1/240 s."""
    kind = DemoKind.DISK
    params_type = DiskParams
    initial_type = DiskInitial
    SIM_DT = 1 / 240
    SAMPLE_INTERVAL = 1 / 60
    MAX_HISTORY = 1200
    HISTORY_FIELDS = ("omega", "alpha", "e_kin", "work")

    def _initial_state(self) -> DiskState:
        return DiskState(theta=wrap_positive(self.initial.theta), omega=self.initial.omega)

    def _advance(self, dt: float) -> None:
        p, s = self.params, self.state
        inertia = p.inertia
        prev_omega = s.omega
        driving, res = disk_torques(p, s.omega)

        if res.is_static:
            s.omega = 0.0
            s.alpha = 0.0
        else:
            alpha = res.net_force / inertia
            if settle(s.omega, alpha, driving, p.axis_friction * inertia, STOP_OMEGA) and (s.omega + alpha * dt) * s.omega <= 0.0:
                s.omega = 0.0
                s.alpha = 0.0
            else:
                s.alpha = alpha
                theta, s.omega = self.integrate(s.theta, s.omega, self.time, dt, lambda x, v, t: alpha)
                s.theta = wrap_positive(theta)

        s.work += p.torque * s.omega * dt

        if s.stop_time is None and abs(s.omega) < STOP_OMEGA and abs(s.omega) < abs(prev_omega):
            s.stop_time = self.time + dt

        if self.time + dt >= p.observation_time - TIME_EPS:
            self._halt(Terminal.OBSERVATION_COMPLETE)

    def kinetic_energy(self) -> float:
        return 0.5 * self.params.inertia * self.state.omega ** 2

    def _sample(self) -> dict:
        s = self.state
        return {"omega": s.omega, "alpha": s.alpha, "e_kin": self.kinetic_energy(), "work": s.work}

    def derived(self) -> dict:
        p, s = self.params, self.state
        driving, res = disk_torques(p, s.omega)
        return {
            "inertia": p.inertia,
            "driving_torque": driving,
            "friction_torque": res.friction,
            "net_torque": res.net_force,
            "angular_acceleration": res.net_force / p.inertia,
            "is_static": res.is_static,
            "e_kin": self.kinetic_energy(),
            "work": s.work,
            "stop_time": s.stop_time,
        }
