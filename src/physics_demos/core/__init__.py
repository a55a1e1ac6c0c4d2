# MIT License (see LICENSE)
"""
Core numerical engine shared by all demos.

This subpackage provides:
    - Integrators: explicit Euler, semi-implicit Euler, RK4, velocity Verlet.
    - Clock: fixed-substep accumulator decoupled from the frame rate.
    - Friction: static/kinetic stick-slip resolution.
    - Forces: incline, gravitation, drag, spring, damper, drive.
    - History: bounded, time-gated sample buffer.
    - Orbital: orbital elements from position and velocity.
    - Invariants: energy and momentum bookkeeping.

Typical usage:
    from physics_demos.core import rk4_step, resolve_friction

    theta, omega = rk4_step(theta, omega, t, 1/240, accel)
"""
from .integrators import (
    euler_step,
    semi_implicit_euler_step,
    rk4_step,
    velocity_verlet_step,
    get_integrator,
    INTEGRATORS,
)
from .clock import FixedStepClock, Ticker, run_for
from .friction import (
    FrictionResult,
    resolve_friction,
    resolve_friction_limits,
    settle,
    distribute,
    max_static_friction,
)
from .forces import (
    incline_components,
    gravitational_acceleration,
    linear_drag_acceleration,
    spring_force,
    viscous_force,
    driven_torque,
)
from .history import HistoryBuffer
from .orbital import OrbitalElements, compute_orbital_elements, circular_speed, escape_speed
from .invariants import kinetic_energy, linear_momentum, angular_momentum_z, relative_drift

__all__ = [
    # Integrators
    "euler_step",
    "semi_implicit_euler_step",
    "rk4_step",
    "velocity_verlet_step",
    "get_integrator",
    "INTEGRATORS",
    # Clock
    "FixedStepClock",
    "Ticker",
    "run_for",
    # Friction
    "FrictionResult",
    "resolve_friction",
    "resolve_friction_limits",
    "settle",
    "distribute",
    "max_static_friction",
    # Forces
    "incline_components",
    "gravitational_acceleration",
    "linear_drag_acceleration",
    "spring_force",
    "viscous_force",
    "driven_torque",
    # History
    "HistoryBuffer",
    # Orbital
    "OrbitalElements",
    "compute_orbital_elements",
    "circular_speed",
    "escape_speed",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "angular_momentum_z",
    "relative_drift",
]
