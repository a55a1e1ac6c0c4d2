# MIT License (see LICENSE)
"""
Numerical integrators for the demo equations of motion.

Every demo reduces to a second-order system

    dx/dt = v,    dv/dt = a(x, v, t)

where x is a position or angle (scalar or numpy vector) and ``a`` is the
demo's pure acceleration function. Each integrator takes the current
(x, v, t), a step dt and the acceleration function, and returns the new
(x, v). Inputs are never modified.

Available integrators:
- euler_step: explicit Euler (position advanced with the old velocity)
- semi_implicit_euler_step: symplectic Euler, v first then x (carts,
  levers, blocks)
- rk4_step: classical 4th-order Runge-Kutta (chaotic/oscillatory systems
  such as the driven pendulum)
- velocity_verlet_step: velocity Verlet (long-run energy conservation for
  orbits)

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
    Velocity Verlet: https://en.wikipedia.org/wiki/Verlet_integration#Velocity_Verlet
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import Callable, TypeVar

import numpy as np

from ..errors import ConfigurationError

Q = TypeVar("Q", float, np.ndarray)

AccelFn = Callable[[Q, Q, float], Q]
StepFn = Callable[[Q, Q, float, float, AccelFn], tuple[Q, Q]]


def euler_step(x: Q, v: Q, t: float, dt: float, accel: AccelFn) -> tuple[Q, Q]:
    """
    Advance (x, v) by dt using explicit (forward) Euler.

        x(t+dt) = x(t) + v(t)·dt
        v(t+dt) = v(t) + a(t)·dt

    First-order and not energy-stable; exact for position only when the
    velocity is constant. Used for the free flight of the collision pucks
    and the uniform-motion demo.
    """
    a = accel(x, v, t)
    return x + v * dt, v + a * dt


def semi_implicit_euler_step(x: Q, v: Q, t: float, dt: float, accel: AccelFn) -> tuple[Q, Q]:
    """
    Advance (x, v) by dt using semi-implicit (symplectic) Euler.

        v(t+dt) = v(t) + a(t)·dt
        x(t+dt) = x(t) + v(t+dt)·dt

    Still first-order, but the energy error stays bounded for oscillators,
    which is visually acceptable for carts, levers and blocks.
    """
    a = accel(x, v, t)
    v_new = v + a * dt
    return x + v_new * dt, v_new


def rk4_step(x: Q, v: Q, t: float, dt: float, accel: AccelFn) -> tuple[Q, Q]:
    """
    Advance (x, v) by dt using classical 4th-order Runge-Kutta.

    The acceleration is evaluated four times (at t, twice at t+dt/2, and at
    t+dt) and combined with weights (1, 2, 2, 1)/6, for O(dt⁵) local error.
    Unlike a constant-force RK4, the acceleration is re-evaluated at every
    stage, so velocity- and time-dependent terms (damping, drive) are
    integrated to full order.
    """
    h = 0.5 * dt

    k1x = v
    k1v = accel(x, v, t)

    k2x = v + h * k1v
    k2v = accel(x + h * k1x, k2x, t + h)

    k3x = v + h * k2v
    k3v = accel(x + h * k2x, k3x, t + h)

    k4x = v + dt * k3v
    k4v = accel(x + dt * k3x, k4x, t + dt)

    x_new = x + (dt / 6.0) * (k1x + 2 * k2x + 2 * k3x + k4x)
    v_new = v + (dt / 6.0) * (k1v + 2 * k2v + 2 * k3v + k4v)
    return x_new, v_new


def velocity_verlet_step(x: Q, v: Q, t: float, dt: float, accel: AccelFn) -> tuple[Q, Q]:
    """
    Advance (x, v) by dt using velocity Verlet.

        x(t+dt) = x(t) + v(t)·dt + ½·a(t)·dt²
        v(t+dt) = v(t) + ½·(a(t) + a(t+dt))·dt

    a(t+dt) is evaluated at the new position. Velocity-dependent terms
    (drag) see the estimate v(t) + a(t)·dt. For conservative forces the
    scheme is symplectic and time-reversible, so energy errors oscillate
    instead of accumulating over many orbits.
    """
    a0 = accel(x, v, t)
    x_new = x + v * dt + 0.5 * a0 * dt * dt
    v_est = v + a0 * dt
    a1 = accel(x_new, v_est, t + dt)
    v_new = v + 0.5 * (a0 + a1) * dt
    return x_new, v_new


INTEGRATORS: dict[str, StepFn] = {
    "euler": euler_step,
    "semi_implicit_euler": semi_implicit_euler_step,
    "rk4": rk4_step,
    "verlet": velocity_verlet_step,
}


def get_integrator(name: str) -> StepFn:
    """
    Look up an integrator by name.

    Raises:
        ConfigurationError: If the name is not one of INTEGRATORS.
    """
    try:
        return INTEGRATORS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown integrator: {name!r} (expected one of {sorted(INTEGRATORS)})"
        ) from None
