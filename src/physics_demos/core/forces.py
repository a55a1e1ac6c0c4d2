# MIT License (see LICENSE)
"""
Force and acceleration building blocks for the demo models.

These are pure functions: they take scalars or numpy arrays and return new
values, so the per-demo acceleration functions can be composed from them and
evaluated several times per step (RK4, Verlet).

Key relations:
- Incline:      F∥ = m·g·sin α,  N = m·g·cos α
- Gravitation:  a = -μ·r / |r|³   (μ = G·M)
- Linear drag:  a = -k·v          (magnitude k·|v| opposite to v)
- Spring:       F = -k·(x + x_preload)
- Damper:       F = -c·v
- Drive:        τ(t) = A·sin(2π·f·t)
"""
from __future__ import annotations
import math

import numpy as np

from ..util import norm2


def incline_components(mass: float, g: float, angle: float) -> tuple[float, float]:
    """
    Split the weight of a body on an incline.

    Args:
        mass: Mass in kg.
        g: Gravitational acceleration in m/s².
        angle: Incline angle in radians (0 = horizontal).

    Returns:
        (parallel, normal): the down-slope component m·g·sin α and the
        normal load m·g·cos α.
    """
    w = mass * g
    return w * math.sin(angle), w * math.cos(angle)


def gravitational_acceleration(position: np.ndarray, mu: float) -> np.ndarray:
    """
    Inverse-square acceleration towards the origin.

    Implements a = -μ·r̂ / |r|² = -μ·r / |r|³.

    Args:
        position: Position [x, y] relative to the attracting body's center.
        mu: Gravitational parameter G·M in m³/s².
    """
    r2 = norm2(position)
    if r2 == 0.0:
        return np.zeros(2, dtype=np.float64)
    inv_r3 = 1.0 / (r2 * math.sqrt(r2))
    return -mu * position * inv_r3


def linear_drag_acceleration(velocity: np.ndarray, k: float) -> np.ndarray:
    """
    Drag acceleration proportional to speed, opposite to the velocity.

    Implements a = -k·|v|·v̂ = -k·v. Returns zeros when k == 0.
    """
    if k == 0.0:
        return np.zeros_like(velocity, dtype=np.float64)
    return -k * velocity


def spring_force(stiffness: float, displacement: float, preload: float = 0.0) -> float:
    """Hooke's law with a preload offset: F = -k·(x + x0)."""
    return -stiffness * (displacement + preload)


def viscous_force(c: float, velocity: float) -> float:
    """Linear viscous damping: F = -c·v."""
    return -c * velocity


def driven_torque(amplitude: float, frequency: float, t: float) -> float:
    """Sinusoidal drive A·sin(2π·f·t), frequency in Hz."""
    return amplitude * math.sin(2.0 * math.pi * frequency * t)
