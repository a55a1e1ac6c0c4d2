# MIT License (see LICENSE)
"""
Small numeric helpers.

The orbit code keeps position and velocity as numpy arrays of shape (2,);
``f64``, ``norm2``, ``norm`` and ``cross2`` work on those. The scalar
helpers cover angle wrapping, unit conversion and the sign convention of
the friction model.
"""
from __future__ import annotations
import math

import numpy as np

TWO_PI = 2.0 * math.pi


def f64(x) -> np.ndarray:
    """Copy ``x`` (tuple, list or array) into a fresh float64 array."""
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """|v|; used for orbital radius and speed."""
    return math.sqrt(norm2(v))


def cross2(a: np.ndarray, b: np.ndarray) -> float:
    """
    z-component of a × b.

    ``cross2(r, v)`` is the specific angular momentum of an orbit.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def sign(x: float) -> float:
    """-1.0, 0.0 or 1.0; zero stays zero."""
    if x > 0:
        return 1.0
    if x < 0:
        return -1.0
    return 0.0


def wrap_angle(a: float) -> float:
    """Wrap an angle into (-π, π]."""
    w = math.fmod(a + math.pi, TWO_PI)
    if w <= 0.0:
        w += TWO_PI
    return w - math.pi


def wrap_positive(a: float) -> float:
    """Wrap an angle into [0, 2π)."""
    w = math.fmod(a, TWO_PI)
    if w < 0.0:
        w += TWO_PI
    return w


def deg2rad(deg: float) -> float:
    """Degrees to radians (UI inputs are in degrees)."""
    return deg * math.pi / 180.0


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))
