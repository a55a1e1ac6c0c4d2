# MIT License (see LICENSE)
"""
Orbital elements from an instantaneous position and velocity.

For a two-body problem with gravitational parameter μ = G·M the state
(r, v) determines the conic the satellite is on:

    specific energy          ε = v²/2 - μ/r
    specific ang. momentum   h = x·vy - y·vx
    eccentricity vector      e = ((v² - μ/r)·r - (r·v)·v) / μ
    semi-latus rectum        p = h²/μ

Classification:
    bound    ε < 0
    circular |e| < CIRCULAR_ECCENTRICITY_TOL
    ellipse  a = -μ/(2ε), rp = a(1-e), ra = a(1+e), T = 2π·sqrt(a³/μ)
    escape   rp = p/(1+e), ra = ∞, T = ∞

The eccentricity vector is the Laplace-Runge-Lenz vector divided by μ; it
points at periapsis.

Reference:
    https://en.wikipedia.org/wiki/Orbital_elements
    https://en.wikipedia.org/wiki/Laplace%E2%80%93Runge%E2%80%93Lenz_vector
"""
from __future__ import annotations
from dataclasses import dataclass
import math

import numpy as np

from ..constants import CIRCULAR_ECCENTRICITY_TOL
from ..errors import require_positive
from ..util import f64, cross2, norm2


@dataclass(frozen=True)
class OrbitalElements:
    """
    Derived description of the current orbit.

    A cached view of the state vector; the state is always authoritative.

    Attributes:
        eccentricity: |e|.
        semi_major_axis: a in meters (radius for circular, nan if unbound).
        perigee_radius: Periapsis distance from the center in meters.
        apogee_radius: Apoapsis distance in meters (inf if unbound).
        periapsis_angle: Direction of periapsis, atan2(ey, ex), radians.
        period: Orbital period in seconds (inf if unbound).
        specific_energy: ε in J/kg.
        specific_angular_momentum: h in m²/s (sign gives the sense of motion).
        is_circular: e below the circular tolerance.
        is_bound: ε < 0.
    """
    eccentricity: float
    semi_major_axis: float
    perigee_radius: float
    apogee_radius: float
    periapsis_angle: float
    period: float
    specific_energy: float
    specific_angular_momentum: float
    is_circular: bool
    is_bound: bool


def compute_orbital_elements(position, velocity, mu: float) -> OrbitalElements:
    """
    Classify the orbit through (position, velocity) around a point mass.

    Args:
        position: [x, y] relative to the primary's center, meters.
        velocity: [vx, vy] in m/s.
        mu: Gravitational parameter G·M (must be > 0).

    Returns:
        OrbitalElements for the conic through the given state.
    """
    require_positive("mu", mu)
    r_vec = f64(position)
    v_vec = f64(velocity)

    r = math.sqrt(norm2(r_vec))
    v2 = norm2(v_vec)

    eps = 0.5 * v2 - mu / r
    h = cross2(r_vec, v_vec)

    rv = float(np.dot(r_vec, v_vec))
    e_vec = ((v2 - mu / r) * r_vec - rv * v_vec) / mu
    e = math.sqrt(norm2(e_vec))

    p = h * h / mu

    is_bound = eps < 0.0
    is_circular = e < CIRCULAR_ECCENTRICITY_TOL

    if is_circular:
        a = r
        rp = ra = r
        period = 2.0 * math.pi * math.sqrt(a ** 3 / mu)
    elif is_bound:
        a = -mu / (2.0 * eps)
        rp = max(0.0, a * (1.0 - e))
        ra = a * (1.0 + e)
        period = 2.0 * math.pi * math.sqrt(a ** 3 / mu)
    else:
        a = math.nan
        rp = max(0.0, p / (1.0 + e))
        ra = math.inf
        period = math.inf

    # Transient blow-ups near periapsis can yield rp <= 0 or nan.
    if not (rp > 0.0 and math.isfinite(rp)):
        rp = r

    return OrbitalElements(
        eccentricity=e,
        semi_major_axis=a,
        perigee_radius=rp,
        apogee_radius=ra,
        periapsis_angle=math.atan2(float(e_vec[1]), float(e_vec[0])),
        period=period,
        specific_energy=eps,
        specific_angular_momentum=h,
        is_circular=is_circular,
        is_bound=is_bound,
    )


def circular_speed(mu: float, r: float) -> float:
    """Speed of a circular orbit of radius r: sqrt(μ/r)."""
    return math.sqrt(mu / r)


def escape_speed(mu: float, r: float) -> float:
    """Escape speed at radius r: sqrt(2μ/r)."""
    return math.sqrt(2.0 * mu / r)
