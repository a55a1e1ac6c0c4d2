# MIT License (see LICENSE)
"""
Swept contact test for the two-body collision demo.

Between substeps the pucks move in straight lines, so the instant they first
touch is the smallest non-negative root of

    |Δp + t·Δv| = r_a + r_b

Advancing to that instant before resolving keeps fast pucks from passing
through each other inside one substep.
"""
from __future__ import annotations
import math

from ..types import Body


def time_of_impact(a: Body, b: Body, dt: float) -> float | None:
    """
    Time in [0, dt] at which two freely moving bodies first touch.

    Args:
        a: First body.
        b: Second body.
        dt: Look-ahead window in seconds.

    Returns:
        0.0 if the bodies already overlap, the contact time if it falls
        inside the window, otherwise None (including when they separate
        or have no relative motion).
    """
    dp = a.position - b.position
    dv = a.velocity - b.velocity
    reach = a.radius + b.radius

    # Quadratic coefficients: qa*t^2 + qb*t + qc = 0
    qa = dv.length_sq()
    qb = 2.0 * dp.dot(dv)
    qc = dp.length_sq() - reach * reach

    if qc <= 0.0:
        return 0.0
    if qa < 1e-15:
        return None

    disc = qb * qb - 4.0 * qa * qc
    if disc < 0.0:
        return None

    root = math.sqrt(disc)
    t0 = (-qb - root) / (2.0 * qa)
    if 0.0 <= t0 <= dt:
        return t0
    return None
