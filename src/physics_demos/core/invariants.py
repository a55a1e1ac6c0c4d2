# MIT License (see LICENSE)
"""
Utilities for calculating conserved quantities.

Used by the demos' derived quantities and by the tests that verify
conservation laws. Without dissipation (drag, friction, inelastic contact)
total energy, momentum and angular momentum should stay constant up to
integration error.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..types import Body
from ..util import cross2


def kinetic_energy(bodies: Iterable[Body]) -> float:
    """
    Total translational kinetic energy of a set of bodies.

    T = Σ ½·m·v²
    """
    return float(sum(b.kinetic_energy for b in bodies))


def linear_momentum(bodies: Iterable[Body]) -> np.ndarray:
    """
    Total linear momentum of a set of bodies.

    P = Σ m·v

    Returns:
        Momentum vector [Px, Py] in kg·m/s.
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity.to_array()
    return p


def angular_momentum_z(mass: float, position: np.ndarray, velocity: np.ndarray) -> float:
    """
    Angular momentum about the origin of a point mass.

    L = m·(x·vy - y·vx)
    """
    return mass * cross2(position, velocity)


def relative_drift(value: float, reference: float, floor: float = 1e-30) -> float:
    """|value - reference| / |reference|, guarded against a zero reference."""
    return abs(value - reference) / max(floor, abs(reference))
