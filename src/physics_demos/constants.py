# MIT License (see LICENSE)
"""
Physical and numerical constants shared by the demo models.

Physical constants use SI units. The numerical thresholds are the values the
classroom demos were calibrated with; changing them changes demo behavior.
"""
from __future__ import annotations

# Gravitational acceleration used by the mechanics demos (m/s²).
G_EARTH: float = 9.81

# Standard gravity, used by the pendulum demo (m/s²).
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?gn
G_STANDARD: float = 9.80665

# Newtonian constant of gravitation (m³·kg⁻¹·s⁻²).
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
GRAVITATIONAL_CONSTANT: float = 6.67430e-11

EARTH_MASS: float = 5.972e24   # kg
EARTH_RADIUS: float = 6.371e6  # m

# Speed below which a sliding/rotating body is treated as possibly at rest
# and static friction is consulted.
STATIONARY_EPS: float = 1e-3

# Largest wall-clock delta consumed in one tick (s). Longer gaps (tab resume,
# debugger pause) are truncated to this.
MAX_FRAME_DT: float = 0.05

# Eccentricity under which an orbit is reported as circular. Numerical
# integration never produces e == 0 exactly.
CIRCULAR_ECCENTRICITY_TOL: float = 0.02

# Tolerance used when comparing accumulated float times against intervals.
TIME_EPS: float = 1e-12
