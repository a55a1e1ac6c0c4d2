import math

import pytest

from physics_demos.constants import EARTH_MASS, GRAVITATIONAL_CONSTANT
from physics_demos.core.orbital import compute_orbital_elements, circular_speed, escape_speed
from physics_demos.errors import ConfigurationError

MU = GRAVITATIONAL_CONSTANT * EARTH_MASS
R0 = 7.0e6


def test_circular_orbit_classification():
    """v0 = sqrt(μ/r) tangential: e ≈ 0, rp = ra = r0, T = 2π sqrt(r³/μ)."""
    v0 = circular_speed(MU, R0)
    el = compute_orbital_elements([R0, 0.0], [0.0, v0], MU)
    print("circular e", el.eccentricity)
    assert el.is_circular
    assert el.is_bound
    assert el.eccentricity < 0.02
    assert el.perigee_radius == pytest.approx(R0)
    assert el.apogee_radius == pytest.approx(R0)
    assert el.period == pytest.approx(2 * math.pi * math.sqrt(R0 ** 3 / MU))
    assert el.specific_angular_momentum > 0


def test_ellipse_from_periapsis():
    """
    Tangential launch at 1.1·v_circ puts the satellite at periapsis:
      e = v²r/μ - 1 = 0.21,  rp = r0,  ra = r0 (1+e)/(1-e)
    """
    v0 = 1.1 * circular_speed(MU, R0)
    el = compute_orbital_elements([R0, 0.0], [0.0, v0], MU)
    e = 1.21 - 1.0
    assert not el.is_circular
    assert el.is_bound
    assert el.eccentricity == pytest.approx(e, rel=1e-9)
    assert el.perigee_radius == pytest.approx(R0, rel=1e-9)
    assert el.apogee_radius == pytest.approx(R0 * (1 + e) / (1 - e), rel=1e-9)
    assert el.semi_major_axis == pytest.approx(R0 / (1 - e), rel=1e-9)
    assert el.periapsis_angle == pytest.approx(0.0, abs=1e-9)


def test_escape_trajectory():
    v0 = 1.5 * circular_speed(MU, R0)
    assert v0 > escape_speed(MU, R0)
    el = compute_orbital_elements([R0, 0.0], [0.0, v0], MU)
    assert not el.is_bound
    assert math.isinf(el.apogee_radius)
    assert math.isinf(el.period)
    assert math.isnan(el.semi_major_axis)
    assert el.perigee_radius == pytest.approx(R0, rel=1e-9)


def test_retrograde_sign():
    v0 = circular_speed(MU, R0)
    el = compute_orbital_elements([R0, 0.0], [0.0, -v0], MU)
    assert el.specific_angular_momentum < 0
    assert el.is_circular


def test_requires_positive_mu():
    with pytest.raises(ConfigurationError):
        compute_orbital_elements([R0, 0.0], [0.0, 1.0], 0.0)
