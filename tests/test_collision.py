import math

import numpy as np
import pytest

from physics_demos.collision import collide, detect_contact, resolve_collision, time_of_impact
from physics_demos.demos import TwoBodyCollision, CollisionParams, CollisionInitial
from physics_demos.errors import ConfigurationError
from physics_demos.types import Body, Vector2


def head_on(mass_a=1.0, mass_b=2.0, speed_a=3.0, speed_b=1.0, restitution=1.0):
    params = CollisionParams(mass_a=mass_a, mass_b=mass_b, restitution=restitution)
    initial = CollisionInitial(speed_a=speed_a, heading_a=0.0, speed_b=speed_b, heading_b=math.pi)
    return TwoBodyCollision(params, initial)


def test_head_on_elastic_matches_analytic():
    """
    1D elastic collision, m1 = 1, m2 = 2, v1 = 3, v2 = -1:
      v1' = ((m1 - m2) v1 + 2 m2 v2) / (m1 + m2) = -7/3
      v2' = ((m2 - m1) v2 + 2 m1 v1) / (m1 + m2) =  5/3
    """
    sim = head_on()
    sim.run(3.0)
    a, b = sim.state.a, sim.state.b
    print("v1'", a.velocity, "v2'", b.velocity)
    assert sim.collision_count == 1
    assert a.velocity.x == pytest.approx(-7.0 / 3.0, rel=1e-9)
    assert b.velocity.x == pytest.approx(5.0 / 3.0, rel=1e-9)
    assert len(sim.contact_points) == 1
    assert sim.contact_points[0].x == pytest.approx(-3.0 + 3.0 * 1.25 + 0.5, abs=1e-9)


def test_momentum_and_energy_conserved_elastic():
    sim = head_on()
    e0 = sim.snapshot()["e_kin"]
    sim.run(3.0)
    px = np.array([s["px"] for s in sim.export_history()])
    e_kin = np.array([s["e_kin"] for s in sim.export_history()])
    print("px range", px.min(), px.max(), "e range", e_kin.min(), e_kin.max())
    np.testing.assert_allclose(px, 1.0, rtol=1e-9)
    np.testing.assert_allclose(e_kin, e0, rtol=1e-9)


def test_inelastic_loses_energy_keeps_momentum():
    sim = head_on(restitution=0.5)
    e0 = sim.snapshot()["e_kin"]
    sim.run(3.0)
    snap = sim.snapshot()
    assert snap["e_kin"] < e0
    assert snap["momentum"][0] == pytest.approx(1.0, rel=1e-9)


def test_perfectly_inelastic_no_relative_normal_velocity():
    """e = 0: both pucks leave with the common velocity (m1 v1 + m2 v2)/(m1 + m2) = 1/3."""
    sim = head_on(restitution=0.0)
    sim.run(3.0)
    a, b = sim.state.a, sim.state.b
    assert a.velocity.x == pytest.approx(1.0 / 3.0, rel=1e-9)
    assert (b.velocity - a.velocity).x == pytest.approx(0.0, abs=1e-12)


def test_oblique_equal_mass_elastic():
    """
    Moving puck hits a resting one along n = (0.8, 0.6):
      a' = (v·t) t = (0.36, -0.48),  b' = (v·n) n = (0.64, 0.48)
    """
    a = Body(1.0, 0.6, Vector2(0.0, 0.0), Vector2(1.0, 0.0))
    b = Body(1.0, 0.6, Vector2(0.8, 0.6), Vector2(0.0, 0.0))
    contact = collide(a, b, restitution=1.0)
    assert contact is not None
    assert contact.penetration == pytest.approx(0.2)
    assert a.velocity.x == pytest.approx(0.36)
    assert a.velocity.y == pytest.approx(-0.48)
    assert b.velocity.x == pytest.approx(0.64)
    assert b.velocity.y == pytest.approx(0.48)
    # pushed apart to exactly touching
    assert (b.position - a.position).length() == pytest.approx(1.2)
    assert detect_contact(a, b) is None


def test_separating_pair_left_alone():
    a = Body(1.0, 0.5, Vector2(0.0, 0.0), Vector2(-1.0, 0.0))
    b = Body(1.0, 0.5, Vector2(0.9, 0.0), Vector2(1.0, 0.0))
    assert not resolve_collision(a, b, Vector2(1.0, 0.0), 1.0)
    assert a.velocity == Vector2(-1.0, 0.0)
    assert b.velocity == Vector2(1.0, 0.0)


def test_fast_small_pucks_do_not_tunnel():
    """
    r = 0.05, v = ±100: relative motion per 0.02 s substep (4 m) is forty
    times the combined diameter, but the swept test still finds the impact.
    """
    params = CollisionParams(radius_a=0.05, radius_b=0.05)
    sim = TwoBodyCollision(params, CollisionInitial(speed_a=100.0, speed_b=100.0))
    sim.step(n=5)
    a, b = sim.state.a, sim.state.b
    assert sim.collision_count == 1
    assert a.velocity.x < 0.0 < b.velocity.x
    assert a.position.x < b.position.x


def test_time_of_impact():
    a = Body(1.0, 0.5, Vector2(0.0, 0.0), Vector2(1.0, 0.0))
    b = Body(1.0, 0.5, Vector2(3.0, 0.0), Vector2(-1.0, 0.0))
    assert time_of_impact(a, b, 2.0) == pytest.approx(1.0)
    assert time_of_impact(a, b, 0.5) is None
    b.velocity = Vector2(1.0, 0.0)
    assert time_of_impact(a, b, 10.0) is None


def test_offset_gives_glancing_blow():
    sim = TwoBodyCollision(initial=CollisionInitial(offset_y=0.5))
    sim.run(3.0)
    assert sim.collision_count == 1
    assert sim.state.a.velocity.y != 0.0
    assert sim.snapshot()["momentum"][1] == pytest.approx(0.0, abs=1e-9)


def test_invalid_parameters():
    with pytest.raises(ConfigurationError):
        CollisionParams(restitution=1.5)
    with pytest.raises(ConfigurationError):
        CollisionParams(radius_a=0.0)
