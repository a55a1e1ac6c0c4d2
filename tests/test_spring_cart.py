import math

import pytest

from physics_demos.demos import SpringCart, SpringCartParams, SpringCartInitial, Terminal
from physics_demos.errors import ConfigurationError


def test_max_compression_matches_energy_balance():
    """
    Frictionless, undamped, level track:
      ½ m v² = ½ k δ²   ->   δ_max = v·sqrt(m/k) = 2·sqrt(1/100) = 0.2 m
    """
    params = SpringCartParams(mass=1.0, stiffness=100.0, damping_ratio=0.0, restitution=1.0)
    sim = SpringCart(params, SpringCartInitial(velocity=2.0))
    sim.run(1.3)
    expected = 2.0 * math.sqrt(1.0 / 100.0)
    rel_err = abs(sim.state.max_compression - expected) / expected
    print("max compression", sim.state.max_compression, "expected", expected, "relerr", rel_err)
    assert rel_err < 0.02
    assert sim.state.impact_velocity == pytest.approx(2.0)


def test_elastic_rebound_and_end_of_track():
    """With e = 1 and no damping the cart leaves the spring at about -2 m/s and runs off the track."""
    params = SpringCartParams(damping_ratio=0.0, restitution=1.0)
    sim = SpringCart(params, SpringCartInitial(velocity=2.0))
    sim.start()
    sim.run(5.0)
    print("rebound velocity", sim.state.rebound_velocity)
    assert sim.state.rebound_velocity == pytest.approx(-2.0, rel=0.02)
    assert sim.terminal is Terminal.END_OF_TRACK
    assert not sim.running
    assert sim.state.x < -(params.start_distance + 1.0)


def test_restitution_scales_rebound():
    params = SpringCartParams(damping_ratio=0.0, restitution=0.5)
    sim = SpringCart(params, SpringCartInitial(velocity=2.0))
    sim.run(1.5)
    assert sim.state.rebound_velocity == pytest.approx(-1.0, rel=0.02)


def test_stick_mode_latches_and_oscillates_out():
    params = SpringCartParams(damping_ratio=0.5, stick=True)
    sim = SpringCart(params, SpringCartInitial(velocity=2.0))
    sim.run(5.0)
    assert sim.state.attached
    assert sim.terminal is None
    assert sim.state.rebound_velocity is None
    assert abs(sim.state.x) < 0.01
    assert abs(sim.state.v) < 0.01


def test_friction_stops_cart_before_spring():
    """
    μk = 0.3: stopping distance v² / (2 μk g) = 4 / 5.886 = 0.68 m < 2 m.
    """
    params = SpringCartParams(mu_static=0.3, mu_kinetic=0.3)
    sim = SpringCart(params, SpringCartInitial(velocity=2.0))
    sim.run(2.0)
    travelled = sim.state.x + params.start_distance
    expected = 4.0 / (2 * 0.3 * params.g)
    assert sim.state.v == 0.0
    assert travelled == pytest.approx(expected, rel=0.02)
    assert not sim.state.in_contact
    assert sim.state.impact_velocity is None


def test_spring_force_in_history():
    params = SpringCartParams(damping_ratio=0.0, restitution=1.0)
    sim = SpringCart(params, SpringCartInitial(velocity=2.0))
    sim.run(1.1)
    sample = sim.history.latest()
    assert sample["x"] > 0.0
    assert sample["spring_force"] == pytest.approx(params.stiffness * sample["x"])
    assert sample["e_spring"] == pytest.approx(0.5 * params.stiffness * sample["x"] ** 2)


def test_critical_damping_coefficient():
    params = SpringCartParams(mass=4.0, stiffness=25.0, damping_ratio=1.0)
    assert params.damping == pytest.approx(2.0 * math.sqrt(100.0))


def test_invalid_parameters():
    with pytest.raises(ConfigurationError):
        SpringCartParams(stiffness=0.0)
    with pytest.raises(ConfigurationError):
        SpringCartParams(restitution=-0.1)
