import pytest

from physics_demos.core.friction import (
    resolve_friction,
    resolve_friction_limits,
    settle,
    distribute,
    max_static_friction,
)


def test_static_friction_cancels_driving_force():
    res = resolve_friction(driving=5.0, normal=10.0, velocity=0.0, mu_static=0.6, mu_kinetic=0.4)
    assert res.is_static
    assert res.friction == 5.0
    assert res.net_force == 0.0


def test_breakaway_uses_driving_direction():
    res = resolve_friction(driving=-7.0, normal=10.0, velocity=0.0, mu_static=0.6, mu_kinetic=0.4)
    assert not res.is_static
    assert res.friction == pytest.approx(-4.0)
    assert res.net_force == pytest.approx(-3.0)


def test_sliding_friction_opposes_velocity():
    """Moving left with no driving force: friction points left, net force right."""
    res = resolve_friction(driving=0.0, normal=10.0, velocity=-1.0, mu_static=0.6, mu_kinetic=0.4)
    assert not res.is_static
    assert res.friction == pytest.approx(-4.0)
    assert res.net_force == pytest.approx(4.0)


def test_below_eps_counts_as_rest():
    res = resolve_friction(driving=1.0, normal=10.0, velocity=5e-4, mu_static=0.2, mu_kinetic=0.1)
    assert res.is_static


def test_extra_resistance_raises_static_limit_and_kinetic_friction():
    held = resolve_friction(6.5, 10.0, 0.0, 0.6, 0.4, extra_resistance=1.0)
    assert held.is_static
    sliding = resolve_friction(0.0, 10.0, 2.0, 0.6, 0.4, extra_resistance=1.0)
    assert sliding.friction == pytest.approx(5.0)


def test_normal_sign_is_ignored():
    assert max_static_friction(0.5, -4.0) == 2.0


def test_settle():
    # slowing down, slow, holdable -> snap
    assert settle(velocity=0.05, acceleration=-2.0, driving=1.0, max_static=6.0, snap_speed=0.1)
    # speeding up
    assert not settle(0.05, 2.0, 1.0, 6.0, 0.1)
    # too fast
    assert not settle(0.5, -2.0, 1.0, 6.0, 0.1)
    # static friction cannot hold it
    assert not settle(0.05, -2.0, 10.0, 6.0, 0.1)


def test_distribute_by_normal_share():
    assert distribute(6.0, [1.0, 2.0]) == pytest.approx([2.0, 4.0])
    assert distribute(6.0, [0.0, 0.0]) == [0.0, 0.0]


def test_limits_from_several_surfaces():
    """Two surfaces with their own coefficients: limits are the sums of μ_i·N_i."""
    static_limit = 0.1 * 10.0 + 0.5 * 4.0
    kinetic = 0.05 * 10.0 + 0.4 * 4.0
    held = resolve_friction_limits(2.9, 0.0, static_limit, kinetic)
    assert held.is_static
    assert held.friction == 2.9
    slips = resolve_friction_limits(3.1, 0.0, static_limit, kinetic)
    assert not slips.is_static
    assert slips.friction == pytest.approx(2.1)
    assert slips.net_force == pytest.approx(1.0)
    moving = resolve_friction_limits(0.0, -0.5, static_limit, kinetic)
    assert moving.friction == pytest.approx(-2.1)


def test_single_surface_matches_limits_form():
    a = resolve_friction(3.0, 10.0, 0.2, 0.6, 0.4, extra_resistance=0.5)
    b = resolve_friction_limits(3.0, 0.2, 0.6 * 10.0 + 0.5, 0.4 * 10.0 + 0.5)
    assert a == b
