import pytest

from physics_demos.demos import UniformMotion, UniformParams, UniformInitial, Terminal


def test_constant_velocity_exact():
    """a = 0: x(t) = x0 + v0·t."""
    sim = UniformMotion(UniformParams(acceleration=0.0), UniformInitial(position=-2.0, velocity=1.5))
    sim.run(3.0)
    x_exp, v_exp = sim.analytic(sim.time)
    assert sim.state.position == pytest.approx(x_exp, rel=1e-9)
    assert sim.state.velocity == v_exp


def test_uniform_acceleration_close_to_analytic():
    """
    x(t) = x0 + v0 t + ½ a t².  Explicit Euler lags by ½·a·dt·t.
    """
    sim = UniformMotion(UniformParams(acceleration=2.0), UniformInitial(position=0.0, velocity=1.0))
    sim.run(2.0)
    x_exp, v_exp = sim.analytic(2.0)
    rel_err = abs(sim.state.position - x_exp) / abs(x_exp)
    print("uniform x", sim.state.position, "exp", x_exp, "relerr", rel_err)
    assert rel_err < 0.01
    assert sim.state.position < x_exp
    assert sim.state.velocity == pytest.approx(v_exp, rel=1e-9)


def test_leaving_track_ends_run():
    sim = UniformMotion(UniformParams(track_length=20.0), UniformInitial(velocity=1.0))
    sim.run(15.0)
    assert sim.terminal is Terminal.END_OF_TRACK
    assert sim.state.position > 10.0
    assert sim.time == pytest.approx(10.0, abs=0.01)


def test_backwards_motion_leaves_left_end():
    sim = UniformMotion(initial=UniformInitial(velocity=-4.0))
    sim.run(5.0)
    assert sim.terminal is Terminal.END_OF_TRACK
    assert sim.state.position < -10.0
