import io

import pytest

from physics_demos.demos import DampedPendulum, TwoBodyCollision
from physics_demos.renderer import DebugRenderer, BufferedRenderer, NullRenderer


def test_debug_renderer_writes_selected_fields():
    out = io.StringIO()
    sim = DampedPendulum()
    renderer = DebugRenderer(output=out, fields=("theta", "omega", "missing"), precision=3)
    renderer.render(sim)
    sim.step(n=24)
    renderer.render(sim)
    lines = out.getvalue().splitlines()
    print(lines)
    assert len(lines) == 2
    assert lines[0] == "t=0.000 theta=0.500 omega=0.000"
    assert lines[1].startswith("t=0.100 theta=")
    assert "missing" not in lines[1]


def test_debug_renderer_flattens_vectors():
    out = io.StringIO()
    DebugRenderer(output=out, fields=("a_position_x", "running")).render(TwoBodyCollision())
    assert out.getvalue() == "t=0.0000 a_position_x=-3.0000 running=False\n"


def test_buffered_renderer_keeps_frames():
    sim = DampedPendulum()
    sim.start()
    renderer = BufferedRenderer()
    for _ in range(5):
        sim.tick(1 / 60)
        renderer.render(sim)
    assert len(renderer.frames) == 5
    assert renderer.frames[-1]["time"] == sim.time
    assert renderer.frames[0]["snapshot"]["theta"] != renderer.frames[-1]["snapshot"]["theta"]
    # frames hold copies, not the live state
    renderer.frames[-1]["snapshot"]["theta"] = 99.0
    assert sim.state.theta != 99.0
    renderer.clear()
    assert len(renderer.frames) == 0


def test_null_renderer_does_nothing():
    sim = DampedPendulum()
    NullRenderer().render(sim)
    assert sim.time == 0.0


def test_buffered_renderer_cap_and_series():
    sim = DampedPendulum()
    renderer = BufferedRenderer(max_frames=3)
    for _ in range(6):
        sim.step(n=4)
        renderer.render(sim)
    assert renderer.frames_drawn == 6
    assert len(renderer.frames) == 3
    assert renderer.frames.maxlen == 3
    assert renderer.frames[0]["time"] == pytest.approx(sim.time - 8 * sim.clock.sim_dt)
    thetas = renderer.series("theta")
    assert len(thetas) == 3
    assert thetas[-1] == sim.state.theta
    assert renderer.series("missing") == []
