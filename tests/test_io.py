import json
import math

import numpy as np
import pytest

from physics_demos.demos import DemoKind, Load, OrbitalMotion, TwoBodyCollision, Lever
from physics_demos.errors import ConfigurationError
from physics_demos.io import (
    params_from_dict,
    initial_from_dict,
    snapshot_to_record,
    history_to_records,
    simulation_from_config,
    load_config,
    save_config,
    config_to_json,
)


def test_degrees_are_converted_once():
    params = params_from_dict("incline", {"mass": "2.5", "angle_deg": 45, "mu_static": 0.5, "mu_kinetic": 0.4})
    assert params.mass == 2.5
    assert params.angle == pytest.approx(math.pi / 4)


def test_unknown_and_duplicate_fields_rejected():
    with pytest.raises(ConfigurationError):
        params_from_dict("incline", {"colour": 1})
    with pytest.raises(ConfigurationError):
        params_from_dict("incline", {"angle": 0.5, "angle_deg": 30})
    with pytest.raises(ConfigurationError):
        params_from_dict("incline", {"mass": "heavy"})
    with pytest.raises(ConfigurationError):
        params_from_dict("incline", {"mass": -1})


def test_nested_values():
    params = params_from_dict(DemoKind.LEVER, {"loads": [{"mass": 4, "x": 2}, [1, 8.5]]})
    assert params.loads == (Load(4.0, 2.0), Load(1.0, 8.5))
    initial = initial_from_dict("collision", {"position_a": [0, 1], "heading_b_deg": 180})
    assert initial.position_a == (0.0, 1.0)
    assert initial.heading_b == pytest.approx(math.pi)
    cart = params_from_dict("spring_cart", {"stick": True})
    assert cart.stick is True


def test_snapshot_flattening():
    sim = TwoBodyCollision()
    record = snapshot_to_record(sim.snapshot())
    assert record["a_position_x"] == -3.0
    assert record["a_position_y"] == 0.0
    assert record["b_velocity_x"] == pytest.approx(-2.0)
    assert record["momentum_x"] == pytest.approx(0.0, abs=1e-12)
    assert record["a_label"] == "A"
    assert all(not isinstance(v, (dict, list, tuple)) for v in record.values())


def test_numpy_state_flattening():
    sim = OrbitalMotion()
    record = snapshot_to_record(sim.snapshot())
    assert record["position_x"] == pytest.approx(sim.state.position[0])
    assert record["velocity_y"] == pytest.approx(sim.state.velocity[1])
    assert isinstance(record["position_x"], float)
    assert not any(isinstance(v, np.ndarray) for v in record.values())


def test_history_records():
    sim = Lever()
    sim.run(0.1)
    records = history_to_records(sim)
    assert len(records) == len(sim.export_history())
    assert set(records[0]) == {"t", "moment"}


def test_config_round_trip(tmp_path):
    path = tmp_path / "incline.json"
    path.write_text(json.dumps({
        "demo": "incline",
        "params": {"mass": 2.0, "angle_deg": 25, "mu_static": 0.5, "mu_kinetic": 0.4},
        "initial": {"position": 1.0},
        "options": {"sample_interval": 0.5, "max_history": 10},
    }))
    sim = load_config(str(path))
    assert sim.kind is DemoKind.INCLINE
    assert sim.params.angle == pytest.approx(math.radians(25))
    assert sim.initial.position == 1.0
    assert sim.history.sample_interval == 0.5
    assert sim.history.max_length == 10

    out = tmp_path / "saved.json"
    save_config(sim, str(out))
    again = load_config(str(out))
    assert again.params == sim.params
    assert again.initial == sim.initial
    assert again.clock.sim_dt == sim.clock.sim_dt
    assert again.integrator_name == "semi_implicit_euler"


def test_lever_config_keeps_loads(tmp_path):
    sim = Lever()
    out = tmp_path / "lever.json"
    save_config(sim, str(out))
    again = load_config(str(out))
    assert again.params.loads == sim.params.loads


def test_bad_configurations():
    with pytest.raises(ConfigurationError):
        simulation_from_config({"params": {}})
    with pytest.raises(ConfigurationError):
        simulation_from_config({"demo": "trebuchet"})
    with pytest.raises(ConfigurationError):
        simulation_from_config({"demo": "pendulum", "options": {"warp": 9}})
    with pytest.raises(ConfigurationError):
        simulation_from_config({"demo": "pendulum", "options": {"integrator": "leapfrog"}})


def test_config_to_json_is_serialisable():
    data = config_to_json(TwoBodyCollision())
    text = json.dumps(data)
    assert json.loads(text)["demo"] == "collision"
