import numpy as np
import pytest

from physics_demos.core.history import HistoryBuffer
from physics_demos.demos import UniformMotion
from physics_demos.errors import ConfigurationError


def test_interval_gating():
    h = HistoryBuffer(("x",), sample_interval=0.1, max_length=100)
    assert h.record(0.0, x=0.0)
    assert not h.record(0.05, x=1.0)
    assert h.record(0.1, x=2.0)
    assert [s["t"] for s in h] == [0.0, 0.1]


def test_capacity_evicts_oldest():
    h = HistoryBuffer(("x",), sample_interval=0.1, max_length=10)
    for k in range(30):
        h.record(k * 0.1, x=float(k))
    assert len(h) == 10
    assert h.samples()[0]["x"] == 20.0
    assert h.latest()["x"] == 29.0


def test_bound_through_simulation():
    """
    Stepping longer than max_history * sample_interval keeps exactly
    max_history samples, and the initial sample has been evicted.
    """
    sim = UniformMotion(max_history=20)
    sim.run(20 * sim.history.sample_interval + 1.0)
    samples = sim.export_history()
    assert len(samples) == 20
    assert samples[0]["t"] > 0.0
    times = [s["t"] for s in samples]
    assert times == sorted(times)


def test_field_mismatch_raises_key_error():
    h = HistoryBuffer(("x", "v"), 0.1, 10)
    with pytest.raises(KeyError):
        h.record(0.0, x=1.0)
    with pytest.raises(KeyError):
        h.record(0.0, x=1.0, v=2.0, a=3.0)


def test_force_record_and_clear():
    h = HistoryBuffer(("x",), 1.0, 10)
    h.record(0.0, x=0.0)
    h.force_record(0.1, x=1.0)
    assert len(h) == 2
    h.clear()
    assert len(h) == 0
    assert h.latest() is None
    assert h.record(0.2, x=2.0)


def test_column_and_copies():
    h = HistoryBuffer(("x",), 0.1, 10)
    for k in range(3):
        h.record(k * 0.1, x=float(k))
    np.testing.assert_allclose(h.column("t"), [0.0, 0.1, 0.2])
    np.testing.assert_allclose(h.column("x"), [0.0, 1.0, 2.0])
    h.samples()[0]["x"] = 99.0
    assert h.samples()[0]["x"] == 0.0
    with pytest.raises(KeyError):
        h.column("y")


def test_invalid_configuration():
    with pytest.raises(ConfigurationError):
        HistoryBuffer(("x",), 0.0, 10)
    with pytest.raises(ConfigurationError):
        HistoryBuffer(("x",), 0.1, 0)
    with pytest.raises(ConfigurationError):
        HistoryBuffer(("t",), 0.1, 10)
