import logging

import pytest

from physics_demos.core.clock import FixedStepClock, Ticker, run_for
from physics_demos.errors import ConfigurationError


class _Recorder:
    def __init__(self, stop_after=None):
        self.calls = []
        self.stop_after = stop_after

    def __call__(self, dt):
        self.calls.append(dt)
        if self.stop_after is not None and len(self.calls) >= self.stop_after:
            return False
        return True


def test_substeps_and_carry():
    clock = FixedStepClock(0.01)
    rec = _Recorder()
    assert clock.advance(0.035, rec) == 3
    assert clock.accumulator == pytest.approx(0.005)
    assert clock.advance(0.005, rec) == 1
    assert rec.calls == [0.01] * 4


def test_oversized_frame_is_clamped(caplog):
    clock = FixedStepClock(0.01, max_frame_dt=0.05)
    with caplog.at_level(logging.WARNING, logger="physics_demos.core.clock"):
        n = clock.advance(2.0, _Recorder())
    assert n == 5
    assert "clamping" in caplog.text


def test_negative_elapsed_is_ignored():
    clock = FixedStepClock(0.01)
    assert clock.advance(-1.0, _Recorder()) == 0
    assert clock.accumulator == 0.0


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_elapsed_is_ignored(bad, caplog):
    clock = FixedStepClock(0.01)
    rec = _Recorder()
    with caplog.at_level(logging.WARNING, logger="physics_demos.core.clock"):
        assert clock.advance(bad, rec) == 0
    assert "non-finite" in caplog.text
    assert clock.accumulator == 0.0
    # the clock keeps working afterwards
    assert clock.advance(0.035, rec) == 3
    assert len(rec.calls) == 3


def test_time_scale_multiplies_elapsed():
    clock = FixedStepClock(0.5, time_scale=60.0)
    assert clock.advance(1 / 60, _Recorder()) == 2


def test_step_returning_false_stops_and_drops_remainder():
    clock = FixedStepClock(0.01)
    rec = _Recorder(stop_after=2)
    assert clock.advance(0.05, rec) == 2
    assert clock.accumulator == 0.0


def test_steps_per_tick_independent_of_frame_rate():
    """Same wall-clock time at 30, 60 and 144 Hz gives the same number of substeps (±1 carried)."""
    totals = []
    for hz in (30, 60, 144):
        clock = FixedStepClock(1 / 240)
        rec = _Recorder()
        for _ in range(hz):
            clock.advance(1 / hz, rec)
        totals.append(len(rec.calls))
    print("substeps per second", totals)
    assert max(totals) - min(totals) <= 1
    assert all(abs(t - 240) <= 1 for t in totals)


def test_invalid_settings():
    with pytest.raises(ConfigurationError):
        FixedStepClock(0.0)
    with pytest.raises(ConfigurationError):
        FixedStepClock(0.01, max_frame_dt=-1.0)
    with pytest.raises(ConfigurationError):
        FixedStepClock(0.01, time_scale=0.0)


def test_run_for_drives_a_ticker():
    class Counter(Ticker):
        def __init__(self):
            self.elapsed = 0.0

        def tick(self, elapsed):
            self.elapsed += elapsed
            return 1

    c = Counter()
    assert run_for(c, 1.0, frame_dt=0.1) == 10
    assert c.elapsed == pytest.approx(1.0)
