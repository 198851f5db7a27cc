from __future__ import annotations

import pytest

from mvc.model import DEFAULT_BPM, TempoModel


def test_initially_off(model):
    assert model.get_rate() == 0
    assert not model.is_running


def test_turn_on_starts_pulse_then_sets_default_rate(model, log, make_listener):
    l1 = make_listener("l1")
    model.register_rate_observer(l1)
    model.turn_on()
    assert model.get_rate() == DEFAULT_BPM == 90
    assert model.is_running
    assert log == [("pulse", "start"), ("pulse", "set_rate", 90), ("l1", "rate", 90)]


def test_turn_on_twice_restarts_and_resets(model, log):
    model.turn_on()
    model.set_rate(120)
    model.turn_on()
    assert model.get_rate() == 90
    assert log.count(("pulse", "start")) == 2


def test_turn_off_notifies_zero_before_stopping(model, log, make_listener):
    l1 = make_listener("l1")
    model.turn_on()
    model.register_rate_observer(l1)
    log.clear()
    model.turn_off()
    assert model.get_rate() == 0
    assert not model.is_running
    assert log == [("pulse", "set_rate", 0), ("l1", "rate", 0), ("pulse", "stop")]


@pytest.mark.parametrize("bpm", [0, -5, 300])
def test_set_rate_accepts_any_int(model, log, bpm):
    model.set_rate(bpm)
    assert model.get_rate() == bpm
    assert log[-1] == ("pulse", "set_rate", bpm)


def test_beat_tick_only_reaches_beat_observers(model, make_listener):
    beat, rate = make_listener("beat"), make_listener("rate")
    model.register_beat_observer(beat)
    model.register_rate_observer(rate)
    model.on_beat_tick()
    assert beat.beats == 1
    assert rate.beats == 0 and rate.rates == []


def test_unregistered_rate_observer_is_not_notified(model, make_listener):
    l1, l2 = make_listener("l1"), make_listener("l2")
    model.register_rate_observer(l1)
    model.register_rate_observer(l2)
    model.unregister_rate_observer(l1)
    model.set_rate(100)
    assert l1.rates == []
    assert l2.rates == [100]


def test_beat_and_rate_membership_is_independent(model, make_listener):
    l1 = make_listener("l1")
    model.register_beat_observer(l1)
    model.register_rate_observer(l1)
    model.unregister_beat_observer(l1)
    model.on_beat_tick()
    model.set_rate(100)
    assert l1.beats == 0
    assert l1.rates == [100]
    assert len(model.beat_observers) == 0
    assert len(model.rate_observers) == 1


def test_notify_rate_observers_resends_current_rate(model, make_listener):
    l1 = make_listener("l1")
    model.set_rate(77)
    model.register_rate_observer(l1)
    model.notify_rate_observers()
    assert l1.rates == [77]


def test_pulse_failure_propagates():
    class BrokenPulse:
        def start(self):
            raise OSError("device gone")

        def stop(self):
            pass

        def set_rate(self, bpm):
            pass

    model = TempoModel(BrokenPulse())
    with pytest.raises(OSError):
        model.turn_on()
    assert model.get_rate() == 0


class FlakyPulse:
    def __init__(self, fail_on):
        self.fail_on = fail_on

    def start(self):
        pass

    def stop(self):
        if self.fail_on == "stop":
            raise OSError("stop failed")

    def set_rate(self, bpm):
        if self.fail_on == "set_rate":
            raise OSError("rate rejected")


def test_rejected_rate_is_not_stored_or_announced(make_listener):
    model = TempoModel(FlakyPulse("set_rate"))
    l1 = make_listener("l1")
    model.register_rate_observer(l1)
    with pytest.raises(OSError):
        model.set_rate(120)
    assert model.get_rate() == 0
    assert l1.rates == []


def test_failed_stop_still_leaves_model_off(make_listener):
    model = TempoModel(FlakyPulse("stop"))
    l1 = make_listener("l1")
    model.register_rate_observer(l1)
    model.turn_on()
    with pytest.raises(OSError):
        model.turn_off()
    assert model.get_rate() == 0
    assert not model.is_running
    assert l1.rates == [90, 0]
