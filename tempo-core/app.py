# app.py
import time
from absl import app, flags
from absl import logging as absl_logging
from mvc.model import TempoModel
from mvc.view import DJView, JsonLogView
from mvc.controller import TempoController
from mvc.intents import Intent, IntentKind
from payload.adapter import JsonTempoAdapter
from pulse.clock import ThreadedPulseGenerator
from pulse.null import LoggingPulseGenerator

RUN_SECONDS = 3.0
BUMPS = 3

_BPM = flags.DEFINE_integer("bpm", None, "Rate to set after start (default: model default).")
_RUN_SECONDS = flags.DEFINE_float("run_seconds", RUN_SECONDS, "How long to let the clock tick before stopping.")
_JSON_EVENTS = flags.DEFINE_bool("json_events", False, "Also log every event as a JSON payload.")
_CLOCK = flags.DEFINE_enum("clock", "thread", ["thread", "log"], "thread: real beat ticks; log: only log generator commands.")


def build(clock: str = "thread", json_events: bool = False):
    """Wire pulse generator -> model -> controller -> views. No globals."""
    pulse = ThreadedPulseGenerator() if clock == "thread" else LoggingPulseGenerator()
    model = TempoModel(pulse)
    if isinstance(pulse, ThreadedPulseGenerator):
        pulse.set_tick_handler(model.on_beat_tick)

    controller = TempoController(model)
    view = DJView(model, controller)
    json_view = JsonLogView(model, JsonTempoAdapter(include_ts=True)) if json_events else None
    return model, controller, view, json_view


def main(argv):
    del argv
    model, controller, view, _ = build(clock=_CLOCK.value, json_events=_JSON_EVENTS.value)

    absl_logging.info("[APP] Starting controller…")
    view.on_click(Intent(IntentKind.START))
    if _BPM.value is not None:
        view.on_click(Intent.set_rate(_BPM.value))
    for _ in range(BUMPS):
        view.on_click(Intent(IntentKind.INCREASE))

    try:
        time.sleep(_RUN_SECONDS.value)
    except KeyboardInterrupt:
        pass
    finally:
        view.on_click(Intent(IntentKind.STOP))
        absl_logging.info("[APP] Stopped after %d beats at %d bpm.", view.beats, model.get_rate())


if __name__ == "__main__":
    app.run(main)
