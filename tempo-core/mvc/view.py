# mvc/view.py
import uuid
from absl import logging as absl_logging
from notifier.observer import IBeatObserver, IRateObserver
from payload.adapter import ITempoPayloadAdapter
from mvc.controller import TempoController
from mvc.intents import Intent
from mvc.model import TempoModel


class DJView(IBeatObserver, IRateObserver):
    """Display with start/stop buttons. Registers itself on the model and controller."""
    def __init__(self, model: TempoModel, controller: TempoController) -> None:
        self.id = uuid.uuid4().hex
        self.model = model
        self.controller = controller

        self.start_enabled = True
        self.stop_enabled = False
        self.beats = 0
        self.last_rate = model.get_rate()
        self.offline = self.last_rate == 0

        self.model.register_beat_observer(self)
        self.model.register_rate_observer(self)
        self.controller.bind_view(self)

    def close(self) -> None:
        self.model.unregister_beat_observer(self)
        self.model.unregister_rate_observer(self)

    # ---- affordances (driven by the controller) ----
    def enable_start(self) -> None:
        self.start_enabled = True

    def disable_start(self) -> None:
        self.start_enabled = False

    def enable_stop(self) -> None:
        self.stop_enabled = True

    def disable_stop(self) -> None:
        self.stop_enabled = False

    # simulated user input
    def on_click(self, intent: Intent) -> None:
        absl_logging.debug("[View] %s clicked", intent.kind.value)
        self.controller.handle(intent)

    # ---- Observer API ----
    def update_rate(self, bpm: int) -> None:
        self.last_rate = bpm
        self.offline = bpm == 0
        if self.offline:
            absl_logging.info("[View] offline")
            return
        absl_logging.info("[View] rate %d bpm", bpm)

    def update_beat(self) -> None:
        self.beats += 1
        absl_logging.debug("[View] beat %d", self.beats)


class JsonLogView(IBeatObserver, IRateObserver):
    """Observer that converts tempo events to JSON via Adapter, then logs it."""
    def __init__(self, model: TempoModel, adapter: ITempoPayloadAdapter, preview_chars: int = 160) -> None:
        self.id = uuid.uuid4().hex
        self.model = model
        self.adapter = adapter
        self.preview_chars = preview_chars
        self.last_text = None
        self.last_preview = None

        model.register_beat_observer(self)
        model.register_rate_observer(self)

    def _emit(self, text: str) -> None:
        self.last_text = text
        preview = text[: self.preview_chars] + ("..." if len(text) > self.preview_chars else "")
        self.last_preview = preview
        absl_logging.info("[JSON] %s", preview)

    def update_beat(self) -> None:
        self._emit(self.adapter.to_text("beat", self.model.get_rate()))

    def update_rate(self, bpm: int) -> None:
        self._emit(self.adapter.to_text("rate", bpm))
