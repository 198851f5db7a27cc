from typing import Optional, Protocol
from absl import logging as absl_logging
from mvc.intents import Intent, IntentKind
from mvc.model import TempoModel

RATE_STEP = 1


class IAffordanceView(Protocol):
    def enable_start(self) -> None: ...
    def disable_start(self) -> None: ...
    def enable_stop(self) -> None: ...
    def disable_stop(self) -> None: ...


class TempoController:
    """
    Controller:
      - turns intents (start, stop, set/increase/decrease rate) into model calls
      - keeps the bound view's start/stop buttons in line with run state
      - never talks to the pulse generator or the observer lists directly
    """
    def __init__(self, model: TempoModel, view: Optional[IAffordanceView] = None) -> None:
        self.model = model
        self.view = view

    def bind_view(self, view: IAffordanceView) -> None:
        self.view = view

    def start(self) -> None:
        absl_logging.info("[Controller] start()")
        self.model.turn_on()
        if self.view:
            self.view.disable_start()
            self.view.enable_stop()

    def stop(self) -> None:
        absl_logging.info("[Controller] stop()")
        self.model.turn_off()
        if self.view:
            self.view.enable_start()
            self.view.disable_stop()

    # No clamping: repeated decreases can take the rate below zero.
    def increase_rate(self) -> None:
        self.model.set_rate(self.model.get_rate() + RATE_STEP)

    def decrease_rate(self) -> None:
        self.model.set_rate(self.model.get_rate() - RATE_STEP)

    def set_rate(self, bpm: int) -> None:
        absl_logging.info("[Controller] set_rate(%d)", bpm)
        self.model.set_rate(bpm)

    def handle(self, intent: Intent) -> None:
        absl_logging.debug("[Controller] intent %s", intent)
        if intent.kind is IntentKind.START:
            self.start()
        elif intent.kind is IntentKind.STOP:
            self.stop()
        elif intent.kind is IntentKind.SET_RATE:
            self.set_rate(intent.bpm or 0)
        elif intent.kind is IntentKind.INCREASE:
            self.increase_rate()
        elif intent.kind is IntentKind.DECREASE:
            self.decrease_rate()
