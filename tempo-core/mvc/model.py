import threading
from absl import logging as absl_logging
from notifier.observer import ITempoSubject, IBeatObserver, IRateObserver
from notifier.registry import ObserverRegistry
from pulse.base import IPulseGenerator

DEFAULT_BPM = 90
OFF_BPM = 0


class TempoModel(ITempoSubject):
    """
    Observable tempo state. Off (rate 0) until turn_on().
    Every rate change goes through set_rate(), which keeps the pulse
    generator and the rate observers in step with the stored value.
    """
    def __init__(self, pulse: IPulseGenerator) -> None:
        self._pulse = pulse
        self._rate = OFF_BPM
        self._running = False
        self._lock = threading.RLock()
        self._beat_observers: ObserverRegistry[IBeatObserver] = ObserverRegistry("beat")
        self._rate_observers: ObserverRegistry[IRateObserver] = ObserverRegistry("rate")

    # ---- state machine ----
    def turn_on(self) -> None:
        absl_logging.info("[Model] turn_on()")
        self._pulse.start()
        with self._lock:
            self._running = True
        self.set_rate(DEFAULT_BPM)

    def turn_off(self) -> None:
        absl_logging.info("[Model] turn_off()")
        self.set_rate(OFF_BPM)
        try:
            self._pulse.stop()
        finally:
            with self._lock:
                self._running = False

    def set_rate(self, bpm: int) -> None:
        absl_logging.info("[Model] set_rate(%d)", bpm)
        with self._lock:
            self._pulse.set_rate(bpm)
            self._rate = bpm
        self._notify_rate(bpm)

    def get_rate(self) -> int:
        with self._lock:
            return self._rate

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def on_beat_tick(self) -> None:
        self.notify_beat_observers()

    # ---- observers ----
    def register_beat_observer(self, observer: IBeatObserver) -> None:
        self._beat_observers.register(observer)

    def unregister_beat_observer(self, observer: IBeatObserver) -> None:
        self._beat_observers.unregister(observer)

    def notify_beat_observers(self) -> None:
        self._beat_observers.notify(lambda obs: obs.update_beat())

    def register_rate_observer(self, observer: IRateObserver) -> None:
        self._rate_observers.register(observer)

    def unregister_rate_observer(self, observer: IRateObserver) -> None:
        self._rate_observers.unregister(observer)

    def notify_rate_observers(self) -> None:
        self._notify_rate(self.get_rate())

    def _notify_rate(self, bpm: int) -> None:
        absl_logging.debug("[Model] notifying %d rate observers (%d)", len(self._rate_observers), bpm)
        self._rate_observers.notify(lambda obs: obs.update_rate(bpm))

    @property
    def beat_observers(self) -> ObserverRegistry[IBeatObserver]:
        return self._beat_observers

    @property
    def rate_observers(self) -> ObserverRegistry[IRateObserver]:
        return self._rate_observers
