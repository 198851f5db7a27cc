import threading
import time
from typing import Callable, Optional

from absl import logging as absl_logging
from .base import IPulseGenerator

IDLE_POLL_S = 0.05


class ThreadedPulseGenerator(IPulseGenerator):
    """
    Pulse generator backed by a daemon thread:
      - calls tick_fn once per beat (60 / bpm seconds apart)
      - rate <= 0 keeps the thread alive but silent
      - set_rate takes effect from the next beat
    Timing is best effort (time.sleep), not real-time.
    """
    def __init__(self, tick_fn: Optional[Callable[[], None]] = None) -> None:
        self._tick_fn = tick_fn
        self._bpm = 0
        self._lock = threading.Lock()
        # fresh pair per run; an old thread only ever sees its own events
        self._stop = threading.Event()
        self._wake = threading.Event()
        self._th: Optional[threading.Thread] = None

    def set_tick_handler(self, tick_fn: Callable[[], None]) -> None:
        with self._lock:
            self._tick_fn = tick_fn

    @property
    def running(self) -> bool:
        return self._th is not None and self._th.is_alive() and not self._stop.is_set()

    def start(self) -> None:
        if self.running:
            absl_logging.debug("[Clock] already running")
            return
        stop, wake = threading.Event(), threading.Event()
        self._stop, self._wake = stop, wake
        self._th = threading.Thread(target=self._loop, args=(stop, wake), name="pulse-clock", daemon=True)
        self._th.start()
        absl_logging.info("[Clock] started")

    def stop(self) -> None:
        th = self._th
        self._stop.set()
        self._wake.set()
        # stop() may be reached from a tick callback on the clock thread itself
        if th is not None and th is not threading.current_thread():
            th.join(timeout=2.0)
            if th.is_alive():
                absl_logging.warning("[Clock] thread did not exit within 2s")
        if th is not None and not th.is_alive() and self._th is th:
            self._th = None
        absl_logging.info("[Clock] stopped")

    def set_rate(self, bpm: int) -> None:
        with self._lock:
            self._bpm = bpm
        self._wake.set()
        absl_logging.debug("[Clock] rate=%d", bpm)

    def _period(self) -> Optional[float]:
        with self._lock:
            bpm = self._bpm
        if bpm <= 0:
            return None
        return 60.0 / bpm

    def _loop(self, stop: threading.Event, wake: threading.Event) -> None:
        last_tick: Optional[float] = None
        while not stop.is_set():
            period = self._period()
            if period is None:
                wake.wait(IDLE_POLL_S)
                wake.clear()
                last_tick = None
                continue

            if last_tick is not None:
                delay = last_tick + period - time.perf_counter()
                if delay > 0:
                    # woken early by set_rate/stop: re-read period and stop flag
                    if wake.wait(delay):
                        wake.clear()
                    continue

            with self._lock:
                tick_fn = self._tick_fn
            if tick_fn is not None:
                try:
                    tick_fn()
                except Exception:
                    absl_logging.exception("[Clock] tick handler failed")

            now = time.perf_counter()
            if last_tick is None or now - last_tick > 2 * period:
                last_tick = now
            else:
                last_tick += period
