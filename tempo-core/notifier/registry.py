# notifier/registry.py
import threading
from typing import Callable, Generic, List, TypeVar

from absl import logging as absl_logging

T = TypeVar("T")


class ObserverRegistry(Generic[T]):
    """
    Ordered listener list for one event type.
      - duplicates are kept (an observer registered twice is notified twice)
      - unregister drops every entry carrying the listener's id
      - notify iterates a snapshot, so callbacks may (un)register freely
      - a failing listener is logged and the pass moves on
    """
    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: List[T] = []
        self._lock = threading.Lock()

    def register(self, listener: T) -> None:
        with self._lock:
            self._listeners.append(listener)
        absl_logging.debug("[%s] registered %s", self.name, listener.id)

    def unregister(self, listener: T) -> None:
        with self._lock:
            before = len(self._listeners)
            self._listeners = [obs for obs in self._listeners if obs.id != listener.id]
            removed = before - len(self._listeners)
        absl_logging.debug("[%s] unregistered %s (%d entries)", self.name, listener.id, removed)

    def snapshot(self) -> List[T]:
        with self._lock:
            return list(self._listeners)

    def notify(self, callback: Callable[[T], None]) -> None:
        for listener in self.snapshot():
            try:
                callback(listener)
            except Exception:
                absl_logging.exception("[%s] observer %s failed", self.name, listener.id)

    def ids(self) -> List[str]:
        return [obs.id for obs in self.snapshot()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    def __contains__(self, listener: object) -> bool:
        listener_id = getattr(listener, "id", listener)
        return listener_id in self.ids()
