# notifier/observer.py
from abc import ABC, abstractmethod


class IBeatObserver(ABC):
    """Receives one call per beat tick. `id` must be stable for the observer's lifetime."""
    id: str

    @abstractmethod
    def update_beat(self) -> None:
        """Called when the subject (Model) emits a beat."""
        ...


class IRateObserver(ABC):
    id: str

    @abstractmethod
    def update_rate(self, bpm: int) -> None:
        """Called after the subject (Model) has stored a new rate."""
        ...


class ITempoSubject(ABC):
    @abstractmethod
    def register_beat_observer(self, observer: IBeatObserver) -> None: ...
    @abstractmethod
    def unregister_beat_observer(self, observer: IBeatObserver) -> None: ...
    @abstractmethod
    def notify_beat_observers(self) -> None: ...

    @abstractmethod
    def register_rate_observer(self, observer: IRateObserver) -> None: ...
    @abstractmethod
    def unregister_rate_observer(self, observer: IRateObserver) -> None: ...
    @abstractmethod
    def notify_rate_observers(self) -> None: ...
