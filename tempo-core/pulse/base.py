from abc import ABC, abstractmethod

class IPulseGenerator(ABC):
    """Device that produces beat ticks; the model only commands it."""
    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    @abstractmethod
    def set_rate(self, bpm: int) -> None: ...
