from __future__ import annotations

from typing import List, Tuple

import pytest

from mvc.model import TempoModel
from notifier.observer import IBeatObserver, IRateObserver
from pulse.base import IPulseGenerator


class RecordingPulse(IPulseGenerator):
    def __init__(self, log: List[Tuple]) -> None:
        self.log = log

    def start(self) -> None:
        self.log.append(("pulse", "start"))

    def stop(self) -> None:
        self.log.append(("pulse", "stop"))

    def set_rate(self, bpm: int) -> None:
        self.log.append(("pulse", "set_rate", bpm))


class Listener(IBeatObserver, IRateObserver):
    def __init__(self, id: str, log: List[Tuple]) -> None:
        self.id = id
        self.log = log
        self.beats = 0
        self.rates: List[int] = []

    def update_beat(self) -> None:
        self.beats += 1
        self.log.append((self.id, "beat"))

    def update_rate(self, bpm: int) -> None:
        self.rates.append(bpm)
        self.log.append((self.id, "rate", bpm))


@pytest.fixture
def log() -> List[Tuple]:
    return []


@pytest.fixture
def pulse(log):
    return RecordingPulse(log)


@pytest.fixture
def model(pulse):
    return TempoModel(pulse)


@pytest.fixture
def make_listener(log):
    def _make(id: str) -> Listener:
        return Listener(id, log)
    return _make
