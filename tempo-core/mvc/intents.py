# mvc/intents.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class IntentKind(Enum):
    START = "start"
    STOP = "stop"
    SET_RATE = "set_rate"
    INCREASE = "increase"
    DECREASE = "decrease"


@dataclass(frozen=True)
class Intent:
    """What the user asked for (button press etc.). bpm is only read for SET_RATE."""
    kind: IntentKind
    bpm: Optional[int] = None

    @classmethod
    def set_rate(cls, bpm: int) -> "Intent":
        return cls(IntentKind.SET_RATE, bpm)
