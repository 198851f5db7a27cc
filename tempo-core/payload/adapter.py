# payload/adapter.py
from abc import ABC, abstractmethod
from datetime import datetime, timezone
import json

class ITempoPayloadAdapter(ABC):
    """Converts a tempo event (kind + bpm) into a transport payload (str)."""
    @abstractmethod
    def to_text(self, event: str, bpm: int) -> str:
        ...

class JsonTempoAdapter(ITempoPayloadAdapter):
    """
    Builds compact JSON:
      { "ts": "...Z", "event": "beat" | "rate", "bpm": 90 }
    Options:
      - include_ts: drop the timestamp for stable output (tests, diffs)
    """
    def __init__(self, include_ts: bool = True) -> None:
        self.include_ts = include_ts

    def to_text(self, event: str, bpm: int) -> str:
        payload = {}
        if self.include_ts:
            payload["ts"] = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
        payload["event"] = event
        payload["bpm"] = int(bpm)
        return json.dumps(payload, separators=(",", ":"))  # compact
