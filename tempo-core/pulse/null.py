from absl import logging as absl_logging
from .base import IPulseGenerator

class LoggingPulseGenerator(IPulseGenerator):
    def start(self) -> None:
        absl_logging.info("[Pulse] start()")

    def stop(self) -> None:
        absl_logging.info("[Pulse] stop()")

    def set_rate(self, bpm: int) -> None:
        absl_logging.info("[Pulse] set_rate(%d)", bpm)
