"""
Phase timing for PyFastPix pipelines.

Timing is reported through an observer, a callable ``(phase, seconds)``,
invoked when a phase ends. Nothing is kept globally: a pipeline call gets its
observer as an argument and forgets it when it returns.

Author: B.G.
"""

import logging
import time
from contextlib import contextmanager

logger = logging.getLogger(__name__)


def log_phase(phase: str, seconds: float):
    """Default observer: one INFO log line per phase."""
    logger.info("%s took %.1f ms", phase, seconds * 1000.0)


class PhaseTimer:
    """
    Observer that records every phase it is told about.

    Args:
        forward: Optional second observer called after recording,
                 e.g. ``log_phase``

    Example:
        timer = PhaseTimer()
        png = process_downscale_image(data, observer=timer)
        timer.records  # [('decode', ...), ('process', ...), ('encode', ...)]
    """

    def __init__(self, forward=None):
        self.records = []
        self._forward = forward

    def __call__(self, phase: str, seconds: float):
        self.records.append((phase, seconds))
        if self._forward is not None:
            self._forward(phase, seconds)

    @property
    def phases(self):
        return [phase for phase, _ in self.records]

    @property
    def total(self) -> float:
        return sum(seconds for _, seconds in self.records)


@contextmanager
def timed_phase(phase: str, observer=log_phase):
    """Time the enclosed block and report it to ``observer`` if it completes."""
    start = time.perf_counter()
    yield
    if observer is not None:
        observer(phase, time.perf_counter() - start)


__all__ = ["log_phase", "PhaseTimer", "timed_phase"]
