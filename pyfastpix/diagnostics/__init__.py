"""
Diagnostics for PyFastPix: wall-clock timing of pipeline phases.

Author: B.G.
"""

from .timing import PhaseTimer, log_phase, timed_phase

__all__ = ["PhaseTimer", "log_phase", "timed_phase"]
