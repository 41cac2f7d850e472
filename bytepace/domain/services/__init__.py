"""Domain services - pure pacing logic."""

from .pacer import AsyncIntervalPacer, AsyncSleep, IntervalPacer, Sleep

__all__ = [
    "IntervalPacer",
    "AsyncIntervalPacer",
    "Sleep",
    "AsyncSleep",
]
