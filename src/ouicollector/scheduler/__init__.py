"""Refresh scheduling with exponential backoff."""

from .backoff import MAX_BACKOFF, backoff
from .runner import RefreshScheduler, SchedulerState

__all__ = [
    "MAX_BACKOFF",
    "backoff",
    "RefreshScheduler",
    "SchedulerState",
]
