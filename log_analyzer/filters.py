"""Filter predicates for log entries — recency window and level."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from log_analyzer.parser import LogEntry


@dataclass(frozen=True)
class FilterCriteria:
    since_hours: float | None = None
    level: str | None = None


def filter_by_level(entry: LogEntry, level: str) -> bool:
    """True if entry matches the given level (case-insensitive)."""
    return entry.level == level.upper()


def filter_by_recency(entry: LogEntry, cutoff: datetime) -> bool:
    """True if the entry is not older than *cutoff*.

    Timestamps are naive local time; entries dated after the cutoff,
    including future-dated ones, pass.
    """
    return entry.timestamp >= cutoff


def build_filter_chain(
    criteria: FilterCriteria, now: datetime | None = None
) -> Callable[[LogEntry], bool]:
    """Combine the active criteria into a single callable.

    *now* is the run's reference instant; the recency cutoff is derived from
    it once so every entry is judged against the same window.
    """
    predicates = []

    if criteria.since_hours is not None:
        if now is None:
            now = datetime.now()
        try:
            cutoff = now - timedelta(hours=criteria.since_hours)
        except OverflowError:
            # window reaches past the earliest representable date
            cutoff = datetime.min
        predicates.append(lambda entry, c=cutoff: filter_by_recency(entry, c))

    if criteria.level:
        level = criteria.level
        predicates.append(lambda entry, l=level: filter_by_level(entry, l))

    if not predicates:
        return lambda entry: True

    def combined(entry: LogEntry) -> bool:
        return all(p(entry) for p in predicates)

    return combined
