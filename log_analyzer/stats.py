"""Aggregation — level counts and most frequent error messages."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from log_analyzer.parser import LEVELS, LogEntry

DEFAULT_TOP_N = 5


@dataclass(frozen=True)
class ErrorCount:
    message: str
    count: int


@dataclass
class AnalysisResult:
    file: str
    total_entries: int = 0
    level_counts: dict[str, int] = field(
        default_factory=lambda: {level: 0 for level in LEVELS}
    )
    top_errors: list[ErrorCount] = field(default_factory=list)


def aggregate(
    entries: Iterable[LogEntry], file: str, top_n: int = DEFAULT_TOP_N
) -> AnalysisResult:
    """Consume an entry stream and fold it into an AnalysisResult.

    Error messages are grouped by exact text. Counter keeps insertion order
    and most_common() sorts stably, so equal counts stay in first-seen order.
    """
    level_counter = Counter({level: 0 for level in LEVELS})
    error_counter = Counter()

    for entry in entries:
        level_counter[entry.level] += 1
        if entry.level == "ERROR":
            error_counter[entry.message] += 1

    level_counts = {level: level_counter[level] for level in LEVELS}

    return AnalysisResult(
        file=file,
        total_entries=sum(level_counts.values()),
        level_counts=level_counts,
        top_errors=[
            ErrorCount(message=msg, count=count)
            for msg, count in error_counter.most_common(top_n)
        ],
    )
