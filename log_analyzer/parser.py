"""Log line parser — frozen dataclass + compiled regex."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Generator, Iterable

logger = logging.getLogger(__name__)

LEVELS = ("INFO", "WARN", "ERROR", "DEBUG")

LOG_PATTERN = re.compile(
    r"^(\d{4}-\d{2}-\d{2}) (\d{2}:\d{2}:\d{2}) \[(INFO|WARN|ERROR|DEBUG)\] (.*)$"
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    level: str
    message: str


@dataclass
class ParseCounter:
    parsed: int = 0
    skipped: int = 0


def parse_line(line: str) -> LogEntry | None:
    """Parse a single log line into a LogEntry. Returns None for unparseable lines.

    The message is kept exactly as written after the level tag; it only has
    to be non-blank.
    """
    stripped = line.rstrip("\r\n")
    match = LOG_PATTERN.match(stripped)
    if not match:
        return None

    date_str, time_str, level, message = match.groups()
    if not message.strip():
        return None

    try:
        timestamp = datetime.strptime(f"{date_str} {time_str}", TIMESTAMP_FORMAT)
    except ValueError:
        return None

    return LogEntry(
        timestamp=timestamp,
        level=level,
        message=message,
    )


def parse_lines(
    lines: Iterable[str], counter: ParseCounter | None = None
) -> Generator[LogEntry, None, None]:
    """Yield a LogEntry for every well-formed line, in file order.

    Malformed and blank lines are skipped. When *counter* is given it is
    updated as the generator is consumed.
    """
    for line_number, line in enumerate(lines, start=1):
        entry = parse_line(line)
        if entry is None:
            logger.debug("Skipping malformed line %d: %r", line_number, line)
            if counter is not None:
                counter.skipped += 1
            continue
        if counter is not None:
            counter.parsed += 1
        yield entry
