"""Report renderers — human-readable text and JSON."""

import json
from typing import Callable

from log_analyzer.stats import AnalysisResult

FORMATS = ("text", "json")

TITLE = "Log Analysis Report"


def format_text(result: AnalysisResult) -> str:
    """Human-readable report."""
    lines = []
    lines.append(TITLE)
    lines.append("=" * len(TITLE))
    lines.append(f"File: {result.file}")
    lines.append(f"Total Entries: {result.total_entries}")
    lines.append("")

    lines.append("Log Level Summary:")
    for level, count in result.level_counts.items():
        lines.append(f"  {level}: {count}")

    if result.top_errors:
        lines.append("")
        lines.append("Top Error Messages:")
        for rank, error in enumerate(result.top_errors, start=1):
            noun = "occurrence" if error.count == 1 else "occurrences"
            lines.append(f"  {rank}. {error.message} ({error.count} {noun})")

    return "\n".join(lines)


def format_json(result: AnalysisResult) -> str:
    """JSON report — a single object, parseable as-is."""
    return json.dumps({
        "file": result.file,
        "totalEntries": result.total_entries,
        "levelCounts": dict(result.level_counts),
        "topErrors": [
            {"message": error.message, "count": error.count}
            for error in result.top_errors
        ],
    }, indent=2)


def get_renderer(output_format: str = "text") -> Callable[[AnalysisResult], str]:
    """Factory that returns the right renderer for the requested format."""
    if output_format == "json":
        return format_json
    if output_format == "text":
        return format_text
    raise ValueError(f"Unknown output format: {output_format}")


def render(result: AnalysisResult, output_format: str = "text") -> str:
    return get_renderer(output_format)(result)
