"""Command-line entry point — argument parsing, logging setup, exit codes."""

import logging
import math
import os
import sys
from argparse import ArgumentParser, ArgumentTypeError
from datetime import datetime

from log_analyzer.config import ConfigError, load_config, load_yaml_config
from log_analyzer.filters import FilterCriteria, build_filter_chain
from log_analyzer.formatter import FORMATS, render
from log_analyzer.parser import LEVELS, ParseCounter, parse_lines
from log_analyzer.reader import read_log_file
from log_analyzer.stats import aggregate

logger = logging.getLogger("log_analyzer")


def positive_hours(value: str) -> float:
    """argparse type for --hours: a positive int or float."""
    try:
        hours = float(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid number of hours: {value!r}")
    if not math.isfinite(hours) or hours <= 0:
        raise ArgumentTypeError(f"hours must be positive, got {value}")
    return hours


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="log-analyzer",
        description="Summarize log levels and the most frequent errors in a log file.",
    )
    parser.add_argument(
        "file",
        help="Path to the log file",
    )
    parser.add_argument(
        "--hours",
        type=positive_hours,
        help="Only include entries from the last N hours",
    )
    parser.add_argument(
        "--level",
        type=str.upper,
        choices=LEVELS,
        help="Only include entries of this level (INFO, WARN, ERROR, DEBUG)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        type=str.lower,
        choices=FORMATS,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--config",
        default=os.environ.get("LOG_ANALYZER_CONFIG"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log diagnostics to stderr (-vv for debug)",
    )
    return parser


def setup_logging(level_name: str, verbosity: int = 0):
    level = getattr(logging, level_name)
    if verbosity == 1:
        level = min(level, logging.INFO)
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )


def run_pipeline(args, config, now: datetime) -> str:
    """Read, parse, filter, aggregate, and render; return the report text."""
    lines = read_log_file(args.file, encoding=config.encoding)

    criteria = FilterCriteria(since_hours=args.hours, level=args.level)
    filter_fn = build_filter_chain(criteria, now=now)

    counter = ParseCounter()
    entries = (e for e in parse_lines(lines, counter) if filter_fn(e))
    result = aggregate(entries, file=args.file, top_n=config.top_n)

    logger.info(
        "Parsed %d entries, skipped %d malformed line(s), %d matched filters",
        counter.parsed, counter.skipped, result.total_entries,
    )
    return render(result, args.output_format or config.default_format)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(load_yaml_config(args.config))
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, args.verbose)

    # Single reference instant for the whole run
    now = datetime.now()

    try:
        report = run_pipeline(args, config, now)
    except OSError as exc:
        logger.debug("Failed to read %s", args.file, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(report)
    return 0


def run():
    """Console-script wrapper: exit with main's status, quietly on Ctrl+C or a closed pipe."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
