"""Whole-file reading with up-front path validation."""

import logging
import os

logger = logging.getLogger(__name__)


def read_log_file(filepath: str, encoding: str = "utf-8") -> list[str]:
    """Read the entire file and return its lines without line terminators.

    Raises FileNotFoundError if *filepath* is not an existing regular file.
    Other OSErrors (e.g. PermissionError) propagate unchanged. Undecodable
    bytes are replaced rather than treated as fatal.
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "r", encoding=encoding, errors="replace") as f:
        content = f.read()

    lines = [line.rstrip("\r") for line in content.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    logger.info("Read %d line(s) from %s", len(lines), filepath)
    return lines
