"""Locate, read and header-check the source CSV."""

import logging
import re
from pathlib import Path

from adimport.errors import (
    EmptySourceError,
    HeaderMismatchError,
    SourceDecodeError,
    SourceNotFoundError,
)
from adimport.ingestion.schema import AD_COLUMNS

logger = logging.getLogger(__name__)

EXPECTED_HEADER = list(AD_COLUMNS)

_LINE_BREAK = re.compile(r"\r?\n")


def parse_header(line: str) -> list[str]:
    """Split a header line on commas and trim each name."""
    return [name.strip() for name in line.split(",")]


def read_source_lines(path: str | Path) -> list[str]:
    """Read the CSV at ``path`` and return its data lines.

    The header is checked against EXPECTED_HEADER as an ordered list;
    casing, order and column count must all match.

    Raises:
        SourceNotFoundError: the file does not exist.
        SourceDecodeError: the file is not valid UTF-8.
        EmptySourceError: fewer than two lines after trimming.
        HeaderMismatchError: the header is not the expected one.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(path)

    try:
        with open(path, encoding="utf-8") as f:
            content = f.read().strip()
    except UnicodeDecodeError as e:
        raise SourceDecodeError(path, e.reason) from e

    lines = _LINE_BREAK.split(content)
    if len(lines) < 2:
        raise EmptySourceError(path)

    header = parse_header(lines[0])
    if header != EXPECTED_HEADER:
        raise HeaderMismatchError(header, EXPECTED_HEADER)

    logger.info("Read %d data lines from %s", len(lines) - 1, path)
    return lines[1:]
