"""Transactional load of CSV lines into the ad_data table."""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from adimport import create_service
from adimport.config import ImportConfig
from adimport.ingestion.schema import AD_COLUMNS, AD_TABLE, initialize_schema
from adimport.ingestion.source import read_source_lines
from adimport.service import DatabaseService
from adimport.types import AdRecord, ImportResult

logger = logging.getLogger(__name__)

FIELD_COUNT = len(AD_COLUMNS)

# Plain decimal text only: no underscores, no nan/inf, ASCII digits.
_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_FLOAT_TEXT = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

# SQLite INTEGER is a signed 64-bit value.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def coerce_int(text: str) -> int | None:
    """Parse base-10 integer text, or None if it is not one.

    Values outside the SQLite INTEGER range are also None.
    """
    if not _INT_TEXT.fullmatch(text):
        return None
    if len(text.lstrip("+-").lstrip("0")) > 19:
        return None
    value = int(text, 10)
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        return None
    return value


def coerce_float(text: str) -> float | None:
    """Parse decimal text, or None if it is not one."""
    if not _FLOAT_TEXT.fullmatch(text):
        return None
    return float(text)


def parse_line(line: str) -> AdRecord | None:
    """Parse one data line into a record matching AD_COLUMNS.

    Returns None when the line does not have exactly six fields. Numeric
    fields that fail to parse come back as None; the NOT NULL constraint
    rejects them at insert time.
    """
    fields = [field.strip() for field in line.split(",")]
    if len(fields) != FIELD_COUNT:
        return None
    campaign_id, date, impressions, clicks, spend, conversions = fields
    return (
        campaign_id,
        date,
        coerce_int(impressions),
        coerce_int(clicks),
        coerce_float(spend),
        coerce_int(conversions),
    )


def iter_records(lines: Iterable[str]) -> Iterator[AdRecord]:
    """Yield parsed records, skipping blank and wrong-shape lines."""
    for line_num, line in enumerate(lines, start=2):
        if not line.strip():
            continue
        record = parse_line(line)
        if record is None:
            logger.debug("Skipping line %d: expected %d fields", line_num, FIELD_COUNT)
            continue
        yield record


def load_records(service: DatabaseService, lines: Iterable[str]) -> int:
    """Insert all records in a single transaction.

    Any storage error rolls the whole batch back and is re-raised, so a
    run either persists every accepted row or none of them.

    Returns the number of rows inserted.
    """
    rows = list(iter_records(lines))
    with service.transaction():
        service.batch_insert(AD_TABLE, AD_COLUMNS, rows)
    logger.info("Inserted %d rows into %s", len(rows), AD_TABLE)
    return len(rows)


def count_rows(service: DatabaseService) -> int:
    """Row count as seen by storage, independent of the loader's counter."""
    with service.transaction():
        return service.scalar(f"SELECT COUNT(*) FROM {AD_TABLE}")


def rebuild_table(
    service: DatabaseService,
    lines: Iterable[str],
    db_path: str | Path,
) -> ImportResult:
    """Drop and recreate ad_data, load ``lines`` and confirm the row count."""
    initialize_schema(service)
    inserted = load_records(service, lines)
    total = count_rows(service)
    if total != inserted:
        logger.warning("Row count mismatch: inserted %d, table has %d", inserted, total)
    return ImportResult(db_path=Path(db_path), inserted=inserted, total=total)


def import_ad_data(config: ImportConfig) -> ImportResult:
    """Rebuild ad_data at ``config.db_path`` from the CSV at ``config.source_path``.

    The source is read and its header checked before the database is
    opened, so a bad source never creates or touches the database file.
    """
    lines = read_source_lines(config.source_path)

    service = create_service(str(config.db_path))
    service.connect()
    try:
        return rebuild_table(service, lines, config.db_path)
    finally:
        service.close()
