"""CSV ingestion: source resolution, schema rebuild and batch load."""

from adimport.ingestion.loader import (
    count_rows,
    import_ad_data,
    iter_records,
    load_records,
    parse_line,
    rebuild_table,
)
from adimport.ingestion.schema import AD_COLUMNS, AD_TABLE, initialize_schema
from adimport.ingestion.source import EXPECTED_HEADER, read_source_lines

__all__ = [
    "AD_COLUMNS",
    "AD_TABLE",
    "EXPECTED_HEADER",
    "count_rows",
    "import_ad_data",
    "initialize_schema",
    "iter_records",
    "load_records",
    "parse_line",
    "read_source_lines",
    "rebuild_table",
]
