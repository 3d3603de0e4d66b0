"""CLI entry point for the ad data import.

Usage:
    import-ad-data [SOURCE] [DATABASE]
    python -m adimport sample_ad_data.csv sample_ad_data.db
"""

import logging
import sqlite3
import sys

from adimport.config import ImportConfig
from adimport.errors import IngestionError
from adimport.ingestion.loader import import_ad_data

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    config = ImportConfig.from_args(argv)

    try:
        result = import_ad_data(config)
    except IngestionError as e:
        logger.error("%s", e)
        sys.exit(1)
    except sqlite3.Error as e:
        logger.error("Import failed, transaction rolled back: %s", e)
        sys.exit(1)

    print(f"Database: {result.db_path}")
    print(f"Inserted rows: {result.inserted}")
    print(f"Rows in table: {result.total}")


if __name__ == "__main__":
    main()
