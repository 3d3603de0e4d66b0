"""Run configuration built from the command line."""

import argparse
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SOURCE = "sample_ad_data.csv"
DEFAULT_DATABASE = "sample_ad_data.db"


@dataclass(frozen=True)
class ImportConfig:
    """Resolved source and destination paths for one run."""

    source_path: Path
    db_path: Path

    @classmethod
    def from_args(cls, argv: list[str] | None = None) -> "ImportConfig":
        parser = argparse.ArgumentParser(
            prog="import-ad-data",
            description="Rebuild the ad_data SQLite table from a CSV file",
        )
        parser.add_argument(
            "source", nargs="?", default=DEFAULT_SOURCE, help="Path to CSV file"
        )
        parser.add_argument(
            "database", nargs="?", default=DEFAULT_DATABASE, help="Path to SQLite database"
        )
        args = parser.parse_args(argv)
        return cls(
            source_path=Path(args.source).resolve(),
            db_path=Path(args.database).resolve(),
        )
