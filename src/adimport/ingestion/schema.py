"""ad_data table schema and rebuild."""

from adimport.service import DatabaseService

AD_TABLE = "ad_data"
AD_COLUMNS = ["campaign_id", "date", "impressions", "clicks", "spend", "conversions"]

# The table is dropped on every run: the CSV is the source of truth.
AD_TABLE_DDL = """
PRAGMA journal_mode = WAL;
PRAGMA synchronous = NORMAL;

DROP TABLE IF EXISTS ad_data;

CREATE TABLE ad_data (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    campaign_id   TEXT    NOT NULL,
    date          TEXT    NOT NULL,
    impressions   INTEGER NOT NULL,
    clicks        INTEGER NOT NULL,
    spend         REAL    NOT NULL,
    conversions   INTEGER NOT NULL
);
"""


def initialize_schema(service: DatabaseService) -> None:
    """Drop and recreate the ad_data table. Prior rows are lost."""
    service.execute_ddl(AD_TABLE_DDL)
