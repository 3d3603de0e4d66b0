"""Ad data import: rebuild a SQLite ad_data table from a CSV export."""

from adimport.service import DatabaseService
from adimport.sqlite_service import SQLiteDatabaseService


def create_service(db_url: str) -> DatabaseService:
    """Create a DatabaseService from a path or connection URL.

    Accepted forms:
    - path/to/db  (plain filesystem path)
    - sqlite:///path/to/db  or  sqlite:///:memory:
    """
    if db_url.startswith("sqlite"):
        # sqlite:///foo.db -> foo.db, bare "sqlite:" -> :memory:
        path = db_url.split(":///", 1)[1] if ":///" in db_url else ":memory:"
        return SQLiteDatabaseService(path)
    if "://" in db_url:
        raise ValueError(f"Unsupported database URL scheme: {db_url}")
    return SQLiteDatabaseService(db_url)


__all__ = ["DatabaseService", "SQLiteDatabaseService", "create_service"]
