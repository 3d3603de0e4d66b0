"""SQLite implementation of DatabaseService."""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator

from adimport.service import DatabaseService
from adimport.types import Params, ParamsList, Row

logger = logging.getLogger(__name__)


class SQLiteDatabaseService(DatabaseService):
    """SQLite backend using stdlib sqlite3.

    Holds a single connection. transaction() marks it active; execute()
    refuses to run outside of one.
    """

    def __init__(self, db_path: str):
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._in_transaction = False

    @property
    def db_path(self) -> str:
        return self._db_path

    def connect(self) -> None:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        self._conn = conn
        logger.debug("Opened SQLite database %s", self._db_path)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self._conn

    def _get_conn(self) -> sqlite3.Connection:
        """Get the connection for the current transaction."""
        if self._in_transaction:
            return self._require_conn()
        raise RuntimeError(
            "No active transaction. Wrap calls in a `with service.transaction():` block."
        )

    @contextmanager
    def transaction(self) -> Iterator[None]:
        conn = self._require_conn()
        self._in_transaction = True
        try:
            yield
            conn.commit()
        except Exception:
            conn.rollback()
            logger.warning("Transaction rolled back")
            raise
        finally:
            self._in_transaction = False

    def execute(self, sql: str, params: Params | None = None) -> list[Row]:
        conn = self._get_conn()
        cursor = conn.execute(sql, params or ())
        if cursor.description is None:
            return []
        columns = [desc[0] for desc in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def scalar(self, sql: str, params: Params | None = None) -> Any:
        conn = self._get_conn()
        row = conn.execute(sql, params or ()).fetchone()
        return None if row is None else row[0]

    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        conn = self._get_conn()
        conn.executemany(sql, params_list)

    def execute_ddl(self, sql: str) -> None:
        conn = self._require_conn()
        conn.executescript(sql)
        conn.commit()

    def batch_insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        if not rows:
            return
        cols = ", ".join(columns)
        placeholders = ", ".join("?" for _ in columns)
        sql = f"INSERT INTO {table} ({cols}) VALUES ({placeholders})"
        self.execute_many(sql, rows)
