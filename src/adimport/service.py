"""Storage interface the import pipeline writes through."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

from adimport.types import Params, ParamsList, Row


class DatabaseService(ABC):
    """One destination database, owned by a single import run.

    Schema rebuilds go through execute_ddl(), which commits on its own.
    Row inserts and reads happen inside transaction(), so a failed batch
    leaves no rows behind.
    """

    @abstractmethod
    def connect(self) -> None:
        """Open the destination database."""

    @abstractmethod
    def close(self) -> None:
        """Close the database. Safe to call more than once."""

    @abstractmethod
    def execute(self, sql: str, params: Params | None = None) -> list[Row]:
        """Run one statement inside the active transaction; rows come back as dicts."""

    @abstractmethod
    def scalar(self, sql: str, params: Params | None = None) -> Any:
        """Run a single-value query (e.g. COUNT(*)) and return that value."""

    @abstractmethod
    def execute_many(self, sql: str, params_list: ParamsList) -> None:
        """Run one statement per parameter set inside the active transaction."""

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit when the block exits cleanly, roll back and re-raise otherwise."""

    @abstractmethod
    def execute_ddl(self, sql: str) -> None:
        """Run a multi-statement script (PRAGMA, DROP TABLE, CREATE TABLE) and commit."""

    @abstractmethod
    def batch_insert(self, table: str, columns: list[str], rows: list[tuple]) -> None:
        """Insert rows into ``table``; a no-op for an empty list."""
