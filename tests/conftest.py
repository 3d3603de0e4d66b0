"""Shared test fixtures."""

from pathlib import Path

import pytest

from adimport import create_service


@pytest.fixture
def db_path(tmp_path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture
def db_service(db_path):
    """Provide a fresh SQLite DatabaseService for each test."""
    service = create_service(f"sqlite:///{db_path}")
    service.connect()
    yield service
    service.close()


@pytest.fixture
def write_csv(tmp_path):
    """Write raw text to a CSV file under tmp_path and return its path."""

    def _write(content: str, name: str = "ads.csv") -> Path:
        csv_file = tmp_path / name
        csv_file.write_bytes(content.encode("utf-8"))
        return csv_file

    return _write
