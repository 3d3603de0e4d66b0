"""Exceptions raised before the import touches storage."""

from pathlib import Path


class IngestionError(Exception):
    """Base exception for import errors."""

    pass


class SourceNotFoundError(IngestionError):
    """Source CSV file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"CSV file not found: {path}")


class EmptySourceError(IngestionError):
    """Source CSV has a header but no data rows (or nothing at all)."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"CSV has no data rows: {path}")


class HeaderMismatchError(IngestionError):
    """Header line differs from the expected column sequence."""

    def __init__(self, header: list[str], expected: list[str]):
        self.header = header
        self.expected = expected
        super().__init__(
            f"Unexpected CSV header: {','.join(header)} "
            f"(expected {','.join(expected)})"
        )


class SourceDecodeError(IngestionError):
    """Source CSV is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"CSV is not valid UTF-8: {path} ({reason})")
