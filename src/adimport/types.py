"""Shared types for the adimport package."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

Row = dict[str, Any]
Params = tuple | list | dict
ParamsList = list[tuple] | list[list]

# (campaign_id, date, impressions, clicks, spend, conversions)
AdRecord = tuple[str, str, int | None, int | None, float | None, int | None]


@dataclass(frozen=True)
class ImportResult:
    """Outcome of one import run."""

    db_path: Path
    inserted: int
    total: int
