from __future__ import annotations

"""
Snapshot encoding (JSON text <-> AppState).

The persisted blob and the export document share one format: the AppState
aggregate as camelCase JSON, with absent optional fields omitted. There is no
schema version; decoding trusts the shape once pydantic accepts it.

Privacy
- Pure functions over text; callers decide where the text goes
- Never log snapshot contents, they hold the household's financial data
"""

import datetime as dt

from pydantic import ValidationError

from budgetbook.model.entities import AppState

EXPORT_PREFIX = "budget_backup"


class SnapshotFormatError(ValueError):
    """Raised when a text blob is not a well-formed AppState snapshot."""


def dump_snapshot(state: AppState, *, indent: int | None = None) -> str:
    """Serialize the full aggregate to JSON text."""
    return state.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def parse_snapshot(text: str) -> AppState:
    """Decode JSON text into an AppState.

    Raises:
        SnapshotFormatError: the text is not JSON or does not match the AppState shape
    """
    try:
        return AppState.model_validate_json(text)
    except ValidationError as e:
        raise SnapshotFormatError(f"Invalid snapshot ({e.error_count()} problem(s)): {_first_error(e)}") from e


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def export_filename(today: dt.date | None = None) -> str:
    """Name for a downloadable backup, stamped with the export date."""
    today = today or dt.date.today()
    return f"{EXPORT_PREFIX}_{today.isoformat()}.json"


__all__ = [
    "SnapshotFormatError",
    "dump_snapshot",
    "parse_snapshot",
    "export_filename",
    "EXPORT_PREFIX",
]
