"""
Central configuration for the budgetbook application.

Path resolution lives in budgetbook.workspace.Workspace. This module holds the
application constants and the optional per-workspace settings file
(config/budgetbook.yml), loaded with PyYAML into a pydantic model.
"""
from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from budgetbook.storage.blob_store import SAFE_KEY_PATTERN

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "budgetbook_data"

DEFAULT_ALERT_THRESHOLD = 80.0
EXCEEDED_THRESHOLD = 100.0

UNCATEGORIZED_LABEL = "Uncategorized"
RECENT_TRANSACTIONS_LIMIT = 5
DEFAULT_TREND_MONTHS = 6
PLANNED_VS_ACTUAL_LIMIT = 6


class StorageBackend(StrEnum):
    sqlite = "sqlite"
    file = "file"


class WorkspaceConfig(BaseModel):
    """Settings read from config/budgetbook.yml. Every field has a default."""

    storage: StorageBackend = Field(default=StorageBackend.sqlite, description="Blob store backend")
    snapshot_key: str = Field(
        default=SNAPSHOT_KEY,
        pattern=SAFE_KEY_PATTERN,
        description="Key the snapshot is stored under (letters, digits, _ . -)",
    )
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load the workspace config file, falling back to defaults.

    A missing file is normal (fresh workspace). A file that cannot be parsed
    or validated is reported through logging and replaced by defaults.
    """
    if not path.exists():
        return WorkspaceConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return WorkspaceConfig.model_validate(data)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.warning("Ignoring invalid workspace config %s: %s", path, e)
        return WorkspaceConfig()


def save_workspace_config(path: Path, config: WorkspaceConfig) -> None:
    """Write the workspace config as YAML, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


__all__ = [
    "SNAPSHOT_KEY",
    "DEFAULT_ALERT_THRESHOLD",
    "EXCEEDED_THRESHOLD",
    "UNCATEGORIZED_LABEL",
    "RECENT_TRANSACTIONS_LIMIT",
    "DEFAULT_TREND_MONTHS",
    "PLANNED_VS_ACTUAL_LIMIT",
    "StorageBackend",
    "WorkspaceConfig",
    "load_workspace_config",
    "save_workspace_config",
]
