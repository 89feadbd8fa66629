"""
Workspace - centralized data path resolution for budgetbook.

A Workspace represents the root directory containing the persisted snapshot,
the workspace config file, and exported backups. All paths are computed
relative to this root.

Resolution priority:
1. Explicit path (--data-dir CLI option)
2. BUDGETBOOK_DATA environment variable
3. Current working directory
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_VAR = "BUDGETBOOK_DATA"


@dataclass
class Workspace:
    """Root directory for all budgetbook data paths."""

    root: Path

    @classmethod
    def resolve(cls, explicit: Path | None = None) -> Workspace:
        """Resolve workspace root from explicit path, env var, or CWD.

        Args:
            explicit: Explicitly provided path (highest priority)

        Returns:
            Workspace with resolved root
        """
        if explicit is not None:
            return cls(root=explicit)
        env = os.environ.get(ENV_VAR)
        if env:
            return cls(root=Path(env))
        return cls(root=Path.cwd())

    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def database_path(self) -> Path:
        return self.data_dir / "budgetbook.db"

    @property
    def snapshots_dir(self) -> Path:
        return self.data_dir / "snapshots"

    @property
    def config_path(self) -> Path:
        return self.root / "config" / "budgetbook.yml"

    @property
    def exports_dir(self) -> Path:
        return self.root / "exports"


__all__ = ["Workspace", "ENV_VAR"]
