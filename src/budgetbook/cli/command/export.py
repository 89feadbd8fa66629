from __future__ import annotations

"""
Export the full ledger snapshot as a dated JSON backup.
"""

from datetime import date
from pathlib import Path
from typing import Optional

from budgetbook.services.state_store import export_document
from budgetbook.workspace import Workspace
from .util import console, open_store


def run(
    *,
    output: Optional[Path] = None,
    workspace: Workspace,
    today: Optional[date] = None,
) -> int:
    """Write the snapshot to ``output`` (default: exports/budget_backup_<date>.json).

    Returns:
        Exit code (0 = success, 1 = error)
    """
    store = open_store(workspace)
    if store is None:
        return 1

    filename, text = export_document(store, today)
    target = output or workspace.exports_dir / filename
    if target.is_dir():
        target = target / filename

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/] could not write {target}: {e}")
        return 1

    console.print(f"[green]Exported[/] to {target}")
    return 0
