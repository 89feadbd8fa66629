from __future__ import annotations

"""
Replace the ledger with a previously exported JSON backup.
"""

from pathlib import Path

import typer

from budgetbook.model.snapshot_io import SnapshotFormatError, parse_snapshot
from budgetbook.workspace import Workspace
from .util import console, open_store, report_save


def run(*, source: Path, assume_yes: bool = False, workspace: Workspace) -> int:
    """Validate ``source`` and, after confirmation, make it the current snapshot.

    The current data is only replaced once the file has been fully validated.

    Returns:
        Exit code (0 = success or cancelled, 1 = error)
    """
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/] could not read {source}: {e}")
        return 1

    try:
        incoming = parse_snapshot(text)
    except SnapshotFormatError as e:
        console.print(f"[red]Error:[/] {source} is not a valid backup: {e}")
        return 1

    console.print(
        f"Backup contains {len(incoming.transactions)} transactions, "
        f"{len(incoming.categories)} categories and {len(incoming.goals)} goals."
    )
    if not assume_yes and not typer.confirm("Replace all current data with this backup?", default=False):
        console.print("[yellow]Import cancelled.[/]")
        return 0

    store = open_store(workspace)
    if store is None:
        return 1

    store.replace_snapshot(incoming)
    console.print(f"[green]Imported[/] {source}")
    return report_save(store)
