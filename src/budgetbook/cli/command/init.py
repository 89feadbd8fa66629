"""Initialize a new budgetbook workspace directory."""

from __future__ import annotations

from budgetbook.workspace import Workspace

from .util import console, open_store

_STARTER_CONFIG_YML = """\
# budgetbook workspace configuration
#
# storage: where the ledger snapshot is kept
#   sqlite - data/budgetbook.db (default)
#   file   - data/snapshots/<snapshot_key>.json
# snapshot_key: key the snapshot is stored under
# log_level: DEBUG, INFO, WARNING or ERROR

storage: sqlite
snapshot_key: budgetbook_data
log_level: WARNING
"""


def run(*, workspace: Workspace) -> int:
    """Initialize a workspace with its directories, starter config and seed data.

    Skips anything that already exists (safe to run on an existing workspace).
    Opening the store for the first time writes the seed snapshot.

    Args:
        workspace: Workspace to initialize

    Returns:
        Exit code (0 = success)
    """
    root = workspace.root
    console.print(f"[bold cyan]Initializing workspace:[/] {root}\n")

    created = []
    skipped = []

    for directory in [workspace.data_dir, workspace.exports_dir, workspace.config_path.parent]:
        if directory.exists():
            skipped.append(str(directory.relative_to(root)) + "/")
        else:
            directory.mkdir(parents=True, exist_ok=True)
            created.append(str(directory.relative_to(root)) + "/")

    if workspace.config_path.exists():
        skipped.append(str(workspace.config_path.relative_to(root)))
    else:
        workspace.config_path.write_text(_STARTER_CONFIG_YML, encoding="utf-8")
        created.append(str(workspace.config_path.relative_to(root)))

    store = open_store(workspace)
    if store is None:
        return 1
    if not store.last_save.ok:
        console.print(f"[red]Error:[/] could not write the starter data: {store.last_save.error}")
        return 1

    if created:
        console.print("[green]Created:[/]")
        for item in created:
            console.print(f"  {item}")

    if skipped:
        console.print("[dim]Already exists (skipped):[/dim]")
        for item in skipped:
            console.print(f"  [dim]{item}[/dim]")

    snapshot = store.snapshot
    console.print(
        f"\n[green]Workspace ready at {root}[/] "
        f"({len(snapshot.transactions)} transactions, {len(snapshot.categories)} categories, "
        f"{len(snapshot.goals)} goals)"
    )
    console.print("\n[dim]Next steps:[/dim]")
    console.print("  budgetbook dashboard")
    console.print("  budgetbook transaction add --help")
    return 0
