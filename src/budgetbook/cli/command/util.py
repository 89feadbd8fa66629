from __future__ import annotations

from datetime import date

from rich.console import Console
from rich.text import Text

from budgetbook.config import StorageBackend, WorkspaceConfig, load_workspace_config
from budgetbook.services.budget_service import AlertLevel
from budgetbook.services.state_store import StateStore
from budgetbook.storage.blob_store import BlobStore, BlobStoreError, JsonFileBlobStore, SqliteBlobStore
from budgetbook.workspace import Workspace

console = Console()


def open_blob_store(workspace: Workspace, config: WorkspaceConfig) -> BlobStore:
    if config.storage == StorageBackend.file:
        return JsonFileBlobStore(workspace.snapshots_dir)
    return SqliteBlobStore(workspace.database_path)


def open_store(workspace: Workspace) -> StateStore | None:
    """Open the workspace's state store, reporting load problems on the console.

    Returns None (after printing the error) when the backend cannot be opened.
    """
    config = load_workspace_config(workspace.config_path)
    try:
        blobs = open_blob_store(workspace, config)
    except BlobStoreError as e:
        console.print(f"[red]Error:[/] {e}")
        return None

    store = StateStore(blobs, key=config.snapshot_key)
    if store.load_warning:
        console.print(f"[yellow]Warning:[/] {store.load_warning}")
    return store


def report_save(store: StateStore) -> int:
    """Print a persistence failure, if any, and return the matching exit code."""
    if store.last_save.ok:
        return 0
    console.print(f"[red]Error:[/] changes are kept in memory but could not be saved: {store.last_save.error}")
    return 1


def fmt_amount(amt: float, currency: str = "") -> Text:
    s = f"{amt:,.2f}"
    if currency:
        s = f"{s} {currency}"
    if amt < 0:
        return Text(s, style="bold red")
    elif amt > 0:
        return Text(s, style="bold green")
    return Text(s)


def fmt_money(amt: float, currency: str = "") -> str:
    s = f"{amt:,.2f}"
    return f"{s} {currency}" if currency else s


def fmt_percent(pct: float, level: AlertLevel) -> str:
    if level == AlertLevel.exceeded:
        return f"[red bold]{pct:.0f}%[/]"
    if level == AlertLevel.warning:
        return f"[yellow]{pct:.0f}%[/]"
    return f"[green]{pct:.0f}%[/]"


def valid_month(month: str) -> bool:
    """True for a YYYY-MM month key."""
    if len(month) != 7:
        return False
    try:
        date.fromisoformat(f"{month}-01")
    except ValueError:
        return False
    return True
