from __future__ import annotations

import calendar
from typing import Optional

from budgetbook.model.entities import SettingsPatch
from budgetbook.workspace import Workspace
from .util import console, open_store, report_save


def run(
    *,
    start_month: Optional[int] = None,
    alert_threshold: Optional[float] = None,
    workspace: Workspace,
) -> int:
    """Show settings, applying any given changes first.

    Args:
        start_month: Reporting start month, 1-12 on the command line (stored 0-11)
        alert_threshold: Utilization percentage that flags a category (0-100)
    """
    if start_month is not None and not 1 <= start_month <= 12:
        console.print("[red]Error:[/] --start-month must be between 1 and 12")
        return 1
    if alert_threshold is not None and not 0 <= alert_threshold <= 100:
        console.print("[red]Error:[/] --alert-threshold must be between 0 and 100")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1

    changes = {}
    if start_month is not None:
        changes["start_month"] = start_month - 1
    if alert_threshold is not None:
        changes["alert_threshold"] = alert_threshold

    rc = 0
    if changes:
        store.update_settings(SettingsPatch(**changes))
        console.print("[green]Settings updated[/]")
        rc = report_save(store)

    settings = store.snapshot.settings
    console.print(f"[bold]Reporting start month:[/] {calendar.month_name[settings.start_month + 1]}")
    console.print(
        f"[bold]Alert threshold:[/] {settings.alert_threshold:.0f}% "
        "[dim](categories at or above this share of their limit are flagged)[/dim]"
    )
    return rc
