from __future__ import annotations

from typing import Optional

from rich.table import Table

from budgetbook.model.entities import ProfileType, UserPatch
from budgetbook.workspace import Workspace
from .util import console, fmt_money, open_store, report_save


def run(
    *,
    name: Optional[str] = None,
    profile_type: Optional[ProfileType] = None,
    currency: Optional[str] = None,
    base_salary: Optional[float] = None,
    active: Optional[bool] = None,
    workspace: Workspace,
) -> int:
    """Show the user profile, applying any given changes first.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    if currency is not None and (len(currency) != 3 or not currency.isalpha()):
        console.print("[red]Error:[/] --currency must be a 3-letter ISO code (e.g. USD)")
        return 1
    if base_salary is not None and base_salary < 0:
        console.print("[red]Error:[/] --salary must not be negative")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1

    changes = {
        k: v
        for k, v in dict(
            name=name,
            profile_type=profile_type,
            currency=currency.upper() if currency else None,
            base_salary=base_salary,
            is_active=active,
        ).items()
        if v is not None
    }
    rc = 0
    if changes:
        store.update_user(UserPatch(**changes))
        console.print(f"[green]Profile updated[/] ({', '.join(sorted(changes))})")
        rc = report_save(store)

    user = store.snapshot.user
    table = Table(title="Profile", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Name", user.name)
    table.add_row("Profile type", user.profile_type.value)
    table.add_row("Currency", user.currency)
    table.add_row("Base salary", fmt_money(user.base_salary, user.currency))
    table.add_row("Active", "yes" if user.is_active else "no")
    console.print(table)
    return rc
