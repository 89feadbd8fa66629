from __future__ import annotations

"""
Add, update and delete categories.

Deleting a category leaves its transactions in place; they are listed as
uncategorized from then on.
"""

import random
from typing import Optional

from budgetbook.model.entities import CategoryDraft, CategoryPatch, CategoryStatus, TransactionType
from budgetbook.workspace import Workspace
from .util import console, open_store, report_save


def _random_color() -> str:
    return f"#{random.randint(0, 0xFFFFFF):06X}"


def add(
    *,
    name: str,
    type: TransactionType,
    monthly_limit: Optional[float] = None,
    color: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Create a category. A limit only makes sense for expense categories."""
    if not name.strip():
        console.print("[red]Error:[/] name must not be empty")
        return 1
    if monthly_limit is not None and type != TransactionType.expense:
        console.print("[red]Error:[/] --limit is only allowed for expense categories")
        return 1
    if monthly_limit is not None and monthly_limit <= 0:
        console.print("[red]Error:[/] --limit must be greater than zero")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1

    draft = CategoryDraft(
        name=name.strip(),
        type=type,
        status=CategoryStatus.active,
        color=color or _random_color(),
        monthly_limit=monthly_limit,
    )
    new_id = store.add_category(draft)
    console.print(f"[green]Added category[/] {new_id}: {draft.name} ({type.value})")
    return report_save(store)


def update(
    *,
    category_id: str,
    name: Optional[str] = None,
    status: Optional[CategoryStatus] = None,
    monthly_limit: Optional[float] = None,
    color: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Change selected fields of a category. Returns an exit code."""
    if monthly_limit is not None and monthly_limit < 0:
        console.print("[red]Error:[/] --limit must not be negative (use 0 to remove the limit)")
        return 1
    changes = {k: v for k, v in dict(name=name, status=status, monthly_limit=monthly_limit, color=color).items() if v is not None}
    if not changes:
        console.print("[yellow]Nothing to update.[/]")
        return 0

    store = open_store(workspace)
    if store is None:
        return 1
    if store.snapshot.find_category(category_id) is None:
        console.print(f"[red]Error:[/] category {category_id!r} not found")
        return 1

    store.update_category(category_id, CategoryPatch(**changes))
    console.print(f"[green]Updated category[/] {category_id} ({', '.join(sorted(changes))})")
    return report_save(store)


def delete(*, category_id: str, workspace: Workspace) -> int:
    """Remove a category, keeping the transactions that reference it."""
    store = open_store(workspace)
    if store is None:
        return 1
    category = store.snapshot.find_category(category_id)
    if category is None:
        console.print(f"[red]Error:[/] category {category_id!r} not found")
        return 1

    in_use = sum(1 for t in store.snapshot.transactions if t.category_id == category_id)
    store.delete_category(category_id)
    console.print(f"[green]Deleted category[/] {category_id}: {category.name}")
    if in_use:
        console.print(f"[dim]{in_use} transaction(s) now show as uncategorized.[/dim]")
    return report_save(store)
