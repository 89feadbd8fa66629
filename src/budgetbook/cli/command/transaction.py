from __future__ import annotations

"""
Add, update and delete transactions.

The store accepts unknown ids silently; these commands look the id up first
so the user gets a clear message and a non-zero exit code.
"""

from datetime import date
from typing import Optional

from budgetbook.model.entities import (
    TransactionDraft,
    TransactionPatch,
    TransactionStatus,
    TransactionType,
)
from budgetbook.services.derivation import category_label
from budgetbook.workspace import Workspace
from .util import console, open_store, report_save


def _set_fields(**fields) -> dict:
    return {k: v for k, v in fields.items() if v is not None}


def add(
    *,
    type: TransactionType,
    description: str,
    amount: float,
    category_id: str,
    on: Optional[date] = None,
    status: TransactionStatus = TransactionStatus.completed,
    payment_method: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Record a new income or expense. Returns an exit code."""
    if not description.strip():
        console.print("[red]Error:[/] description must not be empty")
        return 1
    if amount < 0:
        console.print("[red]Error:[/] amount must not be negative; use --type to set the direction")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1

    if store.snapshot.find_category(category_id) is None:
        console.print(f"[yellow]Warning:[/] category {category_id!r} does not exist; it will show as uncategorized")

    draft = TransactionDraft(
        date=on or date.today(),
        description=description.strip(),
        category_id=category_id,
        amount=amount,
        type=type,
        status=status,
        payment_method=payment_method,
    )
    new_id = store.add_transaction(draft)
    label = category_label(store.snapshot.categories, category_id)
    console.print(f"[green]Added {type.value}[/] {new_id}: {draft.description} ({label}) {amount:,.2f}")
    return report_save(store)


def update(
    *,
    transaction_id: str,
    type: Optional[TransactionType] = None,
    description: Optional[str] = None,
    amount: Optional[float] = None,
    category_id: Optional[str] = None,
    on: Optional[date] = None,
    status: Optional[TransactionStatus] = None,
    payment_method: Optional[str] = None,
    workspace: Workspace,
) -> int:
    """Change selected fields of a transaction. Returns an exit code."""
    if amount is not None and amount < 0:
        console.print("[red]Error:[/] amount must not be negative")
        return 1
    changes = _set_fields(
        type=type,
        description=description,
        amount=amount,
        category_id=category_id,
        date=on,
        status=status,
        payment_method=payment_method,
    )
    if not changes:
        console.print("[yellow]Nothing to update.[/]")
        return 0

    store = open_store(workspace)
    if store is None:
        return 1
    if store.snapshot.find_transaction(transaction_id) is None:
        console.print(f"[red]Error:[/] transaction {transaction_id!r} not found")
        return 1

    store.update_transaction(transaction_id, TransactionPatch(**changes))
    console.print(f"[green]Updated transaction[/] {transaction_id} ({', '.join(sorted(changes))})")
    return report_save(store)


def delete(*, transaction_id: str, workspace: Workspace) -> int:
    """Remove a transaction. Returns an exit code."""
    store = open_store(workspace)
    if store is None:
        return 1
    if store.snapshot.find_transaction(transaction_id) is None:
        console.print(f"[red]Error:[/] transaction {transaction_id!r} not found")
        return 1

    store.delete_transaction(transaction_id)
    console.print(f"[green]Deleted transaction[/] {transaction_id}")
    return report_save(store)
