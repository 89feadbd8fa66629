from __future__ import annotations

from typing import Optional

from rich.table import Table

from budgetbook.model.entities import TransactionType
from budgetbook.services.derivation import category_label, payment_method_label, search_transactions
from budgetbook.workspace import Workspace
from .util import console, fmt_amount, open_store


def run(
    *,
    type: Optional[TransactionType] = None,
    search: str = "",
    limit: Optional[int] = None,
    workspace: Workspace,
) -> int:
    """List transactions newest first, optionally filtered by type and description text.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    store = open_store(workspace)
    if store is None:
        return 1

    state = store.snapshot
    matches = search_transactions(state.transactions, type=type, term=search)
    if limit is not None:
        matches = matches[:limit]

    if not matches:
        console.print("[yellow]No transactions found.[/]")
        return 0

    title = {TransactionType.income: "Income", TransactionType.expense: "Expenses"}.get(type, "Transactions")
    table = Table(title=title)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Category", style="blue")
    table.add_column("Method")
    table.add_column("Status")
    table.add_column("Amount", justify="right")
    for t in matches:
        status = t.status.value if t.is_completed else f"[yellow]{t.status.value}[/]"
        table.add_row(
            t.id,
            t.date.isoformat(),
            t.description,
            category_label(state.categories, t.category_id),
            payment_method_label(t.payment_method),
            status,
            fmt_amount(t.signed_amount, state.user.currency),
        )
    console.print(table)
    console.print(f"[dim]{len(matches)} transaction(s)[/dim]")
    return 0
