from __future__ import annotations

"""
List categories with this month's spend against their limits.
"""

from datetime import date
from typing import Optional

from rich.table import Table

from budgetbook.model.entities import TransactionType
from budgetbook.services.budget_service import AlertLevel, category_spending
from budgetbook.workspace import Workspace
from .util import console, fmt_money, fmt_percent, open_store, valid_month


def run(
    *,
    month: Optional[str] = None,
    workspace: Workspace,
    today: Optional[date] = None,
) -> int:
    """List expense categories (with spending) followed by income categories.

    Spending counts every transaction in the month regardless of status.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    if month is not None and not valid_month(month):
        console.print("[red]Error:[/] --month must look like YYYY-MM")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1

    state = store.snapshot
    if not state.categories:
        console.print("[yellow]No categories defined.[/] Add one with 'budgetbook category add'.")
        return 0

    currency = state.user.currency
    rows = category_spending(state, month, completed_only=False, today=today)

    table = Table(title="Expense categories")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Category", style="cyan")
    table.add_column("Status")
    table.add_column("Spent", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("% Used", justify="right")
    for row in rows:
        limit_str = fmt_money(row.limit, currency) if row.category.has_limit else "—"
        pct_str = fmt_percent(row.utilization, row.level) if row.category.has_limit else "—"
        table.add_row(
            row.category.id,
            row.category.name,
            row.category.status.value,
            fmt_money(row.spent, currency),
            limit_str,
            pct_str,
        )
    console.print(table)

    exceeded = [row for row in rows if row.level == AlertLevel.exceeded]
    for row in exceeded:
        console.print(f"[red]✖ {row.category.name} is over its monthly limit[/]")

    income = [c for c in state.categories if c.type == TransactionType.income]
    if income:
        income_table = Table(title="Income categories")
        income_table.add_column("ID", style="dim", no_wrap=True)
        income_table.add_column("Category", style="cyan")
        income_table.add_column("Status")
        for c in income:
            income_table.add_row(c.id, c.name, c.status.value)
        console.print(income_table)

    return 0
