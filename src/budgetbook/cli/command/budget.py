from __future__ import annotations

"""
Monthly budget plan: planned salary against category limits and actual spend.
"""

from datetime import date
from typing import Optional

from rich.table import Table

from budgetbook.services.budget_service import BudgetLine, budget_plan
from budgetbook.workspace import Workspace
from .util import console, fmt_amount, fmt_money, open_store, valid_month


def run(
    *,
    month: Optional[str] = None,
    workspace: Workspace,
    today: Optional[date] = None,
) -> int:
    """Display the budget plan for a month.

    Args:
        month: Month key YYYY-MM (default: current month)
        workspace: Workspace providing config and data paths

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
    plan = budget_plan(state, month, today=today)
    currency = state.user.currency

    table = Table(title=f"Budget plan ({plan.month})", show_lines=True)
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Limit", style="green", justify="right")
    table.add_column("Spent", style="yellow", justify="right")
    table.add_column("Remaining", justify="right")
    for line in plan.lines:
        _add_line(table, line)
    console.print(table)

    console.print(f"\n[bold]Planned income:[/] {fmt_money(plan.planned_income, currency)}")
    console.print(f"[bold]Planned expenses:[/] {fmt_money(plan.planned_expense, currency)}")
    console.print("[bold]Projected balance:[/] ", fmt_amount(plan.projected_balance, currency))
    console.print(f"[bold]Spent so far:[/] {fmt_money(plan.actual_expense, currency)}")
    console.print("[bold]Current projection:[/] ", fmt_amount(plan.current_projection, currency))
    return 0


def _add_line(table: Table, line: BudgetLine) -> None:
    limit_str = f"{line.limit:,.2f}" if line.limit else "—"
    spent_str = f"{line.spent:,.2f}" if line.spent else "—"
    if not line.limit:
        remaining_str = "—"
    elif line.remaining >= 0:
        remaining_str = f"[green]{line.remaining:,.2f}[/]"
    else:
        remaining_str = f"[red]-{abs(line.remaining):,.2f}[/]"
    table.add_row(line.category.name, limit_str, spent_str, remaining_str)
