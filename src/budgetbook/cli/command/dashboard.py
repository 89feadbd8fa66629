from __future__ import annotations

"""
Dashboard: this month's income, expenses, savings rate, alerts and recent activity.
"""

from datetime import date
from typing import Optional

from rich.table import Table

from budgetbook.services.budget_service import AlertLevel
from budgetbook.services.dashboard_service import dashboard_summary
from budgetbook.services.derivation import category_label
from budgetbook.workspace import Workspace
from .util import console, fmt_amount, fmt_money, fmt_percent, open_store


def run(*, workspace: Workspace, today: Optional[date] = None) -> int:
    """Display the dashboard for the current month.

    Returns:
        Exit code (0 = success)
    """
    store = open_store(workspace)
    if store is None:
        return 1

    state = store.snapshot
    summary = dashboard_summary(state, today)
    currency = state.user.currency
    first_name = state.user.name.split(" ")[0] if state.user.name else ""

    console.print(f"[bold]Hello, {first_name}![/] Summary for {summary.month.period.month_key}\n")

    indicators = Table(show_header=False, box=None)
    indicators.add_column("Indicator", style="cyan")
    indicators.add_column("Value", justify="right")
    indicators.add_row("Balance (all time)", fmt_amount(summary.balance, currency))
    indicators.add_row("Income this month", fmt_money(summary.month.income, currency))
    indicators.add_row("Expenses this month", fmt_money(summary.month.expense, currency))
    indicators.add_row("Net this month", fmt_amount(summary.month.net, currency))
    indicators.add_row("Savings rate", f"{summary.month.savings_rate:.1f}%")
    console.print(indicators)

    console.print("\n[bold]Budget alerts[/]")
    if not summary.alerts:
        console.print("[green]No alerts. You are within budget.[/]")
    for alert in summary.alerts:
        marker = "[red]✖[/]" if alert.level == AlertLevel.exceeded else "[yellow]⚠[/]"
        console.print(
            f"  {marker} {alert.category.name}: {fmt_money(alert.spent, currency)} of "
            f"{fmt_money(alert.limit, currency)} ({fmt_percent(alert.utilization, alert.level)})"
        )

    console.print()
    if not summary.recent:
        console.print("[dim]No transactions yet. Add your first income or expense.[/dim]")
        return 0

    table = Table(title="Recent transactions")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Category", style="blue")
    table.add_column("Amount", justify="right")
    for t in summary.recent:
        table.add_row(
            t.date.isoformat(),
            t.description,
            category_label(state.categories, t.category_id),
            fmt_amount(t.signed_amount, currency),
        )
    console.print(table)
    return 0
