from __future__ import annotations

"""
Reports: monthly trend, expense breakdown, planned vs actual, goal progress.
"""

from datetime import date
from typing import Optional

from rich.table import Table

from budgetbook.config import DEFAULT_TREND_MONTHS
from budgetbook.services.budget_service import expense_breakdown, planned_vs_actual
from budgetbook.services.derivation import goal_summaries, trailing_trend
from budgetbook.services.periods import Period
from budgetbook.workspace import Workspace
from .util import console, fmt_amount, fmt_money, open_store


def run(
    *,
    months: int = DEFAULT_TREND_MONTHS,
    workspace: Workspace,
    today: Optional[date] = None,
) -> int:
    """Print the report tables.

    Args:
        months: Number of trailing months in the trend table (including the current one)
        workspace: Workspace providing config and data paths

    Returns:
        Exit code (0 = success, 1 = error)
    """
    if months < 1:
        console.print("[red]Error:[/] --months must be at least 1")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1

    state = store.snapshot
    currency = state.user.currency
    this_month = Period.current_month(today)

    trend = Table(title=f"Monthly evolution (last {months} months)")
    trend.add_column("Month", style="cyan")
    trend.add_column("Income", justify="right")
    trend.add_column("Expenses", justify="right")
    trend.add_column("Balance", justify="right")
    for row in trailing_trend(state.transactions, months, today):
        trend.add_row(
            row.month,
            fmt_money(row.income_total, currency),
            fmt_money(row.expense_total, currency),
            fmt_amount(row.balance, currency),
        )
    console.print(trend)

    breakdown = expense_breakdown(state, this_month)
    total = sum(s.value for s in breakdown)
    pie = Table(title=f"Expenses by category ({this_month.month_key})")
    pie.add_column("Category", style="cyan")
    pie.add_column("Amount", justify="right")
    pie.add_column("Share", justify="right")
    for s in breakdown:
        share = s.value / total * 100 if total else 0.0
        pie.add_row(s.name, fmt_money(s.value, currency), f"{share:.1f}%")
    console.print(pie if breakdown else "[dim]No expenses this month.[/dim]")

    comparison = planned_vs_actual(state, this_month)
    if comparison:
        bars = Table(title="Planned vs actual")
        bars.add_column("Category", style="cyan")
        bars.add_column("Planned", justify="right")
        bars.add_column("Actual", justify="right")
        for row in comparison:
            bars.add_row(row.category, fmt_money(row.planned, currency), fmt_money(row.actual, currency))
        console.print(bars)

    goals = goal_summaries(state.goals)
    if goals:
        goals_table = Table(title="Goals")
        goals_table.add_column("Goal", style="cyan")
        goals_table.add_column("Current", justify="right")
        goals_table.add_column("Target", justify="right")
        goals_table.add_column("Progress", justify="right")
        for summary in goals:
            goals_table.add_row(
                summary.goal.name,
                fmt_money(summary.goal.current_value, currency),
                fmt_money(summary.goal.target_value, currency),
                f"{summary.progress:.0f}%",
            )
        console.print(goals_table)

    return 0
