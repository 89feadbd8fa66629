from __future__ import annotations

from rich.table import Table

from budgetbook.services.derivation import goal_summaries
from budgetbook.workspace import Workspace
from .util import console, fmt_money, open_store


def run(*, workspace: Workspace) -> int:
    """List savings goals with progress toward their targets."""
    store = open_store(workspace)
    if store is None:
        return 1

    state = store.snapshot
    if not state.goals:
        console.print("[yellow]No goals yet.[/] Add one with 'budgetbook goal add'.")
        return 0

    currency = state.user.currency
    table = Table(title="Financial goals")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Goal", style="cyan")
    table.add_column("Current", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Progress", justify="right")
    table.add_column("Deadline")
    table.add_column("Status")
    for summary in goal_summaries(state.goals):
        goal = summary.goal
        table.add_row(
            goal.id,
            goal.name,
            fmt_money(goal.current_value, currency),
            fmt_money(goal.target_value, currency),
            fmt_money(summary.remaining, currency),
            f"{summary.progress:.0f}%",
            goal.deadline.isoformat(),
            goal.status.value,
        )
    console.print(table)
    return 0
