from __future__ import annotations

from datetime import date
from typing import Optional

from budgetbook.model.entities import GoalDraft, GoalPatch, GoalStatus
from budgetbook.workspace import Workspace
from .util import console, open_store, report_save


def add(
    *,
    name: str,
    target_value: float,
    deadline: date,
    current_value: float = 0.0,
    monthly_planned_value: float = 0.0,
    workspace: Workspace,
) -> int:
    """Create a savings goal. Returns an exit code."""
    if not name.strip():
        console.print("[red]Error:[/] name must not be empty")
        return 1
    if target_value <= 0:
        console.print("[red]Error:[/] --target must be greater than zero")
        return 1
    if current_value < 0:
        console.print("[red]Error:[/] --current must not be negative")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1

    draft = GoalDraft(
        name=name.strip(),
        target_value=target_value,
        current_value=current_value,
        monthly_planned_value=monthly_planned_value,
        deadline=deadline,
        status=GoalStatus.in_progress,
    )
    new_id = store.add_goal(draft)
    console.print(f"[green]Added goal[/] {new_id}: {draft.name}")
    return report_save(store)


def update(
    *,
    goal_id: str,
    name: Optional[str] = None,
    target_value: Optional[float] = None,
    current_value: Optional[float] = None,
    monthly_planned_value: Optional[float] = None,
    deadline: Optional[date] = None,
    status: Optional[GoalStatus] = None,
    workspace: Workspace,
) -> int:
    """Change selected fields of a goal, e.g. record a new saved amount."""
    changes = {
        k: v
        for k, v in dict(
            name=name,
            target_value=target_value,
            current_value=current_value,
            monthly_planned_value=monthly_planned_value,
            deadline=deadline,
            status=status,
        ).items()
        if v is not None
    }
    if not changes:
        console.print("[yellow]Nothing to update.[/]")
        return 0
    if changes.get("target_value", 1) <= 0 or changes.get("current_value", 0) < 0:
        console.print("[red]Error:[/] target must be positive and current must not be negative")
        return 1

    store = open_store(workspace)
    if store is None:
        return 1
    if store.snapshot.find_goal(goal_id) is None:
        console.print(f"[red]Error:[/] goal {goal_id!r} not found")
        return 1

    store.update_goal(goal_id, GoalPatch(**changes))
    console.print(f"[green]Updated goal[/] {goal_id} ({', '.join(sorted(changes))})")
    return report_save(store)


def delete(*, goal_id: str, workspace: Workspace) -> int:
    store = open_store(workspace)
    if store is None:
        return 1
    if store.snapshot.find_goal(goal_id) is None:
        console.print(f"[red]Error:[/] goal {goal_id!r} not found")
        return 1

    store.delete_goal(goal_id)
    console.print(f"[green]Deleted goal[/] {goal_id}")
    return report_save(store)
