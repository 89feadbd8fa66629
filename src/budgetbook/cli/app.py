from __future__ import annotations

"""
budgetbook CLI Wrapper (Typer + Rich)

Local-only household budgeting: record income and expenses, manage
categories with monthly limits, track savings goals, and view derived
indicators (balance, savings rate, budget utilization, alerts, trends).

All paths are resolved from a single workspace root:
  --data-dir / BUDGETBOOK_DATA env var / current working directory
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from budgetbook.config import DEFAULT_TREND_MONTHS, load_workspace_config
from budgetbook.model.entities import (
    CategoryStatus,
    GoalStatus,
    ProfileType,
    TransactionStatus,
    TransactionType,
)
from budgetbook.workspace import ENV_VAR, Workspace

APP_HELP = "budgetbook CLI (local-only household budget)"
DATE_FORMATS = ["%Y-%m-%d"]
HELP_MONTH = "Month as YYYY-MM (default: current month)"

app = typer.Typer(no_args_is_help=True, add_completion=False, help=APP_HELP)
transaction_app = typer.Typer(no_args_is_help=True, help="Add, update or delete transactions")
category_app = typer.Typer(no_args_is_help=True, help="Add, update or delete categories")
goal_app = typer.Typer(no_args_is_help=True, help="Add, update or delete savings goals")
app.add_typer(transaction_app, name="transaction")
app.add_typer(category_app, name="category")
app.add_typer(goal_app, name="goal")


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        envvar=ENV_VAR,
        help="Workspace root directory (default: current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug information to stderr"),
):
    """budgetbook CLI: all paths resolved from a single workspace root."""
    ctx.ensure_object(dict)
    workspace = Workspace.resolve(data_dir)
    ctx.obj["workspace"] = workspace
    config = load_workspace_config(workspace.config_path)
    _configure_logging("DEBUG" if verbose else config.log_level)


def _ws(ctx: typer.Context) -> Workspace:
    return ctx.obj["workspace"]


def _as_date(value: Optional[datetime]):
    return value.date() if value is not None else None


@app.command()
def init(ctx: typer.Context):
    """Initialize a workspace with directories, starter config and demo data.

    Safe to run on an existing workspace; skips anything that already exists.

    Examples:
      budgetbook --data-dir ~/budget init
      budgetbook init
    """
    from budgetbook.cli.command import init as cmd_init

    raise typer.Exit(code=cmd_init.run(workspace=_ws(ctx)))


@app.command()
def dashboard(ctx: typer.Context):
    """Show this month's income, expenses, savings rate, alerts and recent activity."""
    from budgetbook.cli.command import dashboard as cmd_dashboard

    raise typer.Exit(code=cmd_dashboard.run(workspace=_ws(ctx)))


@app.command()
def budget(
    ctx: typer.Context,
    month: Optional[str] = typer.Option(None, "--month", "-m", help=HELP_MONTH),
):
    """Show the monthly budget plan: salary vs category limits vs actual spend.

    Examples:
      budgetbook budget
      budgetbook budget --month 2025-01
    """
    from budgetbook.cli.command import budget as cmd_budget

    raise typer.Exit(code=cmd_budget.run(month=month, workspace=_ws(ctx)))


@app.command()
def categories(
    ctx: typer.Context,
    month: Optional[str] = typer.Option(None, "--month", "-m", help=HELP_MONTH),
):
    """List categories with spending against monthly limits."""
    from budgetbook.cli.command import categories as cmd_categories

    raise typer.Exit(code=cmd_categories.run(month=month, workspace=_ws(ctx)))


@app.command()
def report(
    ctx: typer.Context,
    months: int = typer.Option(DEFAULT_TREND_MONTHS, "--months", "-n", min=1, help="Months in the trend table"),
):
    """Show monthly evolution, expenses by category, planned vs actual and goals."""
    from budgetbook.cli.command import report as cmd_report

    raise typer.Exit(code=cmd_report.run(months=months, workspace=_ws(ctx)))


@app.command()
def goals(ctx: typer.Context):
    """List savings goals and their progress."""
    from budgetbook.cli.command import goals as cmd_goals

    raise typer.Exit(code=cmd_goals.run(workspace=_ws(ctx)))


@app.command()
def transactions(
    ctx: typer.Context,
    type: Optional[TransactionType] = typer.Option(None, "--type", "-t", help="Only income or only expense"),
    search: str = typer.Option("", "--search", "-s", help="Text to look for in descriptions (case-insensitive)"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Max number of rows to show"),
):
    """List transactions, newest first.

    Examples:
      budgetbook transactions --type expense
      budgetbook transactions --search rent --limit 10
    """
    from budgetbook.cli.command import transactions as cmd_transactions

    raise typer.Exit(code=cmd_transactions.run(type=type, search=search, limit=limit, workspace=_ws(ctx)))


# ------------------------------
# transaction add/update/delete
# ------------------------------


@transaction_app.command("add")
def transaction_add(
    ctx: typer.Context,
    type: TransactionType = typer.Option(..., "--type", "-t", help="income or expense"),
    description: str = typer.Option(..., "--description", "-d", help="What the money was for"),
    amount: float = typer.Option(..., "--amount", "-a", help="Amount (never negative)"),
    category_id: str = typer.Option(..., "--category", "-c", help="Category ID (see 'budgetbook categories')"),
    on: Optional[datetime] = typer.Option(None, "--date", formats=DATE_FORMATS, help="Date YYYY-MM-DD (default: today)"),
    status: TransactionStatus = typer.Option(TransactionStatus.completed, "--status", help="pending or completed"),
    payment_method: Optional[str] = typer.Option(None, "--method", help="cash, debit, credit or instant-transfer"),
):
    """Record a new income or expense.

    Examples:
      budgetbook transaction add -t expense -d "Groceries" -a 82.50 -c 4 --method debit
      budgetbook transaction add -t income -d "Salary" -a 5000 -c 1 --date 2025-01-05
    """
    from budgetbook.cli.command import transaction as cmd_transaction

    code = cmd_transaction.add(
        type=type,
        description=description,
        amount=amount,
        category_id=category_id,
        on=_as_date(on),
        status=status,
        payment_method=payment_method,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@transaction_app.command("update")
def transaction_update(
    ctx: typer.Context,
    transaction_id: str = typer.Argument(..., help="Transaction ID"),
    type: Optional[TransactionType] = typer.Option(None, "--type", "-t"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    amount: Optional[float] = typer.Option(None, "--amount", "-a"),
    category_id: Optional[str] = typer.Option(None, "--category", "-c"),
    on: Optional[datetime] = typer.Option(None, "--date", formats=DATE_FORMATS),
    status: Optional[TransactionStatus] = typer.Option(None, "--status"),
    payment_method: Optional[str] = typer.Option(None, "--method"),
):
    """Change selected fields of a transaction (e.g. mark it completed)."""
    from budgetbook.cli.command import transaction as cmd_transaction

    code = cmd_transaction.update(
        transaction_id=transaction_id,
        type=type,
        description=description,
        amount=amount,
        category_id=category_id,
        on=_as_date(on),
        status=status,
        payment_method=payment_method,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@transaction_app.command("delete")
def transaction_delete(
    ctx: typer.Context,
    transaction_id: str = typer.Argument(..., help="Transaction ID"),
):
    """Delete a transaction."""
    from budgetbook.cli.command import transaction as cmd_transaction

    raise typer.Exit(code=cmd_transaction.delete(transaction_id=transaction_id, workspace=_ws(ctx)))


# ------------------------------
# category add/update/delete
# ------------------------------


@category_app.command("add")
def category_add(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Category name"),
    type: TransactionType = typer.Option(TransactionType.expense, "--type", "-t", help="income or expense"),
    monthly_limit: Optional[float] = typer.Option(None, "--limit", help="Monthly spending limit (expense only)"),
    color: Optional[str] = typer.Option(None, "--color", help="Display color, e.g. #F59E0B (default: random)"),
):
    """Create a category.

    Examples:
      budgetbook category add --name "Dining out" --limit 400
      budgetbook category add --name "Bonus" --type income
    """
    from budgetbook.cli.command import category as cmd_category

    code = cmd_category.add(name=name, type=type, monthly_limit=monthly_limit, color=color, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@category_app.command("update")
def category_update(
    ctx: typer.Context,
    category_id: str = typer.Argument(..., help="Category ID"),
    name: Optional[str] = typer.Option(None, "--name"),
    status: Optional[CategoryStatus] = typer.Option(None, "--status", help="active or inactive"),
    monthly_limit: Optional[float] = typer.Option(None, "--limit", help="New monthly limit (0 removes it)"),
    color: Optional[str] = typer.Option(None, "--color"),
):
    """Change selected fields of a category."""
    from budgetbook.cli.command import category as cmd_category

    code = cmd_category.update(
        category_id=category_id,
        name=name,
        status=status,
        monthly_limit=monthly_limit,
        color=color,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@category_app.command("delete")
def category_delete(
    ctx: typer.Context,
    category_id: str = typer.Argument(..., help="Category ID"),
):
    """Delete a category. Its transactions are kept and show as uncategorized."""
    from budgetbook.cli.command import category as cmd_category

    raise typer.Exit(code=cmd_category.delete(category_id=category_id, workspace=_ws(ctx)))


# ------------------------------
# goal add/update/delete
# ------------------------------


@goal_app.command("add")
def goal_add(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Goal name"),
    target_value: float = typer.Option(..., "--target", help="Target amount"),
    deadline: datetime = typer.Option(..., "--deadline", formats=DATE_FORMATS, help="Deadline YYYY-MM-DD"),
    current_value: float = typer.Option(0.0, "--current", help="Amount already saved"),
    monthly_planned_value: float = typer.Option(0.0, "--monthly", help="Planned monthly contribution"),
):
    """Create a savings goal.

    Examples:
      budgetbook goal add --name "Vacation" --target 3000 --deadline 2026-07-01
    """
    from budgetbook.cli.command import goal as cmd_goal

    code = cmd_goal.add(
        name=name,
        target_value=target_value,
        deadline=deadline.date(),
        current_value=current_value,
        monthly_planned_value=monthly_planned_value,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@goal_app.command("update")
def goal_update(
    ctx: typer.Context,
    goal_id: str = typer.Argument(..., help="Goal ID"),
    name: Optional[str] = typer.Option(None, "--name"),
    target_value: Optional[float] = typer.Option(None, "--target"),
    current_value: Optional[float] = typer.Option(None, "--current", help="Amount saved so far"),
    monthly_planned_value: Optional[float] = typer.Option(None, "--monthly"),
    deadline: Optional[datetime] = typer.Option(None, "--deadline", formats=DATE_FORMATS),
    status: Optional[GoalStatus] = typer.Option(None, "--status", help="in_progress or completed"),
):
    """Change selected fields of a goal."""
    from budgetbook.cli.command import goal as cmd_goal

    code = cmd_goal.update(
        goal_id=goal_id,
        name=name,
        target_value=target_value,
        current_value=current_value,
        monthly_planned_value=monthly_planned_value,
        deadline=_as_date(deadline),
        status=status,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@goal_app.command("delete")
def goal_delete(
    ctx: typer.Context,
    goal_id: str = typer.Argument(..., help="Goal ID"),
):
    """Delete a goal."""
    from budgetbook.cli.command import goal as cmd_goal

    raise typer.Exit(code=cmd_goal.delete(goal_id=goal_id, workspace=_ws(ctx)))


# ------------------------------
# profile, settings, export/import
# ------------------------------


@app.command()
def profile(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name"),
    profile_type: Optional[ProfileType] = typer.Option(None, "--type", help="individual or family"),
    currency: Optional[str] = typer.Option(None, "--currency", help="ISO currency code, e.g. USD"),
    base_salary: Optional[float] = typer.Option(None, "--salary", help="Planned monthly income"),
    active: Optional[bool] = typer.Option(None, "--active/--inactive"),
):
    """Show the user profile; any option given updates it first."""
    from budgetbook.cli.command import profile as cmd_profile

    code = cmd_profile.run(
        name=name,
        profile_type=profile_type,
        currency=currency,
        base_salary=base_salary,
        active=active,
        workspace=_ws(ctx),
    )
    raise typer.Exit(code=code)


@app.command()
def settings(
    ctx: typer.Context,
    start_month: Optional[int] = typer.Option(None, "--start-month", help="Reporting start month (1-12)"),
    alert_threshold: Optional[float] = typer.Option(None, "--alert-threshold", help="Alert at this % of a limit (0-100)"),
):
    """Show settings; any option given updates them first."""
    from budgetbook.cli.command import settings as cmd_settings

    code = cmd_settings.run(start_month=start_month, alert_threshold=alert_threshold, workspace=_ws(ctx))
    raise typer.Exit(code=code)


@app.command()
def export(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="File or directory (default: exports/)"),
):
    """Export all data to a dated JSON backup."""
    from budgetbook.cli.command import export as cmd_export

    raise typer.Exit(code=cmd_export.run(output=output, workspace=_ws(ctx)))


@app.command(name="import")
def import_(
    ctx: typer.Context,
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON backup created by 'budgetbook export'"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Replace current data without asking"),
):
    """Replace all data with a JSON backup (validated before anything is changed)."""
    from budgetbook.cli.command import import_data as cmd_import

    raise typer.Exit(code=cmd_import.run(source=source, assume_yes=yes, workspace=_ws(ctx)))


if __name__ == "__main__":
    app()  # pragma: no cover
