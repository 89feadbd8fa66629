from __future__ import annotations

"""
Budget Service - category spend vs monthly limits

Provides per-category spending for a month, utilization percentages, budget
alerts, the planned monthly budget, and the chart-oriented breakdowns used by
the reports view. All functions are pure and never raise on dangling
category references or missing limits.

Two knobs are explicit parameters rather than fixed policy:
- ``completed_only``: whether pending transactions count toward category
  spend. Category and budget views default to counting everything; alerts
  and the dashboard default to completed only.
- ``threshold``: the utilization percentage that raises an alert. None means
  the user's ``settings.alert_threshold``.
"""

import datetime as dt
import math
from collections import defaultdict
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, List, Optional

from budgetbook.config import EXCEEDED_THRESHOLD, PLANNED_VS_ACTUAL_LIMIT, UNCATEGORIZED_LABEL
from budgetbook.model.entities import AppState, Category, Transaction, TransactionType
from budgetbook.services.periods import Period, month_key


class AlertLevel(StrEnum):
    ok = "ok"
    warning = "warning"
    exceeded = "exceeded"


def utilization(spend: float, limit: Optional[float]) -> float:
    """Spend as a percentage of ``limit``; 0 when there is no positive limit."""
    if not limit or limit <= 0:
        return 0.0
    return spend / limit * 100


def alert_level(percent: float, threshold: float) -> AlertLevel:
    """Severity for a utilization percentage: exceeded at 100%, warning at ``threshold``."""
    if percent >= EXCEEDED_THRESHOLD:
        return AlertLevel.exceeded
    if percent >= threshold:
        return AlertLevel.warning
    return AlertLevel.ok


@dataclass(frozen=True)
class CategorySpend:
    """An expense category with its spending for one month."""

    category: Category
    spent: float
    utilization: float
    level: AlertLevel

    @property
    def limit(self) -> float:
        return self.category.monthly_limit or 0.0

    @property
    def remaining(self) -> float:
        return self.limit - self.spent


def _resolve_month(month: Optional[str], today: Optional[dt.date]) -> str:
    return month or month_key(today or dt.date.today())


def _expense_by_category(
    transactions: Iterable[Transaction], month: str, completed_only: bool
) -> dict[str, float]:
    amounts: dict[str, list[float]] = defaultdict(list)
    for t in transactions:
        if t.type != TransactionType.expense or t.month_key != month:
            continue
        if completed_only and not t.is_completed:
            continue
        amounts[t.category_id].append(t.amount)
    return {category_id: math.fsum(values) for category_id, values in amounts.items()}


def category_spending(
    state: AppState,
    month: Optional[str] = None,
    *,
    completed_only: bool = False,
    threshold: Optional[float] = None,
    today: Optional[dt.date] = None,
) -> List[CategorySpend]:
    """Spending per expense category for ``month`` (YYYY-MM, default: today's month).

    Categories keep their stored order. A category without a limit reports
    0% utilization.
    """
    month = _resolve_month(month, today)
    if threshold is None:
        threshold = state.settings.alert_threshold
    spent_by_category = _expense_by_category(state.transactions, month, completed_only)

    rows = []
    for category in state.categories:
        if category.type != TransactionType.expense:
            continue
        spent = spent_by_category.get(category.id, 0.0)
        percent = utilization(spent, category.monthly_limit)
        rows.append(
            CategorySpend(
                category=category,
                spent=spent,
                utilization=percent,
                level=alert_level(percent, threshold),
            )
        )
    return rows


def budget_alerts(
    state: AppState,
    month: Optional[str] = None,
    *,
    threshold: Optional[float] = None,
    completed_only: bool = True,
    today: Optional[dt.date] = None,
) -> List[CategorySpend]:
    """Limited expense categories whose utilization is at or above ``threshold``.

    Order follows the category list; results are not re-sorted by severity.
    """
    if threshold is None:
        threshold = state.settings.alert_threshold
    return [
        row
        for row in category_spending(
            state, month, completed_only=completed_only, threshold=threshold, today=today
        )
        if row.category.has_limit and row.utilization >= threshold
    ]


# ------------------------------
# Monthly budget plan
# ------------------------------


@dataclass(frozen=True)
class BudgetLine:
    category: Category
    limit: float
    spent: float

    @property
    def remaining(self) -> float:
        return self.limit - self.spent


@dataclass(frozen=True)
class BudgetPlan:
    """Planned month: salary against the sum of active expense limits."""

    month: str
    planned_income: float
    planned_expense: float
    actual_expense: float
    lines: List[BudgetLine]

    @property
    def projected_balance(self) -> float:
        return self.planned_income - self.planned_expense

    @property
    def current_projection(self) -> float:
        """Planned income minus what has actually been spent so far this month."""
        return self.planned_income - self.actual_expense


def budget_plan(
    state: AppState,
    month: Optional[str] = None,
    *,
    completed_only: bool = False,
    today: Optional[dt.date] = None,
) -> BudgetPlan:
    """Budget projection for ``month``; planned income is ``user.base_salary``."""
    month = _resolve_month(month, today)
    spent_by_category = _expense_by_category(state.transactions, month, completed_only)

    lines = [
        BudgetLine(
            category=c,
            limit=c.monthly_limit or 0.0,
            spent=spent_by_category.get(c.id, 0.0),
        )
        for c in state.categories
        if c.type == TransactionType.expense and c.is_active
    ]
    return BudgetPlan(
        month=month,
        planned_income=state.user.base_salary,
        planned_expense=math.fsum(line.limit for line in lines),
        actual_expense=math.fsum(line.spent for line in lines),
        lines=lines,
    )


# ------------------------------
# Report breakdowns
# ------------------------------


@dataclass(frozen=True)
class CategorySlice:
    name: str
    value: float
    color: Optional[str] = None


def expense_breakdown(state: AppState, period: Period) -> List[CategorySlice]:
    """Expenses in ``period`` grouped by category name (any status).

    Transactions whose category no longer exists are merged into the
    uncategorized slice. Empty slices are dropped.
    """
    categories = {c.id: c for c in state.categories}
    totals: dict[str, list[float]] = defaultdict(list)
    colors: dict[str, Optional[str]] = {}
    for t in state.transactions:
        if t.type != TransactionType.expense or not period.contains(t.date):
            continue
        category = categories.get(t.category_id)
        name = category.name if category else UNCATEGORIZED_LABEL
        colors.setdefault(name, category.color if category else None)
        totals[name].append(t.amount)

    slices = [CategorySlice(name=name, value=math.fsum(values), color=colors[name]) for name, values in totals.items()]
    return [s for s in slices if s.value > 0]


@dataclass(frozen=True)
class PlannedVsActual:
    category: str
    planned: float
    actual: float


def planned_vs_actual(
    state: AppState, period: Period, limit: int = PLANNED_VS_ACTUAL_LIMIT
) -> List[PlannedVsActual]:
    """Limited expense categories by planned amount (largest first), top ``limit``."""
    rows = []
    for c in state.categories:
        if c.type != TransactionType.expense or not c.has_limit:
            continue
        actual = math.fsum(
            t.amount
            for t in state.transactions
            if t.category_id == c.id and t.type == TransactionType.expense and period.contains(t.date)
        )
        rows.append(PlannedVsActual(category=c.name, planned=c.monthly_limit, actual=actual))
    rows.sort(key=lambda r: r.planned, reverse=True)
    return rows[:limit]


__all__ = [
    "AlertLevel",
    "utilization",
    "alert_level",
    "CategorySpend",
    "category_spending",
    "budget_alerts",
    "BudgetLine",
    "BudgetPlan",
    "budget_plan",
    "CategorySlice",
    "expense_breakdown",
    "PlannedVsActual",
    "planned_vs_actual",
]
