"""
Derivations over the ledger: balances, period totals, trends, goals.

Everything here is a pure function of its arguments. Nothing raises on bad
references or zero denominators: a missing category renders as
"Uncategorized" and every ratio falls back to 0.

Three different "balance" questions are answered by three functions and must
not be mixed up:
- current_balance: lifetime, completed transactions only, no date filter
- period_totals(...).net / savings_rate: one reporting period
- budget_service.budget_plan(...).projected_balance: planned salary minus limits
"""
from __future__ import annotations

import datetime as dt
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional

from budgetbook.config import DEFAULT_TREND_MONTHS, RECENT_TRANSACTIONS_LIMIT, UNCATEGORIZED_LABEL
from budgetbook.model.entities import Category, Goal, PaymentMethod, Transaction, TransactionType
from budgetbook.services.periods import Period, trailing_month_keys

PAYMENT_METHOD_LABELS = {
    PaymentMethod.cash.value: "Cash",
    PaymentMethod.debit.value: "Debit",
    PaymentMethod.credit.value: "Credit",
    PaymentMethod.instant_transfer.value: "Instant transfer",
}


# ------------------------------
# Balances and period totals
# ------------------------------


def current_balance(transactions: Iterable[Transaction]) -> float:
    """Lifetime balance: completed income minus completed expenses, all dates."""
    return math.fsum(t.signed_amount for t in transactions if t.is_completed)


def _period_sum(transactions: Iterable[Transaction], period: Period, kind: TransactionType) -> float:
    return math.fsum(
        t.amount
        for t in transactions
        if t.is_completed and t.type == kind and period.contains(t.date)
    )


def period_income(transactions: Iterable[Transaction], period: Period) -> float:
    return _period_sum(transactions, period, TransactionType.income)


def period_expense(transactions: Iterable[Transaction], period: Period) -> float:
    return _period_sum(transactions, period, TransactionType.expense)


def savings_rate(income: float, expense: float) -> float:
    """Share of income left after expenses, in percent. 0 when there is no income."""
    if income <= 0:
        return 0.0
    return (income - expense) / income * 100


@dataclass(frozen=True)
class PeriodTotals:
    period: Period
    income: float
    expense: float

    @property
    def net(self) -> float:
        return self.income - self.expense

    @property
    def savings_rate(self) -> float:
        return savings_rate(self.income, self.expense)


def period_totals(transactions: Iterable[Transaction], period: Period) -> PeriodTotals:
    """Completed income and expense inside ``period``."""
    transactions = tuple(transactions)
    return PeriodTotals(
        period=period,
        income=period_income(transactions, period),
        expense=period_expense(transactions, period),
    )


# ------------------------------
# Monthly trend series
# ------------------------------


@dataclass(frozen=True)
class MonthlyTotals:
    month: str
    income_total: float = 0.0
    expense_total: float = 0.0

    @property
    def balance(self) -> float:
        return self.income_total - self.expense_total


def _bucket_by_month(transactions: Iterable[Transaction]) -> dict[str, MonthlyTotals]:
    income: dict[str, list[float]] = defaultdict(list)
    expense: dict[str, list[float]] = defaultdict(list)
    months: dict[str, None] = {}
    for t in transactions:
        key = t.month_key
        months[key] = None
        if t.type == TransactionType.income:
            income[key].append(t.amount)
        else:
            expense[key].append(t.amount)
    return {
        key: MonthlyTotals(month=key, income_total=math.fsum(income[key]), expense_total=math.fsum(expense[key]))
        for key in months
    }


def monthly_trend(transactions: Iterable[Transaction]) -> list[MonthlyTotals]:
    """One row per month that has transactions (any status), oldest first."""
    buckets = _bucket_by_month(transactions)
    return [buckets[key] for key in sorted(buckets)]


def trailing_trend(
    transactions: Iterable[Transaction],
    months: int = DEFAULT_TREND_MONTHS,
    today: Optional[dt.date] = None,
) -> list[MonthlyTotals]:
    """The last ``months`` calendar months ending at today's, zero-filled, oldest first."""
    buckets = _bucket_by_month(transactions)
    return [buckets.get(key, MonthlyTotals(month=key)) for key in trailing_month_keys(months, today)]


# ------------------------------
# Goals
# ------------------------------


def goal_progress(current_value: float, target_value: float) -> float:
    """Percent of target reached, capped at 100. 0 for a zero target."""
    if target_value <= 0:
        return 0.0
    return min(100.0, current_value / target_value * 100)


@dataclass(frozen=True)
class GoalSummary:
    goal: Goal
    progress: float

    @property
    def remaining(self) -> float:
        return max(0.0, self.goal.target_value - self.goal.current_value)


def goal_summaries(goals: Iterable[Goal]) -> list[GoalSummary]:
    return [GoalSummary(goal=g, progress=goal_progress(g.current_value, g.target_value)) for g in goals]


# ------------------------------
# Listing helpers
# ------------------------------


def category_label(categories: Iterable[Category], category_id: str) -> str:
    """Name of the referenced category, or the uncategorized label when it is gone."""
    for c in categories:
        if c.id == category_id:
            return c.name
    return UNCATEGORIZED_LABEL


def payment_method_label(method: Optional[str]) -> str:
    if not method:
        return "-"
    return PAYMENT_METHOD_LABELS.get(method, method)


def _newest_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=lambda t: t.date, reverse=True)


def recent_transactions(
    transactions: Iterable[Transaction], limit: int = RECENT_TRANSACTIONS_LIMIT
) -> list[Transaction]:
    return _newest_first(transactions)[:limit]


def search_transactions(
    transactions: Iterable[Transaction],
    type: Optional[TransactionType] = None,
    term: str = "",
) -> list[Transaction]:
    """Case-insensitive description search, optionally restricted to one type, newest first."""
    needle = term.strip().lower()
    return _newest_first(
        t
        for t in transactions
        if (type is None or t.type == type) and needle in t.description.lower()
    )


__all__ = [
    "current_balance",
    "period_income",
    "period_expense",
    "savings_rate",
    "PeriodTotals",
    "period_totals",
    "MonthlyTotals",
    "monthly_trend",
    "trailing_trend",
    "goal_progress",
    "GoalSummary",
    "goal_summaries",
    "category_label",
    "payment_method_label",
    "recent_transactions",
    "search_transactions",
    "PAYMENT_METHOD_LABELS",
]
