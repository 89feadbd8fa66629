"""
Dashboard view model: this month's indicators at a glance.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import List, Optional

from budgetbook.model.entities import AppState, Transaction
from budgetbook.services.budget_service import CategorySpend, budget_alerts
from budgetbook.services.derivation import PeriodTotals, current_balance, period_totals, recent_transactions
from budgetbook.services.periods import Period


@dataclass(frozen=True)
class DashboardSummary:
    month: PeriodTotals
    balance: float
    alerts: List[CategorySpend]
    recent: List[Transaction]


def dashboard_summary(
    state: AppState,
    today: Optional[dt.date] = None,
    *,
    threshold: Optional[float] = None,
) -> DashboardSummary:
    """Completed totals for today's month, lifetime balance, alerts and recent activity."""
    period = Period.current_month(today)
    return DashboardSummary(
        month=period_totals(state.transactions, period),
        balance=current_balance(state.transactions),
        alerts=budget_alerts(state, period.month_key, threshold=threshold, completed_only=True),
        recent=recent_transactions(state.transactions),
    )


__all__ = ["DashboardSummary", "dashboard_summary"]
