"""
Service layer for budgetbook.

The state store is the only stateful piece: it owns the ledger snapshot and
persists it on every mutation. Everything else here is a functional core of
pure derivations over that snapshot.

Principles:
- No UI framework imports (Rich, Typer)
- Dependencies injected through constructors or arguments
- Functions return data structures (frozen dataclasses), never print
"""

from budgetbook.services.budget_service import (
    AlertLevel,
    BudgetLine,
    BudgetPlan,
    CategorySlice,
    CategorySpend,
    PlannedVsActual,
    alert_level,
    budget_alerts,
    budget_plan,
    category_spending,
    expense_breakdown,
    planned_vs_actual,
    utilization,
)
from budgetbook.services.dashboard_service import DashboardSummary, dashboard_summary
from budgetbook.services.derivation import (
    GoalSummary,
    MonthlyTotals,
    PeriodTotals,
    category_label,
    current_balance,
    goal_progress,
    goal_summaries,
    monthly_trend,
    payment_method_label,
    period_expense,
    period_income,
    period_totals,
    recent_transactions,
    savings_rate,
    search_transactions,
    trailing_trend,
)
from budgetbook.services.periods import Period
from budgetbook.services.seed import default_snapshot
from budgetbook.services.state_store import SaveStatus, StateStore, export_document

__all__ = [
    "AlertLevel",
    "BudgetLine",
    "BudgetPlan",
    "CategorySlice",
    "CategorySpend",
    "DashboardSummary",
    "GoalSummary",
    "MonthlyTotals",
    "Period",
    "PeriodTotals",
    "PlannedVsActual",
    "SaveStatus",
    "StateStore",
    "alert_level",
    "budget_alerts",
    "budget_plan",
    "category_label",
    "category_spending",
    "current_balance",
    "dashboard_summary",
    "default_snapshot",
    "expense_breakdown",
    "export_document",
    "goal_progress",
    "goal_summaries",
    "monthly_trend",
    "payment_method_label",
    "period_expense",
    "period_income",
    "period_totals",
    "planned_vs_actual",
    "recent_transactions",
    "savings_rate",
    "search_transactions",
    "trailing_trend",
    "utilization",
]
