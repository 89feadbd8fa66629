"""
Seed data for a first run.

``default_snapshot`` builds the aggregate used when no persisted snapshot
exists: a demo profile, a starter category list, three months of synthetic
history and one savings goal. Amounts are illustrative. Transactions only
reference the categories defined here.
"""
from __future__ import annotations

import datetime as dt
from typing import Callable

from budgetbook.ids import generate_id
from budgetbook.model.entities import (
    AppState,
    Category,
    Goal,
    PaymentMethod,
    Settings,
    Transaction,
    TransactionStatus,
    TransactionType,
    User,
)
from budgetbook.services.periods import shift_month

HISTORY_MONTHS = 3

DEFAULT_USER = User(
    name="Demo User",
    currency="USD",
    base_salary=5000.0,
)

DEFAULT_SETTINGS = Settings(start_month=0, alert_threshold=80.0)

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(id="1", name="Salary", type=TransactionType.income, color="#10B981"),
    Category(id="2", name="Freelance", type=TransactionType.income, color="#34D399"),
    Category(id="3", name="Rent", type=TransactionType.expense, monthly_limit=2000.0, color="#F43F5E"),
    Category(id="4", name="Groceries", type=TransactionType.expense, monthly_limit=1500.0, color="#F59E0B"),
    Category(id="5", name="Transport", type=TransactionType.expense, monthly_limit=500.0, color="#3B82F6"),
    Category(id="6", name="Leisure", type=TransactionType.expense, monthly_limit=300.0, color="#8B5CF6"),
)

# (day of month, description, category id, amount, type, payment method)
_MONTHLY_ENTRIES = (
    (5, "Monthly salary", "1", 5000.0, TransactionType.income, None),
    (10, "Apartment rent", "3", 1800.0, TransactionType.expense, PaymentMethod.instant_transfer),
    (15, "Weekly groceries", "4", 450.0, TransactionType.expense, PaymentMethod.credit),
)


def _history(today: dt.date, id_factory: Callable[[], str]) -> tuple[Transaction, ...]:
    transactions = []
    for offset in range(HISTORY_MONTHS - 1, -1, -1):
        month_start = shift_month(today.replace(day=1), -offset)
        for day, description, category_id, amount, kind, method in _MONTHLY_ENTRIES:
            transactions.append(
                Transaction(
                    id=id_factory(),
                    date=month_start.replace(day=day),
                    description=description,
                    category_id=category_id,
                    amount=amount,
                    type=kind,
                    status=TransactionStatus.completed,
                    payment_method=method.value if method else None,
                )
            )
    return tuple(transactions)


def default_snapshot(
    today: dt.date | None = None,
    id_factory: Callable[[], str] = generate_id,
) -> AppState:
    """Build the first-run aggregate relative to ``today``."""
    today = today or dt.date.today()
    emergency_fund = Goal(
        id="1",
        name="Emergency fund",
        target_value=15000.0,
        current_value=5000.0,
        monthly_planned_value=500.0,
        deadline=shift_month(today, 12),
    )
    return AppState(
        user=DEFAULT_USER,
        transactions=_history(today, id_factory),
        categories=DEFAULT_CATEGORIES,
        goals=(emergency_fund,),
        settings=DEFAULT_SETTINGS,
    )


__all__ = ["default_snapshot", "DEFAULT_CATEGORIES", "DEFAULT_USER", "DEFAULT_SETTINGS", "HISTORY_MONTHS"]
