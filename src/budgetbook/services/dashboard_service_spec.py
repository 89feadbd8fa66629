from __future__ import annotations

from datetime import date

import pytest

from budgetbook.model.entities import (
    AppState,
    Category,
    Transaction,
    TransactionStatus,
    TransactionType,
    User,
)
from budgetbook.services.dashboard_service import dashboard_summary


def _tx(tx_id, day, amount, kind, category_id="rent", status=TransactionStatus.completed):
    return Transaction(
        id=tx_id, date=day, description=tx_id, category_id=category_id, amount=amount, type=kind, status=status
    )


@pytest.fixture
def state() -> AppState:
    return AppState(
        user=User(name="Dash"),
        categories=(Category(id="rent", name="Rent", type=TransactionType.expense, monthly_limit=2000.0),),
        transactions=(
            _tx("dec-salary", date(2024, 12, 5), 5000, TransactionType.income, "salary"),
            _tx("jan-salary", date(2025, 1, 5), 5000, TransactionType.income, "salary"),
            _tx("jan-rent", date(2025, 1, 10), 1800, TransactionType.expense),
            _tx("jan-pending", date(2025, 1, 20), 999999, TransactionType.expense, status=TransactionStatus.pending),
        ),
    )


class DescribeDashboardSummary:
    def it_should_summarize_the_current_month_from_completed_transactions(self, state):
        summary = dashboard_summary(state, today=date(2025, 1, 25))

        assert summary.month.income == pytest.approx(5000)
        assert summary.month.expense == pytest.approx(1800)
        assert summary.month.savings_rate == pytest.approx(64.0)

    def it_should_report_the_lifetime_balance(self, state):
        assert dashboard_summary(state, today=date(2025, 1, 25)).balance == pytest.approx(8200)

    def it_should_list_alerts_using_completed_spend(self, state):
        summary = dashboard_summary(state, today=date(2025, 1, 25))

        assert [a.category.id for a in summary.alerts] == ["rent"]
        assert summary.alerts[0].utilization == pytest.approx(90.0)

    def it_should_honor_an_explicit_threshold(self, state):
        assert dashboard_summary(state, today=date(2025, 1, 25), threshold=95).alerts == []

    def it_should_show_the_most_recent_transactions(self, state):
        recent = dashboard_summary(state, today=date(2025, 1, 25)).recent

        assert [t.id for t in recent][:2] == ["jan-pending", "jan-rent"]
        assert len(recent) == 4
