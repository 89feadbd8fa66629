from __future__ import annotations

from datetime import date

from budgetbook.model.entities import TransactionType
from budgetbook.services.seed import HISTORY_MONTHS, default_snapshot

TODAY = date(2025, 3, 20)


class DescribeDefaultSnapshot:
    def it_should_define_income_and_limited_expense_categories(self):
        state = default_snapshot(TODAY)

        income = [c for c in state.categories if c.type == TransactionType.income]
        expense = [c for c in state.categories if c.type == TransactionType.expense]
        assert income
        assert len(expense) >= 3
        assert all(c.has_limit for c in expense)

    def it_should_generate_one_income_and_some_expenses_per_month(self):
        state = default_snapshot(TODAY)

        months = sorted({t.month_key for t in state.transactions})
        assert months == ["2025-01", "2025-02", "2025-03"]
        for month in months:
            in_month = [t for t in state.transactions if t.month_key == month]
            assert sum(1 for t in in_month if t.type == TransactionType.income) == 1
            assert sum(1 for t in in_month if t.type == TransactionType.expense) >= 1
        assert len(months) == HISTORY_MONTHS

    def it_should_only_reference_its_own_categories(self):
        state = default_snapshot(TODAY)

        category_ids = {c.id for c in state.categories}
        assert all(t.category_id in category_ids for t in state.transactions)

    def it_should_assign_ids_from_the_factory(self):
        counter = iter(range(100))

        state = default_snapshot(TODAY, id_factory=lambda: f"id{next(counter)}")

        assert [t.id for t in state.transactions][:3] == ["id0", "id1", "id2"]
        assert len({t.id for t in state.transactions}) == len(state.transactions)

    def it_should_include_a_goal_due_in_a_year(self):
        state = default_snapshot(TODAY)

        assert len(state.goals) == 1
        assert state.goals[0].deadline == date(2026, 3, 20)

    def it_should_provide_a_profile_with_a_planned_salary(self):
        state = default_snapshot(TODAY)

        assert state.user.base_salary > 0
        assert state.settings.alert_threshold == 80.0
