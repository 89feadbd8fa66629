from __future__ import annotations

"""
Tests for the read-only views: dashboard, budget, categories, report,
goals, transactions, plus the profile and settings commands.
"""

from datetime import date
from pathlib import Path

import pytest

from budgetbook.cli.command import budget, categories, dashboard, goals, profile, report, settings, transactions, util
from budgetbook.config import SNAPSHOT_KEY
from budgetbook.model.entities import (
    AppState,
    Category,
    Goal,
    ProfileType,
    Transaction,
    TransactionStatus,
    TransactionType,
    User,
)
from budgetbook.model.snapshot_io import dump_snapshot, parse_snapshot
from budgetbook.storage.blob_store import SqliteBlobStore
from budgetbook.workspace import Workspace

TODAY = date(2025, 1, 25)


def _tx(tx_id, day, amount, kind, category_id, description, status=TransactionStatus.completed):
    return Transaction(
        id=tx_id,
        date=day,
        description=description,
        category_id=category_id,
        amount=amount,
        type=kind,
        status=status,
    )


def _stored(workspace: Workspace) -> AppState:
    return parse_snapshot(SqliteBlobStore(workspace.database_path).read(SNAPSHOT_KEY))


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    # Keep table cells on one line so output assertions see whole words
    monkeypatch.setattr(util.console, "width", 200)


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    ws = Workspace(root=tmp_path)
    state = AppState(
        user=User(name="Ana Lima", base_salary=5000.0),
        categories=(
            Category(id="salary", name="Salary", type=TransactionType.income),
            Category(id="rent", name="Rent", type=TransactionType.expense, monthly_limit=2000.0),
        ),
        transactions=(
            _tx("t1", date(2025, 1, 5), 5000, TransactionType.income, "salary", "Paycheck"),
            _tx("t2", date(2025, 1, 10), 1900, TransactionType.expense, "rent", "Rent"),
            _tx("t3", date(2025, 1, 12), 30, TransactionType.expense, "deleted", "Mystery"),
        ),
        goals=(Goal(id="g1", name="Emergency", target_value=1000, current_value=250, deadline=date(2026, 1, 1)),),
    )
    SqliteBlobStore(ws.database_path).write(SNAPSHOT_KEY, dump_snapshot(state))
    return ws


class DescribeDashboardCommand:
    def it_should_greet_and_list_alerts(self, workspace, capsys):
        rc = dashboard.run(workspace=workspace, today=TODAY)

        out = capsys.readouterr().out
        assert rc == 0
        assert "Hello, Ana!" in out
        assert "Rent" in out
        assert "95%" in out

    def it_should_say_when_there_is_nothing_to_show(self, tmp_path, capsys):
        ws = Workspace(root=tmp_path / "empty")
        SqliteBlobStore(ws.database_path).write(SNAPSHOT_KEY, dump_snapshot(AppState(user=User(name="New"))))

        rc = dashboard.run(workspace=ws, today=TODAY)

        out = capsys.readouterr().out
        assert rc == 0
        assert "No alerts" in out
        assert "No transactions yet" in out


class DescribeBudgetCommand:
    def it_should_show_the_plan_for_a_month(self, workspace, capsys):
        rc = budget.run(month="2025-01", workspace=workspace)

        out = capsys.readouterr().out
        assert rc == 0
        assert "Budget plan (2025-01)" in out
        assert "3,000.00" in out

    def it_should_reject_a_malformed_month(self, workspace):
        assert budget.run(month="2025-13", workspace=workspace) == 1
        assert budget.run(month="Jan", workspace=workspace) == 1


class DescribeCategoriesCommand:
    def it_should_list_categories_for_a_month(self, workspace, capsys):
        rc = categories.run(month="2025-01", workspace=workspace)

        assert rc == 0
        assert "Rent" in capsys.readouterr().out


class DescribeReportCommand:
    def it_should_render_all_sections(self, workspace, capsys):
        rc = report.run(months=3, workspace=workspace, today=TODAY)

        out = capsys.readouterr().out
        assert rc == 0
        assert "2024-11" in out
        assert "Uncategorized" in out
        assert "Emergency" in out

    def it_should_reject_zero_months(self, workspace):
        assert report.run(months=0, workspace=workspace, today=TODAY) == 1


class DescribeGoalsCommand:
    def it_should_show_progress(self, workspace, capsys):
        rc = goals.run(workspace=workspace)

        out = capsys.readouterr().out
        assert rc == 0
        assert "Emergency" in out
        assert "25" in out


class DescribeTransactionsCommand:
    def it_should_filter_by_search_term(self, workspace, capsys):
        rc = transactions.run(search="myst", workspace=workspace)

        out = capsys.readouterr().out
        assert rc == 0
        assert "Mystery" in out
        assert "Paycheck" not in out


class DescribeProfileCommand:
    def it_should_update_selected_fields(self, workspace):
        rc = profile.run(profile_type=ProfileType.family, currency="brl", workspace=workspace)

        assert rc == 0
        user = _stored(workspace).user
        assert user.profile_type == ProfileType.family
        assert user.currency == "BRL"
        assert user.name == "Ana Lima"

    def it_should_reject_a_bad_currency(self, workspace):
        assert profile.run(currency="dollars", workspace=workspace) == 1


class DescribeSettingsCommand:
    def it_should_store_the_start_month_zero_based(self, workspace):
        rc = settings.run(start_month=3, alert_threshold=90, workspace=workspace)

        assert rc == 0
        stored = _stored(workspace).settings
        assert stored.start_month == 2
        assert stored.alert_threshold == 90

    def it_should_reject_out_of_range_values(self, workspace):
        assert settings.run(start_month=13, workspace=workspace) == 1
        assert settings.run(alert_threshold=120, workspace=workspace) == 1
