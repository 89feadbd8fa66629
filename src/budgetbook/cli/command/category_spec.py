from __future__ import annotations

"""
Tests for category add/update/delete commands.
"""

from datetime import date
from pathlib import Path

import pytest

from budgetbook.cli.command import category
from budgetbook.config import SNAPSHOT_KEY
from budgetbook.model.entities import (
    AppState,
    Category,
    CategoryStatus,
    Transaction,
    TransactionType,
    User,
)
from budgetbook.model.snapshot_io import dump_snapshot, parse_snapshot
from budgetbook.storage.blob_store import SqliteBlobStore
from budgetbook.workspace import Workspace


def _stored(workspace: Workspace) -> AppState:
    return parse_snapshot(SqliteBlobStore(workspace.database_path).read(SNAPSHOT_KEY))


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    ws = Workspace(root=tmp_path)
    state = AppState(
        user=User(name="Test"),
        categories=(Category(id="food", name="Food", type=TransactionType.expense, monthly_limit=500.0),),
        transactions=(
            Transaction(
                id="t1",
                date=date(2025, 1, 10),
                description="Market",
                category_id="food",
                amount=80.0,
                type=TransactionType.expense,
            ),
        ),
    )
    SqliteBlobStore(ws.database_path).write(SNAPSHOT_KEY, dump_snapshot(state))
    return ws


class DescribeCategoryAdd:
    def it_should_add_an_expense_category_with_a_limit(self, workspace):
        rc = category.add(name="Pets", type=TransactionType.expense, monthly_limit=120.0, workspace=workspace)

        assert rc == 0
        added = _stored(workspace).categories[-1]
        assert added.name == "Pets"
        assert added.monthly_limit == 120.0
        assert added.status == CategoryStatus.active
        assert added.color.startswith("#")

    def it_should_reject_a_limit_on_an_income_category(self, workspace):
        rc = category.add(name="Bonus", type=TransactionType.income, monthly_limit=100.0, workspace=workspace)

        assert rc == 1
        assert len(_stored(workspace).categories) == 1

    def it_should_reject_a_zero_limit(self, workspace):
        assert category.add(name="Pets", type=TransactionType.expense, monthly_limit=0, workspace=workspace) == 1


class DescribeCategoryUpdate:
    def it_should_deactivate_a_category(self, workspace):
        rc = category.update(category_id="food", status=CategoryStatus.inactive, workspace=workspace)

        assert rc == 0
        assert _stored(workspace).find_category("food").status == CategoryStatus.inactive

    def it_should_fail_for_an_unknown_id(self, workspace):
        assert category.update(category_id="missing", name="X", workspace=workspace) == 1


class DescribeCategoryDelete:
    def it_should_keep_transactions_of_the_deleted_category(self, workspace):
        rc = category.delete(category_id="food", workspace=workspace)

        assert rc == 0
        state = _stored(workspace)
        assert state.categories == ()
        assert state.find_transaction("t1").category_id == "food"

    def it_should_fail_for_an_unknown_id(self, workspace):
        assert category.delete(category_id="missing", workspace=workspace) == 1
