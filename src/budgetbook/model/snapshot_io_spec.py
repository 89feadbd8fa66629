from __future__ import annotations

import json
from datetime import date

import pytest

from budgetbook.model.entities import (
    AppState,
    Category,
    Goal,
    Settings,
    Transaction,
    TransactionStatus,
    TransactionType,
    User,
)
from budgetbook.model.snapshot_io import (
    SnapshotFormatError,
    dump_snapshot,
    export_filename,
    parse_snapshot,
)


@pytest.fixture
def state() -> AppState:
    return AppState(
        user=User(name="Ana Lima", currency="BRL", base_salary=5000.0),
        transactions=(
            Transaction(
                id="t1",
                date=date(2025, 1, 5),
                description="Salary",
                category_id="1",
                amount=5000.0,
                type=TransactionType.income,
            ),
            Transaction(
                id="t2",
                date=date(2025, 1, 10),
                description="Rent",
                category_id="3",
                amount=1800.0,
                type=TransactionType.expense,
                status=TransactionStatus.pending,
                payment_method="instant-transfer",
            ),
        ),
        categories=(
            Category(id="1", name="Salary", type=TransactionType.income, color="#10B981"),
            Category(id="3", name="Rent", type=TransactionType.expense, monthly_limit=2000.0),
        ),
        goals=(
            Goal(id="g1", name="Emergency fund", target_value=15000, current_value=5000, deadline=date(2026, 1, 1)),
        ),
        settings=Settings(start_month=2, alert_threshold=75),
    )


class DescribeDumpSnapshot:
    def it_should_write_camel_case_json_without_absent_fields(self, state):
        data = json.loads(dump_snapshot(state))

        assert data["user"]["baseSalary"] == 5000.0
        assert data["settings"] == {"startMonth": 2, "alertThreshold": 75.0}
        assert data["transactions"][1]["paymentMethod"] == "instant-transfer"
        assert "paymentMethod" not in data["transactions"][0]
        assert "monthlyLimit" not in data["categories"][0]

    def it_should_round_trip_through_parse(self, state):
        assert parse_snapshot(dump_snapshot(state)) == state

    def it_should_indent_when_asked(self, state):
        assert "\n  " in dump_snapshot(state, indent=2)


class DescribeParseSnapshot:
    def it_should_reject_text_that_is_not_json(self):
        with pytest.raises(SnapshotFormatError):
            parse_snapshot("{not json")

    def it_should_reject_json_of_the_wrong_shape(self):
        with pytest.raises(SnapshotFormatError) as exc:
            parse_snapshot(json.dumps({"transactions": "nope"}))

        assert "Invalid snapshot" in str(exc.value)

    def it_should_fill_defaults_for_omitted_collections(self):
        state = parse_snapshot(json.dumps({"user": {"name": "Solo"}}))

        assert state.transactions == ()
        assert state.settings == Settings()

    def it_should_be_a_value_error(self):
        assert issubclass(SnapshotFormatError, ValueError)


class DescribeExportFilename:
    def it_should_stamp_the_date(self):
        assert export_filename(date(2025, 2, 28)) == "budget_backup_2025-02-28.json"
