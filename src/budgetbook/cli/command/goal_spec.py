from __future__ import annotations

"""
Tests for goal add/update/delete commands.
"""

from datetime import date
from pathlib import Path

import pytest

from budgetbook.cli.command import goal
from budgetbook.config import SNAPSHOT_KEY
from budgetbook.model.entities import AppState, GoalStatus, User
from budgetbook.model.snapshot_io import dump_snapshot, parse_snapshot
from budgetbook.storage.blob_store import SqliteBlobStore
from budgetbook.workspace import Workspace


def _stored(workspace: Workspace) -> AppState:
    return parse_snapshot(SqliteBlobStore(workspace.database_path).read(SNAPSHOT_KEY))


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    ws = Workspace(root=tmp_path)
    SqliteBlobStore(ws.database_path).write(SNAPSHOT_KEY, dump_snapshot(AppState(user=User(name="Test"))))
    return ws


class DescribeGoalCommands:
    def it_should_add_update_and_delete_a_goal(self, workspace):
        assert goal.add(name="Vacation", target_value=3000, deadline=date(2026, 7, 1), workspace=workspace) == 0
        [added] = _stored(workspace).goals
        assert added.status == GoalStatus.in_progress

        assert goal.update(goal_id=added.id, current_value=750.0, workspace=workspace) == 0
        assert _stored(workspace).find_goal(added.id).current_value == 750.0

        assert goal.delete(goal_id=added.id, workspace=workspace) == 0
        assert _stored(workspace).goals == ()

    def it_should_reject_a_non_positive_target(self, workspace):
        assert goal.add(name="Nothing", target_value=0, deadline=date(2026, 1, 1), workspace=workspace) == 1
        assert _stored(workspace).goals == ()

    def it_should_fail_for_unknown_ids(self, workspace):
        assert goal.update(goal_id="missing", name="X", workspace=workspace) == 1
        assert goal.delete(goal_id="missing", workspace=workspace) == 1
