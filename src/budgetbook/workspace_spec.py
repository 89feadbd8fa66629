from __future__ import annotations

from pathlib import Path

from budgetbook.workspace import Workspace


class DescribeWorkspace:
    class DescribeResolve:
        def it_should_use_explicit_path_when_provided(self):
            ws = Workspace.resolve(explicit=Path("/tmp/household"))
            assert ws.root == Path("/tmp/household")

        def it_should_use_budgetbook_data_env_var_when_set(self, monkeypatch):
            monkeypatch.setenv("BUDGETBOOK_DATA", "/tmp/env-household")
            ws = Workspace.resolve()
            assert ws.root == Path("/tmp/env-household")

        def it_should_prefer_explicit_over_env_var(self, monkeypatch):
            monkeypatch.setenv("BUDGETBOOK_DATA", "/tmp/env-household")
            ws = Workspace.resolve(explicit=Path("/tmp/explicit"))
            assert ws.root == Path("/tmp/explicit")

        def it_should_fall_back_to_cwd_when_no_env_var(self, monkeypatch):
            monkeypatch.delenv("BUDGETBOOK_DATA", raising=False)
            ws = Workspace.resolve()
            assert ws.root == Path.cwd()

    class DescribePaths:
        def it_should_keep_the_database_under_data(self):
            ws = Workspace(root=Path("/hh"))
            assert ws.database_path == Path("/hh/data/budgetbook.db")

        def it_should_keep_file_snapshots_under_data(self):
            ws = Workspace(root=Path("/hh"))
            assert ws.snapshots_dir == Path("/hh/data/snapshots")

        def it_should_compute_config_path(self):
            ws = Workspace(root=Path("/hh"))
            assert ws.config_path == Path("/hh/config/budgetbook.yml")

        def it_should_compute_exports_dir(self):
            ws = Workspace(root=Path("/hh"))
            assert ws.exports_dir == Path("/hh/exports")
