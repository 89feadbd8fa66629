from __future__ import annotations

import pytest

from budgetbook.config import (
    SNAPSHOT_KEY,
    StorageBackend,
    WorkspaceConfig,
    load_workspace_config,
    save_workspace_config,
)


class DescribeLoadWorkspaceConfig:
    def it_should_use_defaults_when_the_file_is_missing(self, tmp_path):
        config = load_workspace_config(tmp_path / "missing.yml")

        assert config.storage == StorageBackend.sqlite
        assert config.snapshot_key == SNAPSHOT_KEY

    def it_should_read_values_from_yaml(self, tmp_path):
        path = tmp_path / "budgetbook.yml"
        path.write_text("storage: file\nsnapshot_key: household\nlog_level: DEBUG\n", encoding="utf-8")

        config = load_workspace_config(path)

        assert config.storage == StorageBackend.file
        assert config.snapshot_key == "household"
        assert config.log_level == "DEBUG"

    def it_should_treat_an_empty_file_as_defaults(self, tmp_path):
        path = tmp_path / "budgetbook.yml"
        path.write_text("", encoding="utf-8")

        assert load_workspace_config(path) == WorkspaceConfig()

    @pytest.mark.parametrize(
        "content",
        [
            "storage: [unclosed\n",
            "storage: floppy\n",
            "snapshot_key: ''\n",
            "snapshot_key: a/b\n",
        ],
    )
    def it_should_fall_back_to_defaults_for_invalid_files(self, tmp_path, caplog, content):
        path = tmp_path / "budgetbook.yml"
        path.write_text(content, encoding="utf-8")

        assert load_workspace_config(path) == WorkspaceConfig()
        assert "Ignoring invalid workspace config" in caplog.text


class DescribeSaveWorkspaceConfig:
    def it_should_write_a_file_that_loads_back(self, tmp_path):
        path = tmp_path / "config" / "budgetbook.yml"
        config = WorkspaceConfig(storage=StorageBackend.file, snapshot_key="other")

        save_workspace_config(path, config)

        assert load_workspace_config(path) == config
