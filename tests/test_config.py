"""Tests for configuration loading."""
import dataclasses
import os
from pathlib import Path

import pytest
from iso8859_editor.config import BACKUP_ROOT_ENV, BASE_PATH_ENV, EditorConfig


class TestEditorConfig:
    """Test configuration defaults and environment overrides."""

    def test_defaults_to_working_directory(self) -> None:
        config = EditorConfig.from_env({})

        assert config.base_path == Path.cwd()
        assert config.backup_root == Path.cwd()

    def test_empty_values_use_defaults(self) -> None:
        config = EditorConfig.from_env({BASE_PATH_ENV: "", BACKUP_ROOT_ENV: ""})

        assert config.base_path == Path.cwd()
        assert config.backup_root == Path.cwd()

    def test_environment_overrides(self, tmp_path: Path) -> None:
        config = EditorConfig.from_env(
            {BASE_PATH_ENV: str(tmp_path / "base"), BACKUP_ROOT_ENV: str(tmp_path)}
        )

        assert config.base_path == tmp_path / "base"
        assert config.backup_root == tmp_path

    def test_reads_process_environment(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv(BACKUP_ROOT_ENV, str(tmp_path))
        monkeypatch.delenv(BASE_PATH_ENV, raising=False)

        config = EditorConfig.from_env()

        assert config.backup_root == tmp_path
        assert config.base_path == Path.cwd()

    def test_paths_made_absolute_and_normalized(self) -> None:
        config = EditorConfig(base_path=Path("some/../dir"), backup_root=Path("."))

        assert config.base_path == Path(os.path.abspath("dir"))
        assert config.backup_root == Path.cwd()

    def test_unrestricted(self) -> None:
        assert EditorConfig(base_path=None).base_path is None

    def test_frozen(self) -> None:
        config = EditorConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_path = Path("/")
