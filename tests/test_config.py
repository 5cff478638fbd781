"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from secondbrain.config import DATA_ENV_VAR, DOCS_ENV_VAR, AppConfig


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DOCS_ENV_VAR, raising=False)
    monkeypatch.delenv(DATA_ENV_VAR, raising=False)


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self) -> None:
        """Should create config with default values."""
        config = AppConfig()

        assert config.docs_dir == Path.home() / "Documents" / "SecondBrain"
        assert config.data_dir == Path.home() / "Documents" / "SecondBrain" / "data"
        assert config.search_limit == 10
        assert config.excerpt_before == 40
        assert config.excerpt_after == 60

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Environment variables replace the default locations."""
        monkeypatch.setenv(DOCS_ENV_VAR, str(tmp_path / "notes"))
        monkeypatch.setenv(DATA_ENV_VAR, str(tmp_path / "state"))

        config = AppConfig()

        assert config.docs_dir == tmp_path / "notes"
        assert config.data_dir == tmp_path / "state"

    def test_data_dir_follows_docs_dir(self) -> None:
        """Data dir defaults to a folder inside a custom docs dir."""
        config = AppConfig(docs_dir=Path("/custom/notes"))

        assert config.data_dir == Path("/custom/notes/data")

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(
            docs_dir=Path("/notes"),
            data_dir=Path("/state"),
            search_limit=5,
        )

        assert config.docs_dir == Path("/notes")
        assert config.data_dir == Path("/state")
        assert config.search_limit == 5

    def test_resolve_docs_dir_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(docs_dir=Path("/absolute/notes"))

        assert config.resolve_docs_dir(Path("/base")) == Path("/absolute/notes")

    def test_resolve_docs_dir_relative_no_base(self) -> None:
        """Should return relative path when no base_dir provided."""
        config = AppConfig(docs_dir=Path("notes"))

        assert config.resolve_docs_dir(base_dir=None) == Path("notes")

    def test_resolve_docs_dir_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig(docs_dir=Path("notes"))

        assert config.resolve_docs_dir(Path("/base/directory")) == Path("/base/directory/notes")

    def test_resolve_data_dir_relative_with_base(self) -> None:
        """Relative data dir resolves against base_dir too."""
        config = AppConfig(docs_dir=Path("notes"))

        assert config.resolve_data_dir(Path("/project")) == Path("/project/notes/data")

    def test_ensure_data_dir_creates_directory(self, tmp_path: Path) -> None:
        """Data directory is only created when asked for."""
        config = AppConfig(docs_dir=tmp_path, data_dir=tmp_path / "state" / "json")
        assert not (tmp_path / "state").exists()

        created = config.ensure_data_dir()

        assert created == tmp_path / "state" / "json"
        assert created.is_dir()

    def test_ensure_data_dir_existing(self, tmp_path: Path) -> None:
        """Does not fail when the directory already exists."""
        config = AppConfig(docs_dir=tmp_path, data_dir=tmp_path)

        assert config.ensure_data_dir() == tmp_path
