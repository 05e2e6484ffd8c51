"""Tests for settings."""

from pathlib import Path

from cat_health.config import Settings
from cat_health.db import get_db_path


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.data_dir == Path("~/.cat-health").expanduser()
        assert settings.log_level == "WARNING"
        assert settings.db_path.name == "cat_health.db"

    def test_env_overrides(self, tmp_path):
        settings = Settings.from_env(
            {"CAT_HEALTH_DATA_DIR": str(tmp_path), "CAT_HEALTH_LOG_LEVEL": "debug"}
        )
        assert settings.data_dir == tmp_path
        assert settings.log_level == "DEBUG"
        assert settings.db_path == tmp_path / "cat_health.db"


class TestDbPath:
    def test_explicit_dir_created(self, tmp_path):
        data_dir = tmp_path / "nested" / "data"
        path = get_db_path(data_dir)
        assert path == data_dir / "cat_health.db"
        assert data_dir.is_dir()

    def test_env_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CAT_HEALTH_DATA_DIR", str(tmp_path / "env"))
        assert get_db_path() == Settings.from_env().db_path
        assert get_db_path().parent == tmp_path / "env"
