"""Runtime settings for cat-health.

Defaults can be overridden with environment variables:

    CAT_HEALTH_DATA_DIR   directory holding the SQLite database
    CAT_HEALTH_LOG_LEVEL  minimum loguru level (DEBUG, INFO, WARNING, ERROR)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

ENV_PREFIX = "CAT_HEALTH_"
DEFAULT_DATA_DIR = Path("~") / ".cat-health"
DEFAULT_DB_NAME = "cat_health.db"


@dataclass
class Settings:
    """Application settings.

    Attributes:
        data_dir: Directory for the database file.
        db_name: SQLite file name inside data_dir.
        log_level: Minimum log level for the stderr sink.
    """

    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR.expanduser())
    db_name: str = DEFAULT_DB_NAME
    log_level: str = "WARNING"

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings, letting CAT_HEALTH_* variables win over defaults."""
        env = os.environ if environ is None else environ
        settings = cls()

        data_dir = env.get(f"{ENV_PREFIX}DATA_DIR")
        if data_dir:
            settings.data_dir = Path(data_dir).expanduser()

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            settings.log_level = log_level.upper()

        return settings
