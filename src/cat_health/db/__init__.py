"""Database layer for cat-health."""

from .engine import get_db_path, init_db
from .repositories import (
    CatRepository,
    HealthRecordRepository,
    SettingsRepository,
    WeightGoalRepository,
    WeightRecordRepository,
)

__all__ = [
    "CatRepository",
    "get_db_path",
    "HealthRecordRepository",
    "init_db",
    "SettingsRepository",
    "WeightGoalRepository",
    "WeightRecordRepository",
]
