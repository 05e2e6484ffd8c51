"""Data models for cat-health."""

from .cat import Cat, generate_id
from .health import HealthAnswers, HealthRecord, HealthStatus
from .weight import WeightGoal, WeightRecord, WeightStatus, WeightUnit

__all__ = [
    "Cat",
    "generate_id",
    "HealthAnswers",
    "HealthRecord",
    "HealthStatus",
    "WeightGoal",
    "WeightRecord",
    "WeightStatus",
    "WeightUnit",
]
