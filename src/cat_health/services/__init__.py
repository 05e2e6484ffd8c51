"""Scoring and health-state derivation."""

from .history import (
    HealthSummary,
    TrendPoint,
    WeightSummary,
    health_trend,
    key_observations,
    summarize_health,
    summarize_weights,
)
from .scoring import MAX_SCORE, SCORE_TABLE, HealthScore, calculate_health, score_for_answer
from .streaks import StreakSummary, calculate_streak
from .tips import TIPS_BY_CATEGORY, HealthTip, Urgency, get_health_tips
from .weight import WeightEvaluation, evaluate_weight

__all__ = [
    "calculate_health",
    "calculate_streak",
    "evaluate_weight",
    "get_health_tips",
    "health_trend",
    "HealthScore",
    "HealthSummary",
    "HealthTip",
    "key_observations",
    "MAX_SCORE",
    "score_for_answer",
    "SCORE_TABLE",
    "StreakSummary",
    "summarize_health",
    "summarize_weights",
    "TIPS_BY_CATEGORY",
    "TrendPoint",
    "Urgency",
    "WeightEvaluation",
    "WeightSummary",
]
