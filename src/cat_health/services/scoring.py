"""Daily health scoring.

Each answer maps to a fixed number of points (0-10) through SCORE_TABLE.
The eight answers are summed, expressed as a percentage of MAX_SCORE and
bucketed into a HealthStatus tier.
"""

from dataclasses import dataclass

from ..models.health import HealthAnswers, HealthStatus
from ..utils.units import round_half_up

# Percentage denominator. Fixed at 8 categories x 10 points; not derived
# from the table, so widening the table changes percentages.
MAX_SCORE = 80

SCORE_TABLE: dict[str, dict[str, int]] = {
    "eating": {"0": 0, "1": 5, "2-3": 10, "4+": 8},
    "water": {"very-little": 3, "normal": 10, "a-lot": 7},
    "pee": {"0-1": 5, "2-4": 10, "5+": 6},
    "poop": {"normal": 10, "soft": 6, "diarrhea": 2, "no-poop": 4},
    "activity": {"very-active": 10, "normal": 10, "lazy": 5, "hiding": 2},
    "mood": {"playful": 10, "normal": 10, "aggressive": 4, "depressed": 2},
    "vomiting": {"no": 10, "once": 5, "more-than-once": 1},
    "appetite": {"normal": 10, "less-than-usual": 5, "refusing-food": 1},
}

# Lower bounds on percentage, checked highest first
STATUS_THRESHOLDS: list[tuple[int, HealthStatus]] = [
    (85, HealthStatus.EXCELLENT),
    (65, HealthStatus.GOOD),
    (40, HealthStatus.WARNING),
]


@dataclass(frozen=True)
class HealthScore:
    """Result of scoring one day's answers."""

    score: int
    percentage: int
    status: HealthStatus

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "percentage": self.percentage,
            "status": self.status.value,
        }


def score_for_answer(category: str, answer: str) -> int:
    """Points for a single answer. Unknown categories or codes score 0."""
    return SCORE_TABLE.get(category, {}).get(answer, 0)


def score_to_percentage(score: int) -> int:
    return int(round_half_up(score * 100 / MAX_SCORE))


def status_for_percentage(percentage: int) -> HealthStatus:
    for threshold, status in STATUS_THRESHOLDS:
        if percentage >= threshold:
            return status
    return HealthStatus.CRITICAL


def calculate_health(answers: HealthAnswers) -> HealthScore:
    """Score a day's answers.

    Args:
        answers: The eight daily observations

    Returns:
        Total points, percentage of MAX_SCORE and the status tier
    """
    total = sum(score_for_answer(category, answer) for category, answer in answers.items())
    percentage = score_to_percentage(total)
    return HealthScore(
        score=total,
        percentage=percentage,
        status=status_for_percentage(percentage),
    )
