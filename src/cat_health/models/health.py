"""Daily health check models."""

from dataclasses import dataclass, fields
from datetime import date
from enum import Enum


class HealthStatus(str, Enum):
    """Discrete wellness tier derived from the health percentage."""

    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        return _STATUS_INFO[self][0]

    @property
    def message(self) -> str:
        return _STATUS_INFO[self][1]


_STATUS_INFO = {
    HealthStatus.EXCELLENT: ("Excellent", "Your cat is healthy and happy!"),
    HealthStatus.GOOD: ("Good", "Mostly healthy, keep monitoring."),
    HealthStatus.WARNING: ("Warning", "Possible health issues. Pay attention."),
    HealthStatus.CRITICAL: ("Critical", "High risk. Please consult a veterinarian."),
}


@dataclass
class HealthAnswers:
    """Answers to the eight daily questions.

    Each field holds the answer code for its category, e.g. ``"2-3"`` for
    eating or ``"soft"`` for poop. An empty string means unanswered.
    """

    eating: str = ""
    water: str = ""
    pee: str = ""
    poop: str = ""
    activity: str = ""
    mood: str = ""
    vomiting: str = ""
    appetite: str = ""

    @classmethod
    def categories(cls) -> list[str]:
        """Question categories in declaration order."""
        return [f.name for f in fields(cls)]

    def items(self) -> list[tuple[str, str]]:
        """(category, answer) pairs in declaration order."""
        return [(name, getattr(self, name)) for name in self.categories()]

    def missing_fields(self) -> list[str]:
        return [name for name, answer in self.items() if not answer]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_dict(self) -> dict:
        return dict(self.items())

    @classmethod
    def from_dict(cls, data: dict) -> "HealthAnswers":
        # Unknown keys are dropped so older or newer records still load
        return cls(**{name: str(data.get(name) or "") for name in cls.categories()})


@dataclass
class HealthRecord:
    """One finalized daily check for a cat.

    At most one record exists per (cat_id, date); saving another record
    for the same day replaces it.
    """

    cat_id: str
    date: date
    answers: HealthAnswers
    score: int
    percentage: int
    status: HealthStatus

    @classmethod
    def from_answers(
        cls, cat_id: str, answers: HealthAnswers, day: date | None = None
    ) -> "HealthRecord":
        """Finalize a day's answers into a scored record.

        Raises:
            ValueError: If any question is unanswered.
        """
        from ..services.scoring import calculate_health

        missing = answers.missing_fields()
        if missing:
            raise ValueError(f"Unanswered questions: {', '.join(missing)}")

        result = calculate_health(answers)
        return cls(
            cat_id=cat_id,
            date=day or date.today(),
            answers=answers,
            score=result.score,
            percentage=result.percentage,
            status=result.status,
        )

    @property
    def day_key(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "cat_id": self.cat_id,
            "date": self.day_key,
            "answers": self.answers.to_dict(),
            "score": self.score,
            "percentage": self.percentage,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HealthRecord":
        """Create from dictionary."""
        return cls(
            cat_id=data["cat_id"],
            date=date.fromisoformat(data["date"]),
            answers=HealthAnswers.from_dict(data.get("answers", {})),
            score=int(data["score"]),
            percentage=int(data["percentage"]),
            status=HealthStatus(data["status"]),
        )
