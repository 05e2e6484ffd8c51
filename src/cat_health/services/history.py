"""History summaries used by the trend view and the vet report."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date

from ..models.health import HealthAnswers, HealthRecord, HealthStatus
from ..models.weight import WeightRecord, WeightUnit
from ..utils.units import convert_weight, round_half_up

TREND_WINDOW = 14

# (category, code, label) in report order
OBSERVATION_LABELS: list[tuple[str, str, str]] = [
    ("eating", "0", "No eating"),
    ("eating", "1", "Ate once"),
    ("water", "very-little", "Low water"),
    ("water", "a-lot", "Excess water"),
    ("poop", "diarrhea", "Diarrhea"),
    ("poop", "no-poop", "No stool"),
    ("activity", "hiding", "Hiding"),
    ("activity", "lazy", "Lethargic"),
    ("mood", "depressed", "Depressed"),
    ("mood", "aggressive", "Aggressive"),
    ("vomiting", "more-than-once", "Vomiting"),
    ("appetite", "refusing-food", "Refusing food"),
]


@dataclass(frozen=True)
class TrendPoint:
    date: date
    percentage: int
    status: HealthStatus


@dataclass
class HealthSummary:
    """Aggregate statistics over a list of health records."""

    count: int
    average_percentage: int
    latest_percentage: int
    status_counts: dict[HealthStatus, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "average_percentage": self.average_percentage,
            "latest_percentage": self.latest_percentage,
            "status_counts": {s.value: n for s, n in self.status_counts.items()},
        }


@dataclass
class WeightSummary:
    """Aggregate statistics over weight records, in a single unit."""

    count: int
    latest: float
    minimum: float
    maximum: float
    unit: WeightUnit

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "latest": self.latest,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "unit": self.unit.value,
        }


def key_observations(answers: HealthAnswers) -> str:
    """Short comma-separated list of notable answers, or "All normal"."""
    issues = [
        label
        for category, code, label in OBSERVATION_LABELS
        if getattr(answers, category) == code
    ]
    return ", ".join(issues) if issues else "All normal"


def _newest_first(records):
    return sorted(records, key=lambda r: r.date, reverse=True)


def health_trend(records: list[HealthRecord], limit: int = TREND_WINDOW) -> list[TrendPoint]:
    """The most recent ``limit`` records as chart points, oldest first."""
    recent = _newest_first(records)[:limit]
    return [
        TrendPoint(date=r.date, percentage=r.percentage, status=r.status)
        for r in reversed(recent)
    ]


def summarize_health(records: list[HealthRecord]) -> HealthSummary | None:
    """Average, latest and per-status counts. None when there are no records."""
    if not records:
        return None

    ordered = _newest_first(records)
    average = round_half_up(sum(r.percentage for r in ordered) / len(ordered))
    counts = Counter(r.status for r in ordered)
    return HealthSummary(
        count=len(ordered),
        average_percentage=int(average),
        latest_percentage=ordered[0].percentage,
        # Keep tier order stable for display
        status_counts={s: counts[s] for s in HealthStatus if counts[s]},
    )


def summarize_weights(
    records: list[WeightRecord], unit: WeightUnit | str = WeightUnit.KG
) -> WeightSummary | None:
    """Latest, minimum and maximum weight in ``unit``. None when empty."""
    if not records:
        return None

    unit = WeightUnit(unit)
    ordered = _newest_first(records)
    weights = [convert_weight(r.weight, r.unit, unit) for r in ordered]
    return WeightSummary(
        count=len(weights),
        latest=weights[0],
        minimum=min(weights),
        maximum=max(weights),
        unit=unit,
    )
