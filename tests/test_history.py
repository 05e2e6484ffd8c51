"""Tests for history summaries."""

from datetime import date, timedelta

from cat_health.models.health import HealthAnswers, HealthRecord, HealthStatus
from cat_health.models.weight import WeightRecord, WeightUnit
from cat_health.services.history import (
    health_trend,
    key_observations,
    summarize_health,
    summarize_weights,
)


def make_records(answers, start, count):
    return [
        HealthRecord.from_answers("cat", answers, start + timedelta(days=i))
        for i in range(count)
    ]


class TestKeyObservations:
    """Tests for key_observations."""

    def test_all_normal(self, healthy_answers):
        assert key_observations(healthy_answers) == "All normal"

    def test_known_issues_in_order(self, worst_answers):
        assert key_observations(worst_answers) == (
            "No eating, Low water, Diarrhea, Hiding, Depressed, Vomiting, Refusing food"
        )

    def test_mild_codes_not_listed(self, healthy_answers):
        # soft stool and a single vomit are not called out
        healthy_answers.poop = "soft"
        healthy_answers.vomiting = "once"
        assert key_observations(healthy_answers) == "All normal"

    def test_partial(self):
        answers = HealthAnswers(eating="1", water="a-lot", activity="lazy", mood="aggressive")
        assert key_observations(answers) == "Ate once, Excess water, Lethargic, Aggressive"


class TestHealthTrend:
    def test_oldest_first_and_limited(self, healthy_answers, day):
        records = make_records(healthy_answers, day, 20)
        points = health_trend(list(reversed(records)), limit=14)
        assert len(points) == 14
        assert points[0].date == day + timedelta(days=6)
        assert points[-1].date == day + timedelta(days=19)

    def test_empty(self):
        assert health_trend([]) == []


class TestSummaries:
    """Tests for summarize_health and summarize_weights."""

    def test_health_summary(self, healthy_answers, worst_answers, day):
        records = make_records(healthy_answers, day, 2) + make_records(
            worst_answers, day + timedelta(days=2), 1
        )
        summary = summarize_health(records)
        assert summary.count == 3
        # (100 + 100 + 20) / 3 = 73.3
        assert summary.average_percentage == 73
        assert summary.latest_percentage == 20
        assert summary.status_counts == {
            HealthStatus.EXCELLENT: 2,
            HealthStatus.CRITICAL: 1,
        }
        assert summary.to_dict()["status_counts"] == {"excellent": 2, "critical": 1}

    def test_empty_summaries(self):
        assert summarize_health([]) is None
        assert summarize_weights([]) is None

    def test_weight_summary_converts_units(self, day):
        records = [
            WeightRecord(cat_id="cat", date=day, weight=4.0, unit="kg"),
            WeightRecord(cat_id="cat", date=day + timedelta(days=1), weight=11.0, unit="lbs"),
        ]
        summary = summarize_weights(records, WeightUnit.KG)
        assert summary.latest == 5.0
        assert summary.minimum == 4.0
        assert summary.maximum == 5.0
        assert summary.count == 2
