"""Tests for the vet report generator."""

import json
from datetime import date, timedelta

from cat_health.generators.report import (
    ReportConfig,
    VetReportGenerator,
    _truncate,
    report_filename,
)
from cat_health.models.cat import Cat
from cat_health.models.health import HealthRecord
from cat_health.models.weight import WeightRecord, WeightUnit


def build_generator(**kwargs):
    return VetReportGenerator(ReportConfig(generated_on=date(2024, 1, 15), **kwargs))


class TestReportFilename:
    def test_sanitizes_name(self):
        cat = Cat(name="Mr. Whiskers")
        assert report_filename(cat, date(2024, 1, 15)) == "Mr__Whiskers_health_report_2024-01-15.txt"


class TestTruncate:
    def test_short_text_unchanged(self):
        assert _truncate("All normal") == "All normal"

    def test_long_text(self):
        text = "x" * 41
        assert _truncate(text) == "x" * 37 + "..."
        assert len(_truncate(text)) == 40


class TestVetReportGenerator:
    """Tests for VetReportGenerator."""

    def test_empty_report(self, sample_cat):
        text = build_generator().generate_text(sample_cat, [], [])
        assert "CAT HEALTH REPORT" in text
        assert "Mochi" in text
        assert "Report Generated: Monday, January 15, 2024" in text
        assert "No records yet." in text

    def test_full_report(self, sample_cat, healthy_answers, worst_answers, day):
        health = [
            HealthRecord.from_answers(sample_cat.id, healthy_answers, day),
            HealthRecord.from_answers(sample_cat.id, worst_answers, day + timedelta(days=1)),
        ]
        weights = [WeightRecord(cat_id=sample_cat.id, date=day, weight=5, unit="kg")]
        text = build_generator(weight_unit=WeightUnit.LBS).generate_text(
            sample_cat, health, weights
        )

        assert "Avg Health Score: 60%" in text
        assert "Latest Score: 20%" in text
        assert "Status Breakdown: Excellent: 1  |  Critical: 1" in text
        assert "Weight: Current 11.0 lbs" in text
        assert "Jan 16, 2024" in text
        assert "No eating, Low water, Diarrhea, Hidin..." in text
        # newest record listed first
        assert text.index("Jan 16, 2024") < text.index("Jan 15, 2024")

    def test_max_records(self, sample_cat, healthy_answers, day):
        health = [
            HealthRecord.from_answers(sample_cat.id, healthy_answers, day + timedelta(days=i))
            for i in range(5)
        ]
        data = build_generator(max_records=3).build(sample_cat, health, [])
        assert len(data["health_records"]) == 3
        assert data["health_records"][0]["date"] == "2024-01-19"
        assert data["health_summary"]["count"] == 3

    def test_json(self, sample_cat, healthy_answers, day):
        health = [HealthRecord.from_answers(sample_cat.id, healthy_answers, day)]
        data = json.loads(build_generator().generate_json(sample_cat, health, []))
        assert data["cat"]["name"] == "Mochi"
        assert data["health_records"][0]["observations"] == "All normal"
        assert data["weight_summary"] is None
