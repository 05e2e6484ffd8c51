"""Tests for health scoring."""

import pytest

from cat_health.models.health import HealthAnswers, HealthStatus
from cat_health.services.scoring import (
    MAX_SCORE,
    SCORE_TABLE,
    calculate_health,
    score_for_answer,
    score_to_percentage,
    status_for_percentage,
)

EXPECTED_TABLE = {
    ("eating", "0"): 0,
    ("eating", "1"): 5,
    ("eating", "2-3"): 10,
    ("eating", "4+"): 8,
    ("water", "very-little"): 3,
    ("water", "normal"): 10,
    ("water", "a-lot"): 7,
    ("pee", "0-1"): 5,
    ("pee", "2-4"): 10,
    ("pee", "5+"): 6,
    ("poop", "normal"): 10,
    ("poop", "soft"): 6,
    ("poop", "diarrhea"): 2,
    ("poop", "no-poop"): 4,
    ("activity", "very-active"): 10,
    ("activity", "normal"): 10,
    ("activity", "lazy"): 5,
    ("activity", "hiding"): 2,
    ("mood", "playful"): 10,
    ("mood", "normal"): 10,
    ("mood", "aggressive"): 4,
    ("mood", "depressed"): 2,
    ("vomiting", "no"): 10,
    ("vomiting", "once"): 5,
    ("vomiting", "more-than-once"): 1,
    ("appetite", "normal"): 10,
    ("appetite", "less-than-usual"): 5,
    ("appetite", "refusing-food"): 1,
}


class TestScoreTable:
    """Tests for the per-answer point table."""

    @pytest.mark.parametrize("pair,points", sorted(EXPECTED_TABLE.items()))
    def test_every_code(self, pair, points):
        category, code = pair
        assert score_for_answer(category, code) == points

    def test_table_has_no_extra_codes(self):
        flattened = {
            (category, code)
            for category, codes in SCORE_TABLE.items()
            for code in codes
        }
        assert flattened == set(EXPECTED_TABLE)

    def test_categories_match_answers(self):
        assert list(SCORE_TABLE) == HealthAnswers.categories()

    def test_points_within_bounds(self):
        for codes in SCORE_TABLE.values():
            assert all(0 <= points <= 10 for points in codes.values())

    def test_unknown_code_scores_zero(self):
        assert score_for_answer("poop", "rainbow") == 0
        assert score_for_answer("eating", "") == 0

    def test_unknown_category_scores_zero(self):
        assert score_for_answer("grooming", "normal") == 0


class TestCalculateHealth:
    """Tests for calculate_health."""

    def test_perfect_answers(self, healthy_answers):
        result = calculate_health(healthy_answers)
        assert result.score == 80
        assert result.percentage == 100
        assert result.status == HealthStatus.EXCELLENT

    def test_all_zero(self):
        answers = HealthAnswers(**{c: "unknown" for c in HealthAnswers.categories()})
        result = calculate_health(answers)
        assert result.score == 0
        assert result.percentage == 0
        assert result.status == HealthStatus.CRITICAL

    def test_worst_real_answers(self, worst_answers):
        # 0 + 3 + 5 + 2 + 2 + 2 + 1 + 1
        result = calculate_health(worst_answers)
        assert result.score == 16
        assert result.percentage == 20
        assert result.status == HealthStatus.CRITICAL

    def test_mixed_answers(self, healthy_answers):
        healthy_answers.poop = "soft"  # 6
        healthy_answers.vomiting = "once"  # 5
        result = calculate_health(healthy_answers)
        assert result.score == 71
        assert result.percentage == 89  # 88.75
        assert result.status == HealthStatus.EXCELLENT

    def test_is_deterministic(self, worst_answers):
        assert calculate_health(worst_answers) == calculate_health(worst_answers)
        assert calculate_health(worst_answers).to_dict() == calculate_health(worst_answers).to_dict()

    def test_to_dict(self, healthy_answers):
        assert calculate_health(healthy_answers).to_dict() == {
            "score": 80,
            "percentage": 100,
            "status": "excellent",
        }


class TestPercentage:
    """Tests for the percentage and status tiers."""

    def test_denominator_is_fixed(self):
        assert MAX_SCORE == 80

    def test_half_rounds_up(self):
        # 2 / 80 = 2.5%
        assert score_to_percentage(2) == 3
        # 6 / 80 = 7.5%
        assert score_to_percentage(6) == 8

    def test_exact_division_avoids_float_artifacts(self):
        # 46 / 80 * 100 evaluates to 57.49999..., so the division order matters
        assert score_to_percentage(46) == 58

    def test_monotonic(self):
        percentages = [score_to_percentage(s) for s in range(0, 81)]
        assert percentages == sorted(percentages)

    @pytest.mark.parametrize(
        "percentage,status",
        [
            (100, HealthStatus.EXCELLENT),
            (85, HealthStatus.EXCELLENT),
            (84, HealthStatus.GOOD),
            (65, HealthStatus.GOOD),
            (64, HealthStatus.WARNING),
            (40, HealthStatus.WARNING),
            (39, HealthStatus.CRITICAL),
            (0, HealthStatus.CRITICAL),
        ],
    )
    def test_status_boundaries(self, percentage, status):
        assert status_for_percentage(percentage) == status
