"""Tests for weight goal evaluation."""

from datetime import date

import pytest

from cat_health.models.weight import WeightGoal, WeightRecord, WeightStatus, WeightUnit
from cat_health.services.weight import evaluate_weight


def make_weight(value, unit="kg"):
    return WeightRecord(cat_id="cat", date=date(2024, 1, 15), weight=value, unit=unit)


@pytest.fixture
def goal():
    return WeightGoal(cat_id="cat", min_weight=3.5, max_weight=5.5, unit=WeightUnit.KG)


class TestEvaluateWeight:
    """Tests for evaluate_weight."""

    def test_no_goal(self):
        result = evaluate_weight(make_weight(4.0), None, "kg")
        assert result.status == WeightStatus.NO_GOAL
        assert result.current_weight is None
        assert result.deviation is None

    def test_no_goal_wins_over_no_weight(self):
        assert evaluate_weight(None, None).status == WeightStatus.NO_GOAL

    def test_no_weight(self, goal):
        result = evaluate_weight(None, goal, "kg")
        assert result.status == WeightStatus.NO_WEIGHT
        assert result.goal == goal

    def test_underweight(self, goal):
        result = evaluate_weight(make_weight(3.0), goal, "kg")
        assert result.status == WeightStatus.UNDERWEIGHT
        assert result.deviation == 0.5
        assert result.current_weight == 3.0
        assert result.needs_attention

    def test_upper_bound_is_in_range(self, goal):
        result = evaluate_weight(make_weight(5.5), goal, "kg")
        assert result.status == WeightStatus.IN_RANGE
        assert result.deviation is None

    def test_lower_bound_is_in_range(self, goal):
        assert evaluate_weight(make_weight(3.5), goal, "kg").status == WeightStatus.IN_RANGE

    def test_overweight(self, goal):
        result = evaluate_weight(make_weight(6.0), goal, "kg")
        assert result.status == WeightStatus.OVERWEIGHT
        assert result.deviation == 0.5

    def test_converts_to_preferred_unit(self, goal):
        # 13.5 lbs vs goal 7.7 - 12.1 lbs
        result = evaluate_weight(make_weight(13.5, "lbs"), goal, "lbs")
        assert result.status == WeightStatus.OVERWEIGHT
        assert result.current_weight == 13.5
        assert result.deviation == 1.4
        assert result.unit == WeightUnit.LBS
        assert result.goal.unit == WeightUnit.KG

    def test_mixed_units_in_kg(self, goal):
        # 9.0 lbs -> 4.1 kg
        result = evaluate_weight(make_weight(9.0, "lbs"), goal, "kg")
        assert result.status == WeightStatus.IN_RANGE
        assert result.current_weight == 4.1

    def test_goal_range(self, goal):
        result = evaluate_weight(make_weight(4.0), goal, "lbs")
        assert result.goal_range() == (7.7, 12.1)

    def test_describe(self, goal):
        assert "within the healthy range of 3.5 - 5.5 kg" in evaluate_weight(
            make_weight(4.0), goal, "kg"
        ).describe()
        assert "0.5 kg below" in evaluate_weight(make_weight(3.0), goal, "kg").describe()
        assert evaluate_weight(None, None).describe() == "No weight goal set."
