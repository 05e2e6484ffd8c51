"""Tests for weight unit conversion."""

import pytest

from cat_health.utils.units import convert_weight, round_half_up


class TestConvertWeight:
    """Tests for convert_weight."""

    @pytest.mark.parametrize("value", [0.1, 3.333, 4.25, 12.0])
    def test_same_unit_is_exact(self, value):
        assert convert_weight(value, "kg", "kg") == value
        assert convert_weight(value, "lbs", "lbs") == value

    def test_kg_to_lbs(self):
        # 5 * 2.20462 = 11.0231
        assert convert_weight(5, "kg", "lbs") == 11.0

    def test_lbs_to_kg(self):
        # 11 / 2.20462 = 4.9895...
        assert convert_weight(11, "lbs", "kg") == 5.0

    def test_rounds_to_one_decimal(self):
        assert convert_weight(4.2, "kg", "lbs") == 9.3

    @pytest.mark.parametrize("value", [2.0, 3.7, 4.4, 6.15, 9.9])
    def test_round_trip_is_close(self, value):
        there = convert_weight(value, "kg", "lbs")
        back = convert_weight(there, "lbs", "kg")
        assert back == pytest.approx(value, abs=0.1)

    def test_accepts_enum_units(self):
        from cat_health.models.weight import WeightUnit

        assert convert_weight(5, WeightUnit.KG, WeightUnit.LBS) == 11.0


class TestRoundHalfUp:
    """Halves round up, unlike the built-in round()."""

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round(2.5) == 2  # banker's rounding, for contrast

    def test_one_decimal(self):
        assert round_half_up(0.25, 1) == 0.3
        assert round_half_up(1.04, 1) == 1.0
