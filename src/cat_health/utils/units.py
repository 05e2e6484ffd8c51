"""Weight unit conversion."""

import math

# 1 kg expressed in pounds
KG_TO_LBS = 2.20462


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ``ndigits`` decimals with .5 always rounding up.

    Python's built-in round() rounds half to even; scores and weights
    here use the usual "nearest, halves up" rule instead.
    """
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


def convert_weight(weight: float, from_unit: str, to_unit: str) -> float:
    """Convert a weight between kg and lbs, rounded to one decimal.

    Same-unit conversion returns the value untouched, without rounding.
    """
    if from_unit == to_unit:
        return weight
    if from_unit == "kg" and to_unit == "lbs":
        return round_half_up(weight * KG_TO_LBS, 1)
    return round_half_up(weight / KG_TO_LBS, 1)
