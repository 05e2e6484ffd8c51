"""Weight tracking models."""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum


class WeightUnit(str, Enum):
    """Supported mass units."""

    KG = "kg"
    LBS = "lbs"


class WeightStatus(str, Enum):
    """Outcome of comparing the latest weight against a goal range."""

    NO_GOAL = "no-goal"
    NO_WEIGHT = "no-weight"
    IN_RANGE = "in-range"
    UNDERWEIGHT = "underweight"
    OVERWEIGHT = "overweight"


@dataclass
class WeightRecord:
    """A cat's weight on a given day (one per cat per day)."""

    cat_id: str
    date: date
    weight: float
    unit: WeightUnit = WeightUnit.KG

    def __post_init__(self):
        self.unit = WeightUnit(self.unit)
        if not math.isfinite(self.weight) or self.weight <= 0:
            raise ValueError(f"Weight must be positive, got {self.weight}")

    @property
    def day_key(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "cat_id": self.cat_id,
            "date": self.day_key,
            "weight": self.weight,
            "unit": self.unit.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeightRecord":
        """Create from dictionary."""
        return cls(
            cat_id=data["cat_id"],
            date=date.fromisoformat(data["date"]),
            weight=float(data["weight"]),
            unit=WeightUnit(data.get("unit", "kg")),
        )


@dataclass
class WeightGoal:
    """Healthy weight range for a cat. A cat has at most one active goal."""

    cat_id: str
    min_weight: float
    max_weight: float
    unit: WeightUnit = WeightUnit.KG

    def __post_init__(self):
        self.unit = WeightUnit(self.unit)
        if not all(math.isfinite(w) and w > 0 for w in (self.min_weight, self.max_weight)):
            raise ValueError("Goal weights must be positive")
        if self.min_weight >= self.max_weight:
            raise ValueError("Minimum weight must be less than maximum")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "cat_id": self.cat_id,
            "min_weight": self.min_weight,
            "max_weight": self.max_weight,
            "unit": self.unit.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeightGoal":
        """Create from dictionary."""
        return cls(
            cat_id=data["cat_id"],
            min_weight=float(data["min_weight"]),
            max_weight=float(data["max_weight"]),
            unit=WeightUnit(data.get("unit", "kg")),
        )
