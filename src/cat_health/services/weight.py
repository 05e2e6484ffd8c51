"""Weight goal evaluation."""

from dataclasses import dataclass

from ..models.weight import WeightGoal, WeightRecord, WeightStatus, WeightUnit
from ..utils.units import convert_weight, round_half_up


@dataclass(frozen=True)
class WeightEvaluation:
    """How the latest weight compares with the goal range.

    ``current_weight`` is expressed in the preferred unit, ``goal`` keeps
    its own unit. ``deviation`` is only set when out of range.
    """

    status: WeightStatus
    current_weight: float | None = None
    goal: WeightGoal | None = None
    deviation: float | None = None
    unit: WeightUnit | None = None

    @property
    def needs_attention(self) -> bool:
        return self.status in (WeightStatus.UNDERWEIGHT, WeightStatus.OVERWEIGHT)

    def goal_range(self) -> tuple[float, float] | None:
        """Goal bounds converted to the evaluation unit."""
        if self.goal is None:
            return None
        unit = self.unit or self.goal.unit
        return (
            convert_weight(self.goal.min_weight, self.goal.unit, unit),
            convert_weight(self.goal.max_weight, self.goal.unit, unit),
        )

    def describe(self) -> str:
        """One-line summary for alert banners."""
        if self.status == WeightStatus.NO_GOAL:
            return "No weight goal set."
        if self.status == WeightStatus.NO_WEIGHT:
            return "No weight logged yet."

        low, high = self.goal_range()
        unit = self.unit.value
        if self.status == WeightStatus.IN_RANGE:
            return (
                f"Weight on track: {self.current_weight} {unit} is within "
                f"the healthy range of {low} - {high} {unit}."
            )
        direction = "below" if self.status == WeightStatus.UNDERWEIGHT else "above"
        return (
            f"{self.current_weight} {unit} is {self.deviation} {unit} {direction} "
            f"the healthy range of {low} - {high} {unit}."
        )


def evaluate_weight(
    latest: WeightRecord | None,
    goal: WeightGoal | None,
    preferred_unit: WeightUnit | str = WeightUnit.KG,
) -> WeightEvaluation:
    """Classify the latest weight against the goal range.

    Both the weight and the goal bounds are converted to ``preferred_unit``
    before comparing. Bounds are inclusive.

    Args:
        latest: Most recent weight record, if any
        goal: Active weight goal, if any
        preferred_unit: Unit to compare and report in

    Returns:
        WeightEvaluation with status and, when applicable, deviation
    """
    unit = WeightUnit(preferred_unit)

    if goal is None:
        return WeightEvaluation(status=WeightStatus.NO_GOAL)
    if latest is None:
        return WeightEvaluation(status=WeightStatus.NO_WEIGHT, goal=goal, unit=unit)

    current = convert_weight(latest.weight, latest.unit, unit)
    min_weight = convert_weight(goal.min_weight, goal.unit, unit)
    max_weight = convert_weight(goal.max_weight, goal.unit, unit)

    if current < min_weight:
        return WeightEvaluation(
            status=WeightStatus.UNDERWEIGHT,
            current_weight=current,
            goal=goal,
            deviation=round_half_up(min_weight - current, 1),
            unit=unit,
        )
    if current > max_weight:
        return WeightEvaluation(
            status=WeightStatus.OVERWEIGHT,
            current_weight=current,
            goal=goal,
            deviation=round_half_up(current - max_weight, 1),
            unit=unit,
        )
    return WeightEvaluation(
        status=WeightStatus.IN_RANGE,
        current_weight=current,
        goal=goal,
        unit=unit,
    )
