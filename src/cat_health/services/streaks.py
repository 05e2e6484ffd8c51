"""Daily check-in streaks."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

ON_FIRE_DAYS = 3


@dataclass(frozen=True)
class StreakSummary:
    """Current and longest run of consecutive check-in days."""

    current: int
    longest: int
    checked_today: bool

    @property
    def is_on_fire(self) -> bool:
        return self.current >= ON_FIRE_DAYS

    @property
    def is_personal_best(self) -> bool:
        return self.current > 1 and self.current == self.longest

    @property
    def at_risk(self) -> bool:
        """True when the streak ends unless today gets a check-in."""
        return not self.checked_today and self.current > 0


def _as_date(value: date | str) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def calculate_streak(
    record_dates: Iterable[date | str], today: date | str | None = None
) -> StreakSummary:
    """Compute check-in streaks from the days that have a record.

    Args:
        record_dates: Days with a health record, as dates or ISO day keys.
            Duplicates count once.
        today: Reference day, defaults to the local calendar date

    Returns:
        StreakSummary with current streak, longest streak and whether
        today has been checked
    """
    today = _as_date(today) if today is not None else date.today()
    days = {_as_date(d) for d in record_dates}
    if not days:
        return StreakSummary(current=0, longest=0, checked_today=False)

    checked_today = today in days

    # Current streak: walk backwards from today (or yesterday)
    current = 0
    expected = today if checked_today else today - timedelta(days=1)
    for day in sorted(days, reverse=True):
        if day == expected:
            current += 1
            expected -= timedelta(days=1)
        elif day < expected:
            break

    # Longest streak: scan ascending, runs broken by any gap other than 1 day
    ordered = sorted(days)
    longest = 0
    run = 1
    for previous, day in zip(ordered, ordered[1:]):
        if (day - previous).days == 1:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
    longest = max(longest, run)

    return StreakSummary(current=current, longest=longest, checked_today=checked_today)
