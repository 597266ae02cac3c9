"""Weekly workload calendar."""

from calendar import monthrange
from collections.abc import Iterator
from datetime import date

from attendrecon.models import DayCategory

# Monday = 0 ... Sunday = 6
SATURDAY = 5
SUNDAY = 6

EXPECTED_HOURS = {
    DayCategory.ORDINARY: 8.5,
    DayCategory.REDUCED: 4.0,
    DayCategory.ZERO: 0.0,
}


def day_of_week(target_date: date) -> int:
    """Weekday number, Monday = 0 through Sunday = 6, whatever the locale."""
    return target_date.weekday()


def classify_day(target_date: date) -> DayCategory:
    """
    Classify a date by expected workload.

    Sunday is a zero-workload day, Saturday a reduced one, every other day
    is ordinary.
    """
    weekday = day_of_week(target_date)
    if weekday == SUNDAY:
        return DayCategory.ZERO
    if weekday == SATURDAY:
        return DayCategory.REDUCED
    return DayCategory.ORDINARY


def expected_hours(category: DayCategory) -> float:
    """Hours due on a day of the given category."""
    return EXPECTED_HOURS[category]


def days_in_month(year: int, month: int) -> int:
    _, last_day = monthrange(year, month)
    return last_day


def iter_month(year: int, month: int) -> Iterator[date]:
    """Every date of the month, in order."""
    for day in range(1, days_in_month(year, month) + 1):
        yield date(year, month, day)
