"""Monthly reconciliation and productivity calculation."""

from collections.abc import Iterable, Sequence
from datetime import date

from attendrecon.config import DEFAULT_LEAVE_ALLOWANCE
from attendrecon.duration import compute_worked_hours, parse_clock_time
from attendrecon.models import (
    CanonicalEntry,
    DailyOutcome,
    DayCategory,
    DayStatus,
    MonthlyReport,
    NoData,
    PersonEntries,
)
from attendrecon.workdays import classify_day, expected_hours, iter_month


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        msg = f"Month must be between 1 and 12, got {month}"
        raise ValueError(msg)


def _reconcile_day(target_date: date, entry: CanonicalEntry | None) -> DailyOutcome:
    """Build the outcome of a single day from its entry, if any."""
    category = classify_day(target_date)

    # Nothing is due on zero-workload days; whatever was logged is ignored
    if category == DayCategory.ZERO:
        return DailyOutcome(
            date=target_date,
            day_category=category,
            expected_hours=0.0,
            actual_hours=0.0,
            status=DayStatus.REST,
        )

    expected = expected_hours(category)

    # Missing attendance counts as an absence
    if entry is None or entry.is_absent:
        return DailyOutcome(
            date=target_date,
            day_category=category,
            expected_hours=expected,
            actual_hours=0.0,
            status=DayStatus.ABSENT,
        )

    readable = (
        parse_clock_time(entry.in_time) is not None
        and parse_clock_time(entry.out_time) is not None
    )
    return DailyOutcome(
        date=target_date,
        day_category=category,
        expected_hours=expected,
        actual_hours=compute_worked_hours(entry.in_time, entry.out_time),
        status=DayStatus.WORKED if readable else DayStatus.DEGRADED,
        in_time=entry.in_time,
        out_time=entry.out_time,
    )


def reconcile(
    entries: Iterable[CanonicalEntry], *, year: int, month: int
) -> list[DailyOutcome]:
    """
    Produce one outcome per calendar day of the month.

    Entries outside the month are ignored. If the same date appears more
    than once, the last entry is used.
    """
    _check_month(month)
    entry_by_date = {entry.date: entry for entry in entries}
    return [
        _reconcile_day(target_date, entry_by_date.get(target_date))
        for target_date in iter_month(year, month)
    ]


def aggregate(
    outcomes: Sequence[DailyOutcome],
    person: str,
    display_name: str,
    year: int,
    month: int,
    leave_allowance: int = DEFAULT_LEAVE_ALLOWANCE,
) -> MonthlyReport:
    """
    Sum reconciled days into a monthly report.

    Productivity is actual over expected hours as a percentage rounded to two
    decimals, or 0 when no hours are expected.
    """
    total_expected_hours = sum(
        outcome.expected_hours
        for outcome in outcomes
        if outcome.day_category != DayCategory.ZERO
    )
    total_actual_hours = sum(outcome.actual_hours for outcome in outcomes)
    absence_count = sum(1 for outcome in outcomes if outcome.is_absent)

    if total_expected_hours > 0:
        productivity_percent = round(100 * total_actual_hours / total_expected_hours, 2)
    else:
        productivity_percent = 0.0

    return MonthlyReport(
        person=person,
        display_name=display_name,
        year=year,
        month=month,
        total_expected_hours=total_expected_hours,
        total_actual_hours=total_actual_hours,
        absence_count=absence_count,
        productivity_percent=productivity_percent,
        days=tuple(sorted(outcomes, key=lambda outcome: outcome.date)),
        leave_allowance=leave_allowance,
    )


def build_monthly_report(
    entries: Iterable[CanonicalEntry],
    *,
    year: int,
    month: int,
    person: str = "",
    display_name: str = "",
    leave_allowance: int = DEFAULT_LEAVE_ALLOWANCE,
) -> MonthlyReport | NoData:
    """
    Reconcile and aggregate one person's entries for a month.

    Returns NoData when there are no entries at all. Entries that exist but
    produce nothing but absences still give a full report. The display name
    defaults to the one of the last entry.
    """
    _check_month(month)
    entries = list(entries)
    if not entries:
        return NoData(person=person, year=year, month=month)

    latest = entries[-1]
    outcomes = reconcile(entries, year=year, month=month)
    return aggregate(
        outcomes,
        person=person or latest.person,
        display_name=display_name or latest.display_name,
        year=year,
        month=month,
        leave_allowance=leave_allowance,
    )


def entries_for_month(
    entries: Iterable[CanonicalEntry], year: int, month: int
) -> list[CanonicalEntry]:
    """Entries dated within the given month, in their original order."""
    return [entry for entry in entries if entry.date.year == year and entry.date.month == month]


def build_reports(
    grouping: dict[str, PersonEntries],
    year: int,
    month: int,
    leave_allowance: int = DEFAULT_LEAVE_ALLOWANCE,
) -> dict[str, MonthlyReport | NoData]:
    """
    Report on every person of a grouping for one month.

    Only the entries of the requested month are considered, so a person
    without any entry that month gets NoData.
    """
    return {
        key: build_monthly_report(
            entries_for_month(person_entries, year, month),
            year=year,
            month=month,
            person=key,
            display_name=person_entries.display_name,
            leave_allowance=leave_allowance,
        )
        for key, person_entries in grouping.items()
    }
