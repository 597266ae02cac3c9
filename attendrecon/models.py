"""Data models for attendance entries and monthly reports."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from attendrecon.config import DEFAULT_LEAVE_ALLOWANCE


class DayCategory(str, Enum):
    """Expected workload of a calendar day."""

    ORDINARY = "ordinary"
    REDUCED = "reduced"
    ZERO = "zero"


class DayStatus(str, Enum):
    """How the actual hours of a reconciled day were obtained."""

    WORKED = "worked"
    DEGRADED = "degraded"  # times recorded but unreadable, counted as 0h
    ABSENT = "absent"
    REST = "rest"  # zero-workload day


class ProductivityRating(str, Enum):
    """Coarse productivity band."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs improvement"


EXCELLENT_THRESHOLD = 90.0
GOOD_THRESHOLD = 75.0


@dataclass
class RawRow:
    """A row as extracted from an attendance file. Nothing is validated."""

    identity: str | None
    date: str | int | float | date | datetime | None
    in_time: str | None = None
    out_time: str | None = None


@dataclass(frozen=True)
class CanonicalEntry:
    """One person's attendance for one calendar date."""

    person: str
    display_name: str
    date: date
    in_time: str | None
    out_time: str | None

    @property
    def is_absent(self) -> bool:
        """An entry missing either clock time counts as an absence."""
        return self.in_time is None or self.out_time is None


@dataclass
class PersonEntries:
    """Entries of a single person in the order last written, at most one per date."""

    key: str
    display_name: str
    by_date: dict[date, CanonicalEntry] = field(default_factory=dict)

    def put(self, entry: CanonicalEntry) -> None:
        """Add an entry, replacing any earlier entry for the same date."""
        # Re-inserted so that the latest row is always last
        self.by_date.pop(entry.date, None)
        self.by_date[entry.date] = entry
        self.display_name = entry.display_name

    def get(self, target_date: date) -> CanonicalEntry | None:
        return self.by_date.get(target_date)

    def __iter__(self):
        return iter(self.by_date.values())

    def __len__(self) -> int:
        return len(self.by_date)


@dataclass(frozen=True)
class DailyOutcome:
    """Reconciled record for a single day of the reported month."""

    date: date
    day_category: DayCategory
    expected_hours: float
    actual_hours: float
    status: DayStatus
    in_time: str | None = None
    out_time: str | None = None

    @property
    def is_absent(self) -> bool:
        """Whether this day counts as an absence."""
        return self.status == DayStatus.ABSENT


@dataclass(frozen=True)
class MonthlyReport:
    """Aggregated attendance of one person over one month."""

    person: str
    display_name: str
    year: int
    month: int
    total_expected_hours: float
    total_actual_hours: float
    absence_count: int
    productivity_percent: float
    days: tuple[DailyOutcome, ...]
    leave_allowance: int = DEFAULT_LEAVE_ALLOWANCE

    @property
    def leaves_remaining(self) -> int:
        """Leave allowance left this month (negative when exceeded)."""
        return self.leave_allowance - self.absence_count

    @property
    def rating(self) -> ProductivityRating:
        """Productivity band for the month."""
        if self.productivity_percent >= EXCELLENT_THRESHOLD:
            return ProductivityRating.EXCELLENT
        if self.productivity_percent >= GOOD_THRESHOLD:
            return ProductivityRating.GOOD
        return ProductivityRating.NEEDS_IMPROVEMENT


@dataclass(frozen=True)
class NoData:
    """Returned instead of a report when a person has no entries at all."""

    person: str
    year: int
    month: int
