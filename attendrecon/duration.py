"""Clock-time parsing and worked-hour durations."""

MINUTES_PER_HOUR = 60


class Duration:
    """Represents a duration in minutes."""

    @classmethod
    def from_clock(cls, hours: int, minutes: int) -> "Duration":
        """Build the time elapsed since midnight for a wall-clock reading."""
        return cls(MINUTES_PER_HOUR * hours + minutes)

    def __init__(self, minutes: int = 0) -> None:
        self.minutes: int = minutes

    @property
    def hours(self) -> float:
        """Duration expressed in (fractional) hours."""
        return self.minutes / float(MINUTES_PER_HOUR)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minutes == other.minutes

    def __sub__(self, other: "Duration") -> "Duration":
        return Duration(self.minutes - other.minutes)

    def __lt__(self, other: "Duration") -> bool:
        return self.minutes < other.minutes


def _to_int(part: str) -> int | None:
    part = part.strip()
    if not part or not (part.isascii() and part.isdigit()):
        return None
    return int(part)


def parse_clock_time(token: str | None) -> Duration | None:
    """
    Parse a check-in/check-out token into the time since midnight.

    Accepted layouts, tried in order:
    - ``H:MM`` / ``HH:MM`` (anything after a second colon is ignored)
    - ``HHMM`` (exactly four digits)
    - ``HMM`` (exactly three digits)

    Returns None for blank tokens, any other shape and non-digit parts.
    Never raises.
    """
    if token is None:
        return None
    clean = token.strip()
    if not clean:
        return None

    if ":" in clean:
        parts = clean.split(":")
        hours, minutes = _to_int(parts[0]), _to_int(parts[1])
    elif len(clean) == 4:
        hours, minutes = _to_int(clean[:2]), _to_int(clean[2:])
    elif len(clean) == 3:
        hours, minutes = _to_int(clean[:1]), _to_int(clean[1:])
    else:
        return None

    if hours is None or minutes is None:
        return None
    return Duration.from_clock(hours, minutes)


def compute_worked_hours(in_token: str | None, out_token: str | None) -> float:
    """
    Hours elapsed between a check-in and a check-out token.

    Unparseable tokens count as missing and give 0. An out-time earlier than
    the in-time gives 0 (no midnight crossing).
    """
    clock_in = parse_clock_time(in_token)
    clock_out = parse_clock_time(out_token)
    if clock_in is None or clock_out is None:
        return 0.0

    worked = clock_out - clock_in
    if worked < Duration(0):
        return 0.0
    return worked.hours
