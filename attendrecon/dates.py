"""Date decoding for spreadsheet cells."""

import math
from datetime import date, datetime, timedelta

# 1900 date system: serial 1 is 1900-01-01 and serial 60 is the
# non-existent 1900-02-29 inherited from Lotus 1-2-3.
SERIAL_EPOCH = date(1899, 12, 31)
SERIAL_EPOCH_AFTER_LEAP_BUG = date(1899, 12, 30)
SERIAL_LEAP_BUG = 60
SERIAL_MAX = 2958465  # 9999-12-31

TEXT_DATE_FORMATS = ("%m/%d/%Y", "%m/%d/%y")


def decode_serial_date(serial: float) -> date | None:
    """
    Decode a 1900 date-system serial number into a calendar date.

    The time-of-day fraction is discarded. Serial 60 (1900-02-29, which never
    existed) rolls over to 1900-03-01 so that every later serial keeps its
    spreadsheet meaning. Out-of-range serials give None.
    """
    if math.isnan(serial) or serial < 0 or serial > SERIAL_MAX:
        return None
    days = math.floor(serial)
    if days < SERIAL_LEAP_BUG:
        return SERIAL_EPOCH + timedelta(days=days)
    if days == SERIAL_LEAP_BUG:
        return date(1900, 3, 1)
    return SERIAL_EPOCH_AFTER_LEAP_BUG + timedelta(days=days)


def _parse_date_text(text: str) -> date | None:
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in TEXT_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_date_token(token: object) -> date | None:
    """
    Decode the date cell of a raw row.

    Accepts date/datetime objects, serial numbers and ISO or ``M/D/YYYY``
    text. Returns None when the token cannot be read as a date.
    """
    if token is None or isinstance(token, bool):
        return None
    if isinstance(token, datetime):
        return token.date()
    if isinstance(token, date):
        return token
    if isinstance(token, (int, float)):
        return decode_serial_date(token)
    if isinstance(token, str):
        return _parse_date_text(token)
    return None
