"""Normalization of raw attendance rows into canonical entries."""

import logging
from collections.abc import Iterable

from attendrecon.dates import parse_date_token
from attendrecon.models import CanonicalEntry, PersonEntries, RawRow

logger = logging.getLogger(__name__)


def person_key(name: str) -> str:
    """Canonical matching key for a person: case-folded, whitespace joined by '_'."""
    return "_".join(name.casefold().split())


def _clean_time(token: object) -> str | None:
    if token is None:
        return None
    text = str(token).strip()
    return text or None


def normalize(raw_rows: Iterable[RawRow]) -> dict[str, PersonEntries]:
    """
    Turn raw rows into canonical entries grouped by person.

    Rows without an identity or with an unreadable date are skipped. When
    several rows land on the same person and date, the last one wins.
    People keep the order in which they first appear.
    """
    grouping: dict[str, PersonEntries] = {}
    total = 0
    dropped = 0

    for index, row in enumerate(raw_rows):
        total += 1
        display_name = str(row.identity).strip() if row.identity is not None else ""
        if not display_name:
            logger.debug("Dropping row %d: no identity", index)
            dropped += 1
            continue

        entry_date = parse_date_token(row.date)
        if entry_date is None:
            logger.debug("Dropping row %d: unreadable date %r", index, row.date)
            dropped += 1
            continue

        key = person_key(display_name)
        entry = CanonicalEntry(
            person=key,
            display_name=display_name,
            date=entry_date,
            in_time=_clean_time(row.in_time),
            out_time=_clean_time(row.out_time),
        )

        person = grouping.get(key)
        if person is None:
            person = grouping[key] = PersonEntries(key=key, display_name=display_name)
        elif entry_date in person.by_date:
            logger.debug("Row %d replaces earlier entry for %s on %s", index, key, entry_date)
        person.put(entry)

    logger.info(
        "Normalized %d of %d rows for %d people", total - dropped, total, len(grouping)
    )
    return grouping


def list_people(grouping: dict[str, PersonEntries]) -> list[PersonEntries]:
    """People of a grouping sorted by display name."""
    return sorted(grouping.values(), key=lambda person: person.display_name.casefold())
