"""Readers turning attendance files into raw rows."""

import logging
from pathlib import Path

from attendrecon.config import Config
from attendrecon.errors import NoUsableRowsError, UnsupportedFileError
from attendrecon.models import PersonEntries, RawRow
from attendrecon.normalizer import normalize
from attendrecon.sources.html_table import read_html_rows
from attendrecon.sources.workbook import read_workbook_rows

logger = logging.getLogger(__name__)

WORKBOOK_SUFFIXES = (".xlsx",)
HTML_SUFFIXES = (".html", ".htm")


def read_rows(path: Path, config: Config | None = None) -> list[RawRow]:
    """Read raw rows from a file, choosing the reader by file suffix."""
    suffix = path.suffix.lower()
    if suffix in WORKBOOK_SUFFIXES:
        return read_workbook_rows(path, config)
    if suffix in HTML_SUFFIXES:
        return read_html_rows(path.read_text(encoding="utf-8"), config)
    msg = f"Unsupported attendance file {path.name!r}, expected .xlsx or .html"
    raise UnsupportedFileError(msg)


def load_attendance(path: Path, config: Config | None = None) -> dict[str, PersonEntries]:
    """Read and normalize an attendance file, failing if nothing usable was found."""
    grouping = normalize(read_rows(path, config))
    if not grouping:
        msg = f"No valid attendance records found in {path.name!r}"
        raise NoUsableRowsError(msg)
    return grouping


__all__ = [
    "load_attendance",
    "read_html_rows",
    "read_rows",
    "read_workbook_rows",
]
