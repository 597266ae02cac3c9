"""Attendance rows from HTML table exports."""

import logging

from bs4 import BeautifulSoup, Tag

from attendrecon.config import Config
from attendrecon.models import RawRow

logger = logging.getLogger(__name__)


class TableHeader:
    """Header row of an attendance table."""

    def __init__(self, tag: Tag) -> None:
        self._column_indices: dict[str, int] = {
            " ".join(TableCell(column).text.split()): i
            for i, column in enumerate(tag.find_all(["th", "td"], recursive=False))
        }

    def get_column_index(self, column: str) -> int | None:
        """Index of a column, or None if the table does not have it."""
        return self._column_indices.get(column)

    def has_column(self, column: str) -> bool:
        """Check if a column exists."""
        return column in self._column_indices


class TableCell:
    """Single cell of an attendance table."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def text(self) -> str:
        """Get the text content of the cell."""
        return self._tag.get_text().strip()


class TableRow:
    """Body row of an attendance table."""

    def __init__(self, header: TableHeader, tag: Tag) -> None:
        self._header = header
        self._cells = [TableCell(cell) for cell in tag.find_all(["td", "th"], recursive=False)]

    def __getitem__(self, column: str) -> str | None:
        column_index = self._header.get_column_index(column)
        if column_index is None or column_index >= len(self._cells):
            return None
        return self._cells[column_index].text

    def to_raw_row(self, config: Config) -> RawRow:
        return RawRow(
            identity=self[config.name_column],
            date=self[config.date_column],
            in_time=self[config.in_time_column],
            out_time=self[config.out_time_column],
        )


def read_html_rows(text: str, config: Config | None = None) -> list[RawRow]:
    """Extract raw rows from the first table carrying the configured name column."""
    config = config or Config()
    soup = BeautifulSoup(text, "html.parser")

    for table in soup.find_all("table"):
        header_tag = table.find("tr")
        if not isinstance(header_tag, Tag):
            continue
        header = TableHeader(header_tag)
        if not header.has_column(config.name_column):
            continue

        rows = []
        for row_tag in header_tag.find_all_next("tr"):
            if row_tag.find_parent("table") is not table:
                continue
            rows.append(TableRow(header, row_tag).to_raw_row(config))
        logger.info("Read %d rows from HTML table", len(rows))
        return rows

    logger.warning("No table with a %r column found", config.name_column)
    return []
