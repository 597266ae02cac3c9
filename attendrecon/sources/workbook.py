"""Attendance rows from Excel workbooks."""

import logging
from datetime import datetime, time, timedelta
from pathlib import Path

from openpyxl import load_workbook

from attendrecon.config import Config
from attendrecon.errors import SheetNotFoundError
from attendrecon.models import RawRow

logger = logging.getLogger(__name__)


def _header_key(value: object) -> str:
    return " ".join(str(value or "").split())


def _time_cell(value: object) -> str | None:
    """Render a time column cell as a clock-time token."""
    if value is None:
        return None
    if isinstance(value, (datetime, time)):
        return value.strftime("%H:%M")
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) // 60
        return f"{minutes // 60:02}:{minutes % 60:02}"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _identity_cell(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def read_workbook_rows(path: Path, config: Config | None = None) -> list[RawRow]:
    """
    Extract raw rows from an ``.xlsx`` workbook.

    The first row of the sheet is the header; columns are located by the
    names in the configuration. Date cells are passed through untouched
    (dates, serial numbers or text), time cells are rendered as ``HH:MM``
    when the workbook stores them as times.
    """
    config = config or Config()
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        if config.sheet_name:
            if config.sheet_name not in workbook.sheetnames:
                msg = f"Sheet {config.sheet_name!r} not found in {path}"
                raise SheetNotFoundError(msg)
            worksheet = workbook[config.sheet_name]
        else:
            worksheet = workbook.worksheets[0]

        row_iter = worksheet.iter_rows(values_only=True)
        header_row = next(row_iter, None)
        if header_row is None:
            logger.warning("Sheet %s of %s is empty", worksheet.title, path)
            return []

        columns = {_header_key(value): i for i, value in enumerate(header_row)}
        logger.debug("Header columns of %s: %s", path, list(columns))

        def cell(values: tuple, column: str) -> object:
            index = columns.get(column)
            if index is None or index >= len(values):
                return None
            return values[index]

        rows = []
        for values in row_iter:
            if all(value is None for value in values):
                continue
            rows.append(
                RawRow(
                    identity=_identity_cell(cell(values, config.name_column)),
                    date=cell(values, config.date_column),
                    in_time=_time_cell(cell(values, config.in_time_column)),
                    out_time=_time_cell(cell(values, config.out_time_column)),
                )
            )
    finally:
        workbook.close()

    logger.info("Read %d rows from %s", len(rows), path)
    return rows
