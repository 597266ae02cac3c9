"""Main entry point for attendrecon."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from attendrecon.calculator import build_reports
from attendrecon.config import DEFAULT_CONFIG_PATH, Config
from attendrecon.errors import AttendReconError, ConfigError
from attendrecon.models import MonthlyReport, NoData
from attendrecon.normalizer import list_people, person_key
from attendrecon.sources import load_attendance

logger = logging.getLogger("attendrecon")


def configure() -> None:
    """Interactive configuration setup."""
    defaults = Config.resolve()
    sys.stdout.write("attendrecon configuration\n")
    sys.stdout.write("=" * 40 + "\n")

    def ask(label: str, default: str) -> str:
        return input(f"{label} [{default}]: ").strip() or default

    config = Config(
        name_column=ask("Name column", defaults.name_column),
        date_column=ask("Date column", defaults.date_column),
        in_time_column=ask("In-time column", defaults.in_time_column),
        out_time_column=ask("Out-time column", defaults.out_time_column),
        sheet_name=input("Sheet name (blank for the first sheet): ").strip(),
        leave_allowance=_ask_allowance(ask, defaults.leave_allowance),
    )
    config.save()
    sys.stdout.write("\nConfiguration saved.\n")
    sys.stdout.write(f"Config file: {DEFAULT_CONFIG_PATH}\n")


def _ask_allowance(ask, default: int) -> int:
    answer = ask("Monthly leave allowance", str(default))
    try:
        return int(answer)
    except ValueError as e:
        msg = f"Monthly leave allowance must be a whole number, got {answer!r}"
        raise ConfigError(msg) from e


def _fmt_hours(hours: float) -> str:
    total_minutes = round(hours * 60)
    return f"{total_minutes // 60}h {total_minutes % 60:02d}m"


def _summary_table(reports: list[MonthlyReport]) -> Table:
    table = Table(title="Monthly attendance")
    for column in (
        "Name",
        "Expected",
        "Actual",
        "Absences",
        "Leaves left",
        "Productivity",
        "Rating",
    ):
        table.add_column(column)
    for report in reports:
        table.add_row(
            report.display_name,
            _fmt_hours(report.total_expected_hours),
            _fmt_hours(report.total_actual_hours),
            str(report.absence_count),
            str(report.leaves_remaining),
            f"{report.productivity_percent:.2f}%",
            report.rating.value,
        )
    return table


def _daily_table(report: MonthlyReport) -> Table:
    table = Table(title=f"{report.display_name} - {report.year}/{report.month:02d}")
    for column in ("Date", "Day", "In", "Out", "Expected", "Actual", "Status"):
        table.add_column(column)
    for day in report.days:
        table.add_row(
            day.date.strftime("%m/%d"),
            day.day_category.value,
            day.in_time or "--",
            day.out_time or "--",
            _fmt_hours(day.expected_hours),
            _fmt_hours(day.actual_hours),
            day.status.value,
        )
    return table


def report(args: argparse.Namespace, console: Console) -> int:
    """Print the monthly report of an attendance file."""
    config = Config.resolve()
    grouping = load_attendance(args.file, config)

    if args.person:
        key = person_key(args.person)
        if key not in grouping:
            console.print(f"No attendance records for {args.person!r}")
            return 1
        grouping = {key: grouping[key]}

    results = build_reports(grouping, args.year, args.month, config.leave_allowance)
    reports = []
    for person in list_people(grouping):
        result = results[person.key]
        if isinstance(result, NoData):
            console.print(
                f"No attendance data for {person.display_name} in {args.year}/{args.month:02d}"
            )
            continue
        reports.append(result)

    if reports:
        console.print(_summary_table(reports))
    if args.person and reports:
        console.print(_daily_table(reports[0]))
    return 0


def build_parser() -> argparse.ArgumentParser:
    today = date.today()
    parser = argparse.ArgumentParser(prog="attendrecon", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("config", help="interactive configuration")

    report_parser = subparsers.add_parser("report", help="monthly report of an attendance file")
    report_parser.add_argument("file", type=Path, help=".xlsx or .html attendance file")
    report_parser.add_argument("--person", help="only report on this person")
    report_parser.add_argument(
        "--month", type=int, choices=range(1, 13), default=today.month, metavar="1-12"
    )
    report_parser.add_argument("--year", type=int, default=today.year)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )

    console = Console()
    try:
        if args.command == "config":
            configure()
            return 0
        return report(args, console)
    except (AttendReconError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
