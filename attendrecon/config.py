"""Configuration management."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from attendrecon.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "attendrecon" / "config.ini"

DEFAULT_LEAVE_ALLOWANCE = 2


@dataclass
class Config:
    """Spreadsheet layout and reporting configuration."""

    name_column: str = "Employee Name"
    date_column: str = "Date"
    in_time_column: str = "In-Time"
    out_time_column: str = "Out-Time"
    sheet_name: str = ""
    leave_allowance: int = DEFAULT_LEAVE_ALLOWANCE

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            return cls(
                name_column=os.environ["ATTENDRECON_NAME_COLUMN"],
                date_column=os.environ["ATTENDRECON_DATE_COLUMN"],
                in_time_column=os.environ["ATTENDRECON_IN_TIME_COLUMN"],
                out_time_column=os.environ["ATTENDRECON_OUT_TIME_COLUMN"],
                sheet_name=os.environ.get("ATTENDRECON_SHEET_NAME", ""),
                leave_allowance=_allowance(
                    os.environ.get("ATTENDRECON_LEAVE_ALLOWANCE", DEFAULT_LEAVE_ALLOWANCE),
                    "ATTENDRECON_LEAVE_ALLOWANCE",
                ),
            )
        except KeyError:
            return None

    @classmethod
    def load(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config | None":
        """Load configuration from file."""
        if not path.is_file():
            return None

        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(path)
            columns = config["columns"]
            report = config["report"] if config.has_section("report") else {}
            return cls(
                name_column=columns["name"],
                date_column=columns["date"],
                in_time_column=columns["inTime"],
                out_time_column=columns["outTime"],
                sheet_name=columns.get("sheet", ""),
                leave_allowance=_allowance(
                    report.get("leaveAllowance", DEFAULT_LEAVE_ALLOWANCE),
                    f"leaveAllowance in {path}",
                ),
            )
        except KeyError as e:
            msg = f"Missing {e} in {path}"
            raise ConfigError(msg) from e
        except configparser.Error as e:
            msg = f"Cannot read {path}: {e}"
            raise ConfigError(msg) from e

    @classmethod
    def resolve(cls, path: Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Environment first, then the config file, then built-in defaults."""
        return cls.from_env() or cls.load(path) or cls()

    def save(self, path: Path = DEFAULT_CONFIG_PATH) -> None:
        """Save configuration to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        config = configparser.ConfigParser(interpolation=None)
        config["columns"] = {
            "name": self.name_column,
            "date": self.date_column,
            "inTime": self.in_time_column,
            "outTime": self.out_time_column,
            "sheet": self.sheet_name,
        }
        config["report"] = {"leaveAllowance": str(self.leave_allowance)}
        with path.open("w") as config_file:
            config.write(config_file)


def _allowance(value: object, source: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        msg = f"{source} must be a whole number, got {value!r}"
        raise ConfigError(msg) from e
