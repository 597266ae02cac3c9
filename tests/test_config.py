"""Tests for configuration loading and saving."""

import pytest

from attendrecon.config import Config
from attendrecon.errors import ConfigError


def test_defaults():
    """Default column names match the usual attendance export."""
    config = Config()

    assert config.name_column == "Employee Name"
    assert config.date_column == "Date"
    assert config.in_time_column == "In-Time"
    assert config.out_time_column == "Out-Time"
    assert config.sheet_name == ""
    assert config.leave_allowance == 2


def test_save_and_load(tmp_path):
    """Test saving and reading back a config file."""
    path = tmp_path / "nested" / "config.ini"
    config = Config(
        name_column="Name",
        date_column="Day",
        in_time_column="In",
        out_time_column="Out",
        sheet_name="March",
        leave_allowance=3,
    )

    config.save(path)

    assert Config.load(path) == config


def test_load_missing_file(tmp_path):
    """A missing file gives None."""
    assert Config.load(tmp_path / "missing.ini") is None


def test_from_env(monkeypatch):
    """Test configuration from environment variables."""
    monkeypatch.setenv("ATTENDRECON_NAME_COLUMN", "Staff")
    monkeypatch.setenv("ATTENDRECON_DATE_COLUMN", "Day")
    monkeypatch.setenv("ATTENDRECON_IN_TIME_COLUMN", "Start")
    monkeypatch.setenv("ATTENDRECON_OUT_TIME_COLUMN", "End")
    monkeypatch.setenv("ATTENDRECON_LEAVE_ALLOWANCE", "4")

    config = Config.from_env()

    assert config == Config("Staff", "Day", "Start", "End", "", 4)


def test_from_env_incomplete(monkeypatch):
    """All column variables are required."""
    monkeypatch.setenv("ATTENDRECON_NAME_COLUMN", "Staff")
    monkeypatch.delenv("ATTENDRECON_DATE_COLUMN", raising=False)

    assert Config.from_env() is None


def test_resolve_falls_back_to_defaults(monkeypatch, tmp_path):
    """Without environment or file, defaults are used."""
    monkeypatch.delenv("ATTENDRECON_NAME_COLUMN", raising=False)

    assert Config.resolve(tmp_path / "missing.ini") == Config()


def set_column_env(monkeypatch):
    for name, value in (
        ("NAME", "Staff"),
        ("DATE", "Day"),
        ("IN_TIME", "Start"),
        ("OUT_TIME", "End"),
    ):
        monkeypatch.setenv(f"ATTENDRECON_{name}_COLUMN", value)


def test_from_env_bad_allowance(monkeypatch):
    """A non-numeric leave allowance in the environment is a configuration error."""
    set_column_env(monkeypatch)
    monkeypatch.setenv("ATTENDRECON_LEAVE_ALLOWANCE", "two")

    with pytest.raises(ConfigError, match="ATTENDRECON_LEAVE_ALLOWANCE"):
        Config.from_env()


def test_load_missing_columns_section(tmp_path):
    """A file without a [columns] section is a configuration error."""
    path = tmp_path / "config.ini"
    path.write_text("[report]\nleaveAllowance = 3\n")

    with pytest.raises(ConfigError, match="columns"):
        Config.load(path)


def test_load_missing_column_key(tmp_path):
    """Every column name is required in the file."""
    path = tmp_path / "config.ini"
    path.write_text("[columns]\nname = Staff\ndate = Day\ninTime = Start\n")

    with pytest.raises(ConfigError, match="outTime"):
        Config.load(path)


def test_load_bad_allowance(tmp_path):
    """A non-numeric leave allowance in the file is a configuration error."""
    path = tmp_path / "config.ini"
    path.write_text(
        "[columns]\nname = Staff\ndate = Day\ninTime = Start\noutTime = End\n"
        "[report]\nleaveAllowance = lots\n"
    )

    with pytest.raises(ConfigError, match="leaveAllowance"):
        Config.load(path)


def test_load_malformed_file(tmp_path):
    """A file that is not INI at all is a configuration error."""
    path = tmp_path / "config.ini"
    path.write_text("name = Staff\n")

    with pytest.raises(ConfigError):
        Config.load(path)
