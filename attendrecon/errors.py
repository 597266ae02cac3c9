"""Custom exceptions."""


class AttendReconError(Exception):
    """Base exception for attendrecon."""


class ConfigError(AttendReconError):
    """Raised when configuration values cannot be read."""


class UnsupportedFileError(AttendReconError):
    """Raised when an attendance file has an unsupported format."""


class SheetNotFoundError(AttendReconError):
    """Raised when the configured worksheet does not exist."""


class NoUsableRowsError(AttendReconError):
    """Raised when no row of an attendance file survives normalization."""
