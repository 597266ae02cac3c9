"""Monthly attendance reconciliation and productivity reporting."""

__version__ = "0.1.0"
