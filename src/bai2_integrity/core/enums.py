"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class TransactionDirection(str, Enum):
    """Direction sub-field of a BAI2 transaction type code.

    Values are strings to ease serialization and comparison with parser output.
    """

    CREDIT = "credit"
    DEBIT = "debit"
    MISC = "misc"


class Severity(str, Enum):
    """Severity of a validation finding."""

    ERROR = "error"
    WARNING = "warning"


__all__ = ["TransactionDirection", "Severity"]
