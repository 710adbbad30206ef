"""BAI2 Integrity: business-level validation for parsed BAI2 bank files.

The package does not parse raw BAI2 text. It receives the file -> group ->
account -> transaction tree produced by a parser and returns a consolidated
ValidationReport (see `bai2_integrity.validation`).
"""

__all__ = [
    "__version__",
    "validate",
    "ValidationPolicy",
    "ValidationReport",
]

__version__ = "0.1.0"

from .validation import ValidationPolicy, ValidationReport, validate  # noqa: E402
