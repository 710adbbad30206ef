"""Validation data models.

This module defines the single result accumulator of a validation run:
- ValidationReport: errors, warnings, metrics and recommendations for one file
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bai2_integrity.core.enums import Severity


@dataclass
class ValidationReport:
    """Consolidated validation results for a parsed BAI2 file.

    Stages append to the report in pipeline order. The report is created empty
    for every ``validate()`` call and belongs to the caller once returned.

    Attributes:
        errors: Structural defects; any entry makes the report invalid.
        warnings: Advisory business and data-quality findings.
        metrics: Aggregate counts and sums (see MetricsCheck).
        recommendations: Suggestions derived from findings and metrics.
        failed_stage: Id of the stage whose unexpected fault stopped the run.

    Examples:
        >>> report = ValidationReport()
        >>> report.add_warning("Group 1, Account 1: No transactions found")
        >>> report.valid
        True
        >>> report.add_error("File contains no groups")
        >>> report.valid
        False
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, int] = field(default_factory=dict)
    recommendations: List[str] = field(default_factory=list)
    failed_stage: Optional[str] = None

    @property
    def valid(self) -> bool:
        """True iff no errors were recorded."""
        return not self.errors

    def add(self, severity: Severity, message: str) -> None:
        """Append a finding to the list matching its severity."""
        if severity == Severity.ERROR:
            self.errors.append(message)
        elif severity == Severity.WARNING:
            self.warnings.append(message)
        else:
            raise ValueError(f"Invalid severity: {severity}. Must be 'error' or 'warning'.")

    def add_error(self, message: str) -> None:
        self.add(Severity.ERROR, message)

    def add_warning(self, message: str) -> None:
        self.add(Severity.WARNING, message)

    def add_recommendation(self, message: str) -> None:
        self.recommendations.append(message)

    def record_fault(self, stage_id: str, exc: BaseException) -> None:
        """Record an unexpected fault that stopped the pipeline at ``stage_id``."""
        self.failed_stage = stage_id
        self.add_error(f"Validation failed: {exc}")

    def has_warning_containing(self, text: str) -> bool:
        """Check if any warning contains ``text`` (case-sensitive)."""
        return any(text in w for w in self.warnings)

    def summary(self) -> str:
        """Generate a one-line text summary of the report.

        Examples:
            >>> ValidationReport().summary()
            'VALID: 0 errors, 0 warnings, 0 recommendations, 0 transactions'
        """
        status = "VALID" if self.valid else "INVALID"
        return (
            f"{status}: {len(self.errors)} errors, {len(self.warnings)} warnings, "
            f"{len(self.recommendations)} recommendations, "
            f"{self.metrics.get('transactions', 0)} transactions"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-data snapshot of the report.

        Lists and metrics are copied, so later changes to the report do not
        leak into the snapshot.
        """
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "metrics": dict(self.metrics),
            "recommendations": list(self.recommendations),
            "failed_stage": self.failed_stage,
        }
