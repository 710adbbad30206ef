"""Validation system for parsed BAI2 files.

This module provides a business-level validation framework on top of a parsed file:

- **Models**: ValidationReport - the consolidated result of one run
- **Stages**: Structure, business rules, data quality, metrics, recommendations
  (see validation/checks/)
- **Config**: Thresholds, customer rules and ValidationPolicy (import from .config)
- **Registry**: validate() - stage orchestration inside one fault boundary

Public API:
    ValidationReport: Errors, warnings, metrics and recommendations
    ValidationPolicy: Typed validation options
    CustomerRule: Institution-specific recommendation rule
    validate: Run all stages on a parsed file
    load_policy: Read a ValidationPolicy from YAML

Usage:
    >>> from bai2_integrity.validation import validate
    >>> report = validate(bai_file, {"allow_unknown_customers": True})
    >>> report.valid, report.warnings[:3]

For implementation details:
    - See validation/checks/__init__.py for stage interface conventions
    - See validation/config.py for thresholds and policy configuration
    - See validation/registry.py for stage orchestration
"""

from __future__ import annotations

from .config import CustomerRule, ValidationPolicy, load_policy
from .models import ValidationReport
from .registry import validate

__all__ = [
    # Data models
    "ValidationReport",
    # Configuration
    "ValidationPolicy",
    "CustomerRule",
    "load_policy",
    # Runner
    "validate",
]
