"""Validation stage registry and pipeline driver.

This module orchestrates validation stages:
- ALL_STAGES: Ordered list of the stage instances run for every file
- validate(): Runs the stages inside one fault boundary and returns a ValidationReport
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from .checks.business_rules import BusinessRulesCheck
from .checks.data_quality import DataQualityCheck
from .checks.metrics import MetricsCheck
from .checks.recommendations import RecommendationsCheck
from .checks.structure import StructureCheck
from .config import ValidationPolicy
from .models import ValidationReport

logger = logging.getLogger(__name__)

# Registry of all validation stages
# Order matters: recommendations read the warnings and metrics of earlier stages
ALL_STAGES = [
    StructureCheck(),
    BusinessRulesCheck(),
    DataQualityCheck(),
    MetricsCheck(),
    RecommendationsCheck(),
]

OPTIONS_STAGE_ID = "options"

Options = Union[ValidationPolicy, Mapping[str, Any], None]


def resolve_policy(options: Options) -> ValidationPolicy:
    """Turn ``validate()`` options into a ValidationPolicy."""
    if isinstance(options, ValidationPolicy):
        return options
    return ValidationPolicy.from_options(options)


def validate(bai_file: Any, options: Options = None) -> ValidationReport:
    """Run all validation stages on a parsed BAI2 file.

    Stages run in ALL_STAGES order and share one report. If a stage raises,
    the fault is recorded as a single "Validation failed: ..." error and the
    remaining stages are skipped. Invalid options are recorded the same way
    under the "options" stage id, before any stage runs. This function
    always returns a report.

    Args:
        bai_file: Parsed file exposing ``groups`` -> ``accounts`` ->
            ``transactions``/``summaries``. Not modified.
        options: ValidationPolicy, a mapping of option names (unknown keys
            are ignored), or None for defaults.

    Returns:
        ValidationReport with errors, warnings, metrics and recommendations.

    Examples:
        >>> from bai2_integrity.core.schemas import BaiFile
        >>> report = validate(BaiFile())
        >>> report.valid
        False
        >>> report.errors
        ['File contains no groups']
    """
    report = ValidationReport()

    try:
        policy = resolve_policy(options)
    except Exception as e:  # pylint: disable=broad-except
        logger.exception("Invalid validation options")
        report.record_fault(OPTIONS_STAGE_ID, e)
        logger.info("Validation finished: %s", report.summary())
        return report

    for stage in ALL_STAGES:
        logger.debug("Running validation stage: %s", stage.check_id)
        try:
            stage.run(bai_file, report, policy)
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("Validation stage %s failed", stage.check_id)
            report.record_fault(stage.check_id, e)
            break

    logger.info("Validation finished: %s", report.summary())
    return report
