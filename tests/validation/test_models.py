"""Tests for the ValidationReport accumulator."""

import pytest

from bai2_integrity.core.enums import Severity
from bai2_integrity.validation.models import ValidationReport


def test_new_report_is_empty_and_valid():
    report = ValidationReport()

    assert report.valid is True
    assert report.errors == []
    assert report.warnings == []
    assert report.metrics == {}
    assert report.recommendations == []
    assert report.failed_stage is None


def test_reports_do_not_share_lists():
    first, second = ValidationReport(), ValidationReport()
    first.add_warning("w")

    assert second.warnings == []


def test_warnings_never_affect_validity():
    report = ValidationReport()
    for i in range(5):
        report.add_warning(f"warning {i}")

    assert report.valid is True


def test_errors_make_report_invalid():
    report = ValidationReport()
    report.add(Severity.ERROR, "Group 1 contains no accounts")

    assert report.valid is False
    assert report.errors == ["Group 1 contains no accounts"]


def test_add_rejects_unknown_severity():
    with pytest.raises(ValueError, match="Invalid severity"):
        ValidationReport().add("info", "message")  # type: ignore[arg-type]


def test_record_fault():
    report = ValidationReport()
    report.record_fault("metrics", KeyError("amount"))

    assert report.failed_stage == "metrics"
    assert report.errors == ["Validation failed: 'amount'"]
    assert report.valid is False


def test_has_warning_containing_is_case_sensitive():
    report = ValidationReport(warnings=["Group 1, Account 1: Unknown customer ID 'x'"])

    assert report.has_warning_containing("customer ID")
    assert not report.has_warning_containing("Customer ID")


def test_summary():
    report = ValidationReport(
        errors=["e"],
        warnings=["w1", "w2"],
        metrics={"transactions": 12},
        recommendations=["r"],
    )

    assert report.summary() == "INVALID: 1 errors, 2 warnings, 1 recommendations, 12 transactions"


def test_to_dict_is_a_snapshot():
    report = ValidationReport(warnings=["w"], metrics={"groups": 1})
    snapshot = report.to_dict()
    report.add_warning("later")
    report.metrics["groups"] = 2

    assert snapshot == {
        "valid": True,
        "errors": [],
        "warnings": ["w"],
        "metrics": {"groups": 1},
        "recommendations": [],
        "failed_stage": None,
    }
