"""Recommendation stage.

Derives actionable suggestions from the warnings and metrics accumulated by
the earlier stages, plus institution-specific customer rules from the policy.
Every applicable recommendation is added, in a fixed order.
"""

from __future__ import annotations

from typing import Any, List

from ..config import ValidationPolicy
from ..models import ValidationReport


def distinct_customers(bai_file: Any) -> List[str]:
    """Return distinct non-empty customer ids in first-seen order."""
    seen: List[str] = []
    for group in bai_file.groups:
        for account in group.accounts:
            customer_id = account.customer
            if customer_id and customer_id not in seen:
                seen.append(customer_id)
    return seen


class RecommendationsCheck:
    """Generate recommendations from findings, metrics and customer rules."""

    check_id = "recommendations"

    def run(self, bai_file: Any, report: ValidationReport, policy: ValidationPolicy) -> None:
        transactions = report.metrics.get("transactions", 0)

        if report.has_warning_containing(policy.customer_warning_marker):
            report.add_recommendation(
                "Consider updating expected customer ID list or enabling "
                "allow_unknown_customers option"
            )

        if transactions == 0:
            report.add_recommendation("File contains no transactions - verify this is expected")

        if len(report.warnings) > transactions * policy.warning_rate_threshold:
            report.add_recommendation(
                f"High warning rate ({len(report.warnings)} warnings for {transactions} "
                "transactions) - consider reviewing data quality"
            )

        customers = distinct_customers(bai_file)
        for rule in policy.customer_rules:
            if any(rule.matches(str(c)) for c in customers):
                report.add_recommendation(rule.message)
