"""Metrics collection stage.

Aggregates counts and sums over the whole file, independent of earlier
findings. All amounts stay in integer minor units.
"""

from __future__ import annotations

from typing import Any, Dict

from bai2_integrity.core.utils import iter_accounts, transactions_frame
from ..config import ValidationPolicy
from ..models import ValidationReport


def collect_metrics(bai_file: Any) -> Dict[str, int]:
    """Compute aggregate metrics for a parsed file.

    Args:
        bai_file: Parsed file exposing ``groups``.

    Returns:
        Dictionary with keys groups, accounts, transactions, summaries,
        total_amount, credit_count, debit_count, and avg_transaction_amount
        when the file has at least one transaction. The average uses floor
        division, matching integer minor-unit arithmetic.

    Examples:
        >>> from bai2_integrity.core.schemas import BaiFile
        >>> collect_metrics(BaiFile())["groups"]
        0
    """
    accounts = list(iter_accounts(bai_file))
    df = transactions_frame(bai_file)

    metrics = {
        "groups": len(bai_file.groups),
        "accounts": len(accounts),
        "transactions": len(df),
        "summaries": sum(len(account.summaries) for _, _, account in accounts),
        "total_amount": int(df["amount"].sum()),
        "credit_count": int(df["is_credit"].sum()),
        "debit_count": int(df["is_debit"].sum()),
    }

    if metrics["transactions"] > 0:
        metrics["avg_transaction_amount"] = metrics["total_amount"] // metrics["transactions"]

    return metrics


class MetricsCheck:
    """Store aggregate metrics on the report."""

    check_id = "metrics"

    def run(self, bai_file: Any, report: ValidationReport, policy: ValidationPolicy) -> None:
        report.metrics = collect_metrics(bai_file)
