"""Data quality validation stage.

Detects likely duplicate transactions and transactions without a description.

Duplicates are candidates only: transactions of one account sharing the same
(amount, type code, direction) are reported together. No date or sequence
comparison is made.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from bai2_integrity.core.utils import format_minor_units, iter_accounts, location, type_field
from ..config import ValidationPolicy
from ..models import ValidationReport

DuplicateKey = Tuple[Any, Any, Any]


def group_duplicates(transactions: Any) -> Dict[DuplicateKey, List[Any]]:
    """Group transactions by (amount, type code, type direction).

    Keys and members keep their encounter order.

    Args:
        transactions: Transactions of a single account.

    Returns:
        Mapping of key tuple to the transactions sharing it.
    """
    groups: Dict[DuplicateKey, List[Any]] = {}
    for tx in transactions:
        key = (tx.amount, type_field(tx.type, "code"), type_field(tx.type, "transaction"))
        groups.setdefault(key, []).append(tx)
    return groups


class DataQualityCheck:
    """Validate transactions for duplicates and missing descriptions."""

    check_id = "data_quality"

    def run(self, bai_file: Any, report: ValidationReport, policy: ValidationPolicy) -> None:
        for group_num, account_num, account in iter_accounts(bai_file):
            prefix = location(group_num, account_num)

            for (amount, code, _), members in group_duplicates(account.transactions).items():
                if len(members) > 1:
                    report.add_warning(
                        f"{prefix}: {len(members)} potentially duplicate transactions "
                        f"(amount: ${format_minor_units(amount)}, type: {code})"
                    )

            for tx_num, tx in enumerate(account.transactions, start=1):
                if tx.text is None or not str(tx.text).strip():
                    report.add_warning(
                        f"{location(group_num, account_num, tx_num)}: "
                        "Missing transaction description"
                    )
