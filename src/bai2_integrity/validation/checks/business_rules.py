"""Business rules validation stage.

Flags unknown customers and suspicious transaction amounts. Findings are
advisory only: this stage never produces errors.
"""

from __future__ import annotations

from typing import Any

from bai2_integrity.core.utils import format_minor_units, iter_accounts, location
from ..config import ValidationPolicy
from ..models import ValidationReport


class BusinessRulesCheck:
    """Validate customers against the expected list and amounts against thresholds."""

    check_id = "business_rules"

    def run(self, bai_file: Any, report: ValidationReport, policy: ValidationPolicy) -> None:
        for group_num, account_num, account in iter_accounts(bai_file):
            customer_id = account.customer
            if (
                customer_id not in policy.expected_customers
                and not policy.allow_unknown_customers
            ):
                shown = "" if customer_id is None else customer_id
                report.add_warning(
                    f"{location(group_num, account_num)}: Unknown customer ID '{shown}'"
                )

            for tx_num, tx in enumerate(account.transactions, start=1):
                prefix = location(group_num, account_num, tx_num)
                amount = tx.amount

                if amount == 0:
                    report.add_warning(f"{prefix}: Zero amount transaction")

                if abs(amount) > policy.large_amount_threshold:
                    report.add_warning(
                        f"{prefix}: Large amount transaction (${format_minor_units(amount)})"
                    )
