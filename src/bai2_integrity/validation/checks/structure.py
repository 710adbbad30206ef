"""Structure validation stage.

Confirms the tree has content at every nesting level and that each account
carries the fields needed to process it. Empty files and empty groups are
errors; thin accounts are warnings.
"""

from __future__ import annotations

from typing import Any

from bai2_integrity.core.utils import location
from ..config import ValidationPolicy
from ..models import ValidationReport


class StructureCheck:
    """Validate file, group and account structure."""

    check_id = "structure"

    def run(self, bai_file: Any, report: ValidationReport, policy: ValidationPolicy) -> None:
        """Check that groups and accounts are present and accounts are complete.

        A file without groups stops the stage; a group without accounts is
        reported and its accounts are skipped.
        """
        if not bai_file.groups:
            report.add_error("File contains no groups")
            return

        for group_num, group in enumerate(bai_file.groups, start=1):
            if not group.accounts:
                report.add_error(f"Group {group_num} contains no accounts")
                continue

            for account_num, account in enumerate(group.accounts, start=1):
                self._check_account(account, location(group_num, account_num), report, policy)

    @staticmethod
    def _check_account(
        account: Any, prefix: str, report: ValidationReport, policy: ValidationPolicy
    ) -> None:
        customer_id = account.customer
        if customer_id is None or not str(customer_id).strip():
            report.add_error(f"{prefix}: Missing customer ID")
        elif len(str(customer_id)) < policy.min_customer_id_length:
            report.add_warning(f"{prefix}: Customer ID '{customer_id}' seems unusually short")

        transaction_count = len(account.transactions)
        if transaction_count == 0:
            report.add_warning(f"{prefix}: No transactions found")
        elif transaction_count > policy.max_transactions_per_account:
            report.add_warning(
                f"{prefix}: Unusually high transaction count ({transaction_count})"
            )

        if len(account.summaries) == 0:
            report.add_warning(f"{prefix}: No account summaries found")
