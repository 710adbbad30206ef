"""Core utility functions for walking and summarizing BAI2 trees.

This module provides shared utilities used by the validation stages.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterator, Mapping, Optional, Tuple

import pandas as pd

TRANSACTION_COLUMNS = [
    "group",
    "account",
    "customer",
    "amount",
    "code",
    "transaction",
    "is_credit",
    "is_debit",
]


def type_field(tx_type: Any, name: str) -> Any:
    """Read a sub-field of a transaction type descriptor.

    Parsers expose the descriptor either as an object with attributes or as a
    mapping (``{"code": ..., "transaction": ...}``); both are accepted.

    Args:
        tx_type: Type descriptor of a transaction.
        name: Sub-field name (e.g., "code").

    Returns:
        The sub-field value.

    Raises:
        KeyError: If a mapping descriptor lacks the field.
        AttributeError: If an object descriptor lacks the field.
    """
    if isinstance(tx_type, Mapping):
        return tx_type[name]
    return getattr(tx_type, name)


def location(group_num: int, account_num: int, tx_num: Optional[int] = None) -> str:
    """Build the 1-indexed location prefix used in validation messages.

    Examples:
        >>> location(1, 2)
        'Group 1, Account 2'
        >>> location(1, 2, 3)
        'Group 1, Account 2, Transaction 3'
    """
    prefix = f"Group {group_num}, Account {account_num}"
    if tx_num is not None:
        prefix += f", Transaction {tx_num}"
    return prefix


def format_minor_units(amount: int) -> str:
    """Render a minor-unit amount as major units with two decimals.

    Uses Decimal so no floating point rounding is involved.

    Examples:
        >>> format_minor_units(150000001)
        '1500000.01'
        >>> format_minor_units(-500)
        '-5.00'
    """
    return str(Decimal(str(amount)).scaleb(-2))


def iter_accounts(bai_file: Any) -> Iterator[Tuple[int, int, Any]]:
    """Yield ``(group_num, account_num, account)`` for every account, 1-indexed."""
    for group_num, group in enumerate(bai_file.groups, start=1):
        for account_num, account in enumerate(group.accounts, start=1):
            yield group_num, account_num, account


def transactions_frame(bai_file: Any) -> pd.DataFrame:
    """Flatten all transactions of a file into a DataFrame.

    One row per transaction with columns listed in ``TRANSACTION_COLUMNS``.
    Amounts are stored as Python ints (object dtype), so sums are exact and
    never wrap at the int64 boundary.

    Args:
        bai_file: Parsed file exposing ``groups``.

    Returns:
        DataFrame, empty (with the same columns) when the file has no transactions.
    """
    rows = []
    for group_num, account_num, account in iter_accounts(bai_file):
        for tx in account.transactions:
            rows.append(
                {
                    "group": group_num,
                    "account": account_num,
                    "customer": account.customer,
                    "amount": tx.amount,
                    "code": type_field(tx.type, "code"),
                    "transaction": type_field(tx.type, "transaction"),
                    "is_credit": bool(tx.is_credit),
                    "is_debit": bool(tx.is_debit),
                }
            )
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS).astype({"amount": object})
