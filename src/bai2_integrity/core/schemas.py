"""Input tree schemas for parsed BAI2 files.

This module defines the read-only object graph the validation engine walks:

    BaiFile -> Group -> Account -> Transaction / AccountSummary

The engine only reads attributes, so any object graph with the same shape can
be validated. These dataclasses are provided for callers that hold the parser
output as plain mappings (e.g. a JSON dump) and for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from .enums import TransactionDirection


def _require(data: Mapping[str, Any], key: str, level: str) -> Any:
    """Return ``data[key]`` or raise ValueError naming the tree level."""
    if not isinstance(data, Mapping):
        raise ValueError(f"{level}: expected a mapping, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"{level}: missing required field '{key}'")
    return data[key]


@dataclass(frozen=True)
class TransactionType:
    """BAI2 type code descriptor.

    Attributes:
        code: Three-digit BAI2 type code (e.g., "175").
        transaction: Direction of the code (credit, debit or misc).
        scope: Optional scope of the code as reported by the parser.
        description: Optional human-readable description of the code.
    """

    code: str
    transaction: TransactionDirection
    scope: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransactionType":
        code = _require(data, "code", "TransactionType")
        raw = data.get("transaction", data.get("direction"))
        if raw is None:
            raise ValueError("TransactionType: missing required field 'transaction'")
        try:
            direction = TransactionDirection(str(raw).lower())
        except ValueError as e:
            raise ValueError(f"TransactionType: unknown direction '{raw}'") from e
        return cls(
            code=str(code),
            transaction=direction,
            scope=data.get("scope"),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class Transaction:
    """A single posted amount (BAI2 record 16).

    Attributes:
        amount: Signed amount in minor currency units (cents).
        type: Type code descriptor.
        text: Optional free-text description.
        bank_reference: Optional bank reference number.
        customer_reference: Optional customer reference number.
    """

    amount: int
    type: TransactionType
    text: Optional[str] = None
    bank_reference: Optional[str] = None
    customer_reference: Optional[str] = None

    @property
    def is_credit(self) -> bool:
        return self.type.transaction == TransactionDirection.CREDIT

    @property
    def is_debit(self) -> bool:
        return self.type.transaction == TransactionDirection.DEBIT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        amount = _require(data, "amount", "Transaction")
        type_data = _require(data, "type", "Transaction")
        return cls(
            amount=amount,
            type=TransactionType.from_dict(type_data),
            text=data.get("text"),
            bank_reference=data.get("bank_reference"),
            customer_reference=data.get("customer_reference"),
        )


@dataclass(frozen=True)
class AccountSummary:
    """Account-level aggregate (a status or summary entry of BAI2 record 03)."""

    code: str
    amount: Optional[int] = None
    item_count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AccountSummary":
        code = _require(data, "code", "AccountSummary")
        return cls(
            code=str(code),
            amount=data.get("amount"),
            item_count=data.get("item_count"),
        )


@dataclass(frozen=True)
class Account:
    """A customer's ledger within a group."""

    customer: Optional[str]
    currency_code: Optional[str] = None
    transactions: Tuple[Transaction, ...] = field(default_factory=tuple)
    summaries: Tuple[AccountSummary, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        if not isinstance(data, Mapping):
            raise ValueError(f"Account: expected a mapping, got {type(data).__name__}")
        return cls(
            customer=data.get("customer"),
            currency_code=data.get("currency_code"),
            transactions=tuple(Transaction.from_dict(t) for t in data.get("transactions") or ()),
            summaries=tuple(AccountSummary.from_dict(s) for s in data.get("summaries") or ()),
        )


@dataclass(frozen=True)
class Group:
    """Mid-level grouping of accounts (BAI2 record 02)."""

    accounts: Tuple[Account, ...] = field(default_factory=tuple)
    originator: Optional[str] = None
    receiver: Optional[str] = None
    as_of_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Group":
        accounts = _require(data, "accounts", "Group")
        return cls(
            accounts=tuple(Account.from_dict(a) for a in accounts or ()),
            originator=data.get("originator"),
            receiver=data.get("receiver"),
            as_of_date=data.get("as_of_date"),
        )


@dataclass(frozen=True)
class BaiFile:
    """The full parsed file (BAI2 record 01)."""

    groups: Tuple[Group, ...] = field(default_factory=tuple)
    sender: Optional[str] = None
    receiver: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BaiFile":
        """Build a tree from plain mappings.

        Args:
            data: Mapping with a ``groups`` list; nested levels use the field
                names of the dataclasses in this module.

        Returns:
            BaiFile instance.

        Raises:
            ValueError: If a required field is missing at any level.

        Examples:
            >>> bai = BaiFile.from_dict({"groups": [{"accounts": []}]})
            >>> len(bai.groups)
            1
        """
        groups = _require(data, "groups", "BaiFile")
        return cls(
            groups=tuple(Group.from_dict(g) for g in groups or ()),
            sender=data.get("sender"),
            receiver=data.get("receiver"),
        )


__all__ = [
    "TransactionType",
    "Transaction",
    "AccountSummary",
    "Account",
    "Group",
    "BaiFile",
]
