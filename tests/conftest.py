"""Shared pytest configuration, fixtures, and tree builders for validation testing."""

from typing import Iterable, Optional

import pytest

from bai2_integrity.core.enums import TransactionDirection
from bai2_integrity.core.schemas import (
    Account,
    AccountSummary,
    BaiFile,
    Group,
    Transaction,
    TransactionType,
)

KNOWN_CUSTOMER = "0005157748558"


def make_tx(
    amount: int = 500,
    code: str = "175",
    direction: TransactionDirection = TransactionDirection.CREDIT,
    text: Optional[str] = "DEPOSIT",
) -> Transaction:
    """Build a transaction with sensible defaults."""
    return Transaction(amount=amount, type=TransactionType(code=code, transaction=direction), text=text)


def make_account(
    customer: Optional[str] = KNOWN_CUSTOMER,
    transactions: Iterable[Transaction] = (),
    summaries: Optional[Iterable[AccountSummary]] = None,
) -> Account:
    """Build an account; one summary is added unless ``summaries`` is given."""
    if summaries is None:
        summaries = (AccountSummary(code="010", amount=0),)
    return Account(customer=customer, transactions=tuple(transactions), summaries=tuple(summaries))


def make_file(*groups: Iterable[Account]) -> BaiFile:
    """Build a file where each positional argument is the account list of one group."""
    return BaiFile(groups=tuple(Group(accounts=tuple(accounts)) for accounts in groups))


@pytest.fixture
def clean_file() -> BaiFile:
    """A file with one known account and distinct, described transactions."""
    return make_file(
        [
            make_account(
                transactions=[
                    make_tx(amount=10_000, code="175", text="LOCKBOX DEPOSIT"),
                    make_tx(
                        amount=2_500,
                        code="475",
                        direction=TransactionDirection.DEBIT,
                        text="CHECK PAID",
                    ),
                ]
            )
        ]
    )


@pytest.fixture
def multi_group_file() -> BaiFile:
    """Two groups, three accounts, mixed credits/debits/misc."""
    return make_file(
        [
            make_account(
                transactions=[
                    make_tx(amount=1_000, code="175"),
                    make_tx(amount=-300, code="475", direction=TransactionDirection.DEBIT),
                ]
            ),
            make_account(
                customer="1440000001",
                transactions=[make_tx(amount=7, code="890", direction=TransactionDirection.MISC)],
                summaries=(AccountSummary(code="010"), AccountSummary(code="015")),
            ),
        ],
        [
            make_account(
                transactions=[
                    make_tx(amount=2_000, code="195"),
                    make_tx(amount=1, code="495", direction=TransactionDirection.DEBIT),
                    make_tx(amount=-1, code="495", direction=TransactionDirection.DEBIT),
                ]
            )
        ],
    )
