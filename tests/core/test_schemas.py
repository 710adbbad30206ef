"""Tests for the input tree schemas and their mapping loaders."""

import dataclasses

import pytest

from bai2_integrity.core.enums import TransactionDirection
from bai2_integrity.core.schemas import (
    Account,
    BaiFile,
    Group,
    Transaction,
    TransactionType,
)


@pytest.fixture
def file_mapping():
    """Parser output as plain mappings (e.g. loaded from JSON)."""
    return {
        "sender": "BANKSENDER",
        "receiver": "CUSTRECV",
        "groups": [
            {
                "originator": "BANKSENDER",
                "as_of_date": "2025-06-03",
                "accounts": [
                    {
                        "customer": "0005157748558",
                        "currency_code": "USD",
                        "transactions": [
                            {
                                "amount": 12345,
                                "type": {"code": "175", "transaction": "credit"},
                                "text": "LOCKBOX DEPOSIT",
                                "bank_reference": "000123",
                            },
                            {
                                "amount": 500,
                                "type": {"code": "475", "direction": "DEBIT"},
                            },
                        ],
                        "summaries": [{"code": "010", "amount": 100000}],
                    }
                ],
            }
        ],
    }


def test_from_dict_builds_full_tree(file_mapping):
    bai = BaiFile.from_dict(file_mapping)

    assert bai.sender == "BANKSENDER"
    assert len(bai.groups) == 1
    group = bai.groups[0]
    assert group.as_of_date == "2025-06-03"
    account = group.accounts[0]
    assert account.customer == "0005157748558"
    assert account.currency_code == "USD"
    assert account.summaries[0].code == "010"
    first, second = account.transactions
    assert first.amount == 12345
    assert first.type == TransactionType(code="175", transaction=TransactionDirection.CREDIT)
    assert first.text == "LOCKBOX DEPOSIT"
    assert second.type.transaction == TransactionDirection.DEBIT
    assert second.text is None


def test_credit_and_debit_predicates():
    credit = Transaction(1, TransactionType("175", TransactionDirection.CREDIT))
    debit = Transaction(1, TransactionType("475", TransactionDirection.DEBIT))
    misc = Transaction(1, TransactionType("890", TransactionDirection.MISC))

    assert (credit.is_credit, credit.is_debit) == (True, False)
    assert (debit.is_credit, debit.is_debit) == (False, True)
    assert (misc.is_credit, misc.is_debit) == (False, False)


def test_account_without_transactions_or_summaries():
    account = Account.from_dict({"customer": "0005157748558"})

    assert account.transactions == ()
    assert account.summaries == ()


def test_tree_is_immutable():
    group = Group(accounts=())

    with pytest.raises(dataclasses.FrozenInstanceError):
        group.accounts = ()  # type: ignore[misc]


@pytest.mark.parametrize(
    "mapping,match",
    [
        ({}, "BaiFile: missing required field 'groups'"),
        ({"groups": [{}]}, "Group: missing required field 'accounts'"),
        (
            {"groups": [{"accounts": [{"transactions": [{"type": {}}]}]}]},
            "Transaction: missing required field 'amount'",
        ),
        (
            {"groups": [{"accounts": [{"transactions": [{"amount": 1, "type": {"code": "175"}}]}]}]},
            "TransactionType: missing required field 'transaction'",
        ),
        (
            {
                "groups": [
                    {
                        "accounts": [
                            {
                                "transactions": [
                                    {"amount": 1, "type": {"code": "175", "transaction": "x"}}
                                ]
                            }
                        ]
                    }
                ]
            },
            "TransactionType: unknown direction 'x'",
        ),
        ({"groups": ["not a group"]}, "Group: expected a mapping, got str"),
    ],
)
def test_from_dict_rejects_malformed_mappings(mapping, match):
    with pytest.raises(ValueError, match=match):
        BaiFile.from_dict(mapping)
