from decimal import Decimal

import pytest

from txledger.models import (
    Account,
    Transaction,
    TransactionType,
    parse_transaction,
    parse_transaction_type,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("deposit", TransactionType.DEPOSIT),
        ("withdrawal", TransactionType.WITHDRAWAL),
        ("dispute", TransactionType.DISPUTE),
        ("resolve", TransactionType.RESOLVE),
        ("chargeback", TransactionType.CHARGEBACK),
    ],
)
def test_known_types(text, expected):
    assert parse_transaction_type(text) is expected


@pytest.mark.parametrize("text", ["Deposit", "transfer", "", "unknown"])
def test_unknown_types(text):
    assert parse_transaction_type(text) is TransactionType.UNKNOWN


def test_parse_deposit_row():
    tx = parse_transaction({"type": "deposit", "client": "1", "tx": "7", "amount": "1.5"})
    assert tx == Transaction(TransactionType.DEPOSIT, 1, 7, Decimal("1.5"), "deposit")


def test_parse_without_amount_column():
    tx = parse_transaction({"type": "dispute", "client": "2", "tx": "3"})
    assert tx.amount is None
    assert tx.kind is TransactionType.DISPUTE


def test_parse_empty_amount_is_none():
    tx = parse_transaction({"type": "resolve", "client": "2", "tx": "3", "amount": ""})
    assert tx.amount is None


def test_parse_rounds_amount():
    tx = parse_transaction({"type": "deposit", "client": "1", "tx": "1", "amount": "2.00004"})
    assert tx.amount.as_tuple().exponent >= -4


def test_parse_trims_fields():
    tx = parse_transaction({"type": " deposit ", "client": " 4 ", "tx": " 5 ", "amount": " 3 "})
    assert (tx.kind, tx.client, tx.tx, tx.amount) == (TransactionType.DEPOSIT, 4, 5, Decimal(3))


def test_parse_keeps_unknown_type_name():
    tx = parse_transaction({"type": "transfer", "client": "1", "tx": "1", "amount": ""})
    assert tx.kind is TransactionType.UNKNOWN
    assert tx.raw_type == "transfer"


@pytest.mark.parametrize(
    "row",
    [
        {"client": "1", "tx": "1"},
        {"type": "deposit", "tx": "1"},
        {"type": "deposit", "client": "1"},
        {"type": "deposit", "client": "65536", "tx": "1"},
        {"type": "deposit", "client": "-1", "tx": "1"},
        {"type": "deposit", "client": "1", "tx": "4294967296"},
        {"type": "deposit", "client": "x", "tx": "1"},
        {"type": "deposit", "client": "1", "tx": "1", "amount": "abc"},
    ],
)
def test_parse_invalid_rows(row):
    with pytest.raises(ValueError):
        parse_transaction(row)


def test_parse_limits_accepted():
    tx = parse_transaction({"type": "deposit", "client": "65535", "tx": "4294967295"})
    assert (tx.client, tx.tx) == (65535, 4294967295)


def test_new_account_row():
    assert Account(client=3).to_row() == {
        "client": "3",
        "available": "0",
        "held": "0",
        "total": "0",
        "locked": "false",
    }


def test_account_row_columns_in_order():
    assert tuple(Account(client=1).to_row()) == Account.FIELDS


def test_locked_account_row():
    account = Account(client=1, available=Decimal("1.5000"), held=Decimal(0),
                      total=Decimal("1.5"), locked=True)
    row = account.to_row()
    assert row["locked"] == "true"
    assert row["available"] == row["total"] == "1.5"