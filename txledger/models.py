"""Transaction records read from input and account states written as output."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from .decimals import format_amount, parse_optional_amount

_UNSIGNED_PATTERN = re.compile(r"\+?\d+")
_CLIENT_MAX = 2**16 - 1
_TX_MAX = 2**32 - 1


class TransactionType(Enum):
    """Kind of a transaction; names outside the known set map to UNKNOWN."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"
    UNKNOWN = "unknown"


_KNOWN_TYPES = {t.value: t for t in TransactionType if t is not TransactionType.UNKNOWN}


def parse_transaction_type(text: str) -> TransactionType:
    """Map a lowercase type name to its TransactionType (case-sensitive)."""
    return _KNOWN_TYPES.get(text, TransactionType.UNKNOWN)


@dataclass(frozen=True)
class Transaction:
    """One input record."""

    kind: TransactionType
    client: int
    tx: int
    amount: Decimal | None = None
    raw_type: str = ""


@dataclass
class Account:
    """State of one client's account."""

    client: int
    available: Decimal = field(default_factory=Decimal)
    held: Decimal = field(default_factory=Decimal)
    total: Decimal = field(default_factory=Decimal)
    locked: bool = False

    FIELDS = ("client", "available", "held", "total", "locked")

    def to_row(self) -> dict[str, str]:
        """Return the account as an ordered mapping of column name to text."""
        return {
            "client": str(self.client),
            "available": format_amount(self.available),
            "held": format_amount(self.held),
            "total": format_amount(self.total),
            "locked": "true" if self.locked else "false",
        }


def _parse_unsigned(name: str, text: str, maximum: int) -> int:
    if not _UNSIGNED_PATTERN.fullmatch(text):
        raise ValueError(f"field `{name}`: invalid unsigned integer {text!r}")
    value = int(text)
    if value > maximum:
        raise ValueError(f"field `{name}`: {value} is out of range")
    return value


def _required(row: Mapping[str, str | None], name: str) -> str:
    value = row.get(name)
    if value is None:
        raise ValueError(f"missing field `{name}`")
    return value.strip()


def parse_transaction(row: Mapping[str, str | None]) -> Transaction:
    """Build a Transaction from a mapping of column names to text.

    Raises ValueError when a required field is missing or malformed.
    """
    raw_type = _required(row, "type")
    client = _parse_unsigned("client", _required(row, "client"), _CLIENT_MAX)
    tx = _parse_unsigned("tx", _required(row, "tx"), _TX_MAX)
    amount_text = row.get("amount")
    if amount_text is not None:
        amount_text = amount_text.strip()
    try:
        amount = parse_optional_amount(amount_text)
    except ValueError as err:
        raise ValueError(f"field `amount`: {err}") from err
    return Transaction(
        kind=parse_transaction_type(raw_type),
        client=client,
        tx=tx,
        amount=amount,
        raw_type=raw_type,
    )