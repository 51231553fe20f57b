"""Parsing and formatting of monetary amounts with four fractional digits."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

SCALE = 4
_QUANTUM = Decimal(1).scaleb(-SCALE)
_AMOUNT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")


def _round(value: Decimal) -> Decimal:
    """Round to at most four fractional digits, halves to even."""
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent >= -SCALE:
        return value
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + SCALE + 2)
        return value.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)


def parse_amount(text: str) -> Decimal:
    """Parse a plain decimal number, keeping at most four fractional digits.

    Raises ValueError if the text is not a plain decimal number.
    """
    if not isinstance(text, str) or not _AMOUNT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid decimal amount: {text!r}")
    return _round(Decimal(text))


def parse_optional_amount(text: str | None) -> Decimal | None:
    """Parse an amount that may be absent; None or an empty string give None."""
    if text is None or text == "":
        return None
    return parse_amount(text)


def format_amount(value: Decimal) -> str:
    """Format an amount with up to four fractional digits, without trailing zeros."""
    formatted = f"{_round(Decimal(value)):.{SCALE}f}"
    return formatted.rstrip("0").rstrip(".")