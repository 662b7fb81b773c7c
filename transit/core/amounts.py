"""Conversions between raw integer token units and decimal display strings."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

# Token bridge VAAs carry amounts normalized to at most 8 decimal places.
VAA_MAX_DECIMALS = 8

# uint256 amounts have up to 78 significant digits
_PRECISION = 80

RawAmount = Union[int, str]


def truncated_decimals(decimals: int) -> int:
    """Precision of an amount as carried on the token bridge wire."""
    return min(VAA_MAX_DECIMALS, decimals)


def fmt(raw: RawAmount, decimals: int) -> Decimal:
    """Scale a raw integer amount down by ``decimals`` places."""
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    try:
        units = Decimal(int(str(raw).strip()))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid raw amount: {raw!r}") from exc
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return units.scaleb(-decimals)


def plain(value: Decimal) -> str:
    """Render a decimal without trailing fractional zeros or exponent notation."""
    if value == 0:
        return "0"
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return format(value.normalize(), "f")


def display(raw: RawAmount, decimals: int) -> str:
    """
    Render a raw amount as a plain decimal string.

    Trailing fractional zeros are dropped and exponent notation is never used.

    Examples:
        >>> display("150000000", 6)
        '150'
        >>> display("123456789", 8)
        '1.23456789'
    """
    return plain(fmt(raw, decimals))
