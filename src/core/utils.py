"""Small numeric utilities."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from .types import TOKEN_DECIMALS

Number = Union[int, float, str, Decimal]

_SCALE = Decimal(10) ** TOKEN_DECIMALS


def to_decimal(value: Number) -> Decimal:
    """Parse a human amount ("1.5", 1.5, Decimal) into a Decimal.

    Raises ``ValueError`` on unparseable input.
    """
    if isinstance(value, float):
        # shortest repr, not the exact binary value
        value = str(value)
    try:
        out = Decimal(value)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"not a number: {value!r}") from exc
    if not out.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return out


def to_base_units(amount: Number, decimals: int = TOKEN_DECIMALS) -> int:
    """Human amount -> integer base units (18 decimals by default)."""
    scaled = to_decimal(amount) * (Decimal(10) ** decimals)
    return int(scaled.to_integral_value())


def from_base_units(value: int, decimals: int = TOKEN_DECIMALS) -> Decimal:
    """Integer base units -> human Decimal amount."""
    scale = _SCALE if decimals == TOKEN_DECIMALS else Decimal(10) ** decimals
    return Decimal(int(value)) / scale


def fee_percent(fee_bps: int) -> float:
    return fee_bps / 100.0
