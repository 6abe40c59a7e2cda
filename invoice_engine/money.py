"""
Shared numeric helpers — Decimal coercion and the one rounding rule.

All money in the engine is Decimal. Integer Rials are produced by rounding
half away from zero, which is what the invoice form has always shown.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_ONE = Decimal(1)
HUNDRED = Decimal(100)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a number to Decimal without inheriting binary float noise.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` and not
    ``Decimal("0.1000000000000000055511151231257827...")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_away(value: Decimal | int | float | str) -> int:
    """Round to the nearest integer, ties away from zero (2.5 → 3, -2.5 → -3)."""
    return int(to_decimal(value).quantize(_ONE, rounding=ROUND_HALF_UP))


def percent_of(base: Decimal, rate: Decimal | int | float | str) -> Decimal:
    """``base * rate / 100``, unrounded."""
    return base * to_decimal(rate) / HUNDRED
