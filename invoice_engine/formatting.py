"""
Display formatting for amounts printed on the invoice (fa-IR conventions).

Mirrors what the browser's Intl.NumberFormat("fa-IR") produced for the old
form, so reprinted invoices look the same:
    1234567      → "۱٬۲۳۴٬۵۶۷"
    1234.5       → "۱٬۲۳۴٫۵"
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .money import to_decimal

_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")

GROUP_SEPARATOR = "٬"  # ARABIC THOUSANDS SEPARATOR
DECIMAL_SEPARATOR = "٫"  # ARABIC DECIMAL SEPARATOR
NEGATIVE_PREFIX = "\u200e\u2212"  # LRM + MINUS SIGN

_MAX_FRACTION = Decimal("0.001")


def to_persian_digits(text: str) -> str:
    """Replace ASCII digits with Persian ones; everything else passes through."""
    return text.translate(_PERSIAN_DIGITS)


def format_currency(amount: Decimal | int | float | str) -> str:
    """Group thousands and render with Persian digits.

    At most three fraction digits are kept (rounded half away from zero)
    and trailing zeros are dropped, so whole Rial amounts show no fraction.
    """
    value = to_decimal(amount).quantize(_MAX_FRACTION, rounding=ROUND_HALF_UP)
    negative = value < 0
    whole, _, fraction = f"{abs(value):f}".partition(".")
    fraction = fraction.rstrip("0")

    text = f"{int(whole):,}".replace(",", GROUP_SEPARATOR)
    if fraction:
        text += DECIMAL_SEPARATOR + fraction

    text = to_persian_digits(text)
    return NEGATIVE_PREFIX + text if negative else text
