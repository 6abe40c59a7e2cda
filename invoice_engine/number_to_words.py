"""
Spell out a Rial amount in Persian words, as printed under the invoice total.

THIS IS THE LEGALLY READ FORM OF THE AMOUNT.

Written by hand rather than pulled from a library because the output has to
match, word for word, what the invoices already issued say:
  1. Conjunction " و " between every part, including after "صد".
  2. 10–19 come from their own table ("یازده"), never "ده و یک".
  3. Scale words are "هزار", "میلیون", "میلیارد"; the currency word
     "ریال" is appended once at the very end.
  4. Zero is just "صفر", with no currency word.

Examples:
    19          → "نوزده ریال"
    101         → "صد و یک ریال"
    1000        → "یک هزار ریال"
    1,234,567   → "یک میلیون و دویست و سی و چهار هزار و پانصد و شصت و هفت ریال"
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "", "یک", "دو", "سه", "چهار", "پنج", "شش", "هفت", "هشت", "نه",
)

_TEENS: tuple[str, ...] = (
    "ده", "یازده", "دوازده", "سیزده", "چهارده",
    "پانزده", "شانزده", "هفده", "هجده", "نوزده",
)

_TENS: tuple[str, ...] = (
    "", "ده", "بیست", "سی", "چهل", "پنجاه", "شصت", "هفتاد", "هشتاد", "نود",
)

_HUNDREDS: tuple[str, ...] = (
    "", "صد", "دویست", "سیصد", "چهارصد", "پانصد", "ششصد", "هفتصد", "هشتصد", "نهصد",
)

# Largest first; the remainder below one thousand has no scale word
_SCALES: tuple[tuple[int, str], ...] = (
    (1_000_000_000, "میلیارد"),
    (1_000_000, "میلیون"),
    (1_000, "هزار"),
)

ZERO_WORD = "صفر"
CONJUNCTION = " و "
CURRENCY_WORD = "ریال"

# One past the largest amount with a defined spelling (999 میلیارد ...)
MAX_SUPPORTED = 1_000_000_000_000


# ─── Three-Digit Group ───────────────────────────────────────────────


def _convert_group(n: int) -> str:
    """Spell out 0–999. Returns "" for 0 so the caller can skip the group."""
    hundreds, rest = divmod(n, 100)
    tens, ones = divmod(rest, 10)

    result = ""
    if hundreds:
        result += _HUNDREDS[hundreds]
        if rest:
            result += CONJUNCTION

    if tens > 1:
        result += _TENS[tens]
        if ones:
            result += CONJUNCTION + _ONES[ones]
    elif tens == 1:
        result += _TEENS[ones]
    elif ones:
        result += _ONES[ones]

    return result


# ─── Main Converter ─────────────────────────────────────────────────


def number_to_words(amount: int) -> str:
    """Convert a whole Rial amount to Persian words.

    Args:
        amount: e.g. 245250

    Returns:
        "دویست و چهل و پنج هزار و دویست و پنجاه ریال"

    Algorithm:
        Peel off billions, millions and thousands by integer division,
        largest first. Each non-zero group is spelled by _convert_group and
        gets its scale word; zero groups vanish entirely. Whatever is left
        below one thousand becomes the last group. Groups are joined with
        the conjunction and the currency word closes the phrase.

    Amounts of one thousand billion and above keep only the lowest three
    digits of the billions group. Negative amounts are spelled as their
    absolute value. Both are logged as caller errors.

    Whole-valued Decimals (e.g. a rounded total) are accepted and converted;
    any fraction is dropped.
    """
    amount = int(amount)
    if amount == 0:
        return ZERO_WORD

    remaining = amount
    if remaining < 0:
        logger.warning("Negative amount %d spelled as its absolute value", amount)
        remaining = -remaining
    if remaining >= MAX_SUPPORTED:
        logger.warning(
            "Amount %d exceeds the billions scale; higher digits are dropped", amount
        )

    groups: list[str] = []
    for scale, word in _SCALES:
        value, remaining = divmod(remaining, scale)
        value %= 1000
        if value:
            groups.append(f"{_convert_group(value)} {word}")

    if remaining:
        groups.append(_convert_group(remaining))

    if not groups:
        # Every supported digit was zero, e.g. exactly one thousand billion
        return ZERO_WORD

    return CONJUNCTION.join(groups) + " " + CURRENCY_WORD
