"""
Proforma Invoice Engine — deterministic totals and Persian amount-in-words.

Architecture: Line items + pricing toggles → Totals → Rounded amount → Words
Philosophy:  Money is Decimal. Rounding happens exactly where it is written down.
"""

__version__ = "1.0.0"
