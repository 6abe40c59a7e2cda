"""
Invoice totals — the arithmetic behind the numbers at the foot of the invoice.

Order of operations (each step feeds the next):

    sub_total            = Σ unit_price × quantity          (unrounded)
    discount_amount      = round(sub_total × discount%)      (if enabled)
    total_after_discount = sub_total − discount_amount
    tax_amount           = round(total_after_discount × tax%) (if enabled)
    total_amount         = total_after_discount + tax_amount

Discount and tax are rounded separately, half away from zero, and tax is
charged on the already-discounted base. Collapsing this into a single
formula changes the result by a Rial here and there.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from .models import InvoiceTotals, LineItem, PricingConfig
from .money import percent_of, round_half_away, to_decimal

logger = logging.getLogger(__name__)


def line_total(item: LineItem) -> Decimal:
    """Row total as printed in the items table."""
    return to_decimal(item.unit_price) * to_decimal(item.quantity)


def compute_totals(items: Iterable[LineItem], config: PricingConfig) -> InvoiceTotals:
    """Reduce line items and pricing toggles to invoice totals.

    Pure: the items are only read, nothing is cached between calls.
    Out-of-range input (negative prices, rates above 100) is not rejected;
    the arithmetic result is returned as-is.
    """
    sub_total = sum((line_total(item) for item in items), Decimal(0))

    discount_amount = 0
    if config.discount_enabled:
        discount_amount = round_half_away(percent_of(sub_total, config.discount_rate))

    total_after_discount = sub_total - discount_amount

    tax_amount = 0
    if config.tax_enabled:
        tax_amount = round_half_away(percent_of(total_after_discount, config.tax_rate))

    total_amount = total_after_discount + tax_amount

    logger.debug(
        "Totals: sub=%s discount=%s after_discount=%s tax=%s total=%s",
        sub_total, discount_amount, total_after_discount, tax_amount, total_amount,
    )

    return InvoiceTotals(
        sub_total=sub_total,
        discount_amount=discount_amount,
        total_after_discount=total_after_discount,
        tax_amount=tax_amount,
        total_amount=total_amount,
    )
