"""
Invoice drafts in and out: numbering, form defaults, and the storable record.

The engine never writes anywhere. build_record() produces the exact shape an
external store inserts (invoice_number, buyer_name, invoice_data JSON blob);
saving it is the caller's job.
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import (
    InvoiceDraft,
    InvoiceRecord,
    InvoiceTerm,
    LineItem,
    PricingConfig,
)
from .number_to_words import number_to_words
from .settings import Settings
from .totals import compute_totals

logger = logging.getLogger(__name__)

# Keys stored as their own columns; everything else goes into invoice_data
_TOP_LEVEL_FIELDS = {"invoice_number", "buyer_name"}


def next_invoice_number(last: Optional[int], start: int) -> int:
    """Number for the next invoice: one past the last saved, or ``start``."""
    if last is None:
        return start
    return last + 1


def enabled_terms(terms: list[InvoiceTerm]) -> list[str]:
    """Text of the terms that get printed, in order."""
    return [term.text for term in terms if term.enabled]


def new_draft(
    settings: Settings,
    invoice_date: str,
    last_number: Optional[int] = None,
) -> InvoiceDraft:
    """A blank draft as the form opens it: one empty row, toggles off."""
    return InvoiceDraft(
        invoice_number=next_invoice_number(last_number, settings.start_number),
        invoice_date=invoice_date,
        buyer_name="",
        items=[LineItem()],
        pricing=PricingConfig(
            discount_rate=settings.default_discount_rate,
            tax_rate=settings.default_tax_rate,
        ),
    )


def build_record(draft: InvoiceDraft) -> InvoiceRecord:
    """Pack a finished draft and its calculated amounts into a flat record.

    Decimals are serialized as strings so the blob is plain JSON.
    """
    totals = compute_totals(draft.items, draft.pricing)

    invoice_data = draft.model_dump(mode="json", exclude=_TOP_LEVEL_FIELDS)
    invoice_data["calculated_amounts"] = {
        "sub_total": str(totals.sub_total),
        "discount_amount": totals.discount_amount,
        "tax_amount": totals.tax_amount,
        "total_amount": str(totals.total_amount),
    }
    invoice_data["amount_in_words"] = number_to_words(totals.amount_due)

    logger.info(
        "Built record for invoice %d (%d item(s), total %s)",
        draft.invoice_number, len(draft.items), totals.total_amount,
    )

    return InvoiceRecord(
        invoice_number=draft.invoice_number,
        buyer_name=draft.buyer_name,
        invoice_data=invoice_data,
    )
