#!/usr/bin/env python3
"""
Proforma Invoice Engine — Entry Point
======================================

Prints a sample invoice: rows, totals with discount and tax, and the grand
total in Persian words.

Usage:
    python main.py
    INVOICE_DEFAULT_TAX_RATE=9 python main.py
"""

from __future__ import annotations

import sys
from datetime import date
from decimal import Decimal

from dotenv import load_dotenv

from invoice_engine.exceptions import ConfigError
from invoice_engine.formatting import format_currency, to_persian_digits
from invoice_engine.models import InvoiceDraft, LineItem, PricingConfig
from invoice_engine.number_to_words import number_to_words
from invoice_engine.record import enabled_terms, new_draft
from invoice_engine.settings import load_settings
from invoice_engine.totals import compute_totals, line_total

load_dotenv()


# ─── Sample Rows ────────────────────────────────────────────────────

SAMPLE_ITEMS = [
    LineItem(description="کولر گازی اسپلیت", model="AB-24", unit_price=Decimal(100000), quantity=Decimal(2)),
    LineItem(description="نصب و راه‌اندازی", unit_price=Decimal(50000), quantity=Decimal(1)),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_invoice(draft: InvoiceDraft) -> None:
    """Print rows, totals and terms for a draft."""
    totals = compute_totals(draft.items, draft.pricing)
    pricing = draft.pricing

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  PROFORMA INVOICE{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Number:      {to_persian_digits(str(draft.invoice_number))}")
    print(f"  Date:        {draft.invoice_date}")
    print(f"  Buyer:       {draft.buyer_name or '-'}")
    print(f"{'─' * _WIDTH}")

    for index, item in enumerate(draft.items, start=1):
        label = f"{item.description} ({item.model})" if item.model else item.description
        print(f"  {index}. {label}")
        print(
            f"     {_DIM}{format_currency(item.quantity)} × "
            f"{format_currency(item.unit_price)}{_RESET}  =  "
            f"{format_currency(line_total(item))}"
        )

    print(f"{'─' * _WIDTH}")
    print(f"  Subtotal:    {format_currency(totals.sub_total)}")
    if pricing.discount_enabled:
        print(f"  Discount:    {format_currency(totals.discount_amount)}  {_DIM}({pricing.discount_rate}%){_RESET}")
    if pricing.tax_enabled:
        print(f"  Tax:         {format_currency(totals.tax_amount)}  {_DIM}({pricing.tax_rate}%){_RESET}")
    print(f"  {_BOLD}Total:       {format_currency(totals.total_amount)}{_RESET}")
    print(f"  {_GREEN}{number_to_words(totals.amount_due)}{_RESET}")

    terms = enabled_terms(draft.terms)
    if terms:
        print(f"{'─' * _WIDTH}")
        for term in terms:
            print(f"  - {term}")

    print(f"{'=' * _WIDTH}\n")


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Build a sample draft from the configured defaults and print it."""
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error [{e.code}]: {e}", file=sys.stderr)
        sys.exit(2)

    draft = new_draft(settings, invoice_date=date.today().isoformat())
    draft = draft.model_copy(update={
        "buyer_name": "شرکت نمونه",
        "items": SAMPLE_ITEMS,
        "pricing": PricingConfig(
            discount_enabled=True,
            discount_rate=Decimal(10),
            tax_enabled=True,
            tax_rate=settings.default_tax_rate,
        ),
    })
    print_invoice(draft)


if __name__ == "__main__":
    main()
