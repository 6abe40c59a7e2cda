"""
Pydantic models for invoice data.

The computation models (LineItem, PricingConfig, InvoiceTotals) are frozen:
the engine only reads and reduces them. Range checks on prices, quantities
and rates belong to whoever collects the input (see api.py); these models
accept whatever the caller hands over.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from .money import round_half_away


# ─── Computation Inputs ──────────────────────────────────────────────


class LineItem(BaseModel):
    """One row of an invoice."""

    model_config = {"frozen": True}

    description: str = ""
    model: Optional[str] = None  # Product model label, printed under the description
    unit_price: Decimal = Decimal(0)
    quantity: Decimal = Decimal(1)


class PricingConfig(BaseModel):
    """Discount and tax toggles. Rates are percentages (9 means 9%), not fractions."""

    model_config = {"frozen": True}

    discount_enabled: bool = False
    discount_rate: Decimal = Decimal(0)
    tax_enabled: bool = False
    tax_rate: Decimal = Decimal(0)


# ─── Computation Output ──────────────────────────────────────────────


class InvoiceTotals(BaseModel):
    """Result of one totals computation. Recomputed on every call, never stored."""

    model_config = {"frozen": True}

    sub_total: Decimal  # Unrounded
    discount_amount: int
    total_after_discount: Decimal
    tax_amount: int
    total_amount: Decimal

    @property
    def amount_due(self) -> int:
        """Grand total in whole Rials — the figure spelled out on the invoice."""
        return round_half_away(self.total_amount)


# ─── Invoice Draft ───────────────────────────────────────────────────


class Bank(str, Enum):
    """Which bank account block is printed at the foot of the invoice."""

    NONE = "none"
    MELLAT = "mellat"
    REFAH = "refah"


class InvoiceTerm(BaseModel):
    """A sales term line; only enabled terms are printed."""

    text: str
    enabled: bool = True


DEFAULT_TERMS: tuple[tuple[str, bool], ...] = (
    ("نحوه پرداخت: نقدی", True),
    ("زمان تحویل: فوری", True),
    ("گارانتی: ۵ سال ضمانت کمپرسور، ۱۸ ماه کلیه قطعات و ۱۰ سال خدمات پس از فروش", True),
    ("قیمت‌های فوق با احتساب مالیات بر ارزش افزوده می‌باشند", True),
    ("محل تحویل: انبار مرکزی شرکت (هزینه حمل تا پروژه به عهده خریدار محترم می‌باشد)", True),
)


def default_terms() -> list[InvoiceTerm]:
    """Fresh copies of the standard sales terms."""
    return [InvoiceTerm(text=text, enabled=enabled) for text, enabled in DEFAULT_TERMS]


class InvoiceDraft(BaseModel):
    """Everything the invoice form holds at the moment it is saved."""

    invoice_number: int
    invoice_date: str
    valid_until: Optional[str] = None
    buyer_name: str
    buyer_details: Optional[str] = None
    items: list[LineItem] = Field(default_factory=list)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    terms: list[InvoiceTerm] = Field(default_factory=default_terms)
    selected_bank: Bank = Bank.NONE
    custom_notes: Optional[str] = None


# ─── Persistence Contract ────────────────────────────────────────────


class InvoiceRecord(BaseModel):
    """Flat record handed to an external store: two columns plus one JSON blob."""

    invoice_number: int
    buyer_name: str
    invoice_data: dict[str, Any] = Field(default_factory=dict)
