"""
Proforma Invoice Engine — FastAPI Server
=========================================

HTTP front for the invoice form: totals, amount in words, and the record
shape an external store saves.

Endpoints:
    POST /totals            Compute totals for line items + pricing toggles
    POST /words             Spell out a Rial amount in Persian
    GET  /invoices/new      Blank draft with the next invoice number
    POST /invoices/record   Build the storable record for a finished draft
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from invoice_engine import __version__
from invoice_engine.formatting import format_currency
from invoice_engine.models import (
    InvoiceDraft,
    InvoiceRecord,
    InvoiceTotals,
    LineItem,
    PricingConfig,
)
from invoice_engine.number_to_words import number_to_words
from invoice_engine.record import build_record, new_draft
from invoice_engine.settings import Settings, load_settings
from invoice_engine.totals import compute_totals

load_dotenv()


# ─── Application Lifespan (load settings once) ──────────────────────

_settings: Settings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Read INVOICE_* settings on startup; a bad value fails the boot."""
    global _settings  # noqa: PLW0603
    _settings = load_settings()
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Proforma Invoice Engine API",
    description=(
        "Deterministic invoice totals (two-stage discount/tax rounding) "
        "and Persian amount-in-words for Rial invoices."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────
# Range checks live here, at the input boundary, the same ones the form
# enforced. The engine itself accepts anything.


class LineItemIn(LineItem):
    """API-facing line item with the form's validation rules."""

    description: str = Field(..., min_length=1)
    unit_price: Decimal = Field(..., ge=0)
    quantity: Decimal = Field(Decimal(1), ge=1)


class PricingIn(PricingConfig):
    """API-facing pricing toggles; rates must be percentages in [0, 100]."""

    discount_rate: Decimal = Field(Decimal(0), ge=0, le=100)
    tax_rate: Decimal = Field(Decimal(0), ge=0, le=100)


class TotalsRequest(BaseModel):
    """Request body for the /totals endpoint."""

    items: list[LineItemIn] = Field(default_factory=list)
    pricing: PricingIn = Field(default_factory=PricingIn)

    model_config = {"json_schema_extra": {"example": {
        "items": [
            {"description": "کولر گازی", "unit_price": 100000, "quantity": 2},
            {"description": "نصب", "unit_price": 50000, "quantity": 1},
        ],
        "pricing": {
            "discount_enabled": True,
            "discount_rate": 10,
            "tax_enabled": True,
            "tax_rate": 9,
        },
    }}}


class TotalsResponse(InvoiceTotals):
    """Totals plus the display strings printed on the invoice."""

    amount_in_words: str
    formatted: dict[str, str]


class WordsRequest(BaseModel):
    amount: int = Field(..., ge=0, description="Whole Rial amount.")


class WordsResponse(BaseModel):
    amount: int
    words: str
    formatted: str


class InvoiceDraftIn(InvoiceDraft):
    """API-facing draft: a buyer name is required and rows are validated."""

    buyer_name: str = Field(..., min_length=2)
    items: list[LineItemIn]
    pricing: PricingIn = Field(default_factory=PricingIn)


class HealthResponse(BaseModel):
    status: str
    version: str
    start_number: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> Settings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Settings not loaded")
    return _settings


def _build_totals_response(totals: InvoiceTotals) -> TotalsResponse:
    """Attach words and fa-IR formatted strings to computed totals."""
    formatted = {
        "sub_total": format_currency(totals.sub_total),
        "discount_amount": format_currency(totals.discount_amount),
        "tax_amount": format_currency(totals.tax_amount),
        "total_amount": format_currency(totals.total_amount),
    }
    return TotalsResponse(
        **totals.model_dump(),
        amount_in_words=number_to_words(totals.amount_due),
        formatted=formatted,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post("/totals", summary="Compute invoice totals", tags=["Calculation"])
def calculate_totals(request: TotalsRequest) -> TotalsResponse:
    """Run the totals calculation for the submitted rows and toggles.

    Returns the raw amounts, the grand total spelled out in Persian, and
    each amount formatted with Persian digits and thousands separators.
    """
    totals = compute_totals(request.items, request.pricing)
    return _build_totals_response(totals)


@app.post("/words", summary="Spell out a Rial amount", tags=["Calculation"])
def spell_amount(request: WordsRequest) -> WordsResponse:
    return WordsResponse(
        amount=request.amount,
        words=number_to_words(request.amount),
        formatted=format_currency(request.amount),
    )


@app.get(
    "/invoices/new",
    summary="Blank invoice draft",
    tags=["Invoices"],
    responses={503: {"description": "Settings not yet loaded"}},
)
def blank_invoice(
    invoice_date: str = Query(..., min_length=1),
    last_number: Optional[int] = Query(None, ge=0),
) -> InvoiceDraft:
    """Draft with the next invoice number and the configured default rates."""
    settings = _get_settings()
    return new_draft(settings, invoice_date=invoice_date, last_number=last_number)


@app.post("/invoices/record", summary="Build the storable record", tags=["Invoices"])
def invoice_record(draft: InvoiceDraftIn) -> InvoiceRecord:
    """Flatten a finished draft into invoice_number, buyer_name and invoice_data.

    Nothing is saved; the caller inserts the returned record.
    """
    return build_record(draft)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Settings not yet loaded"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    settings = _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        start_number=settings.start_number,
    )
