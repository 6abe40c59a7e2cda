"""
Tests for the totals calculator.

Pure arithmetic — every rounding point is pinned with a concrete number.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import pytest
from pydantic import ValidationError

from invoice_engine.models import InvoiceTotals, LineItem, PricingConfig
from invoice_engine.money import round_half_away, to_decimal
from invoice_engine.totals import compute_totals, line_total


# ─── Test Data ───────────────────────────────────────────────────────


def _item(unit_price: Any, quantity: Any = 1, description: str = "کالا") -> LineItem:
    return LineItem(
        description=description,
        unit_price=Decimal(str(unit_price)),
        quantity=Decimal(str(quantity)),
    )


SCENARIO_ITEMS = [_item(100000, 2), _item(50000, 1)]

SCENARIO_CONFIG = PricingConfig(
    discount_enabled=True,
    discount_rate=Decimal(10),
    tax_enabled=True,
    tax_rate=Decimal(9),
)


# ═══════════════════════════════════════════════════════════════════════
# ROUNDING HELPER
# ═══════════════════════════════════════════════════════════════════════


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2.5", 3),
            ("2.4999", 2),
            ("3.5", 4),
            ("-2.5", -3),
            ("0.5", 1),
            ("7", 7),
        ],
    )
    def test_ties_go_away_from_zero(self, value, expected):
        assert round_half_away(Decimal(value)) == expected

    def test_float_input_does_not_carry_binary_noise(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert round_half_away(2.675) == 3


# ═══════════════════════════════════════════════════════════════════════
# SUBTOTAL
# ═══════════════════════════════════════════════════════════════════════


class TestSubtotal:
    def test_sum_of_price_times_quantity(self):
        totals = compute_totals(SCENARIO_ITEMS, PricingConfig())
        assert totals.sub_total == Decimal(250000)

    def test_fractional_subtotal_is_not_rounded(self):
        totals = compute_totals([_item("10.25", 3), _item("0.1", 1)], PricingConfig())
        assert totals.sub_total == Decimal("30.85")

    def test_empty_items_give_all_zero(self):
        totals = compute_totals(
            [],
            PricingConfig(
                discount_enabled=True,
                discount_rate=Decimal(10),
                tax_enabled=True,
                tax_rate=Decimal(9),
            ),
        )
        assert totals.sub_total == 0
        assert totals.discount_amount == 0
        assert totals.total_after_discount == 0
        assert totals.tax_amount == 0
        assert totals.total_amount == 0

    def test_line_total(self):
        assert line_total(_item(12500, 4)) == Decimal(50000)

    def test_accepts_generator(self):
        totals = compute_totals((item for item in SCENARIO_ITEMS), PricingConfig())
        assert totals.sub_total == Decimal(250000)


# ═══════════════════════════════════════════════════════════════════════
# DISCOUNT
# ═══════════════════════════════════════════════════════════════════════


class TestDiscount:
    @pytest.mark.parametrize("rate", ["0", "10", "33.3", "100"])
    def test_disabled_discount_is_zero_for_any_rate(self, rate):
        config = PricingConfig(discount_enabled=False, discount_rate=Decimal(rate))
        totals = compute_totals(SCENARIO_ITEMS, config)
        assert totals.discount_amount == 0
        assert totals.total_after_discount == totals.sub_total

    def test_discount_rounds_half_away_from_zero(self):
        # 25 * 10% = 2.5 → 3
        config = PricingConfig(discount_enabled=True, discount_rate=Decimal(10))
        totals = compute_totals([_item(25)], config)
        assert totals.discount_amount == 3
        assert totals.total_after_discount == Decimal(22)

    def test_after_discount_subtracts_the_rounded_amount(self):
        # 10.4 * 50% = 5.2 → 5; 10.4 - 5 = 5.4, not 5.2
        config = PricingConfig(discount_enabled=True, discount_rate=Decimal(50))
        totals = compute_totals([_item("10.4")], config)
        assert totals.discount_amount == 5
        assert totals.total_after_discount == Decimal("5.4")

    def test_enabled_zero_rate_matches_disabled(self):
        enabled = compute_totals(
            SCENARIO_ITEMS, PricingConfig(discount_enabled=True, discount_rate=Decimal(0))
        )
        disabled = compute_totals(SCENARIO_ITEMS, PricingConfig())
        assert enabled == disabled


# ═══════════════════════════════════════════════════════════════════════
# TAX
# ═══════════════════════════════════════════════════════════════════════


class TestTax:
    @pytest.mark.parametrize("rate", ["0", "9", "100"])
    def test_disabled_tax_is_zero_for_any_rate(self, rate):
        config = PricingConfig(tax_enabled=False, tax_rate=Decimal(rate))
        totals = compute_totals(SCENARIO_ITEMS, config)
        assert totals.tax_amount == 0
        assert totals.total_amount == totals.total_after_discount

    def test_enabled_zero_rate_matches_disabled(self):
        enabled = compute_totals(
            SCENARIO_ITEMS, PricingConfig(tax_enabled=True, tax_rate=Decimal(0))
        )
        disabled = compute_totals(SCENARIO_ITEMS, PricingConfig())
        assert enabled == disabled

    def test_tax_rounds_half_away_from_zero(self):
        # 50 * 9% = 4.5 → 5
        config = PricingConfig(tax_enabled=True, tax_rate=Decimal(9))
        totals = compute_totals([_item(50)], config)
        assert totals.tax_amount == 5
        assert totals.total_amount == Decimal(55)

    def test_tax_is_charged_on_discounted_base(self):
        # Gross 1000, 10% off → 900; 9% of 900 = 81 (not 90)
        config = PricingConfig(
            discount_enabled=True,
            discount_rate=Decimal(10),
            tax_enabled=True,
            tax_rate=Decimal(9),
        )
        totals = compute_totals([_item(1000)], config)
        assert totals.tax_amount == 81
        assert totals.total_amount == Decimal(981)

    def test_tax_rounded_independently(self):
        # 15 * 9% = 1.35 → 1; 16.5 * 9% = 1.485 → 1; 17 * 9% = 1.53 → 2
        config = PricingConfig(tax_enabled=True, tax_rate=Decimal(9))
        assert compute_totals([_item(15)], config).tax_amount == 1
        assert compute_totals([_item("16.5")], config).tax_amount == 1
        assert compute_totals([_item(17)], config).tax_amount == 2

    def test_fractional_rates_still_give_integer_amounts(self):
        config = PricingConfig(
            discount_enabled=True,
            discount_rate=Decimal("7.5"),
            tax_enabled=True,
            tax_rate=Decimal("9.25"),
        )
        totals = compute_totals([_item("1234.56", 3)], config)
        assert isinstance(totals.discount_amount, int)
        assert isinstance(totals.tax_amount, int)
        # 3703.68 * 7.5% = 277.776 → 278; 3425.68 * 9.25% = 316.8754 → 317
        assert totals.discount_amount == 278
        assert totals.tax_amount == 317


# ═══════════════════════════════════════════════════════════════════════
# END-TO-END & INVARIANTS
# ═══════════════════════════════════════════════════════════════════════


class TestScenario:
    def test_reference_invoice(self):
        totals = compute_totals(SCENARIO_ITEMS, SCENARIO_CONFIG)
        assert totals.sub_total == Decimal(250000)
        assert totals.discount_amount == 25000
        assert totals.total_after_discount == Decimal(225000)
        assert totals.tax_amount == 20250
        assert totals.total_amount == Decimal(245250)
        assert totals.amount_due == 245250

    def test_idempotent(self):
        first = compute_totals(SCENARIO_ITEMS, SCENARIO_CONFIG)
        second = compute_totals(SCENARIO_ITEMS, SCENARIO_CONFIG)
        assert first == second

    def test_inputs_are_not_mutated(self):
        before = [item.model_copy() for item in SCENARIO_ITEMS]
        compute_totals(SCENARIO_ITEMS, SCENARIO_CONFIG)
        assert SCENARIO_ITEMS == before

    @pytest.mark.parametrize(
        ("prices", "discount", "tax"),
        [
            (["99.99", "0.01"], "12.5", "9"),
            (["1"], "50", "50"),
            (["333.33", "666.67", "0.5"], "3", "10"),
            ([], "10", "9"),
        ],
    )
    def test_definitional_identity(self, prices, discount, tax):
        config = PricingConfig(
            discount_enabled=True,
            discount_rate=Decimal(discount),
            tax_enabled=True,
            tax_rate=Decimal(tax),
        )
        totals = compute_totals([_item(p, 2) for p in prices], config)
        assert totals.sub_total == sum(
            (Decimal(p) * 2 for p in prices), Decimal(0)
        )
        assert totals.total_amount == (
            totals.sub_total - totals.discount_amount + totals.tax_amount
        )


class TestOutOfContractInput:
    """Caller violations propagate as plain arithmetic rather than raising."""

    def test_negative_price_propagates(self):
        totals = compute_totals([_item(-100)], PricingConfig())
        assert totals.sub_total == Decimal(-100)
        assert totals.total_amount == Decimal(-100)

    def test_rate_above_hundred_is_not_clamped(self):
        config = PricingConfig(discount_enabled=True, discount_rate=Decimal(150))
        totals = compute_totals([_item(100)], config)
        assert totals.discount_amount == 150
        assert totals.total_after_discount == Decimal(-50)

    def test_totals_model_is_frozen(self):
        totals = compute_totals(SCENARIO_ITEMS, SCENARIO_CONFIG)
        assert isinstance(totals, InvoiceTotals)
        with pytest.raises(ValidationError):
            totals.tax_amount = 0  # type: ignore[misc]
