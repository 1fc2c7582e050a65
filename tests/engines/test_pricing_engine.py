"""
Tests for the Pricing Engine — line and cart totals.
"""

from decimal import Decimal

from core.primitives.item import CartLine
from engines.pricing import (
    cart_subtotal,
    cart_tax,
    cart_total,
    cart_totals,
    line_subtotal,
    line_tax,
)


def _line(item_id, price, tax_rate, quantity):
    return CartLine(
        item_id=item_id,
        name=f"Item {item_id}",
        price=Decimal(price),
        tax_rate=Decimal(tax_rate),
        quantity=quantity,
    )


class TestLineTotals:
    def test_line_subtotal_and_tax(self):
        line = _line(1, "100", "10", 2)
        assert line_subtotal(line) == Decimal("200")
        assert line_tax(line) == Decimal("20")

    def test_zero_tax_rate(self):
        assert line_tax(_line(1, "9.99", "0", 3)) == Decimal("0")


class TestCartTotals:
    def test_empty_cart_is_zero(self):
        assert cart_subtotal([]) == Decimal("0")
        assert cart_tax([]) == Decimal("0")
        assert cart_total([]) == Decimal("0")

    def test_total_is_subtotal_plus_tax(self):
        lines = [
            _line(1, "100", "10", 2),
            _line(2, "200", "5", 1),
            _line(3, "19.99", "7.5", 3),
        ]
        assert cart_total(lines) == cart_subtotal(lines) + cart_tax(lines)

    def test_accepts_a_generator(self):
        lines = [_line(1, "100", "10", 2), _line(2, "150", "8", 3)]
        assert cart_total(line for line in lines) == Decimal("706")

    def test_no_intermediate_rounding(self):
        # 0.333333 tax per line; per-line rounding would give 0.99
        lines = [_line(i, "3.33", "10.01", 1) for i in range(1, 4)]
        assert cart_tax(lines) == Decimal("3.33") * Decimal("0.1001") * 3

    def test_display_totals_rounded(self):
        totals = cart_totals([_line(1, "100", "10", 2)])
        assert totals.to_dict() == {
            "subtotal": "200.00",
            "tax": "20.00",
            "total": "220.00",
        }

    def test_display_totals_half_up(self):
        totals = cart_totals([_line(1, "0.05", "10", 1)])
        assert totals.tax == Decimal("0.01")
        assert totals.total == Decimal("0.06")
