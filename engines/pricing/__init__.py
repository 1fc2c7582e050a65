"""
POS Billing Pricing Engine — Line and Cart Totals
===================================================
Pure functions over cart lines. No state, no rounding.

Sums carry full Decimal precision; callers round with
round_money() only where a value is shown or recorded, so
per-line rounding error never compounds across a cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from core.primitives.item import CartLine
from core.primitives.money import HUNDRED, ZERO, money_str, round_money


def line_subtotal(line: CartLine) -> Decimal:
    return line.price * line.quantity


def line_tax(line: CartLine) -> Decimal:
    return line_subtotal(line) * (line.tax_rate / HUNDRED)


def cart_subtotal(lines: Iterable[CartLine]) -> Decimal:
    return sum((line_subtotal(line) for line in lines), ZERO)


def cart_tax(lines: Iterable[CartLine]) -> Decimal:
    return sum((line_tax(line) for line in lines), ZERO)


def cart_total(lines: Iterable[CartLine]) -> Decimal:
    lines = tuple(lines)
    return cart_subtotal(lines) + cart_tax(lines)


@dataclass(frozen=True)
class CartTotals:
    """Display totals, rounded to cents."""
    subtotal: Decimal
    tax: Decimal
    total: Decimal

    def to_dict(self) -> dict:
        return {
            "subtotal": money_str(self.subtotal),
            "tax": money_str(self.tax),
            "total": money_str(self.total),
        }


def cart_totals(lines: Iterable[CartLine]) -> CartTotals:
    lines = tuple(lines)
    return CartTotals(
        subtotal=round_money(cart_subtotal(lines)),
        tax=round_money(cart_tax(lines)),
        total=round_money(cart_total(lines)),
    )
