"""
POS Billing Money Primitive — Decimal Amounts and Rounding
============================================================
Single currency, decimal arithmetic.

RULES (NON-NEGOTIABLE):
- Monetary values are decimal.Decimal, never float
- Computation keeps full precision
- Two-place ROUND_HALF_UP rounding happens only where a value
  is displayed or recorded (round_money)
- Inputs are bounded (MAX_AMOUNT, MAX_QUANTITY) so every stored
  value stays within Decimal context precision once rounded

This file contains NO persistence logic.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from core.errors import ValidationError

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")

MAX_AMOUNT = Decimal("1000000000000")
MAX_QUANTITY = 1_000_000_000


def to_decimal(
    value: Any,
    field: str,
    *,
    maximum: Decimal = MAX_AMOUNT,
) -> Decimal:
    """
    Coerce a pre-parsed numeric value to Decimal.

    Accepts int, Decimal, float and numeric strings. Rejects None,
    empty strings, booleans, non-finite values and magnitudes above
    maximum. Negative zero comes back as zero.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required.", field=field)
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be numeric.", field=field)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValidationError(
                f"{field} must be numeric.", field=field,
            ) from exc
    elif isinstance(value, float):
        # repr round-trips, so 0.1 stays 0.1 rather than its binary expansion
        result = Decimal(repr(value))
    else:
        raise ValidationError(f"{field} must be numeric.", field=field)

    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number.", field=field)
    if abs(result) > maximum:
        raise ValidationError(
            f"{field} must not exceed {maximum:,}.",
            field=field,
            maximum=str(maximum),
        )
    if result.is_zero():
        result = abs(result)
    return result


def to_non_negative_decimal(value: Any, field: str) -> Decimal:
    result = to_decimal(value, field)
    if result < ZERO:
        raise ValidationError(f"{field} cannot be negative.", field=field)
    return result


def to_quantity(value: Any, field: str, *, minimum: Optional[int] = 0) -> int:
    """Coerce a whole-number quantity; fractional values are rejected."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required.", field=field)
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer.", field=field)
    if isinstance(value, int):
        result = value
    else:
        number = to_decimal(value, field, maximum=Decimal(MAX_QUANTITY))
        if number != number.to_integral_value():
            raise ValidationError(f"{field} must be an integer.", field=field)
        result = int(number)

    if minimum is not None and result < minimum:
        raise ValidationError(
            f"{field} must be >= {minimum}.", field=field, minimum=minimum,
        )
    if result > MAX_QUANTITY:
        raise ValidationError(
            f"{field} must not exceed {MAX_QUANTITY:,}.",
            field=field,
            maximum=MAX_QUANTITY,
        )
    return result


def round_money(amount: Decimal) -> Decimal:
    """Round to cents. Call at display/recording boundaries only."""
    result = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    if result.is_zero():
        result = abs(result)
    return result


def money_str(amount: Decimal) -> str:
    """JSON-safe rendering: '220.00'."""
    return str(round_money(amount))


def format_money(amount: Decimal) -> str:
    """Receipt rendering: '$220.00'."""
    return f"${round_money(amount):,}"
