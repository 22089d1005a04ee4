"""Pricing engine: subtotal, PPN and total for a list of cart lines."""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from models.cart import CartLine, OrderSummary
from models.store_config import DEFAULT_TAX_RATE


def round_half_up(value: Decimal) -> int:
    """
    Round to the nearest integer, ties away from zero.

    ``Decimal("18150.5")`` -> 18151, ``Decimal("-2.5")`` -> -3.
    """
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_tax(subtotal: int, tax_rate: float = DEFAULT_TAX_RATE) -> int:
    """
    PPN on an integer subtotal.

    The rate goes through ``str`` before becoming a Decimal so 0.11 is
    exactly eleven hundredths, not the nearest binary float.
    """
    return round_half_up(Decimal(subtotal) * Decimal(str(tax_rate)))


def compute_summary(lines: Iterable[CartLine], tax_rate: float = DEFAULT_TAX_RATE) -> OrderSummary:
    """
    Compute the order summary from the complete list of lines.

    This is the only place totals are calculated. The live cart display and
    the transaction record both call it, so they cannot disagree.

    Args:
        lines: Every line currently in the cart
        tax_rate: PPN rate (defaults to 11%)

    Returns:
        OrderSummary with integer amounts
    """
    subtotal = 0
    item_count = 0
    for line in lines:
        subtotal += line.unit_price * line.quantity
        item_count += line.quantity

    tax = compute_tax(subtotal, tax_rate)
    return OrderSummary(
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
        item_count=item_count,
        tax_rate=tax_rate,
    )
