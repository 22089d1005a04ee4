"""
Cart data models.

These models represent what is in the cart and what it costs.

Immutability:
    - CartLine is frozen; the cart store replaces a line instead of
      mutating it, so a line handed to the presentation layer never
      changes underneath it.
    - OrderSummary is frozen and is only ever produced by the pricing
      engine from the full list of lines.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Any

from .product import Product


@dataclass(frozen=True)
class CartLine:
    """
    One product in the cart.

    The product is a snapshot taken when the line was first added. Adding
    the same product again bumps the quantity but keeps this snapshot.
    """

    product: Product
    """Product snapshot at add time."""

    quantity: int
    """Number of units, always >= 1 while the line exists."""

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"CartLine quantity must be >= 1, got {self.quantity}")

    @property
    def product_id(self) -> str:
        """Identifier of the product on this line."""
        return self.product.id

    @property
    def unit_price(self) -> int:
        """Price per unit from the snapshot."""
        return self.product.price

    @property
    def line_total(self) -> int:
        """unit_price x quantity."""
        return self.product.price * self.quantity

    def with_quantity(self, quantity: int) -> "CartLine":
        """Return a copy of this line with a new quantity."""
        return replace(self, quantity=quantity)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            "product_id": self.product.id,
            "name": self.product.name,
            "unit": self.product.unit,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "line_total": self.line_total,
            "image": self.product.image,
        }


@dataclass(frozen=True)
class OrderSummary:
    """
    Totals derived from the current cart.

    Never stored next to the cart; recompute it from the lines whenever it
    is needed.
    """

    subtotal: int
    """Sum of unit_price x quantity over all lines."""

    tax: int
    """PPN amount, round-half-up of subtotal x tax_rate."""

    total: int
    """subtotal + tax."""

    item_count: int
    """Sum of quantities over all lines."""

    tax_rate: float
    """Rate the tax was computed with."""

    @property
    def is_empty(self) -> bool:
        """Whether the summary describes an empty cart."""
        return self.item_count == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            "subtotal": self.subtotal,
            "tax": self.tax,
            "total": self.total,
            "item_count": self.item_count,
            "tax_rate": self.tax_rate,
        }
