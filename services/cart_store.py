"""
In-memory cart store.

Holds the ordered cart lines for one register session. The store owns the
lines only; totals are never cached here and are recomputed by the pricing
engine from the full list on demand and after each mutation.

Observers:
    Callbacks registered with subscribe() receive a fresh OrderSummary after
    every mutation (add, adjust, remove, clear). The presentation layer uses
    this instead of polling.

Usage:
    cart = CartStore()
    cart.add("semen-padang", catalog_snapshot)
    cart.adjust_quantity("semen-padang", +1)
    summary = cart.summary(store_config.tax_rate)
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from core.exceptions import ProductNotFoundError
from models.cart import CartLine, OrderSummary
from models.catalog import CatalogSnapshot
from models.store_config import DEFAULT_TAX_RATE
from modules.pricing import compute_summary
from logging_config import get_logger


logger = get_logger(__name__)

SummaryCallback = Callable[[OrderSummary], None]


class QuantityAction(Enum):
    """Quantity intents from the cart controls."""

    INCREASE = "increase"
    DECREASE = "decrease"

    @property
    def delta(self) -> int:
        return 1 if self is QuantityAction.INCREASE else -1


class CartStore:
    """
    Ordered collection of cart lines keyed by product id.

    Insertion order is display order. Adding a product that is already in
    the cart bumps its quantity and keeps the original product snapshot,
    but only while the product is still in the catalog passed in.
    """

    def __init__(
        self,
        on_change: Optional[SummaryCallback] = None,
        tax_rate: float = DEFAULT_TAX_RATE,
    ):
        """
        Initialize an empty cart.

        Args:
            on_change: Optional first observer
            tax_rate: Rate used for the summaries sent to observers
        """
        self._lines: Dict[str, CartLine] = {}
        self._observers: List[SummaryCallback] = []
        self.tax_rate = tax_rate
        if on_change is not None:
            self._observers.append(on_change)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def items(self) -> Tuple[CartLine, ...]:
        """Current lines in insertion order."""
        return tuple(self._lines.values())

    def get_line(self, product_id: str) -> Optional[CartLine]:
        return self._lines.get(product_id)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines

    def summary(self, tax_rate: Optional[float] = None) -> OrderSummary:
        """
        Compute totals for the current lines.

        Args:
            tax_rate: Override for the store's rate
        """
        rate = self.tax_rate if tax_rate is None else tax_rate
        return compute_summary(self._lines.values(), rate)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, product_id: str, catalog: CatalogSnapshot) -> CartLine:
        """
        Add one unit of a product.

        Args:
            product_id: Product identifier
            catalog: Snapshot the product is looked up in

        Returns:
            The new or updated line

        Raises:
            ProductNotFoundError: If the product is not in the catalog
        """
        product = catalog.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        existing = self._lines.get(product_id)
        if existing is not None:
            line = existing.with_quantity(existing.quantity + 1)
        else:
            line = CartLine(product=product, quantity=1)

        self._lines[product_id] = line
        logger.debug(f"Cart add {product_id} -> qty {line.quantity}")
        self._notify()
        return line

    def adjust_quantity(self, product_id: str, delta: int) -> Optional[CartLine]:
        """
        Change a line's quantity by one unit.

        A line that would drop to zero is removed. Unknown product ids are
        ignored.

        Args:
            product_id: Product identifier
            delta: +1 or -1

        Returns:
            The updated line, or None if it was removed or never existed

        Raises:
            ValueError: If delta is not +1 or -1
        """
        if delta not in (1, -1):
            raise ValueError(f"Quantity delta must be +1 or -1, got {delta}")

        line = self._lines.get(product_id)
        if line is None:
            return None

        quantity = line.quantity + delta
        if quantity < 1:
            del self._lines[product_id]
            logger.debug(f"Cart remove {product_id} (quantity reached 0)")
            self._notify()
            return None

        line = line.with_quantity(quantity)
        self._lines[product_id] = line
        logger.debug(f"Cart adjust {product_id} -> qty {quantity}")
        self._notify()
        return line

    def remove(self, product_id: str) -> None:
        """Drop a line outright (no-op if absent)."""
        if self._lines.pop(product_id, None) is not None:
            logger.debug(f"Cart remove {product_id}")
            self._notify()

    def clear(self) -> None:
        """Remove every line."""
        self._lines.clear()
        logger.debug("Cart cleared")
        self._notify()

    def seed(self, product_id: str, catalog: CatalogSnapshot) -> Optional[CartLine]:
        """
        Put the default product in an empty cart.

        Skipped when the cart already has lines or the product is not in
        the catalog.
        """
        if not product_id or self._lines:
            return None
        if catalog.get_product(product_id) is None:
            logger.info(f"Default cart product {product_id} not in catalog, not seeding")
            return None
        return self.add(product_id, catalog)

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def subscribe(self, callback: SummaryCallback) -> Callable[[], None]:
        """
        Register an observer.

        Returns:
            A function that unregisters the observer
        """
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        if not self._observers:
            return
        summary = self.summary()
        for callback in list(self._observers):
            callback(summary)
