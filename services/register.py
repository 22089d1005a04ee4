"""
Register: the session object behind the till.

Routes cashier intents to the catalog, cart, pricing and transaction
components. One Register lives for the lifetime of the Flask app and is
stored in app.config["REGISTER"].

Checkout Guard:
    checkout() holds a non-blocking lock while its POST is in flight. A
    second checkout arriving in that window (double click, second browser
    tab) is rejected with CheckoutInProgressError instead of recording the
    sale twice.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional, Union

from core.exceptions import CheckoutInProgressError
from models.cart import CartLine, OrderSummary
from models.catalog import CatalogSnapshot
from models.product import Product
from models.store_config import StoreConfig
from models.transaction import SubmitResult
from modules.formatting import format_rupiah, unit_label
from services.cart_store import CartStore, QuantityAction
from services.catalog_service import CatalogService
from services.transaction_service import TransactionService
from logging_config import get_logger


logger = get_logger(__name__)


class Register:
    """
    Session-scoped owner of the cart.

    Attributes:
        cart: The CartStore for this session
        store_config: Store settings (tax rate, endpoint)
    """

    def __init__(
        self,
        catalog_service: CatalogService,
        cart_store: CartStore,
        transaction_service: TransactionService,
        store_config: StoreConfig,
    ):
        self._catalog_service = catalog_service
        self._transaction_service = transaction_service
        self.cart = cart_store
        self.store_config = store_config
        self.cart.tax_rate = store_config.tax_rate
        self._checkout_lock = threading.Lock()

    @property
    def checkout_in_progress(self) -> bool:
        return self._checkout_lock.locked()

    # -------------------------------------------------------------------------
    # Catalog intents
    # -------------------------------------------------------------------------

    def load_catalog(self) -> CatalogSnapshot:
        """Reload the catalog through the source chain."""
        return self._catalog_service.load_catalog()

    @property
    def catalog(self) -> CatalogSnapshot:
        return self._catalog_service.get_snapshot()

    def search(self, query: str) -> List[Product]:
        return self._catalog_service.search(query)

    def filter_by_category(self, category: str) -> List[Product]:
        return self._catalog_service.filter_by_category(category)

    # -------------------------------------------------------------------------
    # Cart intents
    # -------------------------------------------------------------------------

    def add(self, product_id: str) -> CartLine:
        """
        Add one unit of a product from the current catalog.

        Raises:
            ProductNotFoundError: If the product is not in the catalog
        """
        return self.cart.add(product_id, self.catalog)

    def adjust_quantity(
        self,
        product_id: str,
        action: Union[QuantityAction, str],
    ) -> Optional[CartLine]:
        """
        Apply an increase/decrease intent.

        Raises:
            ValueError: If action is not "increase" or "decrease"
        """
        if not isinstance(action, QuantityAction):
            action = QuantityAction(action)
        return self.cart.adjust_quantity(product_id, action.delta)

    def remove(self, product_id: str) -> None:
        self.cart.remove(product_id)

    def clear(self) -> None:
        self.cart.clear()

    def seed(self, product_id: str) -> Optional[CartLine]:
        """Place the default product in an empty cart, if it exists."""
        return self.cart.seed(product_id, self.catalog)

    def summary(self) -> OrderSummary:
        return self.cart.summary(self.store_config.tax_rate)

    # -------------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------------

    def checkout(self) -> SubmitResult:
        """
        Submit the current cart as one transaction.

        The cart is cleared only when the endpoint confirms the record; on
        any failure it is left exactly as it was.

        Returns:
            SubmitResult

        Raises:
            CheckoutInProgressError: If another checkout has not finished
        """
        if not self._checkout_lock.acquire(blocking=False):
            logger.warning("Checkout rejected: another checkout is in flight")
            raise CheckoutInProgressError()

        try:
            lines = self.cart.items()
            result = self._transaction_service.submit(
                lines, self.summary(), self.store_config
            )
            if result.success:
                self.cart.clear()
            return result
        finally:
            self._checkout_lock.release()

    # -------------------------------------------------------------------------
    # Presentation
    # -------------------------------------------------------------------------

    def state(self) -> Dict[str, Any]:
        """Cart lines and totals, with display strings, for the JSON API."""
        summary = self.summary()
        lines = []
        for line in self.cart.items():
            data = line.to_dict()
            data["unit_label"] = unit_label(line.product.unit)
            data["unit_price_display"] = format_rupiah(line.unit_price)
            data["line_total_display"] = format_rupiah(line.line_total)
            lines.append(data)

        summary_data = summary.to_dict()
        summary_data.update({
            "subtotal_display": format_rupiah(summary.subtotal),
            "tax_display": format_rupiah(summary.tax),
            "total_display": format_rupiah(summary.total),
        })

        return {
            "items": lines,
            "summary": summary_data,
            "checkout_in_progress": self.checkout_in_progress,
        }
