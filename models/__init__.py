"""
Data models for Mini ERP POS.

This module contains the dataclasses for:
- Product: Canonical catalog item
- CatalogSnapshot: Point-in-time product list
- CartLine / OrderSummary: Cart contents and derived totals
- TransactionRecord / SubmitResult: Recorded sale and submission outcome
- StoreConfig: Spreadsheet identifiers and credentials

Everything except the cart store's internal state is frozen: snapshots,
lines, summaries, and records are replaced, never edited in place.
"""

from .product import Product
from .catalog import CatalogSnapshot
from .cart import CartLine, OrderSummary
from .transaction import TransactionRecord, TransactionLine, TransactionStatus, SubmitResult
from .store_config import StoreConfig, DEFAULT_TAX_RATE

__all__ = [
    # Catalog models
    "Product",
    "CatalogSnapshot",
    # Cart models
    "CartLine",
    "OrderSummary",
    # Transaction models
    "TransactionRecord",
    "TransactionLine",
    "TransactionStatus",
    "SubmitResult",
    # Configuration
    "StoreConfig",
    "DEFAULT_TAX_RATE",
]
