"""
Services layer for Mini ERP POS.

This module contains the business logic services:
- CatalogService: Catalog loading through the source fallback chain
- CartStore: In-memory cart with change observers
- TransactionService: One-shot transaction submission
- Register: Session object wiring the three together

Request Model:
    Every network round trip (catalog load, checkout) is a single blocking
    httpx call made inside the Flask request that triggered it.
"""

from .catalog_service import CatalogService
from .cart_store import CartStore, QuantityAction
from .transaction_service import TransactionService
from .register import Register

__all__ = [
    "CatalogService",
    "CartStore",
    "QuantityAction",
    "TransactionService",
    "Register",
]
