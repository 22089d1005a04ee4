"""
Catalog data models.

A CatalogSnapshot is the product list as it was last loaded, plus where it
came from. It is a frozen dataclass: a reload produces a new snapshot and
swaps the reference, it never edits the old one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional, Tuple

from .product import Product


SOURCE_REMOTE_API = "remote_api"
SOURCE_REMOTE_CSV = "remote_csv"
SOURCE_LOCAL_CSV = "local_csv"
SOURCE_FALLBACK = "fallback"
SOURCE_NONE = "none"


@dataclass(frozen=True)
class CatalogSnapshot:
    """
    Point-in-time product catalog.

    Usage:
        snapshot = catalog_service.get_snapshot()
        product = snapshot.get_product("semen-padang")
        for product in snapshot.filter_by_category("semen"):
            print(product.name, product.price)
    """

    products: Tuple[Product, ...]
    """Products in source order."""

    source: str
    """Which source produced this snapshot (see SOURCE_* constants)."""

    fetched_at: datetime
    """When this snapshot was loaded."""

    @property
    def is_loaded(self) -> bool:
        """Whether any source has been loaded yet."""
        return self.source != SOURCE_NONE

    def __len__(self) -> int:
        return len(self.products)

    def get_product(self, product_id: str) -> Optional[Product]:
        """
        Find a product by identifier.

        If a source lists the same id twice, the first occurrence wins.

        Args:
            product_id: Product identifier

        Returns:
            Product if found, None otherwise
        """
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def search(self, query: str) -> List[Product]:
        """
        Case-insensitive substring search over name and category.

        An empty query matches everything.
        """
        needle = query.strip().lower()
        if not needle:
            return list(self.products)
        return [
            p for p in self.products
            if needle in p.name.lower() or needle in p.category.lower()
        ]

    def filter_by_category(self, category: str) -> List[Product]:
        """Products whose category tag equals ``category`` exactly."""
        return [p for p in self.products if p.category == category]

    def categories(self) -> List[str]:
        """Distinct non-empty categories in first-seen order."""
        seen: Dict[str, None] = {}
        for product in self.products:
            if product.category:
                seen.setdefault(product.category, None)
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            "source": self.source,
            "fetched_at": self.fetched_at.isoformat(),
            "products": [p.to_dict() for p in self.products],
            "categories": self.categories(),
        }

    @classmethod
    def create(cls, products: List[Product], source: str) -> "CatalogSnapshot":
        """Create a snapshot stamped with the current time."""
        return cls(
            products=tuple(products),
            source=source,
            fetched_at=datetime.now(timezone.utc),
        )

    @classmethod
    def create_empty(cls) -> "CatalogSnapshot":
        """
        Create an empty snapshot (for initialization before first load).
        """
        return cls(
            products=(),
            source=SOURCE_NONE,
            fetched_at=datetime(2000, 1, 1, tzinfo=timezone.utc),
        )
