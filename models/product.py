"""
Product data model.

A Product is the canonical shape every catalog source is normalized into,
whatever its original field names were. Identity is the ``id`` field; all
other fields only change by re-fetching the catalog.

Unrecognized source fields are kept verbatim in ``extras`` so the canonical
fields stay typed while unmapped spreadsheet columns are not lost.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional


PRODUCT_IMAGE_TEMPLATE = "assets/img/products/{product_id}.png"

# Keys accepted from remote JSON records, mapped to Product field names.
# The Apps Script API returns the same object shape the browser client used,
# so both the canonical and the legacy camelCase/"weight" spellings appear.
_FIELD_ALIASES = {
    "id": "id",
    "sku": "id",
    "name": "name",
    "price": "price",
    "category": "category",
    "unit": "unit",
    "weight": "unit",
    "stock": "stock",
    "cost_price": "cost_price",
    "costPrice": "cost_price",
    "vendor": "vendor",
    "image": "image",
}


def parse_int(value: Any, default: int = 0) -> int:
    """
    Parse a spreadsheet number into an int, never raising.

    Decimal text is parsed as a float and truncated toward zero, so
    ``"1500.75"`` becomes 1500. Anything unparseable yields ``default``.

    Args:
        value: Raw cell or JSON value
        default: Result for empty or malformed input

    Returns:
        Parsed integer
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return default
    if not math.isfinite(number):
        return default
    return int(number)


def product_image_path(product_id: str) -> str:
    """Deterministic image path for a product without an explicit image."""
    return PRODUCT_IMAGE_TEMPLATE.format(product_id=product_id)


@dataclass(frozen=True)
class Product:
    """
    A single sellable item from the catalog.

    Prices are integers in the smallest currency unit (rupiah has no
    fractional sub-unit in this shop).
    """

    id: str
    """Product identifier (SKU), unique within a catalog."""

    name: str
    """Display name."""

    price: int
    """Unit selling price, non-negative."""

    category: str = ""
    """Category tag used for filtering (e.g., 'semen', 'genteng')."""

    unit: str = ""
    """Unit-of-measure label (e.g., '55Kg / 1 Karung')."""

    stock: Optional[int] = None
    """Stock count, or None when the source does not track stock."""

    cost_price: Optional[int] = None
    """Purchase price, if the source provides one."""

    vendor: str = ""
    """Supplier name."""

    image: str = ""
    """Image reference (URL or relative path)."""

    extras: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    """Unmapped source fields, read-only."""

    def __post_init__(self) -> None:
        if not isinstance(self.extras, MappingProxyType):
            object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        data = {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "unit": self.unit,
            "stock": self.stock,
            "cost_price": self.cost_price,
            "vendor": self.vendor,
            "image": self.image,
        }
        if self.extras:
            data["extras"] = dict(self.extras)
        return data

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        extras: Optional[Mapping[str, str]] = None,
    ) -> "Product":
        """
        Normalize a raw product record.

        Accepts canonical field names and the legacy aliases in
        ``_FIELD_ALIASES``. Keys that match neither are folded into
        ``extras`` as strings.

        Args:
            data: Raw record (remote JSON object or mapped CSV row)
            extras: Additional unmapped fields to keep

        Returns:
            Product instance

        Raises:
            ValueError: If the record has no identifier or no name
        """
        canonical: Dict[str, Any] = {}
        unmapped: Dict[str, str] = dict(extras or {})

        for key, value in data.items():
            target = _FIELD_ALIASES.get(key)
            if target is None:
                unmapped[str(key)] = "" if value is None else str(value)
            elif target not in canonical or canonical[target] in (None, ""):
                canonical[target] = value

        product_id = str(canonical.get("id") or "").strip()
        name = str(canonical.get("name") or "").strip()
        if not product_id or not name:
            raise ValueError("product record needs both an identifier and a name")

        stock = canonical.get("stock")
        cost_price = canonical.get("cost_price")
        image = str(canonical.get("image") or "").strip()

        return cls(
            id=product_id,
            name=name,
            price=max(parse_int(canonical.get("price")), 0),
            category=str(canonical.get("category") or "").strip(),
            unit=str(canonical.get("unit") or "").strip(),
            stock=None if stock is None else max(parse_int(stock), 0),
            cost_price=None if cost_price is None else max(parse_int(cost_price), 0),
            vendor=str(canonical.get("vendor") or "").strip(),
            image=image or product_image_path(product_id),
            extras=unmapped,
        )
