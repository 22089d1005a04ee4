"""
Catalog routes.

Handles:
- GET  /api/products          - List, search (?q=) and filter (?category=)
- POST /api/catalog/refresh   - Reload through the source chain
"""

from flask import Blueprint, current_app, request

from modules.i18n import translate
from modules.image_defaults import get_default_image
from modules.formatting import format_rupiah
from logging_config import get_logger
from .main import current_language, get_register, sanitize_text


# Module logger
logger = get_logger(__name__)

catalog_bp = Blueprint("catalog", __name__)


@catalog_bp.route("/api/products", methods=["GET"])
def list_products():
    """
    Product listing for the catalog grid.

    ``q`` and ``category`` combine: the search result is narrowed to the
    category when both are given.
    """
    register = get_register()
    max_length = current_app.config.get("MAX_QUERY_LENGTH", 100)
    query = sanitize_text(request.args.get("q"), max_length)
    category = sanitize_text(request.args.get("category"), max_length)

    products = register.search(query)
    if category:
        products = [p for p in products if p.category == category]

    snapshot = register.catalog
    return {
        "products": [_product_entry(p) for p in products],
        "count": len(products),
        "query": query,
        "category": category,
        "categories": snapshot.categories(),
        "source": snapshot.source,
    }


@catalog_bp.route("/api/catalog/refresh", methods=["POST"])
def refresh_catalog():
    """Reload the catalog. Always succeeds; the source tells which one won."""
    snapshot = get_register().load_catalog()
    logger.info(f"Catalog refreshed on request: {snapshot.source}")
    return {
        "success": True,
        "message": translate("catalog.refreshed", current_language(), source=snapshot.source),
        "source": snapshot.source,
        "count": len(snapshot),
        "fetched_at": snapshot.fetched_at.isoformat(),
    }


def _product_entry(product) -> dict:
    """Product dict plus the display price and a placeholder image."""
    data = product.to_dict()
    data["price_display"] = format_rupiah(product.price)
    data["placeholder_image"] = get_default_image(product.category)
    return data
