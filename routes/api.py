"""
API routes (service status).

Handles:
- /health - Health check endpoint
"""

from flask import Blueprint, current_app


api_bp = Blueprint("api", __name__)


@api_bp.route("/health", methods=["GET"])
def health():
    """
    Health check for monitoring.

    The POS always has a catalog (the built-in table is the last resort),
    so the service is healthy once the register exists. The catalog source
    and endpoint flag tell whether it runs degraded.
    """
    register = current_app.config.get("REGISTER")
    if register is None:
        return {"status": "unavailable"}, 503

    snapshot = register.catalog
    store_config = register.store_config
    return {
        "status": "ok",
        "catalog": {
            "source": snapshot.source,
            "products": len(snapshot),
            "fetched_at": snapshot.fetched_at.isoformat(),
        },
        "endpoint_configured": store_config.has_endpoint,
        "remote_inventory": store_config.has_remote_inventory,
        "cart_lines": len(register.cart),
        "checkout_in_progress": register.checkout_in_progress,
    }
