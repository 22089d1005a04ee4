"""
Cart routes.

Handles:
- GET    /api/cart                              - Lines and totals
- POST   /api/cart/items                        - Add one unit {product_id}
- POST   /api/cart/items/<product_id>/<action>  - increase / decrease
- DELETE /api/cart/items/<product_id>           - Remove a line
- DELETE /api/cart                              - Empty the cart
"""

from flask import Blueprint, request

from core.exceptions import ProductNotFoundError
from services.cart_store import QuantityAction
from modules.i18n import translate
from logging_config import get_logger
from .main import cart_state, current_language, get_register, sanitize_text


# Module logger
logger = get_logger(__name__)

cart_bp = Blueprint("cart", __name__)

MAX_PRODUCT_ID_LENGTH = 100


@cart_bp.route("/api/cart", methods=["GET"])
def get_cart():
    """Current cart state."""
    return cart_state(get_register(), current_language())


@cart_bp.route("/api/cart/items", methods=["POST"])
def add_item():
    """Add one unit of a product from the current catalog."""
    register = get_register()
    lang = current_language()

    payload = request.get_json(silent=True)
    if payload is None:
        raw_id = request.form.get("product_id")
    elif isinstance(payload, dict):
        raw_id = payload.get("product_id")
    else:
        raw_id = None

    if not isinstance(raw_id, str) or not raw_id.strip():
        logger.info(f"Add rejected, bad product_id in request body: {raw_id!r}")
        state = cart_state(register, lang)
        state.update({
            "success": False,
            "message": translate("cart.invalid_product", lang),
        })
        return state, 400

    product_id = sanitize_text(raw_id, MAX_PRODUCT_ID_LENGTH)

    try:
        line = register.add(product_id)
    except ProductNotFoundError:
        logger.info(f"Add rejected, unknown product: {product_id!r}")
        state = cart_state(register, lang)
        state.update({
            "success": False,
            "message": translate("cart.not_found", lang, product_id=product_id),
        })
        return state, 404

    state = cart_state(register, lang)
    state.update({
        "success": True,
        "message": translate("cart.added", lang, name=line.product.name),
    })
    return state


@cart_bp.route("/api/cart/items/<product_id>/<action>", methods=["POST"])
def adjust_item(product_id: str, action: str):
    """Increase or decrease a line by one unit."""
    register = get_register()
    lang = current_language()
    product_id = sanitize_text(product_id, MAX_PRODUCT_ID_LENGTH)

    try:
        quantity_action = QuantityAction(action)
    except ValueError:
        state = cart_state(register, lang)
        state.update({
            "success": False,
            "message": translate("cart.invalid_action", lang, action=sanitize_text(action, 20)),
        })
        return state, 400

    register.adjust_quantity(product_id, quantity_action)
    state = cart_state(register, lang)
    state["success"] = True
    return state


@cart_bp.route("/api/cart/items/<product_id>", methods=["DELETE"])
def remove_item(product_id: str):
    """Remove a line regardless of quantity."""
    register = get_register()
    register.remove(sanitize_text(product_id, MAX_PRODUCT_ID_LENGTH))
    state = cart_state(register, current_language())
    state["success"] = True
    return state


@cart_bp.route("/api/cart", methods=["DELETE"])
def clear_cart():
    """Empty the cart."""
    register = get_register()
    lang = current_language()
    register.clear()
    state = cart_state(register, lang)
    state.update({
        "success": True,
        "message": translate("cart.cleared", lang),
    })
    return state
