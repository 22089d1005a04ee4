"""
Checkout route.

Handles:
- POST /api/checkout - Record the cart as one transaction

Status codes:
    200 - recorded, cart cleared
    400 - refused before sending (empty cart, endpoint not configured)
    409 - another checkout is still in flight
    502 - endpoint unreachable or rejected the record (cart kept)
"""

from flask import Blueprint

from core.exceptions import (
    CartPreconditionError,
    CheckoutInProgressError,
    ConfigurationError,
    EmptyCartError,
    MissingEndpointError,
)
from modules.i18n import translate
from logging_config import get_logger
from .main import cart_state, current_language, get_register


# Module logger
logger = get_logger(__name__)

checkout_bp = Blueprint("checkout", __name__)


@checkout_bp.route("/api/checkout", methods=["POST"])
def checkout():
    """Submit the cart to the finance sheet."""
    register = get_register()
    lang = current_language()

    try:
        result = register.checkout()
    except CheckoutInProgressError:
        return {
            "success": False,
            "message": translate("checkout.in_progress", lang),
            "error_type": CheckoutInProgressError.__name__,
        }, 409

    body = result.to_dict()
    body["cart"] = cart_state(register, lang)

    if result.success:
        body["message"] = translate("checkout.success", lang)
        return body

    error = result.error
    if isinstance(error, EmptyCartError):
        body["message"] = translate("checkout.empty_cart", lang)
        return body, 400
    if isinstance(error, MissingEndpointError):
        body["message"] = translate("checkout.not_configured", lang)
        return body, 400
    if isinstance(error, (CartPreconditionError, ConfigurationError)):
        return body, 400

    logger.warning(f"Checkout not recorded: {result.message}")
    body["message"] = translate("checkout.failed", lang, reason=result.message)
    return body, 502
