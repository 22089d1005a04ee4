"""
Main routes (home, language-aware helpers).

The POS is driven by the JSON API; the root URL sends callers to the
current cart.
"""

from typing import Optional

import bleach
from flask import Blueprint, current_app, redirect, request, session, url_for

from modules.i18n import DEFAULT_LANGUAGE, get_supported_languages, translate

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    """Redirect root to the cart."""
    return redirect(url_for("cart.get_cart"))


def sanitize_text(text: Optional[str], max_length: Optional[int] = None) -> str:
    """
    Sanitize user input text to prevent XSS and injection attacks.

    Args:
        text: Raw input text
        max_length: Optional maximum length to enforce

    Returns:
        Sanitized text safe for lookups and echoing back in responses
    """
    if not text:
        return ""

    text = bleach.clean(text.strip(), tags=[], strip=True)

    if max_length and len(text) > max_length:
        text = text[:max_length]

    return text


def current_language() -> str:
    """
    Language for response messages.

    A ``lang`` query parameter wins, then the session choice made through
    /set_language, then the configured default.
    """
    lang = request.args.get("lang") or session.get("language")
    if lang in get_supported_languages():
        return lang
    return current_app.config.get("DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)


def get_register():
    """The Register created by the app factory."""
    return current_app.config["REGISTER"]


def cart_state(register, lang: str) -> dict:
    """Register state with the localized summary labels added."""
    state = register.state()
    summary = state["summary"]
    percent = round(summary["tax_rate"] * 100, 2)
    summary["tax_label"] = translate("summary.tax_label", lang, percent=f"{percent:g}")
    summary["item_count_label"] = translate("summary.item_count", lang, count=summary["item_count"])
    if not state["items"]:
        state["empty_message"] = translate("cart.empty", lang)
    return state
