"""
Mini ERP POS - Flask Application Entry Point.

This is a slim app factory that:
1. Loads the store configuration (empty config on failure, never fatal)
2. Loads the product catalog through the source fallback chain
3. Builds the register (cart + pricing + transaction submission)
4. Registers route blueprints
5. Sets up JSON error handlers and the language switch

ARCHITECTURE:
    Main Thread
    ├── Store config + initial catalog load
    └── Flask request handling
        ├── Catalog refresh   (one blocking httpx round trip)
        └── Checkout          (one blocking httpx POST, guarded)

Every service is created once here and stored in app.config for the routes.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, redirect, request, session, url_for
from werkzeug.exceptions import HTTPException

from logging_config import setup_logging, get_logger
from config import load_store_config
from core.api_client import SheetsAPIClient
from core.exceptions import MiniERPError
from services.catalog_service import CatalogService
from services.cart_store import CartStore
from services.register import Register
from services.transaction_service import TransactionService
from routes import register_blueprints
from modules.i18n import get_supported_languages


# Module logger (configured after setup_logging)
logger = get_logger(__name__)


def _get_base_path() -> Path:
    """
    Get the base path for the application.

    In PyInstaller bundle: Returns the directory containing the executable
    In development: Returns the directory containing app.py
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    else:
        return Path(__file__).parent


def create_app(
    config_object="config.Config",
    client_factory: Optional[Callable[..., SheetsAPIClient]] = None,
) -> Flask:
    """
    Application factory - creates and configures Flask app.

    Nothing here is fail-fast: a missing store config, an unreachable
    spreadsheet or a missing CSV file all degrade to the next fallback,
    down to the built-in catalog.

    Args:
        config_object: Config class, or its import path
        client_factory: Override for building SheetsAPIClient instances
            (tests pass one wired to an httpx.MockTransport)

    Returns:
        Configured Flask application
    """
    # Load .env from base path (next to executable in production)
    # Use override=True so .env file always takes precedence over shell environment
    base_path = _get_base_path()
    env_file = base_path / '.env'
    if env_file.exists():
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(override=True)  # Default behavior

    # Create Flask app
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.sort_keys = False

    # Configure logging
    log_level = logging.DEBUG if app.config.get("DEBUG") else logging.INFO
    enable_file_logging = app.config.get("ENVIRONMENT") == "production" and not app.testing

    root_logger = setup_logging(
        app_name="mini_erp",
        log_level=log_level,
        enable_file_logging=enable_file_logging
    )

    # Set Flask's logger to use our configured logger
    app.logger.handlers = root_logger.handlers
    app.logger.setLevel(log_level)

    logger.info(f"Starting Mini ERP POS in {app.config.get('ENVIRONMENT')} mode")

    # =========================================================================
    # STORE CONFIGURATION
    # =========================================================================

    store_config = load_store_config(app.config.get("STORE_CONFIG_PATH"))
    app.config["STORE_CONFIG"] = store_config

    # =========================================================================
    # SERVICES INITIALIZATION
    # =========================================================================

    factory = client_factory or SheetsAPIClient

    catalog_service = CatalogService(app.config, store_config, client_factory=factory)
    app.config["CATALOG_SERVICE"] = catalog_service

    transaction_service = TransactionService(
        client_factory=factory,
        timeout_seconds=app.config.get("HTTP_TIMEOUT_SECONDS"),
    )

    register = Register(
        catalog_service=catalog_service,
        cart_store=CartStore(),
        transaction_service=transaction_service,
        store_config=store_config,
    )
    app.config["REGISTER"] = register

    # Initial catalog load, then the optional onboarding line
    snapshot = register.load_catalog()
    logger.info(f"Initial catalog: {len(snapshot)} products from {snapshot.source}")

    seed_product = app.config.get("DEFAULT_CART_SEED")
    if seed_product:
        register.seed(seed_product)

    # =========================================================================
    # REGISTER BLUEPRINTS
    # =========================================================================

    register_blueprints(app)

    # =========================================================================
    # ERROR HANDLERS
    # =========================================================================

    @app.errorhandler(MiniERPError)
    def handle_app_error(e):
        logger.error(f"Unhandled application error: {e}", exc_info=True)
        return jsonify({
            "success": False,
            "message": e.message,
            "error_type": type(e).__name__,
        }), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"success": False, "message": e.description}), e.code

    @app.errorhandler(500)
    def handle_server_error(e):
        logger.error(f"500 error: {e}", exc_info=True)
        return jsonify({
            "success": False,
            "message": "An unexpected error occurred. Please try again.",
        }), 500

    # =========================================================================
    # LANGUAGE ROUTE
    # =========================================================================

    @app.route("/set_language/<lang>", methods=["GET"])
    def set_language(lang: str):
        if lang in get_supported_languages():
            session["language"] = lang
            session.modified = True
        else:
            logger.warning(f"Unsupported language requested: {lang}")
        return redirect(request.referrer or url_for("main.index"))

    logger.info("Application initialized successfully")
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = os.environ.get("FLASK_DEBUG", "1") == "1"
    app.run(debug=debug_mode)
