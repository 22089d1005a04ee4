"""
Flask route blueprints for Mini ERP POS.

This module contains all route handlers organized by functionality:
- main: Root redirect and shared request helpers
- catalog: Product listing, search and refresh
- cart: Cart lines and quantity controls
- checkout: Transaction submission
- api: Health check

Each blueprint is registered with the Flask app in create_app().
"""

from .main import main_bp
from .catalog import catalog_bp
from .cart import cart_bp
from .checkout import checkout_bp
from .api import api_bp

__all__ = [
    "main_bp",
    "catalog_bp",
    "cart_bp",
    "checkout_bp",
    "api_bp",
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app.

    Args:
        app: Flask application instance
    """
    app.register_blueprint(main_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(cart_bp)
    app.register_blueprint(checkout_bp)
    app.register_blueprint(api_bp)
