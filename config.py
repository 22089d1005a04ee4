"""
Configuration for Mini ERP POS.

Two layers:
    - Config classes: Flask and application settings read from the
      environment (.env is loaded first).
    - StoreConfig: spreadsheet identifiers and the shared secret, read once
      at startup from the JSON file named by STORE_CONFIG_PATH. A missing
      or broken file is not fatal; it yields the empty configuration, which
      sends the catalog loader down its fallback chain.
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from core.exceptions import ConfigLoadError
from logging_config import get_logger
from models.store_config import StoreConfig

# Load .env file early so environment variables are available for Config class
# This must happen before the Config class is defined
load_dotenv(override=True)

# Base directory (where this file lives)
BASE_DIR = Path(__file__).resolve().parent

# Published CSV export of the inventory sheet
DEFAULT_CATALOG_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQeQzTtU6TzJRvBH3hy2kyedHOa4-sl6LkuEgLSr3qx3awtYZm1_rbzuB5BXJg3h9Oa-ZwWODhkKxfI"
    "/pub?gid=0&single=true&output=csv"
)

logger = get_logger(__name__)


class Config:
    """Default configuration for the Flask application."""

    # Flask settings
    SECRET_KEY = os.environ.get("FLASK_SECRET_KEY", "dev-secret-key")
    SESSION_COOKIE_NAME = "mini_erp_session"
    ENVIRONMENT = os.environ.get("FLASK_ENV", "development")

    # Debug mode
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"

    # ==========================================================================
    # Store back end
    # ==========================================================================
    # STORE_CONFIG_PATH: JSON file with INVENTORY_SHEET_ID, FINANCE_SHEET_ID,
    #   APPS_SCRIPT_URL, SECRET_KEY and optional TAX_RATE
    #
    # CATALOG_CSV_URL / LOCAL_CATALOG_PATH: second and third catalog sources.
    #   Set either to an empty string to skip that source.
    # ==========================================================================
    STORE_CONFIG_PATH = os.environ.get(
        "STORE_CONFIG_PATH", str(BASE_DIR / "config.json")
    )
    CATALOG_CSV_URL = os.environ.get("CATALOG_CSV_URL", DEFAULT_CATALOG_CSV_URL)
    LOCAL_CATALOG_PATH = os.environ.get(
        "LOCAL_CATALOG_PATH", str(BASE_DIR / "data" / "inventory.csv")
    )
    HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "15"))

    # ==========================================================================
    # Till behaviour
    # ==========================================================================
    # DEFAULT_CART_SEED: product id placed in the cart when a session starts
    #   (the shop's best seller). Empty string starts with an empty cart.
    # ==========================================================================
    DEFAULT_CART_SEED = os.environ.get("DEFAULT_CART_SEED", "semen-rajawali")
    DEFAULT_LANGUAGE = os.environ.get("DEFAULT_LANGUAGE", "id")
    MAX_QUERY_LENGTH = 100


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    TESTING = False


class TestingConfig(Config):
    """Testing configuration: no network sources, empty store config."""
    DEBUG = False
    TESTING = True
    STORE_CONFIG_PATH = ""
    CATALOG_CSV_URL = ""
    LOCAL_CATALOG_PATH = ""
    DEFAULT_CART_SEED = ""


def read_store_config(path: str) -> StoreConfig:
    """
    Read the store configuration file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        Parsed StoreConfig

    Raises:
        ConfigLoadError: File missing, unreadable, not a JSON object, or
            carrying an invalid TAX_RATE
    """
    if not path:
        raise ConfigLoadError("<unset>", "no configuration path given")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise ConfigLoadError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(path, "top-level value must be a JSON object")

    try:
        return StoreConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ConfigLoadError(path, str(e)) from e


def load_store_config(path: Optional[str]) -> StoreConfig:
    """
    Load the store configuration, falling back to the empty configuration.

    Never raises. The empty configuration is a valid state: it disables the
    structured inventory API and transaction recording.

    Args:
        path: Path to the JSON configuration file (None/empty allowed)

    Returns:
        StoreConfig
    """
    try:
        store_config = read_store_config(path or "")
    except ConfigLoadError as e:
        logger.warning(f"{e.message}; using empty store configuration")
        return StoreConfig.empty()

    logger.info(
        f"Store configuration loaded from {path} "
        f"(remote inventory: {store_config.has_remote_inventory}, "
        f"endpoint: {store_config.has_endpoint})"
    )
    return store_config
