"""
Centralized logging configuration for Mini ERP POS.

Every module logs under the ``mini_erp`` namespace so a single call to
setup_logging() controls the whole application, including the Flask
request threads the development server spawns.

Features:
    - Thread name in every log message (Flask serves each request on its own thread)
    - Console output (always enabled)
    - Rotating file logs (optional, for production)
    - Separate error log for ERROR/CRITICAL messages

Log Format:
    2026-03-02 10:15:30 [INFO    ] [MainThread] mini_erp.app - Starting Mini ERP POS
    2026-03-02 10:15:31 [WARNING ] [Thread-3] mini_erp.services.catalog_service - Catalog source 'remote_csv' failed
    2026-03-02 10:15:32 [INFO    ] [Thread-4] mini_erp.services.transaction_service - Transaction recorded

Usage:
    # At application startup
    from logging_config import setup_logging, get_logger

    setup_logging(log_level=logging.INFO, enable_file_logging=True)

    # In modules
    logger = get_logger(__name__)
    logger.info("This message includes thread context automatically")
"""

import logging
import sys
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


APP_LOGGER_NAME = "mini_erp"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


# =============================================================================
# THREAD CONTEXT FILTER
# =============================================================================

class ThreadContextFilter(logging.Filter):
    """
    Logging filter that adds the current thread name to each record.

    Adds ``thread_name`` so the format string can show which request
    thread produced a message.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.thread_name = threading.current_thread().name
        return True


# =============================================================================
# LOGGING SETUP
# =============================================================================

def setup_logging(
    app_name: str = APP_LOGGER_NAME,
    log_level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    enable_file_logging: bool = True,
) -> logging.Logger:
    """
    Configure application logging with thread context.

    This sets up:
    1. Console handler (always enabled)
    2. Rotating file handler (optional) - all levels
    3. Error file handler (optional) - ERROR/CRITICAL only

    Args:
        app_name: Name of the application logger (default: "mini_erp")
        log_level: Minimum log level (default: INFO)
        log_dir: Directory for log files (default: ./logs next to this file)
        enable_file_logging: Whether to write to log files (default: True)

    Returns:
        Configured application logger

    Example:
        # Development
        logger = setup_logging(log_level=logging.DEBUG, enable_file_logging=False)
    """
    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)
    logger.propagate = False  # Prevent duplicate logs to root logger

    # Allows re-configuration (e.g. one app per test)
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] [%(thread_name)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    thread_filter = ThreadContextFilter()

    # ---------------------------------------------------------------------
    # Console Handler (always enabled)
    # ---------------------------------------------------------------------
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(thread_filter)
    logger.addHandler(console_handler)

    # ---------------------------------------------------------------------
    # File Handlers (optional)
    # ---------------------------------------------------------------------
    if enable_file_logging:
        if log_dir is None:
            log_dir = Path(__file__).parent / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        app_log_file = log_dir / f"{app_name}.log"
        for path, level in (
            (app_log_file, log_level),
            (log_dir / f"{app_name}_error.log", logging.ERROR),
        ):
            logger.addHandler(_rotating_handler(path, level, formatter, thread_filter))

        logger.info(f"File logging enabled: {app_log_file}")

    logger.info(f"Logging configured at level {logging.getLevelName(log_level)}")
    return logger


def _rotating_handler(
    path: Path,
    level: int,
    formatter: logging.Formatter,
    thread_filter: logging.Filter,
) -> RotatingFileHandler:
    """10 MB x 5 rotating UTF-8 file handler."""
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(thread_filter)
    return handler


# =============================================================================
# LOGGER FACTORY
# =============================================================================

def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger under the application namespace.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance inheriting setup_logging() configuration

    Example:
        # In services/cart_store.py
        logger = get_logger(__name__)
        # Logger name: "mini_erp.services.cart_store"
    """
    if not name.startswith(APP_LOGGER_NAME):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
