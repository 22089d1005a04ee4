"""Helper modules for the Mini ERP POS application."""

__all__ = [
    "csv_catalog",
    "fallback_catalog",
    "formatting",
    "i18n",
    "image_defaults",
    "pricing",
]
