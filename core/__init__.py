"""
Core module for Mini ERP POS.

Contains fundamental infrastructure components:
- exceptions: Custom exception hierarchy
- api_client: HTTP client for the Apps Script inventory/finance endpoint
"""

from .exceptions import (
    MiniERPError,
    ConfigLoadError,
    SourceFetchError,
    RowParseError,
    CartPreconditionError,
    EmptyCartError,
    ProductNotFoundError,
    CheckoutInProgressError,
    ConfigurationError,
    MissingEndpointError,
    SubmitError,
    SubmitNetworkError,
    SubmitRejectedError,
)
from .api_client import SheetsAPIClient

__all__ = [
    "MiniERPError",
    "ConfigLoadError",
    "SourceFetchError",
    "RowParseError",
    "CartPreconditionError",
    "EmptyCartError",
    "ProductNotFoundError",
    "CheckoutInProgressError",
    "ConfigurationError",
    "MissingEndpointError",
    "SubmitError",
    "SubmitNetworkError",
    "SubmitRejectedError",
    "SheetsAPIClient",
]
