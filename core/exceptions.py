"""
Custom exceptions for Mini ERP POS.

Exception Hierarchy:
    MiniERPError (base)
    ├── ConfigLoadError          - Store config unreadable (recovered: empty config)
    ├── SourceFetchError         - Catalog source failed (recovered: next source)
    ├── RowParseError            - One flat-file row unusable (recovered: row skipped)
    ├── CartPreconditionError    - Cart operation not allowed (reported to caller)
    │   ├── EmptyCartError
    │   ├── ProductNotFoundError
    │   └── CheckoutInProgressError
    ├── ConfigurationError       - Required setting missing (reported to caller)
    │   └── MissingEndpointError
    └── SubmitError              - Transaction not recorded (reported to caller)
        ├── SubmitNetworkError
        └── SubmitRejectedError

Usage:
    Recovered errors are caught inside the service that raised them and turned
    into a fallback state. Reported errors reach the caller, either raised or
    carried inside a SubmitResult. Nothing here is fatal to the process.
"""

from typing import Optional, Dict, Any


class MiniERPError(Exception):
    """
    Base exception for all Mini ERP POS errors.

    All custom exceptions inherit from this class, allowing callers to catch
    all application-specific errors with a single except clause if needed.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# RECOVERED ERRORS - Degrade to a fallback state
# =============================================================================

class ConfigLoadError(MiniERPError):
    """
    The store configuration file could not be read or parsed.

    Recovered by falling back to an all-empty StoreConfig, which in turn
    makes the catalog loader skip the remote structured API.
    """

    def __init__(self, path: str, reason: str):
        message = f"Could not load store configuration from {path}: {reason}"
        details = {
            "path": path,
            "resolution": "Check STORE_CONFIG_PATH and the JSON syntax of the file"
        }
        super().__init__(message, details)
        self.path = path
        self.reason = reason


class SourceFetchError(MiniERPError):
    """
    One catalog source failed (network error, non-2xx, unreadable file,
    or no usable products).

    Recovered by the catalog service, which moves on to the next source.
    """

    def __init__(self, source: str, reason: str):
        message = f"Catalog source '{source}' failed: {reason}"
        super().__init__(message, {"source": source})
        self.source = source
        self.reason = reason


class RowParseError(MiniERPError):
    """A single flat-file row could not be turned into a product."""

    def __init__(self, line_number: int, reason: str):
        message = f"Row {line_number} skipped: {reason}"
        super().__init__(message, {"line_number": line_number})
        self.line_number = line_number
        self.reason = reason


# =============================================================================
# CART PRECONDITIONS - Reported to caller, never retried
# =============================================================================

class CartPreconditionError(MiniERPError):
    """Base class for cart operations rejected before any state change."""


class EmptyCartError(CartPreconditionError):
    """Checkout was attempted with no lines in the cart."""

    def __init__(self, message: str = "Cart is empty"):
        super().__init__(message, {
            "resolution": "Add at least one product before checking out"
        })


class ProductNotFoundError(CartPreconditionError):
    """The requested product id is not in the current catalog."""

    def __init__(self, product_id: str):
        super().__init__(f"Product not found: {product_id}", {"product_id": product_id})
        self.product_id = product_id


class CheckoutInProgressError(CartPreconditionError):
    """A checkout was requested while another one is still outstanding."""

    def __init__(self, message: str = "A checkout is already in progress"):
        super().__init__(message)


# =============================================================================
# CONFIGURATION - Reported to caller
# =============================================================================

class ConfigurationError(MiniERPError):
    """A setting required for the requested operation is missing."""


class MissingEndpointError(ConfigurationError):
    """No Apps Script endpoint URL is configured, so nothing can be recorded."""

    def __init__(self, message: str = "Apps Script URL not configured"):
        super().__init__(message, {
            "setting": "APPS_SCRIPT_URL",
            "resolution": "Set APPS_SCRIPT_URL in the store configuration file"
        })


# =============================================================================
# SUBMISSION - Reported to caller, cart left untouched
# =============================================================================

class SubmitError(MiniERPError):
    """
    Base class for transaction submission failures.

    The submitter never retries. The cart is not modified when one of these
    is produced, so the user can simply try again.
    """


class SubmitNetworkError(SubmitError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""

    def __init__(self, reason: str):
        super().__init__(f"Could not reach transaction endpoint: {reason}")
        self.reason = reason


class SubmitRejectedError(SubmitError):
    """
    The endpoint answered but did not record the transaction.

    Either the HTTP status was not 2xx, the body was not JSON, or the body
    carried an explicit failure flag. The remote message is kept verbatim
    when one was provided.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        details = {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.status_code = status_code
