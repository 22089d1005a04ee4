"""
HTTP client for the spreadsheet-backed Apps Script web app.

This module wraps every network round trip the POS makes:
    - GET  <endpoint>?action=getInventory&sheetId=<id>   (structured catalog)
    - GET  <published CSV URL>                           (flat-file catalog)
    - POST <endpoint> {action: "saveTransaction", ...}   (record a sale)

Each call is a single request/response with no retry. Transport failures are
translated into the application's exception taxonomy here, so services never
see httpx exceptions.

Usage:
    with SheetsAPIClient(config.apps_script_url, config.secret_key) as client:
        products = client.fetch_inventory(config.inventory_sheet_id)

        ack = client.save_transaction(record.to_payload(), config.finance_sheet_id)
"""

from __future__ import annotations

import logging
from typing import Dict, Any, List, Optional

import httpx

from .exceptions import SourceFetchError, SubmitNetworkError, SubmitRejectedError


DEFAULT_TIMEOUT_SECONDS = 15.0


class SheetsAPIClient:
    """
    Thin wrapper around httpx for the Apps Script endpoint.

    One instance is meant to live for one operation (a catalog load or a
    checkout) and then be closed. The bearer credential is attached to every
    request made through this client.

    Attributes:
        base_url: Apps Script web app URL (may be empty for CSV-only use)
    """

    def __init__(
        self,
        base_url: str = "",
        secret_key: str = "",
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: Optional[logging.Logger] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Apps Script web app URL
            secret_key: Shared secret sent as a bearer token
            timeout_seconds: Per-request timeout
            logger: Logger instance (creates default if not provided)
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url
        self._logger = logger or logging.getLogger("mini_erp.core.api_client")
        self._http = httpx.Client(
            timeout=timeout_seconds,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {secret_key}",
            },
            follow_redirects=True,
            transport=transport,
        )

    def __enter__(self) -> "SheetsAPIClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._http.close()

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def fetch_inventory(self, sheet_id: str) -> List[Dict[str, Any]]:
        """
        Fetch the product list from the structured inventory API.

        Args:
            sheet_id: Inventory spreadsheet identifier

        Returns:
            List of raw product dicts. A body without a "products" list is
            treated as an empty catalog, not as an error.

        Raises:
            SourceFetchError: Network error, non-2xx status, or non-JSON body
        """
        params = {"action": "getInventory", "sheetId": sheet_id}
        self._logger.debug(f"GET {self.base_url} action=getInventory sheetId={sheet_id}")

        try:
            response = self._http.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise SourceFetchError("remote_api", f"HTTP error! status: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise SourceFetchError("remote_api", str(e)) from e
        except ValueError as e:
            raise SourceFetchError("remote_api", f"invalid JSON body: {e}") from e

        products = data.get("products") if isinstance(data, dict) else None
        if not isinstance(products, list):
            return []
        return [p for p in products if isinstance(p, dict)]

    def fetch_text(self, url: str, source: str = "remote_csv") -> str:
        """
        Download a plain-text document (the published CSV export).

        Args:
            url: Absolute URL of the document
            source: Source label used in the raised error

        Returns:
            Response body decoded as text

        Raises:
            SourceFetchError: Network error or non-2xx status
        """
        self._logger.debug(f"GET {url}")
        try:
            response = self._http.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SourceFetchError(source, f"HTTP error! status: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise SourceFetchError(source, str(e)) from e
        return response.text

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def save_transaction(self, record: Dict[str, Any], finance_sheet_id: str) -> Dict[str, Any]:
        """
        Record one transaction. Exactly one POST, never retried.

        Args:
            record: Serialized TransactionRecord (see TransactionRecord.to_payload)
            finance_sheet_id: Finance spreadsheet identifier

        Returns:
            Parsed response body when it carries ``success: true``

        Raises:
            SubmitNetworkError: No HTTP response was received
            SubmitRejectedError: Non-2xx status, non-JSON body, or success flag not set
        """
        body = {
            "action": "saveTransaction",
            "data": record,
            "sheetId": finance_sheet_id,
        }

        try:
            response = self._http.post(self.base_url, json=body)
        except httpx.HTTPError as e:
            raise SubmitNetworkError(str(e)) from e

        if not response.is_success:
            raise SubmitRejectedError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise SubmitRejectedError(
                f"Invalid response from transaction endpoint: {e}",
                status_code=response.status_code,
            ) from e

        if not isinstance(result, dict) or result.get("success") is not True:
            error = result.get("error") if isinstance(result, dict) else None
            raise SubmitRejectedError(error or "Checkout failed", status_code=response.status_code)

        return result
