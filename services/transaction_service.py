"""
Transaction submission service.

Records one sale in the finance spreadsheet. Each call makes at most one
POST and never retries; the outcome is returned as a SubmitResult rather
than raised, so callers handle success and failure the same way.

Flow:
    1. Refuse an empty cart (no network call)
    2. Refuse when no endpoint is configured (no network call)
    3. Freeze the lines and summary into a TransactionRecord
    4. POST it once through SheetsAPIClient.save_transaction
    5. Wrap the acknowledgement or the error in a SubmitResult

The cart is never touched here. The register clears it after a successful
result.

Usage:
    service = TransactionService()
    result = service.submit(cart.items(), cart.summary(), store_config)
    if result.success:
        cart.clear()
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from core.api_client import SheetsAPIClient, DEFAULT_TIMEOUT_SECONDS
from core.exceptions import EmptyCartError, MissingEndpointError, SubmitError
from models.cart import CartLine, OrderSummary
from models.store_config import StoreConfig
from models.transaction import SubmitResult, TransactionRecord
from logging_config import get_logger


logger = get_logger(__name__)


class TransactionService:
    """Builds transaction records and submits them to the finance sheet."""

    def __init__(
        self,
        client_factory: Callable[..., SheetsAPIClient] = SheetsAPIClient,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Args:
            client_factory: Callable building a SheetsAPIClient
            timeout_seconds: Per-request timeout for the POST
        """
        self._client_factory = client_factory
        self._timeout = timeout_seconds

    def submit(
        self,
        lines: Iterable[CartLine],
        summary: OrderSummary,
        config: StoreConfig,
        record: Optional[TransactionRecord] = None,
    ) -> SubmitResult:
        """
        Submit one transaction.

        Args:
            lines: Cart lines to record
            summary: OrderSummary computed from the same lines
            config: Store configuration with endpoint and finance sheet id
            record: Pre-built record (tests pin the timestamp this way)

        Returns:
            SubmitResult; never raises for expected failures
        """
        lines = tuple(lines)
        if not lines:
            logger.info("Checkout refused: cart is empty")
            return SubmitResult.create_failed(EmptyCartError())

        if not config.has_endpoint:
            logger.warning("Checkout refused: Apps Script URL not configured")
            return SubmitResult.create_failed(MissingEndpointError())

        if record is None:
            record = TransactionRecord.build(lines, summary)

        logger.info(
            f"Submitting transaction {record.timestamp}: "
            f"{record.item_count} items, total {record.total}"
        )

        try:
            with self._client_factory(
                base_url=config.apps_script_url,
                secret_key=config.secret_key,
                timeout_seconds=self._timeout,
                logger=logger,
            ) as client:
                acknowledgement = client.save_transaction(
                    record.to_payload(), config.finance_sheet_id
                )
        except SubmitError as e:
            logger.error(f"Transaction {record.timestamp} not recorded: {e.message}")
            return SubmitResult.create_failed(e, record=record)

        logger.info(f"Transaction {record.timestamp} recorded")
        return SubmitResult.create_succeeded(record, acknowledgement)
