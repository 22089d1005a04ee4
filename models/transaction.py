"""
Transaction data models.

These models represent a finalized sale as it is sent to the finance
spreadsheet, and the outcome of that single submission.

Immutability:
    - TransactionRecord is frozen. It is built once from the cart and the
      pricing engine's summary at checkout time and is never recomputed or
      patched while the request is in flight.
    - The acknowledgement lives in SubmitResult, not on the record; the
      record keeps status PENDING forever.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Any, Iterable, Optional, Tuple

from .cart import CartLine, OrderSummary


class TransactionStatus(Enum):
    """
    Status carried inside a transaction record.

    A record is always sent as PENDING; the endpoint's answer is reported
    through SubmitResult.
    """

    PENDING = "pending"
    """Record built and awaiting acknowledgement from the endpoint."""


@dataclass(frozen=True)
class TransactionLine:
    """One sold item inside a transaction record."""

    sku: str
    name: str
    unit_price: int
    quantity: int
    line_total: int

    @classmethod
    def from_cart_line(cls, line: CartLine) -> "TransactionLine":
        """Snapshot a cart line."""
        return cls(
            sku=line.product_id,
            name=line.product.name,
            unit_price=line.unit_price,
            quantity=line.quantity,
            line_total=line.line_total,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Wire shape expected by the Apps Script saveTransaction handler."""
        return {
            "sku": self.sku,
            "name": self.name,
            "price": self.unit_price,
            "quantity": self.quantity,
            "total": self.line_total,
        }


@dataclass(frozen=True)
class TransactionRecord:
    """
    Immutable snapshot of a completed sale.

    Usage:
        summary = compute_summary(lines, config.tax_rate)
        record = TransactionRecord.build(lines, summary)
        client.save_transaction(record.to_payload(), config.finance_sheet_id)
    """

    timestamp: str
    """ISO-8601 UTC timestamp of when the record was built."""

    items: Tuple[TransactionLine, ...]
    """Sold lines in cart order."""

    subtotal: int
    tax: int
    total: int

    status: TransactionStatus = TransactionStatus.PENDING

    @property
    def item_count(self) -> int:
        """Total number of units sold."""
        return sum(item.quantity for item in self.items)

    @classmethod
    def build(
        cls,
        lines: Iterable[CartLine],
        summary: OrderSummary,
        timestamp: Optional[datetime] = None,
    ) -> "TransactionRecord":
        """
        Build a record from cart lines and their summary.

        The totals are copied from ``summary`` rather than recomputed here,
        so the amount displayed to the cashier and the amount recorded
        always come from the same pricing computation.

        Args:
            lines: Current cart lines
            summary: OrderSummary computed from the same lines
            timestamp: Override for the record time (defaults to now, UTC)

        Returns:
            TransactionRecord with status PENDING
        """
        when = timestamp or datetime.now(timezone.utc)
        return cls(
            timestamp=when.isoformat().replace("+00:00", "Z"),
            items=tuple(TransactionLine.from_cart_line(line) for line in lines),
            subtotal=summary.subtotal,
            tax=summary.tax,
            total=summary.total,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize for the ``data`` field of a saveTransaction request."""
        return {
            "timestamp": self.timestamp,
            "items": [item.to_payload() for item in self.items],
            "subtotal": self.subtotal,
            "tax": self.tax,
            "total": self.total,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class SubmitResult:
    """
    Outcome of one submission attempt.

    Exactly one of ``acknowledgement`` (on success) or ``error`` (on
    failure) is meaningful. ``record`` is None when the submission was
    refused before a record could be built (empty cart, no endpoint).
    """

    success: bool
    """Whether the endpoint confirmed the transaction."""

    record: Optional[TransactionRecord] = None
    """The record that was (or would have been) sent."""

    acknowledgement: Dict[str, Any] = field(default_factory=dict)
    """Parsed response body from the endpoint on success."""

    error: Optional[Exception] = None
    """The failure, on unsuccessful submissions."""

    @property
    def message(self) -> str:
        """Best available diagnostic message."""
        if self.error is not None:
            return getattr(self.error, "message", str(self.error))
        return str(self.acknowledgement.get("message", ""))

    @classmethod
    def create_succeeded(
        cls,
        record: TransactionRecord,
        acknowledgement: Dict[str, Any],
    ) -> "SubmitResult":
        """Create a successful result."""
        return cls(success=True, record=record, acknowledgement=dict(acknowledgement))

    @classmethod
    def create_failed(
        cls,
        error: Exception,
        record: Optional[TransactionRecord] = None,
    ) -> "SubmitResult":
        """Create a failed result carrying the error."""
        return cls(success=False, record=record, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        data: Dict[str, Any] = {
            "success": self.success,
            "message": self.message,
            "record": self.record.to_payload() if self.record else None,
        }
        if self.error is not None:
            data["error_type"] = type(self.error).__name__
        return data
