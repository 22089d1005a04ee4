"""
Store configuration model.

Identifiers and credentials for the spreadsheet back end. Loaded once at
startup by ``config.load_store_config``; an all-empty instance is a valid
configuration that simply routes the catalog loader to its fallbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any

DEFAULT_TAX_RATE = 0.11


@dataclass(frozen=True)
class StoreConfig:
    """Process-wide store settings."""

    inventory_sheet_id: str = ""
    """Spreadsheet holding the product catalog."""

    finance_sheet_id: str = ""
    """Spreadsheet transactions are written to."""

    apps_script_url: str = ""
    """Apps Script web app base URL."""

    secret_key: str = ""
    """Shared secret sent as a bearer token."""

    tax_rate: float = DEFAULT_TAX_RATE
    """PPN rate applied to the subtotal."""

    @property
    def has_endpoint(self) -> bool:
        """Whether transactions can be submitted."""
        return bool(self.apps_script_url.strip())

    @property
    def has_remote_inventory(self) -> bool:
        """Whether the structured inventory API should be tried."""
        return self.has_endpoint and bool(self.inventory_sheet_id.strip())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for diagnostics (secret redacted)."""
        return {
            "INVENTORY_SHEET_ID": self.inventory_sheet_id,
            "FINANCE_SHEET_ID": self.finance_sheet_id,
            "APPS_SCRIPT_URL": self.apps_script_url,
            "SECRET_KEY": "***" if self.secret_key else "",
            "TAX_RATE": self.tax_rate,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StoreConfig":
        """
        Create from the JSON configuration object.

        Raises:
            ValueError: If TAX_RATE is present but not a number in [0, 1]
        """
        tax_rate = data.get("TAX_RATE", DEFAULT_TAX_RATE)
        if tax_rate is None or tax_rate == "":
            tax_rate = DEFAULT_TAX_RATE
        tax_rate = float(tax_rate)
        if not 0.0 <= tax_rate <= 1.0:
            raise ValueError(f"TAX_RATE must be between 0 and 1, got {tax_rate}")

        return cls(
            inventory_sheet_id=str(data.get("INVENTORY_SHEET_ID") or ""),
            finance_sheet_id=str(data.get("FINANCE_SHEET_ID") or ""),
            apps_script_url=str(data.get("APPS_SCRIPT_URL") or ""),
            secret_key=str(data.get("SECRET_KEY") or ""),
            tax_rate=tax_rate,
        )

    @classmethod
    def empty(cls) -> "StoreConfig":
        """The all-empty fallback configuration."""
        return cls()
