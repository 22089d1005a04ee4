"""
Catalog service with an ordered source fallback chain.

The catalog is loaded on demand (at startup and on explicit refresh). Each
load walks the sources in order and keeps the first one that yields at least
one product:

    1. remote_api  - Apps Script getInventory (needs sheet id + endpoint)
    2. remote_csv  - published CSV export of the inventory sheet
    3. local_csv   - CSV file bundled with the install
    4. fallback    - built-in product table (cannot fail)

A failing source is logged at WARNING and skipped; load_catalog() itself
never raises.

Snapshot Model:
    - Every load builds a new frozen CatalogSnapshot and swaps the reference
    - Routes read the current snapshot via get_snapshot()
    - A snapshot handed out earlier is never modified

Usage:
    catalog_service = CatalogService(app.config, store_config)
    snapshot = catalog_service.load_catalog()
    print(snapshot.source, len(snapshot))
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Tuple

from core.api_client import SheetsAPIClient, DEFAULT_TIMEOUT_SECONDS
from core.exceptions import SourceFetchError
from models.catalog import (
    CatalogSnapshot,
    SOURCE_FALLBACK,
    SOURCE_LOCAL_CSV,
    SOURCE_REMOTE_API,
    SOURCE_REMOTE_CSV,
)
from models.product import Product
from models.store_config import StoreConfig
from modules.csv_catalog import parse_catalog_csv
from modules.fallback_catalog import get_fallback_products
from logging_config import get_logger


# Module logger
logger = get_logger(__name__)

ClientFactory = Callable[..., SheetsAPIClient]


class CatalogService:
    """
    Loads the product catalog and serves queries over the latest snapshot.

    Attributes:
        csv_url: Published CSV URL ("" disables the source)
        local_path: Bundled CSV path ("" disables the source)
    """

    def __init__(
        self,
        config: Mapping[str, Any],
        store_config: StoreConfig,
        client_factory: ClientFactory = SheetsAPIClient,
    ):
        """
        Initialize catalog service.

        Args:
            config: Flask config (or any mapping) with CATALOG_CSV_URL,
                LOCAL_CATALOG_PATH and HTTP_TIMEOUT_SECONDS
            store_config: Store identifiers and credentials
            client_factory: Callable building a SheetsAPIClient; tests pass
                one wired to an httpx.MockTransport
        """
        self._store_config = store_config
        self._client_factory = client_factory
        self.csv_url = (config.get("CATALOG_CSV_URL") or "").strip()
        self.local_path = (config.get("LOCAL_CATALOG_PATH") or "").strip()
        self._timeout = float(config.get("HTTP_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS)

        # Start with empty snapshot so get_snapshot() never returns None
        self._current_snapshot: CatalogSnapshot = CatalogSnapshot.create_empty()

        logger.info(
            f"CatalogService initialized (remote api: {store_config.has_remote_inventory}, "
            f"csv url: {bool(self.csv_url)}, local path: {self.local_path or '-'})"
        )

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load_catalog(self) -> CatalogSnapshot:
        """
        Load the catalog from the first source that yields products.

        Returns:
            The new current CatalogSnapshot (never empty)
        """
        for source, loader in self._sources():
            try:
                products = loader()
            except SourceFetchError as e:
                logger.warning(f"{e.message}; trying next source")
                continue

            if not products:
                logger.warning(f"Catalog source '{source}' returned no products; trying next source")
                continue

            return self._swap(products, source)

        # The built-in table is never empty, so this is only reached if it
        # has been edited down to nothing.
        logger.error("All catalog sources failed, catalog is empty")
        return self._swap([], SOURCE_FALLBACK)

    def get_snapshot(self) -> CatalogSnapshot:
        """
        Get the current catalog snapshot.

        Returns:
            Current CatalogSnapshot (empty with source "none" before the
            first load)
        """
        return self._current_snapshot

    def _swap(self, products: List[Product], source: str) -> CatalogSnapshot:
        snapshot = CatalogSnapshot.create(products, source)
        self._current_snapshot = snapshot
        logger.info(f"Catalog loaded from {source}: {len(snapshot)} products")
        return snapshot

    def _sources(self) -> List[Tuple[str, Callable[[], List[Product]]]]:
        """Enabled sources in priority order."""
        sources: List[Tuple[str, Callable[[], List[Product]]]] = []
        if self._store_config.has_remote_inventory:
            sources.append((SOURCE_REMOTE_API, self._load_remote_api))
        if self.csv_url:
            sources.append((SOURCE_REMOTE_CSV, self._load_remote_csv))
        if self.local_path:
            sources.append((SOURCE_LOCAL_CSV, self._load_local_csv))
        sources.append((SOURCE_FALLBACK, get_fallback_products))
        return sources

    def _new_client(self, base_url: str = "") -> SheetsAPIClient:
        return self._client_factory(
            base_url=base_url,
            secret_key=self._store_config.secret_key,
            timeout_seconds=self._timeout,
            logger=logger,
        )

    def _load_remote_api(self) -> List[Product]:
        with self._new_client(self._store_config.apps_script_url) as client:
            records = client.fetch_inventory(self._store_config.inventory_sheet_id)

        products = []
        for record in records:
            try:
                products.append(Product.from_dict(record))
            except ValueError as e:
                logger.debug(f"Remote product skipped: {e}")
        return products

    def _load_remote_csv(self) -> List[Product]:
        with self._new_client() as client:
            text = client.fetch_text(self.csv_url, source=SOURCE_REMOTE_CSV)
        return parse_catalog_csv(text)

    def _load_local_csv(self) -> List[Product]:
        path = Path(self.local_path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFetchError(SOURCE_LOCAL_CSV, f"cannot read {path}: {e}") from e
        return parse_catalog_csv(text)

    # -------------------------------------------------------------------------
    # Queries over the current snapshot
    # -------------------------------------------------------------------------

    def get_product(self, product_id: str) -> Optional[Product]:
        """Find a product in the current snapshot."""
        return self._current_snapshot.get_product(product_id)

    def search(self, query: str) -> List[Product]:
        """Case-insensitive search over name and category."""
        return self._current_snapshot.search(query)

    def filter_by_category(self, category: str) -> List[Product]:
        """Products with exactly this category tag."""
        return self._current_snapshot.filter_by_category(category)
