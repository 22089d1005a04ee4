"""Fetch the product catalog through the normal source chain and print it."""

import json
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Config, load_store_config
from logging_config import setup_logging
from services.catalog_service import CatalogService


def main():
    """Load the catalog and write it as JSON to stdout."""
    setup_logging(log_level=logging.WARNING, enable_file_logging=False)

    print(f"Store config: {Config.STORE_CONFIG_PATH}", file=sys.stderr)
    store_config = load_store_config(Config.STORE_CONFIG_PATH)
    print(f"Remote inventory API: {'yes' if store_config.has_remote_inventory else 'no'}", file=sys.stderr)

    settings = {
        "CATALOG_CSV_URL": Config.CATALOG_CSV_URL,
        "LOCAL_CATALOG_PATH": Config.LOCAL_CATALOG_PATH,
        "HTTP_TIMEOUT_SECONDS": Config.HTTP_TIMEOUT_SECONDS,
    }

    print("Loading catalog...", file=sys.stderr)
    snapshot = CatalogService(settings, store_config).load_catalog()

    print(f"SUCCESS: {len(snapshot)} products from {snapshot.source}", file=sys.stderr)
    print(f"Categories: {', '.join(snapshot.categories()) or '-'}", file=sys.stderr)
    print(file=sys.stderr)  # Blank line separator

    # Output JSON to stdout
    print(json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
