"""Shared fixtures for the Mini ERP POS test suite."""

import json

import httpx
import pytest

from core.api_client import SheetsAPIClient
from models.catalog import CatalogSnapshot, SOURCE_FALLBACK
from models.store_config import StoreConfig
from modules.fallback_catalog import get_fallback_products


APPS_SCRIPT_URL = "https://script.example.test/macros/s/abc/exec"
CSV_URL = "https://docs.example.test/inventory.csv"


@pytest.fixture
def catalog():
    """Snapshot of the built-in product table."""
    return CatalogSnapshot.create(get_fallback_products(), SOURCE_FALLBACK)


@pytest.fixture
def store_config():
    """Fully configured store."""
    return StoreConfig(
        inventory_sheet_id="inv-sheet",
        finance_sheet_id="fin-sheet",
        apps_script_url=APPS_SCRIPT_URL,
        secret_key="s3cret",
        tax_rate=0.11,
    )


@pytest.fixture
def make_client_factory():
    """
    Build a client factory whose clients answer through ``handler``.

    Every request seen is appended to the returned list.
    """
    def _make(handler):
        requests = []

        def recording_handler(request):
            requests.append(request)
            return handler(request)

        def factory(**kwargs):
            return SheetsAPIClient(transport=httpx.MockTransport(recording_handler), **kwargs)

        return factory, requests

    return _make


def json_response(data, status_code=200):
    """httpx.Response carrying a JSON body."""
    return httpx.Response(
        status_code,
        content=json.dumps(data).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture(name="json_response")
def json_response_fixture():
    """The json_response helper, for tests that build handlers."""
    return json_response
