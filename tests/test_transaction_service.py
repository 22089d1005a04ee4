"""
Unit tests for transaction submission.
"""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import httpx
import pytest

from core.exceptions import (
    EmptyCartError,
    MissingEndpointError,
    SubmitNetworkError,
    SubmitRejectedError,
)
from models.store_config import StoreConfig
from models.transaction import TransactionRecord, TransactionStatus
from services.cart_store import CartStore
from services.transaction_service import TransactionService


@pytest.fixture
def cart(catalog):
    cart = CartStore()
    cart.add("semen-padang", catalog)
    return cart


class TestPreconditions:

    def test_empty_cart_makes_no_request(self, store_config):
        factory = MagicMock()
        service = TransactionService(client_factory=factory)

        result = service.submit([], CartStore().summary(), store_config)

        assert not result.success
        assert isinstance(result.error, EmptyCartError)
        assert result.record is None
        factory.assert_not_called()

    def test_missing_endpoint_makes_no_request(self, cart):
        factory = MagicMock()
        service = TransactionService(client_factory=factory)

        result = service.submit(cart.items(), cart.summary(), StoreConfig.empty())

        assert not result.success
        assert isinstance(result.error, MissingEndpointError)
        assert result.message == "Apps Script URL not configured"
        factory.assert_not_called()


class TestSubmit:

    def test_success_sends_one_record(self, cart, store_config, make_client_factory, json_response):
        factory, requests = make_client_factory(lambda r: json_response({"success": True}))
        service = TransactionService(client_factory=factory)

        result = service.submit(cart.items(), cart.summary(), store_config)

        assert result.success
        assert result.error is None
        assert len(requests) == 1

        body = json.loads(requests[0].content)
        assert body["action"] == "saveTransaction"
        assert body["sheetId"] == "fin-sheet"
        data = body["data"]
        assert data["subtotal"] == 165000
        assert data["tax"] == 18150
        assert data["total"] == 183150
        assert data["status"] == "pending"
        assert data["items"] == [{
            "sku": "semen-padang",
            "name": "Semen Padang",
            "price": 165000,
            "quantity": 1,
            "total": 165000,
        }]
        assert data["timestamp"].endswith("Z")

    def test_rejection_keeps_remote_message(self, cart, store_config, make_client_factory, json_response):
        factory, requests = make_client_factory(
            lambda r: json_response({"success": False, "error": "Sheet locked"})
        )
        service = TransactionService(client_factory=factory)

        result = service.submit(cart.items(), cart.summary(), store_config)

        assert not result.success
        assert isinstance(result.error, SubmitRejectedError)
        assert result.message == "Sheet locked"
        assert result.record is not None
        assert len(requests) == 1

    def test_http_error_not_retried(self, cart, store_config, make_client_factory, json_response):
        factory, requests = make_client_factory(lambda r: json_response({}, status_code=500))
        service = TransactionService(client_factory=factory)

        result = service.submit(cart.items(), cart.summary(), store_config)

        assert isinstance(result.error, SubmitRejectedError)
        assert result.error.status_code == 500
        assert len(requests) == 1

    def test_network_error(self, cart, store_config, make_client_factory):
        def handler(request):
            raise httpx.ConnectError("no route to host", request=request)

        factory, _ = make_client_factory(handler)
        service = TransactionService(client_factory=factory)

        result = service.submit(cart.items(), cart.summary(), store_config)

        assert isinstance(result.error, SubmitNetworkError)
        assert result.to_dict()["error_type"] == "SubmitNetworkError"

    def test_cart_is_not_touched(self, cart, store_config, make_client_factory, json_response):
        factory, _ = make_client_factory(lambda r: json_response({"success": True}))
        TransactionService(client_factory=factory).submit(cart.items(), cart.summary(), store_config)

        assert len(cart) == 1


class TestTransactionRecord:

    def test_build_copies_summary(self, cart):
        when = datetime(2026, 3, 2, 10, 15, 30, tzinfo=timezone.utc)
        record = TransactionRecord.build(cart.items(), cart.summary(), timestamp=when)

        assert record.timestamp == "2026-03-02T10:15:30Z"
        assert record.status is TransactionStatus.PENDING
        assert record.total == 183150
        assert record.item_count == 1

    def test_record_is_frozen(self, cart):
        record = TransactionRecord.build(cart.items(), cart.summary())
        with pytest.raises(AttributeError):
            record.total = 0
