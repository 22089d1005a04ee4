"""
Unit tests for the Apps Script HTTP client.

Requests are answered by httpx.MockTransport; nothing leaves the process.
"""

import json

import httpx
import pytest

from core.api_client import SheetsAPIClient
from core.exceptions import SourceFetchError, SubmitNetworkError, SubmitRejectedError


APPS_SCRIPT_URL = "https://script.example.test/macros/s/abc/exec"


def _client(handler, secret_key="s3cret"):
    return SheetsAPIClient(
        base_url=APPS_SCRIPT_URL,
        secret_key=secret_key,
        transport=httpx.MockTransport(handler),
    )


RECORD = {
    "timestamp": "2026-03-02T10:15:30Z",
    "items": [{"sku": "semen-padang", "name": "Semen Padang", "price": 165000, "quantity": 1, "total": 165000}],
    "subtotal": 165000,
    "tax": 18150,
    "total": 183150,
    "status": "pending",
}


class TestFetchInventory:

    def test_request_shape(self, json_response):
        seen = []

        def handler(request):
            seen.append(request)
            return json_response({"products": [{"id": "semen-padang", "name": "Semen Padang"}]})

        with _client(handler) as client:
            products = client.fetch_inventory("inv-sheet")

        assert products == [{"id": "semen-padang", "name": "Semen Padang"}]
        request = seen[0]
        assert request.method == "GET"
        assert request.url.params["action"] == "getInventory"
        assert request.url.params["sheetId"] == "inv-sheet"
        assert request.headers["Authorization"] == "Bearer s3cret"

    def test_missing_products_is_empty(self, json_response):
        with _client(lambda request: json_response({"status": "ok"})) as client:
            assert client.fetch_inventory("inv-sheet") == []

    def test_non_dict_entries_dropped(self, json_response):
        body = {"products": [{"id": "a", "name": "A"}, "garbage", 3]}
        with _client(lambda request: json_response(body)) as client:
            assert client.fetch_inventory("inv-sheet") == [{"id": "a", "name": "A"}]

    def test_http_error(self, json_response):
        with _client(lambda request: json_response({}, status_code=500)) as client:
            with pytest.raises(SourceFetchError) as exc_info:
                client.fetch_inventory("inv-sheet")

        assert exc_info.value.source == "remote_api"
        assert "HTTP error! status: 500" in exc_info.value.message

    def test_invalid_json(self):
        with _client(lambda request: httpx.Response(200, content=b"<html>")) as client:
            with pytest.raises(SourceFetchError):
                client.fetch_inventory("inv-sheet")

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(SourceFetchError):
                client.fetch_inventory("inv-sheet")


class TestFetchText:

    def test_returns_body(self):
        with _client(lambda request: httpx.Response(200, text="id,name\n")) as client:
            assert client.fetch_text("https://docs.example.test/x.csv") == "id,name\n"

    def test_error_carries_source(self):
        with _client(lambda request: httpx.Response(404)) as client:
            with pytest.raises(SourceFetchError) as exc_info:
                client.fetch_text("https://docs.example.test/x.csv", source="remote_csv")

        assert exc_info.value.source == "remote_csv"


class TestSaveTransaction:

    def test_request_body(self, json_response):
        seen = []

        def handler(request):
            seen.append(request)
            return json_response({"success": True, "message": "saved"})

        with _client(handler) as client:
            result = client.save_transaction(RECORD, "fin-sheet")

        assert result == {"success": True, "message": "saved"}
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert request.headers["Authorization"] == "Bearer s3cret"
        assert json.loads(request.content) == {
            "action": "saveTransaction",
            "data": RECORD,
            "sheetId": "fin-sheet",
        }

    def test_rejected_with_remote_error(self, json_response):
        body = {"success": False, "error": "Sheet locked"}
        with _client(lambda request: json_response(body)) as client:
            with pytest.raises(SubmitRejectedError) as exc_info:
                client.save_transaction(RECORD, "fin-sheet")

        assert exc_info.value.message == "Sheet locked"

    def test_rejected_without_message(self, json_response):
        with _client(lambda request: json_response({})) as client:
            with pytest.raises(SubmitRejectedError) as exc_info:
                client.save_transaction(RECORD, "fin-sheet")

        assert exc_info.value.message == "Checkout failed"

    def test_http_status(self, json_response):
        with _client(lambda request: json_response({"success": True}, status_code=503)) as client:
            with pytest.raises(SubmitRejectedError) as exc_info:
                client.save_transaction(RECORD, "fin-sheet")

        assert exc_info.value.status_code == 503

    def test_non_json_body(self):
        with _client(lambda request: httpx.Response(200, text="OK")) as client:
            with pytest.raises(SubmitRejectedError):
                client.save_transaction(RECORD, "fin-sheet")

    def test_network_error(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with _client(handler) as client:
            with pytest.raises(SubmitNetworkError):
                client.save_transaction(RECORD, "fin-sheet")
