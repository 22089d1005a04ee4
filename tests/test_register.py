"""
Unit tests for the Register session object.
"""

import threading
from unittest.mock import MagicMock

import pytest

from core.exceptions import CheckoutInProgressError, ProductNotFoundError, SubmitRejectedError
from models.store_config import StoreConfig
from models.transaction import SubmitResult
from services.cart_store import CartStore, QuantityAction
from services.catalog_service import CatalogService
from services.register import Register
from services.transaction_service import TransactionService


@pytest.fixture
def catalog_service():
    service = CatalogService(
        {"CATALOG_CSV_URL": "", "LOCAL_CATALOG_PATH": ""},
        StoreConfig.empty(),
    )
    service.load_catalog()
    return service


@pytest.fixture
def make_register(catalog_service, store_config):
    def _make(transaction_service=None, config=None):
        return Register(
            catalog_service=catalog_service,
            cart_store=CartStore(),
            transaction_service=transaction_service or MagicMock(spec=TransactionService),
            store_config=config or store_config,
        )
    return _make


class TestCartIntents:

    def test_add_and_adjust(self, make_register):
        register = make_register()
        register.add("semen-padang")
        register.adjust_quantity("semen-padang", "increase")
        register.adjust_quantity("semen-padang", QuantityAction.INCREASE)
        register.adjust_quantity("semen-padang", "decrease")

        assert register.cart.get_line("semen-padang").quantity == 2
        assert register.summary().total == 366300

    def test_unknown_action(self, make_register):
        register = make_register()
        register.add("semen-padang")
        with pytest.raises(ValueError):
            register.adjust_quantity("semen-padang", "double")

    def test_add_unknown_product(self, make_register):
        with pytest.raises(ProductNotFoundError):
            make_register().add("does-not-exist")

    def test_remove_and_clear(self, make_register):
        register = make_register()
        register.add("semen-padang")
        register.add("pintu-kayu")
        register.remove("semen-padang")
        assert len(register.cart) == 1

        register.clear()
        assert register.cart.is_empty

    def test_summary_uses_store_tax_rate(self, make_register, store_config):
        register = make_register(config=StoreConfig(tax_rate=0.0))
        register.add("semen-padang")
        assert register.summary().total == 165000

    def test_search_and_filter(self, make_register):
        register = make_register()
        assert [p.id for p in register.search("kayu")] == ["pintu-kayu"]
        assert len(register.filter_by_category("semen")) == 7


class TestState:

    def test_state_contains_display_fields(self, make_register):
        register = make_register()
        register.add("semen-padang")
        state = register.state()

        line = state["items"][0]
        assert line["unit_label"] == "1 Karung"
        assert line["line_total_display"] == "Rp 165.000"
        assert state["summary"]["total"] == 183150
        assert state["summary"]["total_display"] == "Rp 183.150"
        assert state["checkout_in_progress"] is False


class TestCheckout:

    def test_success_clears_cart(self, make_register):
        transaction_service = MagicMock(spec=TransactionService)
        register = make_register(transaction_service)
        register.add("semen-padang")
        transaction_service.submit.return_value = SubmitResult(success=True)

        result = register.checkout()

        assert result.success
        assert register.cart.is_empty
        transaction_service.submit.assert_called_once()
        lines, summary, config = transaction_service.submit.call_args.args
        assert [line.product_id for line in lines] == ["semen-padang"]
        assert summary.total == 183150

    def test_failure_keeps_cart(self, make_register):
        transaction_service = MagicMock(spec=TransactionService)
        register = make_register(transaction_service)
        register.add("semen-padang")
        transaction_service.submit.return_value = SubmitResult.create_failed(
            SubmitRejectedError("Sheet locked")
        )

        result = register.checkout()

        assert not result.success
        assert register.cart.get_line("semen-padang").quantity == 1

    def test_reentry_rejected(self, make_register):
        entered = threading.Event()
        release = threading.Event()
        transaction_service = MagicMock(spec=TransactionService)

        def slow_submit(*args):
            entered.set()
            release.wait(timeout=5)
            return SubmitResult(success=True)

        transaction_service.submit.side_effect = slow_submit
        register = make_register(transaction_service)
        register.add("semen-padang")

        worker = threading.Thread(target=register.checkout)
        worker.start()
        assert entered.wait(timeout=5)

        assert register.checkout_in_progress
        with pytest.raises(CheckoutInProgressError):
            register.checkout()

        release.set()
        worker.join(timeout=5)
        assert not register.checkout_in_progress
        assert transaction_service.submit.call_count == 1

    def test_guard_released_after_error(self, make_register):
        transaction_service = MagicMock(spec=TransactionService)
        transaction_service.submit.side_effect = RuntimeError("boom")
        register = make_register(transaction_service)

        with pytest.raises(RuntimeError):
            register.checkout()
        assert not register.checkout_in_progress
