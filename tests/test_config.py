"""
Unit tests for store configuration loading.
"""

import json

import pytest

import config as app_config
from config import load_store_config, read_store_config
from core.exceptions import ConfigLoadError
from models.store_config import DEFAULT_TAX_RATE, StoreConfig


def _write(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    return str(path)


class TestLoadStoreConfig:

    def test_valid_file(self, tmp_path):
        path = _write(tmp_path, json.dumps({
            "INVENTORY_SHEET_ID": "inv",
            "FINANCE_SHEET_ID": "fin",
            "APPS_SCRIPT_URL": "https://script.example.test/exec",
            "SECRET_KEY": "s3cret",
            "TAX_RATE": 0.1,
        }))

        config = load_store_config(path)

        assert config.inventory_sheet_id == "inv"
        assert config.finance_sheet_id == "fin"
        assert config.secret_key == "s3cret"
        assert config.tax_rate == 0.1
        assert config.has_endpoint
        assert config.has_remote_inventory

    def test_tax_rate_defaults(self, tmp_path):
        path = _write(tmp_path, json.dumps({"APPS_SCRIPT_URL": "https://x.test"}))
        config = load_store_config(path)

        assert config.tax_rate == DEFAULT_TAX_RATE
        assert not config.has_remote_inventory

    @pytest.mark.parametrize("content", [
        "{not json",
        "[1, 2, 3]",
        json.dumps({"TAX_RATE": 2}),
        json.dumps({"TAX_RATE": "eleven"}),
    ])
    def test_broken_file_yields_empty(self, tmp_path, content):
        assert load_store_config(_write(tmp_path, content)) == StoreConfig.empty()

    def test_missing_file_yields_empty(self, tmp_path):
        assert load_store_config(str(tmp_path / "nope.json")) == StoreConfig.empty()

    def test_unset_path_yields_empty(self):
        assert load_store_config(None) == StoreConfig.empty()
        assert load_store_config("") == StoreConfig.empty()

    def test_read_raises_with_path(self, tmp_path):
        path = str(tmp_path / "nope.json")
        with pytest.raises(ConfigLoadError) as exc_info:
            read_store_config(path)
        assert exc_info.value.path == path


class TestStoreConfig:

    def test_empty_has_no_endpoint(self):
        config = StoreConfig.empty()
        assert not config.has_endpoint
        assert not config.has_remote_inventory

    def test_to_dict_redacts_secret(self, store_config):
        assert store_config.to_dict()["SECRET_KEY"] == "***"


class TestTestingConfig:

    def test_network_sources_disabled(self):
        assert app_config.TestingConfig.CATALOG_CSV_URL == ""
        assert app_config.TestingConfig.LOCAL_CATALOG_PATH == ""
        assert app_config.TestingConfig.TESTING is True
