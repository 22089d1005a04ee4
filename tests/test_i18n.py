"""
Unit tests for translated messages.
"""

import json

from modules.i18n import I18nManager, translate


class TestTranslate:

    def test_default_language_is_indonesian(self):
        assert translate("cart.cleared") == "Keranjang dikosongkan"

    def test_english(self):
        assert translate("cart.not_found", "en", product_id="x") == "Product not found: x"

    def test_unknown_language_uses_default(self):
        assert translate("cart.cleared", "fr") == "Keranjang dikosongkan"

    def test_missing_key_returns_key(self):
        assert translate("nope.missing", "en") == "nope.missing"

    def test_missing_variable_returns_template(self):
        assert translate("cart.added", "en") == "{name} added to cart"


class TestI18nManager:

    def test_custom_directory(self, tmp_path):
        (tmp_path / "id.json").write_text(json.dumps({"a": {"b": "halo {x}"}}), encoding="utf-8")
        (tmp_path / "en.json").write_text("{broken", encoding="utf-8")
        manager = I18nManager(tmp_path)

        assert manager.get_translation("a.b", "id", x="dunia") == "halo dunia"
        assert manager.get_translation("a.b", "en") == "a.b"

    def test_missing_directory(self, tmp_path):
        manager = I18nManager(tmp_path / "missing")
        assert manager.get_translation("cart.cleared") == "cart.cleared"
        assert manager.is_language_supported("en")
