"""
Internationalization (i18n) Module

Localized messages for the POS JSON API (checkout outcomes, cart errors).

Supported languages:
- Bahasa Indonesia (id) - default, what the cashiers use
- English (en)

Usage in Python:
    from modules.i18n import translate
    message = translate('checkout.success', lang='id')
    message = translate('cart.not_found', lang='en', product_id='semen-padang')
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from logging_config import get_logger

logger = get_logger(__name__)

# Supported languages
SUPPORTED_LANGUAGES = {
    'id': {'name': 'Bahasa Indonesia', 'flag_emoji': 'ID'},
    'en': {'name': 'English', 'flag_emoji': 'GB'},
}

DEFAULT_LANGUAGE = 'id'


class I18nManager:
    """Loads translation files and resolves dotted message keys."""

    def __init__(self, translations_dir: Optional[Path] = None):
        """
        Initialize i18n manager.

        Args:
            translations_dir: Path to translations directory.
                            Defaults to ./translations in the project root.
        """
        if translations_dir is None:
            translations_dir = Path(__file__).parent.parent / 'translations'

        self.translations_dir = translations_dir
        self._translations: Dict[str, Dict[str, Any]] = {}
        self._load_all_translations()

    def _load_all_translations(self) -> None:
        """Load every supported language; missing files yield empty tables."""
        if not self.translations_dir.exists():
            logger.warning(f"Translations directory not found: {self.translations_dir}")

        for lang_code in SUPPORTED_LANGUAGES:
            self._translations[lang_code] = self._load_translation(lang_code)

    def _load_translation(self, lang_code: str) -> Dict[str, Any]:
        """
        Load translation file for a specific language.

        Args:
            lang_code: Language code (e.g., 'id', 'en')

        Returns:
            Parsed translation table (empty on any failure)
        """
        translation_file = self.translations_dir / f'{lang_code}.json'

        if not translation_file.exists():
            logger.warning(f"Translation file not found: {translation_file}")
            return {}

        try:
            with open(translation_file, 'r', encoding='utf-8') as f:
                table = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load translation file {translation_file}: {e}")
            return {}

        if not isinstance(table, dict):
            logger.error(f"Translation file {translation_file} is not a JSON object")
            return {}

        logger.debug(f"Loaded {len(table)} translation sections for language: {lang_code}")
        return table

    def get_translation(
        self,
        key: str,
        lang: str = DEFAULT_LANGUAGE,
        **kwargs
    ) -> str:
        """
        Get translated string for a key.

        Supports nested keys using dot notation: 'section.key'.
        Supports variable substitution: "Produk {product_id} ..." with
        product_id passed as a keyword argument.

        Args:
            key: Translation key (supports dot notation)
            lang: Language code (unknown codes use DEFAULT_LANGUAGE)
            **kwargs: Variables for string formatting

        Returns:
            Translated string, or the key itself if not found
        """
        if lang not in self._translations:
            lang = DEFAULT_LANGUAGE

        value: Any = self._translations.get(lang, {})
        for part in key.split('.'):
            value = value.get(part) if isinstance(value, dict) else None
            if value is None:
                break

        if not isinstance(value, str):
            logger.debug(f"Translation key not found: {key} (lang: {lang})")
            return key

        if not kwargs:
            return value
        try:
            return value.format(**kwargs)
        except (KeyError, IndexError) as e:
            logger.warning(f"Missing variable in translation: {e} (key: {key}, lang: {lang})")
            return value

    def is_language_supported(self, lang_code: str) -> bool:
        """Check if a language is supported."""
        return lang_code in SUPPORTED_LANGUAGES


# Global i18n manager instance
i18n_manager = I18nManager()


def translate(key: str, lang: str = DEFAULT_LANGUAGE, **kwargs) -> str:
    """
    Translate a key to the specified language.

    Example:
        >>> translate('checkout.empty_cart', lang='id')
        'Keranjang kosong! Silakan pilih produk terlebih dahulu.'
    """
    return i18n_manager.get_translation(key, lang, **kwargs)


def get_supported_languages() -> Dict[str, Dict[str, str]]:
    """Get all supported languages with their metadata."""
    return SUPPORTED_LANGUAGES
