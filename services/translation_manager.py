# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from typing import Dict

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_LANGUAGE = "en"


class TranslationManager:
    """Singleton Translation Manager. Missing keys fall back to English, then to the key."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = FALLBACK_LANGUAGE
            cls._instance._translations = {}
            cls._instance._load_translations()
            cls._instance.set_language(Config.DEFAULT_LANGUAGE)
        return cls._instance

    def _load_translations(self):
        from services.translations.en import EN_TRANSLATIONS
        self._translations: Dict[str, Dict[str, str]] = {
            "en": EN_TRANSLATIONS,
        }

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"No translations for '{lang_code}', using '{FALLBACK_LANGUAGE}'")
            lang_code = FALLBACK_LANGUAGE
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def has_translation(self, key: str) -> bool:
        return (
            key in self._translations.get(self._current_language, {})
            or key in self._translations.get(FALLBACK_LANGUAGE, {})
        )

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            translation = self._translations.get(FALLBACK_LANGUAGE, {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.debug(f"Could not format translation '{key}' with {sorted(kwargs)}")
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def has_translation(key: str) -> bool:
    return _translator.has_translation(key)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()
