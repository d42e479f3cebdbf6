# -*- coding: utf-8 -*-
"""UI text lookup. The English catalogue is the only one shipped."""

from typing import Dict, Set

from pcos_assessment.services.translations.en import EN_TRANSLATIONS
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton holding the active catalogue."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._catalogue: Dict[str, str] = EN_TRANSLATIONS
            cls._instance._reported_missing: Set[str] = set()
        return cls._instance

    def tr(self, key: str, **kwargs) -> str:
        """
        Text for key, formatted with kwargs.

        Unknown keys come back unchanged so a gap shows up on screen
        instead of raising.
        """
        text = self._catalogue.get(key)
        if text is None:
            if key not in self._reported_missing:
                self._reported_missing.add(key)
                logger.warning(f"Missing UI text: {key}")
            return key
        if kwargs:
            try:
                text = text.format(**kwargs)
            except (KeyError, ValueError):
                logger.warning(f"Could not format UI text {key} with {sorted(kwargs)}")
        return text


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)
