"""
DeepL translator - wraps the deepl SDK behind the Translator interface

The source language is left to DeepL's auto-detection. Locale codes are
upper-cased; codes DeepL rejects as targets (plain "en") go through
target_overrides.
"""

import time
import logging
from typing import Any, Dict, Optional

import deepl

from ..errors import TranslationError, TranslatorUnavailable
from ..utils.credentials import ApiKeySource

logger = logging.getLogger(__name__)

DEFAULT_TARGET_OVERRIDES = {"en": "EN-US"}


class DeepLTranslator:
    """
    Translator backed by the DeepL API.

    Usage:
        translator = DeepLTranslator(api_key="...")
        translator.translate("Hello World", "fr")   # "Bonjour le monde"

        # Tests inject a client exposing translate_text()
        translator = DeepLTranslator(client=fake_client)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        client: Optional[Any] = None,
        target_overrides: Optional[Dict[str, str]] = None
    ):
        """
        Args:
            api_key: DeepL authentication key (ignored when client is given)
            client: Pre-built client with a deepl-compatible translate_text()
            target_overrides: Locale -> DeepL target code

        Raises:
            TranslatorUnavailable: No key, or the DeepL client could not be created
        """
        overrides = DEFAULT_TARGET_OVERRIDES if target_overrides is None else target_overrides
        self.target_overrides = {k.lower(): v for k, v in overrides.items()}

        if client is not None:
            self._client = client
            return

        if not api_key:
            raise TranslatorUnavailable("DeepL API key is empty or not found")

        try:
            self._client = deepl.Translator(api_key)
        except (deepl.DeepLException, ValueError) as e:
            raise TranslatorUnavailable(f"Failed to initialize DeepL translator: {e}") from e

        logger.info("DeepL translator initialized")

    @classmethod
    def from_key_source(
        cls,
        source: ApiKeySource,
        target_overrides: Optional[Dict[str, str]] = None
    ) -> "DeepLTranslator":
        """Create a translator with the key from a credential source"""
        api_key = source.get_api_key()
        if not api_key:
            raise TranslatorUnavailable("DeepL API key is empty or not found")
        return cls(api_key, target_overrides=target_overrides)

    def target_code(self, locale: str) -> str:
        """DeepL target language code for a locale"""
        return self.target_overrides.get(locale.lower(), locale.upper())

    def translate(self, text: str, target_locale: str) -> str:
        target_lang = self.target_code(target_locale)
        start_time = time.time()

        try:
            result = self._client.translate_text(
                text,
                source_lang=None,
                target_lang=target_lang
            )
        except deepl.DeepLException as e:
            raise TranslationError(f"DeepL call failed for {target_lang}: {e}") from e

        translated = getattr(result, "text", None)
        if not translated:
            raise TranslationError(f"DeepL returned no text for {target_lang}")

        latency_ms = int((time.time() - start_time) * 1000)
        logger.debug(f"DeepL translated {len(text)} chars to {target_lang} ({latency_ms}ms)")
        return translated
