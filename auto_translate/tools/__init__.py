"""
Translation tools - provider adapters behind the Translator interface
"""

from typing import Optional

from ..errors import ConfigurationError
from ..utils.config import TranslatorSettings
from ..utils.credentials import ApiKeySource, api_key_source_from_settings
from .translator import Translator, EchoTranslator
from .deepl_translator import DeepLTranslator


def build_translator(
    settings: TranslatorSettings,
    api_key_source: Optional[ApiKeySource] = None
) -> Translator:
    """
    Construct the configured translator once for the host.

    Args:
        settings: Translator settings
        api_key_source: Credential source (default: chain built from settings)

    Returns:
        Translator instance

    Raises:
        TranslatorUnavailable: No credential or client construction failed
        ConfigurationError: Unknown provider
    """
    provider = settings.provider.lower()

    if provider == "echo":
        return EchoTranslator()

    if provider == "deepl":
        source = api_key_source or api_key_source_from_settings(settings)
        return DeepLTranslator.from_key_source(
            source,
            target_overrides=settings.target_overrides
        )

    raise ConfigurationError(f"Unknown translator provider: {settings.provider}")


__all__ = [
    "Translator",
    "EchoTranslator",
    "DeepLTranslator",
    "build_translator",
]
