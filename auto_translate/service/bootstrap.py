"""
Bootstrap - wire settings, translator, service, queue and observer together
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import TranslatorUnavailable
from ..sops.gap_fill import GapFillConfig, TranslationFiller
from ..store import RecordStore
from ..tools import build_translator
from ..tools.translator import Translator
from ..utils.config import AutoTranslateSettings, get_settings
from ..utils.credentials import ApiKeySource
from ..utils.logging_setup import setup_logging
from .observer import SaveObserver
from .queue import TranslationQueue
from .translation_service import TranslationService

logger = logging.getLogger(__name__)


@dataclass
class AutoTranslateApp:
    """Everything a host needs to trigger translations on save"""
    settings: AutoTranslateSettings
    service: TranslationService
    observer: SaveObserver
    queue: Optional[TranslationQueue] = None


def create_app(
    store: RecordStore,
    settings: Optional[AutoTranslateSettings] = None,
    translator: Optional[Translator] = None,
    api_key_source: Optional[ApiKeySource] = None,
    log_dir: Optional[Path] = None
) -> AutoTranslateApp:
    """
    Build the add-on for a host.

    Args:
        store: Where translated records are written back
        settings: Settings (default: config/auto_translate.yaml)
        translator: Pre-built translator (default: built from settings)
        api_key_source: Credential source for the configured provider
        log_dir: Base directory for a relative log file path

    Returns:
        AutoTranslateApp
    """
    settings = settings or get_settings()
    setup_logging(settings.logging, base_dir=log_dir)

    if translator is None:
        try:
            translator = build_translator(settings.translator, api_key_source)
        except TranslatorUnavailable as e:
            logger.error(f"Translator unavailable, translations will be skipped: {e}")

    filler = TranslationFiller(GapFillConfig(slug_fields=list(settings.slug_fields)))
    service = TranslationService(translator, settings.locale_set(), store, filler=filler)

    queue = None
    if settings.queue.enabled:
        queue = TranslationQueue(
            service,
            name=settings.queue.name,
            concurrency=settings.queue.concurrency
        )

    observer = SaveObserver(service, queue=queue)
    return AutoTranslateApp(settings=settings, service=service, observer=observer, queue=queue)
