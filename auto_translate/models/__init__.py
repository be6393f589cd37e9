"""
Data models for the auto-translation pipeline
"""

from .translatable_record import Translatable, TranslatableRecord, Translations
from .locale_set import LocaleSet
from .fill_result import FieldLocale, TranslationResult

__all__ = [
    # Records
    "Translatable",
    "TranslatableRecord",
    "Translations",

    # Locales
    "LocaleSet",

    # Fill output
    "FieldLocale",
    "TranslationResult",
]
