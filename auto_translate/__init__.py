"""
Auto Translate

Fills the missing translations of a record's translatable attributes, for
every supported locale, whenever the record is saved:
- Per-field gap detection; existing text is never overwritten
- DeepL translator injected once by the host
- Queued or inline execution on save
- Best-effort: a save never fails because translation failed
"""

__version__ = "0.1.0"

# Re-export key components for convenience
from .errors import (
    AutoTranslateError,
    ConfigurationError,
    TranslatorUnavailable,
    TranslationError,
    PersistenceError,
)
from .models import (
    TranslatableRecord,
    LocaleSet,
    TranslationResult,
    FieldLocale,
)
from .sops import TranslationFiller, fill
from .tools import Translator, DeepLTranslator, EchoTranslator, build_translator
from .service import TranslationService, SaveObserver, TranslationQueue, create_app
from .utils import get_settings, slugify

__all__ = [
    # Version
    "__version__",
    # Errors
    "AutoTranslateError",
    "ConfigurationError",
    "TranslatorUnavailable",
    "TranslationError",
    "PersistenceError",
    # Models
    "TranslatableRecord",
    "LocaleSet",
    "TranslationResult",
    "FieldLocale",
    # Core
    "TranslationFiller",
    "fill",
    # Translators
    "Translator",
    "DeepLTranslator",
    "EchoTranslator",
    "build_translator",
    # Service
    "TranslationService",
    "SaveObserver",
    "TranslationQueue",
    "create_app",
    # Utils
    "get_settings",
    "slugify",
]
