"""
Error taxonomy for the auto-translation pipeline
"""


class AutoTranslateError(Exception):
    """Base class for all auto-translate errors"""


class ConfigurationError(AutoTranslateError):
    """Missing source locale, invalid settings or other setup problem"""


class TranslatorUnavailable(AutoTranslateError):
    """No API credential, or the translation client could not be created"""


class TranslationError(AutoTranslateError):
    """A single translation API call failed (auth, quota, network)"""


class PersistenceError(AutoTranslateError):
    """Writing the translated record back to its store failed"""
