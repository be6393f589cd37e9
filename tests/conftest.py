"""
Shared fixtures: fake translators, stores and records
"""

from typing import Dict, List, Optional, Set, Tuple

import pytest

from auto_translate.errors import PersistenceError, TranslationError
from auto_translate.models import LocaleSet, TranslatableRecord
from auto_translate.store import InMemoryRecordStore


class FakeTranslator:
    """
    Translator double.

    Known (text, locale) pairs come from `mapping`; anything else is echoed as
    "<locale>:<text>". Locales in `fail_locales` raise TranslationError.
    """

    def __init__(
        self,
        mapping: Optional[Dict[Tuple[str, str], str]] = None,
        fail_locales: Optional[Set[str]] = None
    ):
        self.mapping = mapping or {}
        self.fail_locales = fail_locales or set()
        self.calls: List[Tuple[str, str]] = []

    def translate(self, text: str, target_locale: str) -> str:
        self.calls.append((text, target_locale))
        if target_locale in self.fail_locales:
            raise TranslationError(f"quota exceeded for {target_locale}")
        return self.mapping.get((text, target_locale), f"{target_locale}:{text}")


class FailingStore:
    """Store whose save() always raises the given exception"""

    def __init__(self, exc: Exception):
        self.exc = exc

    def save(self, record: TranslatableRecord) -> None:
        raise self.exc


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator({
        ("Hello World", "fr"): "Bonjour le monde",
        ("Hello World", "de"): "Hallo Welt",
    })


@pytest.fixture
def locales() -> LocaleSet:
    return LocaleSet(locales=["en", "fr", "de"])


@pytest.fixture
def record() -> TranslatableRecord:
    return TranslatableRecord(
        id="page-42",
        source_locale="en",
        translatable_fields=["title", "slug"],
        translations={"title": {"en": "Hello World"}},
    )


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def persistence_failure() -> PersistenceError:
    return PersistenceError("database is read-only")
