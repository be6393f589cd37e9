"""
Gap-fill SOP tests
"""

import logging

import pytest

from auto_translate.errors import ConfigurationError, TranslatorUnavailable
from auto_translate.models import FieldLocale, LocaleSet, TranslatableRecord
from auto_translate.sops import GapFillConfig, TranslationFiller, fill

from tests.conftest import FakeTranslator


def test_fills_title_and_skips_slug_without_source(record, locales, translator):
    result = fill(record, locales, translator)

    assert result.changed is True
    assert result.translations["title"] == {
        "en": "Hello World",
        "fr": "Bonjour le monde",
        "de": "Hallo Welt",
    }
    assert "slug" not in result.translations
    assert result.skipped_fields == ["slug"]
    assert result.filled == [
        FieldLocale(field_name="title", locale="fr"),
        FieldLocale(field_name="title", locale="de"),
    ]


def test_second_run_is_a_no_op(record, locales, translator):
    first = fill(record, locales, translator)
    filled_record = record.with_translations(first.translations)
    calls_after_first = len(translator.calls)

    second = fill(filled_record, locales, translator)

    assert second.changed is False
    assert second.translations == first.translations
    assert len(translator.calls) == calls_after_first


def test_existing_entries_are_not_overwritten(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["title"],
        translations={"title": {"en": "Hello World", "fr": "Salut tout le monde"}},
    )
    translator = FakeTranslator()

    result = fill(record, locales, translator)

    assert result.translations["title"]["fr"] == "Salut tout le monde"
    assert result.translations["title"]["de"] == "de:Hello World"
    assert translator.calls == [("Hello World", "de")]


def test_gaps_are_detected_per_field(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["title", "body"],
        translations={
            "title": {"en": "Title", "fr": "Titre", "de": "Titel"},
            "body": {"en": "Body"},
        },
    )

    result = fill(record, locales, FakeTranslator())

    assert result.translations["body"] == {"en": "Body", "fr": "fr:Body", "de": "de:Body"}
    assert result.translations["title"] == {"en": "Title", "fr": "Titre", "de": "Titel"}


def test_empty_source_text_logs_warning(locales, caplog):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["title"],
        translations={"title": {"en": "   "}},
    )
    translator = FakeTranslator()

    with caplog.at_level(logging.WARNING):
        result = fill(record, locales, translator)

    assert result.changed is False
    assert result.skipped_fields == ["title"]
    assert translator.calls == []
    assert any("Empty source text" in r.message for r in caplog.records)


def test_slug_field_is_normalized(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["slug"],
        translations={"slug": {"en": "my-pretty-page"}},
    )
    translator = FakeTranslator({
        ("my-pretty-page", "fr"): "Ma Belle Page!",
        ("my-pretty-page", "de"): "Meine Schöne Seite",
    })

    result = fill(record, locales, translator)

    assert result.translations["slug"]["fr"] == "ma-belle-page"
    assert result.translations["slug"]["de"] == "meine-schone-seite"


def test_custom_slug_fields(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["permalink", "slug"],
        translations={"permalink": {"en": "x"}, "slug": {"en": "y"}},
    )
    translator = FakeTranslator({
        ("x", "fr"): "Mon Lien", ("x", "de"): "Mein Link",
        ("y", "fr"): "Pas Un Slug", ("y", "de"): "Kein Slug",
    })

    result = TranslationFiller(GapFillConfig(slug_fields=["permalink"])).fill(
        record, locales, translator
    )

    assert result.translations["permalink"]["fr"] == "mon-lien"
    assert result.translations["slug"]["fr"] == "Pas Un Slug"


def test_slug_that_normalizes_to_nothing_is_a_failed_pair(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["slug"],
        translations={"slug": {"en": "home"}},
    )
    translator = FakeTranslator({("home", "fr"): "!!!", ("home", "de"): "Startseite"})

    result = fill(record, locales, translator)

    assert "fr" not in result.translations["slug"]
    assert result.translations["slug"]["de"] == "startseite"
    assert result.failed == [FieldLocale(field_name="slug", locale="fr")]


def test_one_failing_locale_does_not_stop_the_others(caplog):
    locales = LocaleSet(locales=["en", "fr", "de", "es"])
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["title"],
        translations={"title": {"en": "Hello"}},
    )
    translator = FakeTranslator(fail_locales={"de"})

    with caplog.at_level(logging.ERROR):
        result = fill(record, locales, translator)

    assert result.changed is True
    assert result.translations["title"] == {"en": "Hello", "fr": "fr:Hello", "es": "es:Hello"}
    assert result.failed == [FieldLocale(field_name="title", locale="de")]
    assert any("Translation failed" in r.message for r in caplog.records)


def test_duplicate_field_names_are_attempted_once(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["title", "title"],
        translations={"title": {"en": "Hello"}},
    )
    translator = FakeTranslator()

    fill(record, locales, translator)

    assert sorted(translator.calls) == [("Hello", "de"), ("Hello", "fr")]


def test_empty_string_entry_counts_as_gap(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["title"],
        translations={"title": {"en": "Hello", "fr": "", "de": None}},
    )

    result = fill(record, locales, FakeTranslator())

    assert result.translations["title"] == {"en": "Hello", "fr": "fr:Hello", "de": "de:Hello"}


def test_every_target_locale_is_covered(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="fr",
        translatable_fields=["title", "body"],
        translations={"title": {"fr": "Bonjour"}, "body": {"fr": "Texte", "en": "Text"}},
    )

    result = fill(record, locales, FakeTranslator())

    for field_name in ("title", "body"):
        for locale in locales.targets("fr"):
            assert result.translations[field_name][locale]


def test_input_record_is_not_mutated(record, locales, translator):
    before = record.model_dump()

    fill(record, locales, translator)

    assert record.model_dump() == before


def test_missing_source_locale_raises(locales, translator):
    record = TranslatableRecord(
        id="p1",
        source_locale="",
        translatable_fields=["title"],
        translations={"title": {"en": "Hello"}},
    )

    with pytest.raises(ConfigurationError):
        fill(record, locales, translator)


def test_no_translatable_fields_returns_unchanged(locales):
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translations={"title": {"en": "Hello"}},
    )

    result = fill(record, locales, None)

    assert result.changed is False
    assert result.translations == {"title": {"en": "Hello"}}


def test_missing_translator_raises(record, locales):
    with pytest.raises(TranslatorUnavailable):
        fill(record, locales, None)


def test_source_only_locale_set_changes_nothing(record, translator):
    result = fill(record, LocaleSet(locales=["en"]), translator)

    assert result.changed is False
    assert translator.calls == []


def test_unexpected_translator_error_fails_only_that_pair(caplog):
    class FlakyTranslator(FakeTranslator):
        def translate(self, text, target_locale):
            if target_locale == "de":
                raise ConnectionError("socket reset")
            return super().translate(text, target_locale)

    locales = LocaleSet(locales=["en", "fr", "de", "es"])
    record = TranslatableRecord(
        id="p1",
        source_locale="en",
        translatable_fields=["title"],
        translations={"title": {"en": "Hello"}},
    )

    with caplog.at_level(logging.ERROR):
        result = fill(record, locales, FlakyTranslator())

    assert result.changed is True
    assert result.translations["title"] == {"en": "Hello", "fr": "fr:Hello", "es": "es:Hello"}
    assert result.failed == [FieldLocale(field_name="title", locale="de")]
    assert any(r.exc_info for r in caplog.records)
