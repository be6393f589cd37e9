"""
Gap-fill SOP - translate every missing (field, locale) pair of a record

Business rules:
- The source locale is required; a record without one is a setup error.
- Target locales are the supported locales minus the source locale.
- A pair is translated only when the record has no text for it yet
  (checked per field). Existing text is never overwritten.
- A field with empty source text is skipped for every locale (warning).
- A failing translator call only loses its own pair.
- Each pair is attempted at most once per run.
- Slug fields store a URL-safe slug of the translated text.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from ..errors import ConfigurationError, TranslationError, TranslatorUnavailable
from ..models import (
    FieldLocale,
    LocaleSet,
    Translatable,
    TranslationResult,
    Translations,
)
from ..tools.translator import Translator
from ..utils.observability import set_span_attribute, trace_step
from ..utils.slug import slugify

logger = logging.getLogger(__name__)


@dataclass
class GapFillConfig:
    """Gap-fill settings"""
    slug_fields: List[str] = field(default_factory=lambda: ["slug"])


def _has_text(value: Optional[str]) -> bool:
    return bool(value) and bool(value.strip())


class TranslationFiller:
    """
    Gap-fill SOP.

    Computes the missing translations of one record and asks the injected
    translator for each of them. The record itself is never mutated and
    nothing is persisted here; the caller saves when result.changed is True.

    Usage:
        filler = TranslationFiller()
        result = filler.fill(record, LocaleSet(locales=["en", "fr"]), translator)
        if result.changed:
            store.save(record.with_translations(result.translations))
    """

    def __init__(self, config: Optional[GapFillConfig] = None):
        self.config = config or GapFillConfig()

    def fill(
        self,
        record: Translatable,
        locale_set: LocaleSet,
        translator: Optional[Translator]
    ) -> TranslationResult:
        """
        Fill the translation gaps of a record.

        Args:
            record: Record exposing translatable_fields, source_locale, translations
            locale_set: Supported locales
            translator: Translation capability

        Returns:
            TranslationResult with the updated mapping and changed flag

        Raises:
            ConfigurationError: The record has no source locale
            TranslatorUnavailable: No translator was provided
        """
        record_id = getattr(record, "id", None)
        source_locale = (record.source_locale or "").strip()
        if not source_locale:
            logger.error(f"Source language is empty (record {record_id})")
            raise ConfigurationError(f"Source locale not set on record {record_id}")

        translations: Translations = copy.deepcopy(record.translations or {})

        fields = self._unique_fields(record.translatable_fields or [])
        if not fields:
            logger.info(f"Record {record_id} declares no translatable fields")
            return TranslationResult(translations=translations, changed=False)

        if translator is None:
            raise TranslatorUnavailable("Translator is not initialized")

        target_locales = locale_set.targets(source_locale)
        filled: List[FieldLocale] = []
        failed: List[FieldLocale] = []
        skipped_fields: List[str] = []

        with trace_step("translation.fill", {
            "record.id": record_id,
            "source_locale": source_locale,
            "field_count": len(fields),
            "target_locale_count": len(target_locales),
        }) as (span, record_event):
            attempted: Set[Tuple[str, str]] = set()

            for field_name in fields:
                existing = translations.get(field_name) or {}
                candidates = [
                    locale for locale in target_locales
                    if not _has_text(existing.get(locale))
                ]
                if not candidates:
                    continue

                source_text = existing.get(source_locale)
                if not _has_text(source_text):
                    logger.warning(
                        f"Empty source text for attribute '{field_name}' "
                        f"(record {record_id}, locale {source_locale})"
                    )
                    skipped_fields.append(field_name)
                    continue

                for locale in candidates:
                    if (field_name, locale) in attempted:
                        continue
                    attempted.add((field_name, locale))

                    text = self._translate_pair(
                        translator, source_text, field_name, locale, record_id
                    )
                    pair = FieldLocale(field_name=field_name, locale=locale)
                    if text is None:
                        failed.append(pair)
                        record_event("pair_failed", {"field": field_name, "locale": locale})
                        continue

                    if translations.get(field_name) is None:
                        translations[field_name] = {}
                    translations[field_name][locale] = text
                    filled.append(pair)
                    record_event("pair_translated", {"field": field_name, "locale": locale})

            set_span_attribute(span, "filled_count", len(filled))
            set_span_attribute(span, "failed_count", len(failed))

        if filled:
            logger.info(f"Record {record_id}: {len(filled)} translation(s) added")
        else:
            logger.info(f"Record {record_id}: no new translations were added")

        return TranslationResult(
            translations=translations,
            changed=bool(filled),
            filled=filled,
            failed=failed,
            skipped_fields=skipped_fields
        )

    def _unique_fields(self, fields: List[str]) -> List[str]:
        unique = []
        for name in fields:
            if name and name not in unique:
                unique.append(name)
        return unique

    def _translate_pair(
        self,
        translator: Translator,
        source_text: str,
        field_name: str,
        locale: str,
        record_id: Optional[str]
    ) -> Optional[str]:
        """Translated (and slug-normalised) text, or None when the pair failed"""
        try:
            text = translator.translate(source_text, locale)
        except TranslationError as e:
            logger.error(
                f"Translation failed for attribute '{field_name}' "
                f"(record {record_id}, locale {locale}): {e}"
            )
            return None
        except Exception:
            logger.exception(
                f"Translator error for attribute '{field_name}' "
                f"(record {record_id}, locale {locale})"
            )
            return None

        if field_name in self.config.slug_fields and text:
            text = slugify(text)

        if not _has_text(text):
            logger.warning(
                f"Translator returned empty text for attribute '{field_name}' "
                f"(record {record_id}, locale {locale})"
            )
            return None

        logger.debug(f"Translation set for attribute '{field_name}' ({locale})")
        return text


def fill(
    record: Translatable,
    locale_set: LocaleSet,
    translator: Optional[Translator],
    config: Optional[GapFillConfig] = None
) -> TranslationResult:
    """Convenience wrapper around TranslationFiller.fill"""
    return TranslationFiller(config).fill(record, locale_set, translator)
