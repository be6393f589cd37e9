"""
Translation service - runs the gap fill for a saved record and writes it back

Flow:
    record saved → handle_translation(record)
                     ├─ translator missing → TranslatorUnavailable
                     ├─ TranslationFiller.fill(record, locales, translator)
                     └─ changed → store.save(updated record)
"""

import logging
from typing import Optional

from ..errors import PersistenceError, TranslatorUnavailable
from ..models import LocaleSet, TranslatableRecord, TranslationResult
from ..sops.gap_fill import GapFillConfig, TranslationFiller
from ..store import RecordStore
from ..tools.translator import Translator
from ..utils.observability import trace_step

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Host-side orchestration around the gap filler.

    The translator is built once by the host and injected; None means the
    provider could not be set up and every call raises TranslatorUnavailable.

    Usage:
        service = TranslationService(translator, LocaleSet(locales=["en", "fr"]), store)
        result = service.handle_translation(record)
    """

    def __init__(
        self,
        translator: Optional[Translator],
        locale_set: LocaleSet,
        store: RecordStore,
        filler: Optional[TranslationFiller] = None
    ):
        self.translator = translator
        self.locale_set = locale_set
        self.store = store
        self.filler = filler or TranslationFiller(GapFillConfig())
        logger.info(
            f"TranslationService initialized with languages: {', '.join(locale_set.locales)}"
        )

    def handle_translation(self, record: TranslatableRecord) -> TranslationResult:
        """
        Translate the record's gaps and persist it when anything was added.

        Args:
            record: Freshly loaded record

        Returns:
            TranslationResult of the fill

        Raises:
            TranslatorUnavailable: No translator configured
            ConfigurationError: The record has no source locale
            PersistenceError: Saving the updated record failed
        """
        logger.info(f"Starting translation process for record {record.id}")

        if self.translator is None:
            logger.warning(
                f"Translation process aborted for record {record.id}: translator is not initialized"
            )
            raise TranslatorUnavailable("Translator is not initialized")

        with trace_step("translation.handle", {"record.id": record.id}) as (span, record_event):
            result = self.filler.fill(record, self.locale_set, self.translator)

            if not result.changed:
                return result

            updated = record.with_translations(result.translations)
            try:
                self.store.save(updated)
            except PersistenceError as e:
                logger.error(f"Failed to save record {record.id}: {e}")
                raise
            except Exception as e:
                logger.error(f"Failed to save record {record.id}: {e}")
                raise PersistenceError(f"Failed to save record {record.id}: {e}") from e

            record_event("record_saved", {"filled_count": len(result.filled)})
            logger.info(f"Record {record.id} saved successfully with new translations")

        return result
