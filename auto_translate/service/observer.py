"""
Save observer - triggers translation when a translatable record is saved
"""

import logging
from typing import Optional

from ..errors import TranslatorUnavailable
from ..models import TranslatableRecord, TranslationResult
from .queue import TranslateRecordJob, TranslationQueue
from .translation_service import TranslationService

logger = logging.getLogger(__name__)


class SaveObserver:
    """
    Called by the host after every successful save of a translatable record.

    With a queue the record is dispatched as a job; without one the service
    runs inline and every failure is logged instead of raised, so a save
    never fails because translation failed.

    Usage:
        observer = SaveObserver(service, queue=queue)
        store.save(record)
        observer.saved(record)
    """

    def __init__(
        self,
        service: TranslationService,
        queue: Optional[TranslationQueue] = None
    ):
        self.service = service
        self.queue = queue

    @property
    def queued(self) -> bool:
        return self.queue is not None

    def saved(self, record: TranslatableRecord) -> Optional[TranslationResult]:
        """
        Handle the "record saved" event.

        Returns:
            The fill result when translated inline, None when queued or skipped
        """
        if record.skip_translation:
            logger.debug(f"Record {record.id} saved with skip_translation set")
            return None

        if self.queue is not None:
            return self.queue_translation(record)
        return self.translate_now(record)

    def queue_translation(self, record: TranslatableRecord) -> None:
        """Dispatch a translation job if the record wants auto-translation"""
        if not record.should_auto_translate():
            return None
        if self.queue is None:
            raise RuntimeError("SaveObserver has no queue configured")
        self.queue.dispatch(TranslateRecordJob(record))
        return None

    def translate_now(self, record: TranslatableRecord) -> Optional[TranslationResult]:
        """Translate inline; failures are logged, never raised"""
        if not record.should_auto_translate():
            return None
        try:
            return self.service.handle_translation(record)
        except TranslatorUnavailable as e:
            logger.warning(f"Auto translation skipped for record {record.id}: {e}")
            return None
        except Exception as e:
            logger.error(f"Auto translation failed for record {record.id}: {e}")
            return None
