"""
Translation queue - deferred translation jobs, one per saved record

Jobs are drained concurrently with a semaphore; each blocking service call
runs in a worker thread. There is no retry: a failed job is reported in its
outcome and dropped.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from ..errors import TranslatorUnavailable
from ..models import TranslatableRecord, TranslationResult
from .translation_service import TranslationService

logger = logging.getLogger(__name__)


class JobStatus(str, Enum):
    """Final state of a translation job"""
    TRANSLATED = "translated"   # New translations saved
    UNCHANGED = "unchanged"     # Nothing to fill
    SKIPPED = "skipped"         # Translator unavailable
    FAILED = "failed"           # Configuration or persistence error


@dataclass
class TranslateRecordJob:
    """Queued request to translate one record"""
    record: TranslatableRecord
    queued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class JobOutcome:
    """Result of running one job"""
    record_id: str
    status: JobStatus
    result: Optional[TranslationResult] = None
    error: Optional[str] = None
    latency_ms: int = 0


class TranslationQueue:
    """
    In-process queue of translation jobs.

    Usage:
        queue = TranslationQueue(service, concurrency=2)
        queue.dispatch(TranslateRecordJob(record))
        outcomes = await queue.work()
    """

    def __init__(
        self,
        service: TranslationService,
        name: str = "translations",
        concurrency: int = 2
    ):
        self.service = service
        self.name = name
        self.concurrency = max(1, concurrency)
        self._pending: List[TranslateRecordJob] = []

    def dispatch(self, job: TranslateRecordJob) -> None:
        self._pending.append(job)
        logger.info(f"Queued translation of record {job.record.id} on '{self.name}'")

    @property
    def pending(self) -> int:
        return len(self._pending)

    def _run_job(self, job: TranslateRecordJob) -> JobOutcome:
        start_time = datetime.now()
        record_id = job.record.id

        try:
            result = self.service.handle_translation(job.record)
            status = JobStatus.TRANSLATED if result.changed else JobStatus.UNCHANGED
            outcome = JobOutcome(record_id=record_id, status=status, result=result)
        except TranslatorUnavailable as e:
            logger.warning(f"Translation job for record {record_id} skipped: {e}")
            outcome = JobOutcome(record_id=record_id, status=JobStatus.SKIPPED, error=str(e))
        except Exception as e:
            logger.error(f"Translation job for record {record_id} failed: {e}")
            outcome = JobOutcome(record_id=record_id, status=JobStatus.FAILED, error=str(e))

        outcome.latency_ms = int((datetime.now() - start_time).total_seconds() * 1000)
        return outcome

    async def work(self) -> List[JobOutcome]:
        """
        Drain every pending job.

        Returns:
            One JobOutcome per job, in dispatch order
        """
        jobs, self._pending = self._pending, []
        if not jobs:
            return []

        semaphore = asyncio.Semaphore(self.concurrency)

        async def run_with_semaphore(job: TranslateRecordJob) -> JobOutcome:
            async with semaphore:
                return await asyncio.to_thread(self._run_job, job)

        logger.info(f"Processing {len(jobs)} job(s) on '{self.name}', concurrency {self.concurrency}")

        outcomes = await asyncio.gather(*[run_with_semaphore(job) for job in jobs])

        translated = sum(1 for o in outcomes if o.status == JobStatus.TRANSLATED)
        failed = sum(1 for o in outcomes if o.status == JobStatus.FAILED)
        logger.info(f"Queue '{self.name}' drained: {translated} translated, {failed} failed")

        return list(outcomes)

    def work_sync(self) -> List[JobOutcome]:
        """Drain the queue from synchronous code"""
        return asyncio.run(self.work())
