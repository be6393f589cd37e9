"""
Service layer - save trigger, job queue and write-back orchestration

Usage:
    from auto_translate.service import create_app
    from auto_translate.store import InMemoryRecordStore

    app = create_app(InMemoryRecordStore())
    app.observer.saved(record)
    if app.queue:
        outcomes = app.queue.work_sync()
"""

from .translation_service import TranslationService
from .queue import (
    JobOutcome,
    JobStatus,
    TranslateRecordJob,
    TranslationQueue,
)
from .observer import SaveObserver
from .bootstrap import AutoTranslateApp, create_app

__all__ = [
    # Orchestration
    "TranslationService",
    # Queue
    "JobOutcome",
    "JobStatus",
    "TranslateRecordJob",
    "TranslationQueue",
    # Trigger
    "SaveObserver",
    # Wiring
    "AutoTranslateApp",
    "create_app",
]
