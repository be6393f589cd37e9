"""
Command-line runner for the save → translate flow

Usage:
    auto-translate --input examples/records.json
    auto-translate --input examples/records.json --sync
    auto-translate --input examples/records.json --dry-run --output-dir results/records

Options:
    --input FILE        JSON file with a list of records
    --output-dir DIR    Where translated records are written (default: results/records)
    --config-dir DIR    Directory holding auto_translate.yaml
    --sync              Translate inline instead of through the queue
    --dry-run           Use the echo translator instead of DeepL
    --debug             DEBUG log level
"""

# =============================================================================
# Dependencies
# =============================================================================
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import AutoTranslateError, PersistenceError
from .models import TranslatableRecord, TranslationResult
from .service import AutoTranslateApp, JobOutcome, JobStatus, create_app
from .store import JsonFileRecordStore
from .tools.translator import EchoTranslator
from .utils.config import ConfigLoader

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("results") / "records"


# =============================================================================
# Helpers
# =============================================================================
def load_records(json_path: Path, default_source_locale: str) -> List[TranslatableRecord]:
    """Load records from a JSON list (or a single JSON object)"""
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = [data]

    return [TranslatableRecord.from_mapping(item, default_source_locale) for item in data]


def summarize_outcome(outcome: JobOutcome) -> Dict[str, Any]:
    """Flatten a queue outcome for the JSON summary"""
    summary = {
        "record_id": outcome.record_id,
        "status": outcome.status.value,
        "latency_ms": outcome.latency_ms,
    }
    if outcome.result is not None:
        summary["filled"] = [f"{p.field_name}:{p.locale}" for p in outcome.result.filled]
        summary["failed"] = [f"{p.field_name}:{p.locale}" for p in outcome.result.failed]
    if outcome.error:
        summary["error"] = outcome.error
    return summary


def summarize_inline(
    app: AutoTranslateApp,
    record: TranslatableRecord,
    result: Optional[TranslationResult]
) -> Dict[str, Any]:
    """Summary entry for a record translated inline by the save observer"""
    if result is not None:
        status = JobStatus.TRANSLATED if result.changed else JobStatus.UNCHANGED
    elif (record.skip_translation or not record.should_auto_translate()
          or app.service.translator is None):
        status = JobStatus.SKIPPED
    else:
        # The observer logged the failure and swallowed it
        status = JobStatus.FAILED

    summary = {"record_id": record.id, "status": status.value}
    if result is not None:
        summary["filled"] = [f"{p.field_name}:{p.locale}" for p in result.filled]
        summary["failed"] = [f"{p.field_name}:{p.locale}" for p in result.failed]
    return summary


def print_json_block(title: str, data: Any) -> None:
    print(f"\n{'='*60}")
    print(title)
    print("=" * 60)
    print(json.dumps(data, ensure_ascii=False, indent=2))


# =============================================================================
# Main entry point
# =============================================================================
def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run every record through the save observer"""
    parser = argparse.ArgumentParser(description="Auto-translate saved records")
    parser.add_argument("--input", type=str, required=True, help="JSON file with records")
    parser.add_argument("--output-dir", type=str, default=str(DEFAULT_OUTPUT_DIR),
                        help="Directory for translated records")
    parser.add_argument("--config-dir", type=str, help="Directory holding auto_translate.yaml")
    parser.add_argument("--sync", action="store_true", help="Translate inline instead of queueing")
    parser.add_argument("--dry-run", action="store_true", help="Use the echo translator")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG log level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    try:
        settings = ConfigLoader(args.config_dir).get_settings()
        if args.sync:
            settings.queue.enabled = False

        records = load_records(Path(args.input), settings.default_source_locale)
        store = JsonFileRecordStore(args.output_dir)
        app = create_app(
            store,
            settings=settings,
            translator=EchoTranslator() if args.dry_run else None,
            log_dir=Path(args.output_dir).parent
        )
    except (AutoTranslateError, OSError, ValueError) as e:
        logger.error(f"Setup failed: {e}")
        return 1

    summary: List[Dict[str, Any]] = []
    for record in records:
        try:
            store.save(record)
        except PersistenceError as e:
            logger.error(f"Could not save record {record.id}: {e}")
            summary.append({
                "record_id": record.id,
                "status": JobStatus.FAILED.value,
                "error": str(e),
            })
            continue

        result = app.observer.saved(record)
        if app.queue is None:
            summary.append(summarize_inline(app, record, result))

    if app.queue is not None:
        outcomes = app.queue.work_sync()
        summary.extend(summarize_outcome(o) for o in outcomes)

    print_json_block("Translation summary:", summary)
    logger.info(f"Records written to {store.directory}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
