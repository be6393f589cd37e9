"""
Record stores - write-back targets for translated records
"""

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from pydantic import ValidationError

from .errors import PersistenceError
from .models import TranslatableRecord

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Whatever owns the record's lifecycle; save() raises PersistenceError"""

    def save(self, record: TranslatableRecord) -> None:
        ...


class InMemoryRecordStore:
    """Records kept in a dict keyed by id"""

    def __init__(self):
        self.records: Dict[str, TranslatableRecord] = {}
        self.save_count = 0

    def save(self, record: TranslatableRecord) -> None:
        self.records[record.id] = record
        self.save_count += 1

    def get(self, record_id: str) -> Optional[TranslatableRecord]:
        return self.records.get(record_id)


class JsonFileRecordStore:
    """
    One JSON document per record under a directory.

    Usage:
        store = JsonFileRecordStore("results/records")
        store.save(record)                 # results/records/<id>.json
        record = store.load("page-42")
    """

    def __init__(self, directory: str):
        self.directory = Path(directory)

    def path_for(self, record_id: str) -> Path:
        safe_id = re.sub(r"[^A-Za-z0-9._-]", "_", record_id)
        return self.directory / f"{safe_id}.json"

    def save(self, record: TranslatableRecord) -> None:
        path = self.path_for(record.id)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(record.model_dump(), f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise PersistenceError(f"Failed to save record {record.id} to {path}: {e}") from e
        logger.debug(f"Record {record.id} written to {path}")

    def load(self, record_id: str) -> Optional[TranslatableRecord]:
        path = self.path_for(record_id)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return TranslatableRecord(**json.load(f))
        except (OSError, ValueError, ValidationError) as e:
            raise PersistenceError(f"Failed to load record {record_id} from {path}: {e}") from e

    def list_ids(self) -> List[str]:
        if not self.directory.exists():
            return []
        return sorted(path.stem for path in self.directory.glob("*.json"))
