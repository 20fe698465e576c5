"""
JSON record store - one file per record with an in-memory index.
"""

import json
import os
from pathlib import Path
from threading import RLock
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar

from app.core import get_logger, InfrastructureError

from .records import Record

logger = get_logger(__name__, component="json_store")

RecordT = TypeVar("RecordT", bound=Record)


class JsonRecordStore(Generic[RecordT]):
    """Disk-first persistence for one collection of records.

    Records are loaded lazily and cached; callers always receive copies so a
    record mutated by one task is never visible to another until it is saved.
    """

    def __init__(self, storage_dir: Path, record_type: Type[RecordT]):
        self._storage_dir = Path(storage_dir)
        self._storage_dir.mkdir(parents=True, exist_ok=True)
        self._record_type = record_type

        self._records: Dict[str, RecordT] = {}
        self._known_ids: set[str] = set()
        self._lock = RLock()

        self._index_records()

    @property
    def lock(self) -> RLock:
        """Held by repositories for read-modify-write sequences (upserts)."""
        return self._lock

    def _index_records(self) -> None:
        """Build an index of known records from disk without loading payloads."""
        with self._lock:
            self._known_ids = {record_file.stem for record_file in self._storage_dir.glob("*.json")}

    def _record_file(self, record_id: str) -> Path:
        return self._storage_dir / f"{record_id}.json"

    def _load_from_disk(self, record_id: str) -> Optional[RecordT]:
        record_file = self._record_file(record_id)
        if not record_file.exists():
            return None
        try:
            with open(record_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return self._record_type.from_dict(data)
        except (OSError, ValueError, TypeError) as e:
            logger.error(
                f"Error loading {self._record_type.__name__} {record_id}",
                extra={"path": str(record_file), "error": str(e)},
            )
            return None

    def _write(self, record: RecordT) -> None:
        record_file = self._record_file(record.id)
        tmp_file = record_file.with_suffix(".json.tmp")
        try:
            with open(tmp_file, "w", encoding="utf-8") as f:
                json.dump(record.to_dict(), f, indent=2, ensure_ascii=False)
            os.replace(tmp_file, record_file)
        except OSError as e:
            raise InfrastructureError(
                f"Failed to save {self._record_type.__name__} {record.id}: {e}"
            ) from e
        self._known_ids.add(record.id)

    def _copy(self, record: RecordT) -> RecordT:
        return self._record_type.from_dict(record.to_dict())

    def _get_cached(self, record_id: str) -> Optional[RecordT]:
        cached = self._records.get(record_id)
        if cached:
            return cached
        if record_id not in self._known_ids:
            return None
        record = self._load_from_disk(record_id)
        if not record:
            self._known_ids.discard(record_id)
            return None
        self._records[record_id] = record
        return record

    def save(self, record: RecordT) -> RecordT:
        """Create or overwrite a record, refreshing `updated_at`."""
        with self._lock:
            record.touch()
            stored = self._copy(record)
            self._write(stored)
            self._records[stored.id] = stored
            return self._copy(stored)

    def get(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            record = self._get_cached(record_id)
            return self._copy(record) if record else None

    def delete(self, record_id: str) -> bool:
        with self._lock:
            existed = record_id in self._known_ids
            self._records.pop(record_id, None)
            self._known_ids.discard(record_id)
            record_file = self._record_file(record_id)
            if record_file.exists():
                record_file.unlink()
            return existed

    def list(self, predicate: Optional[Callable[[RecordT], bool]] = None) -> List[RecordT]:
        with self._lock:
            records = []
            for record_id in sorted(self._known_ids):
                record = self._get_cached(record_id)
                if record and (predicate is None or predicate(record)):
                    records.append(self._copy(record))
            return records

    def find_one(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        matches = self.list(predicate)
        return matches[0] if matches else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._known_ids)
