"""Record store: in-memory sink for records that passed validation."""

import threading
import uuid
from collections import defaultdict
from typing import Any, Optional

import structlog

logger = structlog.get_logger()


class RecordStore:
    """Keeps accepted records per model in process memory.

    Stand-in for the real persistence layer, which lives outside this service.
    """

    def __init__(self):
        self._records: dict[str, dict[str, dict[str, Any]]] = defaultdict(dict)
        self._lock = threading.Lock()

    def _generate_record_id(self, model: str) -> str:
        return f"{model}_{uuid.uuid4().hex[:8]}"

    def add(self, model: str, record: dict[str, Any]) -> str:
        """Store a copy of the record and return its new id."""
        record_id = self._generate_record_id(model)
        with self._lock:
            self._records[model][record_id] = dict(record)
        logger.info("record_stored", model=model, record_id=record_id)
        return record_id

    def get(self, model: str, record_id: str) -> Optional[dict[str, Any]]:
        with self._lock:
            record = self._records.get(model, {}).get(record_id)
        return dict(record) if record is not None else None

    def list_records(self, model: str) -> dict[str, dict[str, Any]]:
        """All accepted records for a model, keyed by id, in insertion order."""
        with self._lock:
            return {rid: dict(rec) for rid, rec in self._records.get(model, {}).items()}

    def count(self, model: str) -> int:
        with self._lock:
            return len(self._records.get(model, {}))
