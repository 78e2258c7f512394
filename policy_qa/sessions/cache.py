"""Process-wide session cache keyed by document identifier.

Sessions live only for the lifetime of the process; a restart clears them and
callers must upload again. Mutation is whole-record overwrite, never a merge.
"""

import logging
import threading
from collections import OrderedDict

from policy_qa.models.schemas import SessionRecord

logger = logging.getLogger(__name__)


class SessionCache:
    """Thread-safe map from document identifier to SessionRecord.

    The lock only guards dictionary operations and is never held while the
    caller awaits the indexing service.

    Args:
        max_entries: Optional LRU bound. None keeps every session for the
            life of the process.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._records: OrderedDict[str, SessionRecord] = OrderedDict()
        self._lock = threading.Lock()

    def put(self, document_id: str, record: SessionRecord) -> None:
        """Insert or overwrite the record for ``document_id``."""
        if not document_id:
            raise ValueError("document_id must be non-empty")

        with self._lock:
            self._records[document_id] = record
            self._records.move_to_end(document_id)
            if self._max_entries is not None:
                while len(self._records) > self._max_entries:
                    evicted, _ = self._records.popitem(last=False)
                    logger.info(f"Evicted least recently used session: {evicted}")

    def get(self, document_id: str) -> SessionRecord | None:
        """Return the record for ``document_id``, or None if it is not cached."""
        with self._lock:
            record = self._records.get(document_id)
            if record is not None:
                self._records.move_to_end(document_id)
            return record

    def has(self, document_id: str) -> bool:
        with self._lock:
            return document_id in self._records

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
