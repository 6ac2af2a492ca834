import threading
from typing import Dict, List, Optional

from tlog.schemas.blog import PostRecord


class PostStore:
    """In-memory post records keyed by id.

    The content loader is the only writer; readers get list snapshots.
    """

    def __init__(self):
        self._records: Dict[str, PostRecord] = {}
        self._lock = threading.RLock()

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def set(self, record: PostRecord) -> None:
        with self._lock:
            self._records[record.id] = record

    def get(self, post_id: str) -> Optional[PostRecord]:
        with self._lock:
            return self._records.get(post_id)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._records)

    def values(self) -> List[PostRecord]:
        with self._lock:
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, post_id: object) -> bool:
        with self._lock:
            return post_id in self._records
