"""In-memory storage backends (tests, scripts, ephemeral sessions)."""

import threading
from typing import Dict, List, Optional

from resumetrics.schemas.resume_metadata import ResumeMetadata
from resumetrics.storage.ports import BlobStore, MetadataStore


class InMemoryMetadataStore(MetadataStore):
    def __init__(self) -> None:
        self._records: List[ResumeMetadata] = []
        self._lock = threading.Lock()

    def list(self) -> List[ResumeMetadata]:
        with self._lock:
            return list(self._records)

    def get(self, resume_id: str) -> Optional[ResumeMetadata]:
        with self._lock:
            return next((r for r in self._records if r.id == resume_id), None)

    def put(self, record: ResumeMetadata, position: Optional[int] = None) -> None:
        with self._lock:
            if position is None:
                self._records.append(record)
            else:
                self._records.insert(position, record)

    def delete(self, resume_id: str) -> Optional[int]:
        with self._lock:
            for i, r in enumerate(self._records):
                if r.id == resume_id:
                    del self._records[i]
                    return i
            return None


class InMemoryBlobStore(BlobStore):
    def __init__(self) -> None:
        self._blobs: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def get(self, resume_id: str) -> Optional[bytes]:
        with self._lock:
            return self._blobs.get(resume_id)

    def put(self, resume_id: str, data: bytes) -> None:
        with self._lock:
            self._blobs[resume_id] = bytes(data)

    def delete(self, resume_id: str) -> bool:
        with self._lock:
            return self._blobs.pop(resume_id, None) is not None

    def exists(self, resume_id: str) -> bool:
        with self._lock:
            return resume_id in self._blobs
