"""Filesystem storage backends: a JSON metadata index and one file per blob."""

import json
import os
import re
import tempfile
import threading
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from resumetrics.config import METADATA_COLLECTION
from resumetrics.exceptions import StorageFailure
from resumetrics.schemas.resume_metadata import ResumeMetadata
from resumetrics.storage.ports import BlobStore, MetadataStore
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)

_SAFE_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def _atomic_write(path: Path, data: bytes) -> None:
    """Write to a temp file in the same directory, then rename over ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class JsonMetadataStore(MetadataStore):
    """
    Records kept as an ordered list under one named collection of a JSON document,
    e.g. ``{"resumes": [...]}``. Other collections in the same file are preserved.
    """

    def __init__(self, path: Union[str, Path], collection: str = METADATA_COLLECTION) -> None:
        self._path = Path(path)
        self._collection = collection
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read_document(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error("Cannot read metadata index %s: %s", self._path, e)
            raise StorageFailure(f"Cannot read metadata index {self._path}: {e}") from e
        if not isinstance(document, dict):
            raise StorageFailure(f"Metadata index {self._path} is not a JSON object")
        return document

    def _read_records(self) -> List[ResumeMetadata]:
        raw = self._read_document().get(self._collection) or []
        try:
            return [ResumeMetadata.model_validate(item) for item in raw]
        except (ValidationError, TypeError) as e:
            logger.error("Corrupt record in metadata index %s: %s", self._path, e)
            raise StorageFailure(f"Corrupt record in metadata index {self._path}") from e

    def _write_records(self, records: List[ResumeMetadata]) -> None:
        document = self._read_document()
        document[self._collection] = [r.to_json_dict() for r in records]
        try:
            _atomic_write(self._path, json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8"))
        except OSError as e:
            logger.error("Cannot write metadata index %s: %s", self._path, e)
            raise StorageFailure(f"Cannot write metadata index {self._path}: {e}") from e

    def list(self) -> List[ResumeMetadata]:
        with self._lock:
            return self._read_records()

    def get(self, resume_id: str) -> Optional[ResumeMetadata]:
        with self._lock:
            return next((r for r in self._read_records() if r.id == resume_id), None)

    def put(self, record: ResumeMetadata, position: Optional[int] = None) -> None:
        with self._lock:
            records = self._read_records()
            if position is None:
                records.append(record)
            else:
                records.insert(position, record)
            self._write_records(records)

    def delete(self, resume_id: str) -> Optional[int]:
        with self._lock:
            records = self._read_records()
            for i, r in enumerate(records):
                if r.id == resume_id:
                    del records[i]
                    self._write_records(records)
                    return i
            return None


class FileBlobStore(BlobStore):
    """One ``<id>.bin`` file per blob under ``root``."""

    def __init__(self, root: Union[str, Path]) -> None:
        self._root = Path(root)
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    def _path_for(self, resume_id: str) -> Path:
        if not _SAFE_ID_RE.match(resume_id or ""):
            raise ValueError(f"Invalid blob id: {resume_id!r}")
        return self._root / f"{resume_id}.bin"

    def get(self, resume_id: str) -> Optional[bytes]:
        if not _SAFE_ID_RE.match(resume_id or ""):
            return None
        path = self._path_for(resume_id)
        with self._lock:
            try:
                return path.read_bytes()
            except FileNotFoundError:
                return None
            except OSError as e:
                raise StorageFailure(f"Cannot read blob {resume_id}: {e}") from e

    def put(self, resume_id: str, data: bytes) -> None:
        path = self._path_for(resume_id)
        with self._lock:
            try:
                _atomic_write(path, data)
            except OSError as e:
                logger.error("Cannot write blob %s: %s", resume_id, e)
                raise StorageFailure(f"Cannot write blob {resume_id}: {e}") from e

    def delete(self, resume_id: str) -> bool:
        if not _SAFE_ID_RE.match(resume_id or ""):
            return False
        path = self._path_for(resume_id)
        with self._lock:
            try:
                path.unlink()
                return True
            except FileNotFoundError:
                return False
            except OSError as e:
                logger.error("Cannot delete blob %s: %s", resume_id, e)
                raise StorageFailure(f"Cannot delete blob {resume_id}: {e}") from e

    def exists(self, resume_id: str) -> bool:
        return bool(_SAFE_ID_RE.match(resume_id or "")) and self._path_for(resume_id).is_file()
