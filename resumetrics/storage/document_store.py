"""DocumentStore: keeps the metadata index and the blob store in step."""

import asyncio
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from resumetrics.config import BLOB_DIRNAME, METADATA_FILENAME, STORAGE_DIR, SUPPORTED_MIME_TYPES
from resumetrics.exceptions import StorageFailure, StorageInconsistency, UnsupportedFormat
from resumetrics.schemas.analysis_result import AnalysisResult
from resumetrics.schemas.resume_metadata import ResumeMetadata, StoredResume, UploadedDocument
from resumetrics.storage.file_store import FileBlobStore, JsonMetadataStore
from resumetrics.storage.ports import BlobStore, MetadataStore
from resumetrics.utils.helpers import generate_resume_id
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)


class DocumentStore:
    """
    Persists (file, metadata, analysis) across a metadata index and a blob store.

    Metadata is committed last on save and removed first on delete, so a record
    visible in the index always has its blob unless the stores were damaged
    outside this class. A failure half-way through is rolled back.
    """

    def __init__(self, metadata_store: MetadataStore, blob_store: BlobStore) -> None:
        self._metadata = metadata_store
        self._blobs = blob_store

    def _new_id(self) -> str:
        resume_id = generate_resume_id()
        while self._metadata.get(resume_id) is not None:
            resume_id = generate_resume_id()
        return resume_id

    async def save(self, document: UploadedDocument, analysis: AnalysisResult) -> str:
        """Store the file and its analysis under a new unique id and return the id."""
        if document.mime_type not in SUPPORTED_MIME_TYPES:
            raise UnsupportedFormat(document.mime_type)

        resume_id = self._new_id()
        metadata = ResumeMetadata(
            id=resume_id,
            file_name=document.file_name,
            upload_date=datetime.now(timezone.utc),
            file_type=document.mime_type,
            file_size=document.size,
            analysis=analysis,
        )

        await asyncio.to_thread(self._blobs.put, resume_id, document.content)
        try:
            self._metadata.put(metadata)
        except StorageFailure:
            logger.error("Metadata write failed for %s; removing its stored file", resume_id)
            try:
                await asyncio.to_thread(self._blobs.delete, resume_id)
            except StorageFailure:
                logger.exception("Rollback failed; file for %s is orphaned", resume_id)
            raise

        logger.info("Saved %s (%s, %s bytes)", resume_id, document.file_name, document.size)
        return resume_id

    def list(self) -> List[ResumeMetadata]:
        """All stored records in insertion order."""
        return self._metadata.list()

    async def get_by_id(self, resume_id: str) -> Optional[StoredResume]:
        """
        Metadata and file for ``resume_id``; None when no such record exists.
        Raises StorageInconsistency when the record exists but its file does not.
        """
        metadata = self._metadata.get(resume_id)
        if metadata is None:
            return None

        content = await asyncio.to_thread(self._blobs.get, resume_id)
        if content is None:
            # A delete may have completed in between.
            if self._metadata.get(resume_id) is None:
                return None
            logger.error("Record %s has no stored file", resume_id)
            raise StorageInconsistency(resume_id)

        document = UploadedDocument(
            content=content,
            file_name=metadata.file_name,
            mime_type=metadata.file_type,
        )
        return StoredResume(metadata=metadata, document=document)

    async def delete(self, resume_id: str) -> None:
        """
        Remove the record and its file. Deleting an absent id is a no-op.
        If the file cannot be removed, the record is restored and StorageFailure propagates.
        """
        record = self._metadata.get(resume_id)
        if record is None:
            # Clears a file left behind by an earlier failed rollback.
            await asyncio.to_thread(self._blobs.delete, resume_id)
            return

        position = self._metadata.delete(resume_id)
        try:
            await asyncio.to_thread(self._blobs.delete, resume_id)
        except StorageFailure:
            logger.error("File delete failed for %s; restoring its record", resume_id)
            try:
                self._metadata.put(record, position=position)
            except StorageFailure:
                logger.exception("Restore failed; record %s is gone but its file remains", resume_id)
            raise
        logger.info("Deleted %s", resume_id)

    def find_orphaned_ids(self) -> List[str]:
        """Ids present in the index whose file is missing from the blob store."""
        orphans = [r.id for r in self._metadata.list() if not self._blobs.exists(r.id)]
        if orphans:
            logger.warning("Found %s records without stored files: %s", len(orphans), orphans)
        return orphans


def get_document_store(storage_dir: Optional[Union[str, Path]] = None) -> DocumentStore:
    """Filesystem-backed store under ``storage_dir`` (default: RESUMETRICS_STORAGE_DIR)."""
    root = Path(storage_dir) if storage_dir is not None else STORAGE_DIR
    return DocumentStore(
        JsonMetadataStore(root / METADATA_FILENAME),
        FileBlobStore(root / BLOB_DIRNAME),
    )
