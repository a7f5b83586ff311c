"""Ingestion pipeline: extract text, analyze it, persist file + metadata + analysis."""

import asyncio
from typing import Optional

from resumetrics.cv_pipeline.analysis_client import AnalysisClient
from resumetrics.cv_pipeline.text_extractor import extract_text
from resumetrics.exceptions import UnsupportedFormat
from resumetrics.schemas.resume_metadata import UploadedDocument
from resumetrics.storage.document_store import DocumentStore, get_document_store
from resumetrics.utils.helpers import mime_type_for_filename
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)


async def ingest_resume(
    document: UploadedDocument,
    store: DocumentStore,
    client: AnalysisClient,
    job_description: Optional[str] = None,
) -> str:
    """
    Run the full upload flow for one document and return the new record id.

    Extraction errors propagate before anything is stored. Résumé analysis
    falls back to regex extraction on provider failure; a failed job match
    (when a job description is given) propagates and nothing is stored.
    """
    text = await asyncio.to_thread(extract_text, document.content, document.mime_type)
    analysis = await client.analyze(text, job_description)
    resume_id = await store.save(document, analysis)
    logger.info("Ingested %s as %s (analysis source=%s)", document.file_name, resume_id, analysis.source)
    return resume_id


def run_resume_pipeline(
    file_bytes: bytes,
    filename: str,
    job_description: Optional[str] = None,
    store: Optional[DocumentStore] = None,
    client: Optional[AnalysisClient] = None,
) -> str:
    """
    Ingest an uploaded file from a sync context (e.g. a script or UI callback).
    The MIME type is resolved from the file name; uses its own event loop.
    """
    mime_type = mime_type_for_filename(filename)
    if mime_type is None:
        logger.warning("Unsupported file type: %s", filename)
        raise UnsupportedFormat(filename)
    document = UploadedDocument(content=file_bytes, file_name=filename, mime_type=mime_type)

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(
            ingest_resume(
                document,
                store or get_document_store(),
                client or AnalysisClient(),
                job_description,
            )
        )
    finally:
        loop.close()
