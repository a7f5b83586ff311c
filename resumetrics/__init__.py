"""
Résumé ingestion, analysis and storage core.

Turns an uploaded PDF/DOCX into normalized text, analyzes it with an external
generative-AI provider (falling back to regex extraction when the provider
fails), and persists file + metadata + analysis in a metadata index and a
blob store.

Note: analysis sends the full résumé text, and any job description, to the
configured third-party provider.
"""

from resumetrics.cv_pipeline import (
    AnalysisClient,
    extract_text,
    extract_text_from_file,
    ingest_resume,
    run_resume_pipeline,
)
from resumetrics.exceptions import (
    AnalysisError,
    AnalysisParseFailed,
    ExtractionFailed,
    ProviderUnavailable,
    ResumetricsError,
    StorageError,
    StorageFailure,
    StorageInconsistency,
    UnsupportedFormat,
)
from resumetrics.schemas import AnalysisResult, MatchResult, ResumeMetadata, StoredResume, UploadedDocument
from resumetrics.storage import DocumentStore, get_document_store

__all__ = [
    "AnalysisClient",
    "DocumentStore",
    "get_document_store",
    "extract_text",
    "extract_text_from_file",
    "ingest_resume",
    "run_resume_pipeline",
    "AnalysisResult",
    "MatchResult",
    "ResumeMetadata",
    "StoredResume",
    "UploadedDocument",
    "ResumetricsError",
    "UnsupportedFormat",
    "ExtractionFailed",
    "AnalysisError",
    "AnalysisParseFailed",
    "ProviderUnavailable",
    "StorageError",
    "StorageInconsistency",
    "StorageFailure",
]
