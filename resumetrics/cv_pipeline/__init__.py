"""CV upload pipeline: text extraction (PDF/DOCX), provider analysis with regex fallback, persistence."""

from resumetrics.cv_pipeline.analysis_client import AnalysisClient, run_analysis
from resumetrics.cv_pipeline.fallback_extractor import extract_with_regex
from resumetrics.cv_pipeline.pipeline import ingest_resume, run_resume_pipeline
from resumetrics.cv_pipeline.text_extractor import extract_text, extract_text_from_file

__all__ = [
    "AnalysisClient",
    "run_analysis",
    "extract_with_regex",
    "ingest_resume",
    "run_resume_pipeline",
    "extract_text",
    "extract_text_from_file",
]
