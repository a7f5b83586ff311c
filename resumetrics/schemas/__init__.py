"""Schema exports."""

from .analysis_result import ANALYSIS_RESULT_FIELDS, AnalysisResult
from .insights import InterviewQuestionSet, LinkedInAnalysis, MarketAnalysis
from .match_result import MATCH_RESULT_FIELDS, MatchResult
from .resume_metadata import ResumeMetadata, StoredResume, UploadedDocument

__all__ = [
    "ANALYSIS_RESULT_FIELDS",
    "MATCH_RESULT_FIELDS",
    "AnalysisResult",
    "MatchResult",
    "ResumeMetadata",
    "StoredResume",
    "UploadedDocument",
    "InterviewQuestionSet",
    "LinkedInAnalysis",
    "MarketAnalysis",
]
