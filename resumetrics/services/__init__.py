"""Service exports."""

from .analysis_provider import (
    AnalysisProvider,
    GeminiAnalysisProvider,
    OpenAIAnalysisProvider,
    get_analysis_provider,
)
from .response_parser import parse_llm_json, require_any_field, validate_loosely

__all__ = [
    "AnalysisProvider",
    "GeminiAnalysisProvider",
    "OpenAIAnalysisProvider",
    "get_analysis_provider",
    "parse_llm_json",
    "require_any_field",
    "validate_loosely",
]
