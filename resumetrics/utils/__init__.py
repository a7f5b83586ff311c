"""Utility exports."""

from .helpers import (
    extract_emails,
    generate_resume_id,
    mime_type_for_filename,
    normalize_whitespace,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "extract_emails",
    "generate_resume_id",
    "mime_type_for_filename",
    "normalize_whitespace",
]
