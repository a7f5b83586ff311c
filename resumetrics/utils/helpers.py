"""Helper utilities for the Resumetrics core."""

import re
import secrets
import time
from pathlib import Path
from typing import List, Optional

from resumetrics.config import SUPPORTED_MIME_TYPES

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_emails(text: str) -> List[str]:
    """Extract email addresses from text using regex, in order of appearance."""
    if not text:
        return []
    pattern = r"[\w.%+-]+@[\w.-]+\.[a-zA-Z]{2,}"
    return list(dict.fromkeys(re.findall(pattern, text)))


def mime_type_for_filename(filename: str) -> Optional[str]:
    """Map a .pdf/.docx file name to its MIME type; None for anything else."""
    suffix = Path((filename or "").strip()).suffix.lower()
    for mime_type, extension in SUPPORTED_MIME_TYPES.items():
        if suffix == extension:
            return mime_type
    return None


def generate_resume_id() -> str:
    """New record id: nanosecond timestamp plus a random suffix (no shared counter)."""
    return f"resume_{time.time_ns()}_{secrets.token_hex(5)}"
