"""Deterministic regex extraction used when the analysis provider fails."""

import re
from typing import List, Optional

from resumetrics.schemas.analysis_result import AnalysisResult
from resumetrics.utils.helpers import extract_emails

# Labels that start a new section; a captured value stops at the next one.
_SECTION_LABELS = (
    r"Full\s+Name|Name|E-?mail|Phone|Mobile|Address|Location|LinkedIn|"
    r"Technical\s+Skills|Skills|Work\s+Experience|Experience|Education|"
    r"Summary|Objective|Projects|Certifications|Languages|Interests|References"
)
_VALUE = rf"(?P<value>.+?)(?=\s+(?:{_SECTION_LABELS})\s*:|\n|$)"

NAME_PATTERN = re.compile(rf"\b(?:Full\s+Name|Name)\s*:\s*{_VALUE}", re.IGNORECASE)
SKILLS_PATTERN = re.compile(rf"\b(?:Technical\s+Skills|Skills)\s*:\s*{_VALUE}", re.IGNORECASE)
EXPERIENCE_PATTERN = re.compile(rf"\b(?:Work\s+Experience|Experience)\s*:\s*{_VALUE}", re.IGNORECASE)


def _labelled_value(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    value = match.group("value").strip()
    return value or None


def _split_skills(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [s.strip() for s in value.split(",") if s.strip()]


def extract_with_regex(text: str) -> AnalysisResult:
    """
    Recover email, name, skills and experience from labelled résumé text.

    Unmatched fields are None (or an empty skills list). Never raises; the
    input text is attached as raw_text.
    """
    text = text or ""
    emails = extract_emails(text)
    return AnalysisResult(
        name=_labelled_value(NAME_PATTERN, text),
        email=emails[0] if emails else None,
        skills=_split_skills(_labelled_value(SKILLS_PATTERN, text)),
        experience=_labelled_value(EXPERIENCE_PATTERN, text),
        raw_text=text,
        source="fallback",
    )
