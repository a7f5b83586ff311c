"""Extract normalized text from uploaded résumé files (PDF, DOCX). In-memory only."""

from io import BytesIO
from typing import List

import pdfplumber
from docx import Document

from resumetrics.config import DOCX_MIME_TYPE, PDF_MIME_TYPE
from resumetrics.exceptions import ExtractionFailed, UnsupportedFormat
from resumetrics.utils.helpers import mime_type_for_filename, normalize_whitespace
from resumetrics.utils.logger import get_logger

logger = get_logger(__name__)


def _extract_pdf(content: bytes) -> str:
    """Page word tokens joined by spaces, pages joined by newlines, page order kept."""
    pages: List[str] = []
    with pdfplumber.open(BytesIO(content)) as pdf:
        for page in pdf.pages:
            words = page.extract_words()
            pages.append(" ".join(w["text"] for w in words))
    return "\n".join(pages)


def _extract_docx(content: bytes) -> str:
    """Raw paragraph text of the document body, tables included."""
    doc = Document(BytesIO(content))
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            for cell in row.cells:
                parts.extend(p.text for p in cell.paragraphs)
    return "\n".join(parts)


_EXTRACTORS = {
    PDF_MIME_TYPE: _extract_pdf,
    DOCX_MIME_TYPE: _extract_docx,
}


def extract_text(content: bytes, mime_type: str) -> str:
    """
    Extract text from a PDF or DOCX document held in memory.

    Whitespace runs collapse to single spaces and the result is trimmed; a
    PDF without pages yields an empty string. Raises UnsupportedFormat for any
    other MIME type and ExtractionFailed when the decoder cannot read the file.
    """
    extractor = _EXTRACTORS.get(mime_type)
    if extractor is None:
        logger.warning("Unsupported file type: %s", mime_type)
        raise UnsupportedFormat(mime_type)
    try:
        raw = extractor(content)
    except Exception as e:
        logger.error("Text extraction failed for %s: %s", mime_type, e)
        raise ExtractionFailed(mime_type, e) from e
    text = normalize_whitespace(raw)
    logger.info("Extracted %s characters from %s document", len(text), mime_type)
    return text


def extract_text_from_file(content: bytes, filename: str) -> str:
    """Same as extract_text, with the MIME type resolved from the file extension."""
    mime_type = mime_type_for_filename(filename)
    if mime_type is None:
        logger.warning("Unsupported file type: %s", filename)
        raise UnsupportedFormat(filename)
    return extract_text(content, mime_type)
