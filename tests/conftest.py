"""Shared fixtures: document builders, a scripted analysis provider, storage fakes."""

import json
from io import BytesIO
from typing import Callable, List, Optional

import pytest
from docx import Document

from resumetrics.config import DOCX_MIME_TYPE, PDF_MIME_TYPE
from resumetrics.exceptions import ProviderUnavailable
from resumetrics.schemas.resume_metadata import UploadedDocument
from resumetrics.services.analysis_provider import AnalysisProvider
from resumetrics.storage import DocumentStore, InMemoryBlobStore, InMemoryMetadataStore


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: List[List[str]]) -> bytes:
    """Minimal PDF with one Helvetica text line per entry, one page per list."""
    objects = {
        1: b"<< /Type /Catalog /Pages 2 0 R >>",
        3: b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    }
    kids = []
    next_id = 4
    for lines in pages:
        page_id, content_id = next_id, next_id + 1
        next_id += 2
        kids.append(page_id)
        ops = " ".join(f"({_pdf_escape(line)}) Tj T*" for line in lines)
        stream = f"BT /F1 12 Tf 14 TL 72 720 Td {ops} ET".encode("latin-1")
        objects[page_id] = (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Contents {content_id} 0 R /Resources << /Font << /F1 3 0 R >> >> >>"
        ).encode("latin-1")
        objects[content_id] = b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
    kid_refs = " ".join(f"{k} 0 R" for k in kids)
    objects[2] = f"<< /Type /Pages /Kids [{kid_refs}] /Count {len(kids)} >>".encode("latin-1")

    out = BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = {}
    for obj_id in sorted(objects):
        offsets[obj_id] = out.tell()
        out.write(b"%d 0 obj\n" % obj_id + objects[obj_id] + b"\nendobj\n")
    xref_at = out.tell()
    size = max(objects) + 1
    out.write(b"xref\n0 %d\n" % size)
    out.write(b"0000000000 65535 f \n")
    for obj_id in range(1, size):
        out.write(b"%010d 00000 n \n" % offsets[obj_id])
    out.write(b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (size, xref_at))
    return out.getvalue()


def build_docx(paragraphs: List[str], table: Optional[List[List[str]]] = None) -> bytes:
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table:
        grid = doc.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    buf = BytesIO()
    doc.save(buf)
    return buf.getvalue()


class ScriptedProvider(AnalysisProvider):
    """Answers each prompt through ``handler``; records every prompt it receives."""

    name = "scripted"

    def __init__(self, handler: Callable[[str], str]) -> None:
        self._handler = handler
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._handler(prompt)


def _raise_unavailable(prompt: str) -> str:
    raise ProviderUnavailable("connection refused")


@pytest.fixture
def make_pdf():
    return build_pdf


@pytest.fixture
def make_docx():
    return build_docx


@pytest.fixture
def scripted_provider():
    """Factory: scripted_provider(handler) or scripted_provider(text=...) for a fixed answer."""

    def factory(handler: Optional[Callable[[str], str]] = None, text: Optional[str] = None) -> ScriptedProvider:
        if handler is None:
            handler = lambda prompt: text  # noqa: E731
        return ScriptedProvider(handler)

    return factory


@pytest.fixture
def unavailable_provider():
    return ScriptedProvider(_raise_unavailable)


@pytest.fixture
def resume_payload():
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "skills": ["Go", "Rust"],
        "experience": "8 years building distributed systems",
        "currentPosition": {
            "title": "Senior Engineer",
            "designation": "IC3",
            "company": "Acme",
            "duration": "3 years",
        },
        "careerAnalysis": {
            "currentLevel": "Senior",
            "totalYearsOfExperience": 8,
            "positionHistory": [
                {"title": "Engineer", "company": "Initech", "duration": "5 years", "responsibilities": ["APIs"]}
            ],
            "suggestedNextRole": "Staff Engineer",
            "progressionRoadmap": {
                "targetRole": "Staff Engineer",
                "estimatedTimeframe": "2 years",
                "requiredSkills": [
                    {"skill": "System design", "priority": "High", "currentLevel": "intermediate", "actionItems": ["Lead a design review"]}
                ],
                "certifications": ["CKA"],
                "milestones": [{"title": "Tech lead", "timeframe": "6 months", "actions": ["Own a project"]}],
            },
        },
        "analysis": {
            "strengths": {"skills": ["Go"], "experience": ["Scale"], "marketAlignment": ["Cloud"]},
            "improvements": {"skills": ["Frontend"], "experience": [], "suggestions": ["Add metrics"]},
            "marketScore": 82,
            "cvScore": 75,
        },
    }


@pytest.fixture
def match_payload():
    return {
        "matchRate": 71,
        "suitable": True,
        "cvSummary": {"position": "Senior Engineer", "experience": ["8 years"], "skills": ["Go", "Rust"]},
        "jobSummary": {"title": "Platform Engineer", "responsibilities": ["Run k8s"], "requirements": ["Go"]},
        "improvements": [
            {"category": "Skills", "details": "Mention Kubernetes", "priority": "high"},
            {"category": "Format", "details": "Shorten summary", "priority": "low"},
        ],
        "analysis": {"strengths": ["Go"], "gaps": ["Kubernetes"], "recommendations": ["Get CKA"]},
    }


@pytest.fixture
def as_model_output():
    """Wrap a payload the way chat models tend to: prose plus a fenced JSON block."""

    def wrap(payload: dict) -> str:
        return f"Here is the analysis you asked for:\n```json\n{json.dumps(payload, indent=2)}\n```\nLet me know!"

    return wrap


@pytest.fixture
def memory_store():
    return DocumentStore(InMemoryMetadataStore(), InMemoryBlobStore())


@pytest.fixture
def pdf_document(make_pdf):
    return UploadedDocument(
        content=make_pdf([["Name: Jane Doe"], ["Skills: Go, Rust"]]),
        file_name="jane.pdf",
        mime_type=PDF_MIME_TYPE,
    )


@pytest.fixture
def docx_document(make_docx):
    return UploadedDocument(
        content=make_docx(["Full Name: John Smith", "Email: john@example.com"]),
        file_name="john.docx",
        mime_type=DOCX_MIME_TYPE,
    )
