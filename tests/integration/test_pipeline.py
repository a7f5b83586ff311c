"""End-to-end ingestion: upload → extract → analyze → store → fetch."""

import asyncio
import threading

import httpx
import pytest

from resumetrics.config import PDF_MIME_TYPE
from resumetrics.cv_pipeline import AnalysisClient, ingest_resume, run_resume_pipeline
from resumetrics.exceptions import ExtractionFailed, ProviderUnavailable, UnsupportedFormat
from resumetrics.schemas.resume_metadata import UploadedDocument
from resumetrics.services.analysis_provider import GeminiAnalysisProvider


def _unreachable_gemini():
    def handler(request):
        raise httpx.ConnectError("network is unreachable", request=request)

    return GeminiAnalysisProvider(api_key="test-key", api_url="https://gemini.invalid/generate", transport=httpx.MockTransport(handler))


@pytest.mark.integration
def test_two_page_pdf_with_unreachable_provider(pdf_document, memory_store):
    client = AnalysisClient(_unreachable_gemini())

    resume_id = asyncio.run(ingest_resume(pdf_document, memory_store, client))
    stored = asyncio.run(memory_store.get_by_id(resume_id))

    analysis = stored.metadata.analysis
    assert analysis.source == "fallback"
    assert analysis.name == "Jane Doe"
    assert analysis.skills == ["Go", "Rust"]
    assert "Jane Doe" in analysis.raw_text
    assert stored.metadata.file_name == "jane.pdf"
    assert stored.metadata.file_size == pdf_document.size
    assert stored.document.content == pdf_document.content


@pytest.mark.integration
def test_docx_with_provider_analysis(docx_document, memory_store, scripted_provider, resume_payload, as_model_output):
    client = AnalysisClient(scripted_provider(text=as_model_output(resume_payload)))

    resume_id = asyncio.run(ingest_resume(docx_document, memory_store, client))

    [record] = memory_store.list()
    assert record.id == resume_id
    assert record.analysis.source == "ai"
    assert record.analysis.raw_text == "Full Name: John Smith Email: john@example.com"
    assert record.analysis.analysis.cv_score == 75


@pytest.mark.integration
def test_unsupported_upload_does_not_touch_store(memory_store, unavailable_provider):
    document = UploadedDocument(content=b"plain text", file_name="cv.txt", mime_type="text/plain")

    with pytest.raises(UnsupportedFormat):
        asyncio.run(ingest_resume(document, memory_store, AnalysisClient(unavailable_provider)))
    assert memory_store.list() == []


@pytest.mark.integration
def test_corrupt_upload_does_not_touch_store(memory_store, unavailable_provider):
    document = UploadedDocument(content=b"garbage", file_name="cv.pdf", mime_type=PDF_MIME_TYPE)

    with pytest.raises(ExtractionFailed):
        asyncio.run(ingest_resume(document, memory_store, AnalysisClient(unavailable_provider)))
    assert memory_store.list() == []


@pytest.mark.integration
def test_failed_job_match_stores_nothing(pdf_document, memory_store, unavailable_provider):
    with pytest.raises(ProviderUnavailable):
        asyncio.run(
            ingest_resume(pdf_document, memory_store, AnalysisClient(unavailable_provider), job_description="Go role")
        )
    assert memory_store.list() == []


@pytest.mark.integration
def test_job_match_is_persisted(pdf_document, memory_store, scripted_provider, resume_payload, match_payload, as_model_output):
    def handler(prompt):
        return as_model_output(match_payload if "Job description:" in prompt else resume_payload)

    client = AnalysisClient(scripted_provider(handler))
    resume_id = asyncio.run(ingest_resume(pdf_document, memory_store, client, job_description="Platform Engineer"))

    stored = asyncio.run(memory_store.get_by_id(resume_id))
    assert stored.metadata.analysis.job_match.analysis.gaps == ["Kubernetes"]


@pytest.mark.integration
def test_back_to_back_uploads(make_pdf, memory_store, unavailable_provider):
    client = AnalysisClient(unavailable_provider)
    first = UploadedDocument(content=make_pdf([["Name: A"]]), file_name="a.pdf", mime_type=PDF_MIME_TYPE)
    second = UploadedDocument(content=make_pdf([["Name: B"]]), file_name="b.pdf", mime_type=PDF_MIME_TYPE)

    async def upload_both():
        return await asyncio.gather(
            ingest_resume(first, memory_store, client),
            ingest_resume(second, memory_store, client),
        )

    id_a, id_b = asyncio.run(upload_both())

    assert id_a != id_b
    assert asyncio.run(memory_store.get_by_id(id_a)).metadata.analysis.name == "A"
    assert asyncio.run(memory_store.get_by_id(id_b)).metadata.analysis.name == "B"


@pytest.mark.integration
def test_run_resume_pipeline_sync(tmp_path, make_pdf, unavailable_provider):
    from resumetrics.storage import get_document_store

    store = get_document_store(tmp_path)
    resume_id = run_resume_pipeline(
        make_pdf([["Name: Jane Doe", "Skills: Go, Rust"]]),
        "jane.pdf",
        store=store,
        client=AnalysisClient(unavailable_provider),
    )

    [record] = store.list()
    assert record.id == resume_id
    assert record.analysis.skills == ["Go", "Rust"]

    with pytest.raises(UnsupportedFormat):
        run_resume_pipeline(b"x", "notes.txt", store=store, client=AnalysisClient(unavailable_provider))
    assert len(store.list()) == 1


@pytest.mark.integration
def test_extraction_runs_off_the_event_loop(monkeypatch, pdf_document, memory_store, unavailable_provider):
    from resumetrics.cv_pipeline import pipeline

    threads = []

    def recording_extract(content, mime_type):
        threads.append(threading.get_ident())
        return "Name: Jane Doe Skills: Go"

    monkeypatch.setattr(pipeline, "extract_text", recording_extract)

    async def scenario():
        resume_id = await ingest_resume(pdf_document, memory_store, AnalysisClient(unavailable_provider))
        return resume_id, threading.get_ident()

    resume_id, loop_thread = asyncio.run(scenario())

    assert threads and threads[0] != loop_thread
    assert memory_store.list()[0].id == resume_id
