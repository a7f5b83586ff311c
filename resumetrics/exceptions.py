"""Exception hierarchy for extraction, analysis and storage failures."""

from typing import Optional


class ResumetricsError(Exception):
    """Base class for every error raised by the package."""


class UnsupportedFormat(ResumetricsError):
    """
    Raised when an uploaded document is not a PDF or DOCX.

    Attributes:
        mime_type: The rejected MIME type (or file name when resolved from one)
    """

    def __init__(self, mime_type: Optional[str]):
        self.mime_type = mime_type
        super().__init__(f"Unsupported document type: {mime_type!r}. Please upload a PDF or DOCX file")


class ExtractionFailed(ResumetricsError):
    """
    Raised when the PDF/DOCX decoder cannot read the document.

    Attributes:
        mime_type: MIME type the decoder was chosen for
        original_error: The decoder exception
    """

    def __init__(self, mime_type: str, original_error: Exception):
        self.mime_type = mime_type
        self.original_error = original_error
        super().__init__(
            f"Could not extract text from {mime_type} document: "
            f"{type(original_error).__name__}: {original_error}"
        )


class AnalysisError(ResumetricsError):
    """Base class for failures of the external analysis provider."""


class AnalysisParseFailed(AnalysisError):
    """
    Raised when provider output holds no parseable JSON object.

    Attributes:
        message: Error description
        raw_output: Provider output that failed to parse (truncated in the message)
    """

    def __init__(self, message: str, raw_output: Optional[str] = None):
        self.message = message
        self.raw_output = raw_output
        parts = [message]
        if raw_output:
            snippet = raw_output[:200] + "..." if len(raw_output) > 200 else raw_output
            parts.append(f"\nProvider output:\n{snippet}")
        super().__init__("\n".join(parts))


class ProviderUnavailable(AnalysisError):
    """
    Raised on network failures, non-2xx responses or malformed response envelopes.

    Attributes:
        message: Error description
        status_code: HTTP status code when the provider answered
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)


class StorageError(ResumetricsError):
    """Base class for metadata index / blob store problems."""


class StorageInconsistency(StorageError):
    """
    Raised when the metadata index and the blob store disagree about an id.

    Attributes:
        resume_id: The affected id
        detail: Which side is missing
    """

    def __init__(self, resume_id: str, detail: str = "metadata exists but the stored file is missing"):
        self.resume_id = resume_id
        self.detail = detail
        super().__init__(f"Storage inconsistency for {resume_id}: {detail}")


class StorageFailure(StorageError):
    """Raised when the underlying storage engine fails to read, write or delete."""
