"""Persisted résumé records and the uploaded document they describe."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field

from resumetrics.exceptions import UnsupportedFormat
from resumetrics.schemas.analysis_result import AnalysisResult
from resumetrics.schemas.base import CamelModel
from resumetrics.utils.helpers import mime_type_for_filename


class UploadedDocument(BaseModel):
    """A raw uploaded file: bytes plus the name and MIME type it arrived with."""

    content: bytes = Field(..., repr=False)
    file_name: str = Field(..., description="Original file name")
    mime_type: str = Field(..., description="MIME type reported for the upload")

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: Union[str, Path], mime_type: Optional[str] = None) -> "UploadedDocument":
        """Read a file from disk; the MIME type is guessed from the extension when not given."""
        path = Path(path)
        resolved = mime_type or mime_type_for_filename(path.name)
        if resolved is None:
            raise UnsupportedFormat(path.name)
        return cls(content=path.read_bytes(), file_name=path.name, mime_type=resolved)


class ResumeMetadata(CamelModel):
    """One entry of the metadata index; the file bytes live in the blob store under ``id``."""

    id: str = Field(..., description="Unique id, never reused")
    file_name: str
    upload_date: datetime = Field(..., description="Upload time, serialized as ISO-8601")
    file_type: str = Field(..., description="MIME type of the stored file")
    file_size: int = Field(..., ge=0)
    analysis: AnalysisResult = Field(default_factory=AnalysisResult)


class StoredResume(BaseModel):
    """Result of a successful lookup: the metadata record and its file."""

    metadata: ResumeMetadata
    document: UploadedDocument
