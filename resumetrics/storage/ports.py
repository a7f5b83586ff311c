"""Storage ports: the metadata index and the blob store the DocumentStore is built on."""

from abc import ABC, abstractmethod
from typing import List, Optional

from resumetrics.schemas.resume_metadata import ResumeMetadata


class MetadataStore(ABC):
    """
    Ordered index of résumé records; the single source of truth for which résumés exist.
    Implementations serialize their own read/modify/write and raise StorageFailure on engine errors.
    """

    @abstractmethod
    def list(self) -> List[ResumeMetadata]:
        """All records in insertion order."""
        ...

    @abstractmethod
    def get(self, resume_id: str) -> Optional[ResumeMetadata]:
        ...

    @abstractmethod
    def put(self, record: ResumeMetadata, position: Optional[int] = None) -> None:
        """Append ``record``, or insert it at ``position`` (used to restore a removed record)."""
        ...

    @abstractmethod
    def delete(self, resume_id: str) -> Optional[int]:
        """Remove the record; return the position it held, or None if it was absent."""
        ...


class BlobStore(ABC):
    """
    Raw file bytes addressed only by record id; keeps no list of its own.
    Implementations raise StorageFailure on engine errors.
    """

    @abstractmethod
    def get(self, resume_id: str) -> Optional[bytes]:
        ...

    @abstractmethod
    def put(self, resume_id: str, data: bytes) -> None:
        ...

    @abstractmethod
    def delete(self, resume_id: str) -> bool:
        """Remove the blob; False if there was none."""
        ...

    @abstractmethod
    def exists(self, resume_id: str) -> bool:
        ...
