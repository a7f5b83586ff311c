"""Résumé persistence: metadata index + blob store behind a DocumentStore."""

from .document_store import DocumentStore, get_document_store
from .file_store import FileBlobStore, JsonMetadataStore
from .memory_store import InMemoryBlobStore, InMemoryMetadataStore
from .ports import BlobStore, MetadataStore

__all__ = [
    "DocumentStore",
    "get_document_store",
    "MetadataStore",
    "BlobStore",
    "InMemoryMetadataStore",
    "InMemoryBlobStore",
    "JsonMetadataStore",
    "FileBlobStore",
]
