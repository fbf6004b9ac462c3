"""Serialized file and folder operations on a document root directory."""

__version__ = "0.1.0"

from document_file_manager.manager import (
    DocumentFileManager,
    DocumentRootError,
    resolve_documents_dir,
)
from document_file_manager.protocols import DocumentStore, FileSystem
from document_file_manager.types import DocumentEntry

__all__ = [
    "__version__",
    "DocumentEntry",
    "DocumentFileManager",
    "DocumentRootError",
    "DocumentStore",
    "FileSystem",
    "resolve_documents_dir",
]
