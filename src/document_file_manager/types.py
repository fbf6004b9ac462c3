"""Shared data types for the document file manager."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DocumentEntry"]


class DocumentEntry(BaseModel):
    """A single entry from a one-level directory listing.

    Attributes:
        name: Entry name relative to its parent directory.
        path: Absolute location of the entry.
        is_dir: True if the entry is a directory.
        size: Size in bytes for files, None for directories.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    path: Path
    is_dir: bool = Field(default=False, alias="isDir")
    size: int | None = None
