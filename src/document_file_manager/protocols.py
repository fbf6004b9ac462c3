"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the file system
backend and for the document manager itself. Designing to interfaces enables:
- Loose coupling between the CLI and the manager
- Easy substitution of test doubles
- Clear contracts for implementations

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from document_file_manager.types import DocumentEntry


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the file system operations the manager delegates to.

    Implementations raise the platform's OSError subclasses unchanged.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        ...

    def list_dir(self, path: Path) -> list[str]:
        """List entry names directly inside a directory."""
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a single file."""
        ...

    def copytree(self, src: Path, dst: Path) -> None:
        """Copy a directory tree."""
        ...

    def file_size(self, path: Path) -> int:
        """Return the size of a file in bytes."""
        ...


@runtime_checkable
class DocumentStore(Protocol):
    """Protocol for document root operations.

    Implementations serialize calls so that only one operation touches the
    document root at a time.
    """

    @property
    def document_root(self) -> Path:
        """Resolved document root directory."""
        ...

    def exists(self, path: Path) -> bool:
        """Check whether a path exists.

        Args:
            path: Absolute path to check.

        Returns:
            True if present, False otherwise (never raises).
        """
        ...

    def list_names(self, folder: str | None = None) -> list[str]:
        """List entry names in the root or in a named folder.

        Args:
            folder: Optional folder name under the root.

        Returns:
            Entry names, one level deep.
        """
        ...

    def list_locations(self, folder: str | None = None) -> list[Path]:
        """List entry paths in the root or in a named folder.

        Args:
            folder: Optional folder name under the root.

        Returns:
            Absolute entry paths, one level deep.
        """
        ...

    def list_entries(self, folder: str | None = None) -> list[DocumentEntry]:
        """List entries with type and size information.

        Args:
            folder: Optional folder name under the root.

        Returns:
            DocumentEntry objects, one level deep.
        """
        ...

    def copy(self, source: Path, destination: Path, replace: bool = True) -> None:
        """Copy a file or folder.

        Args:
            source: Path to copy from.
            destination: Path to copy to.
            replace: Remove an existing destination first instead of failing.
        """
        ...

    def remove(self, path: Path) -> None:
        """Remove a file or folder if it exists.

        Args:
            path: Path to remove.
        """
        ...

    def folder_location(self, name: str) -> Path:
        """Get the location of a named folder under the root.

        Args:
            name: Folder name.

        Returns:
            Absolute folder path.
        """
        ...

    def create_folder(self, name: str) -> Path:
        """Create a named folder if it does not exist.

        Args:
            name: Folder name.

        Returns:
            Absolute folder path.
        """
        ...

    def remove_folder(self, name: str) -> None:
        """Remove a named folder and everything inside it.

        Args:
            name: Folder name.
        """
        ...

    def delete_contents(self, name: str) -> None:
        """Remove every direct child of a named folder.

        Args:
            name: Folder name.
        """
        ...
