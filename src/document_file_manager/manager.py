"""Serialized access to files and folders under the document root."""

from __future__ import annotations

import errno
import logging
import os
import threading
from pathlib import Path

from document_file_manager.filesystem import RealFileSystem
from document_file_manager.protocols import FileSystem
from document_file_manager.types import DocumentEntry

logger = logging.getLogger(__name__)

# Name of the documents directory inside the user's home
DOCUMENTS_DIR_NAME = "Documents"


class DocumentRootError(Exception):
    """Error resolving the document root directory."""

    pass


def resolve_documents_dir() -> Path:
    """Resolve the platform documents directory.

    Returns:
        Path to ~/Documents.

    Raises:
        DocumentRootError: If the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise DocumentRootError(f"Cannot resolve documents directory: {e}") from e
    return home / DOCUMENTS_DIR_NAME


class DocumentFileManager:
    """Lists, copies, creates and removes entries under one document root.

    Every public method holds the instance lock for its whole duration, so
    concurrent callers are served one operation at a time. Operations that
    touch several paths (replace-on-copy, delete_contents) are not atomic:
    a failure part way leaves the earlier steps in place.

    Follows Separate Use from Creation: use `create()` or `create_default()`
    in production code.
    """

    def __init__(self, root: Path | None = None, filesystem: FileSystem | None = None) -> None:
        """Initialize the manager.

        Args:
            root: Document root. Defaults to ~/Documents, resolved on first use.
            filesystem: Filesystem abstraction. Defaults to RealFileSystem.
        """
        self._root = root
        self.fs = filesystem or RealFileSystem()
        self._lock = threading.RLock()

    @classmethod
    def create(cls, root: Path, filesystem: FileSystem | None = None) -> DocumentFileManager:
        """Create a manager bound to a custom document root.

        Args:
            root: Document root directory.
            filesystem: Optional filesystem abstraction.

        Returns:
            Configured DocumentFileManager instance.
        """
        return cls(root=root, filesystem=filesystem)

    @classmethod
    def create_default(cls, filesystem: FileSystem | None = None) -> DocumentFileManager:
        """Create a manager bound to the platform documents directory.

        Args:
            filesystem: Optional filesystem abstraction.

        Returns:
            DocumentFileManager rooted at ~/Documents.
        """
        return cls(filesystem=filesystem)

    @property
    def document_root(self) -> Path:
        """Resolved document root.

        Raises:
            DocumentRootError: If the root cannot be resolved.
        """
        with self._lock:
            if self._root is None:
                self._root = resolve_documents_dir()
                logger.debug("Resolved document root: %s", self._root)
            return self._root

    def exists(self, path: Path) -> bool:
        """Check whether a path exists.

        Args:
            path: Absolute path to check.

        Returns:
            True if present. Any resolution problem reports False.
        """
        with self._lock:
            try:
                return self.fs.exists(path)
            except (OSError, ValueError):
                return False

    def list_names(self, folder: str | None = None) -> list[str]:
        """List entry names directly inside the root or a named folder.

        Args:
            folder: Optional folder name under the root.

        Returns:
            Entry names in directory enumeration order.

        Raises:
            FileNotFoundError: If the folder does not exist.
        """
        with self._lock:
            return self.fs.list_dir(self._directory(folder))

    def list_locations(self, folder: str | None = None) -> list[Path]:
        """List entry paths directly inside the root or a named folder.

        Args:
            folder: Optional folder name under the root.

        Returns:
            Absolute entry paths in directory enumeration order.

        Raises:
            FileNotFoundError: If the folder does not exist.
        """
        with self._lock:
            directory = self._directory(folder)
            return [directory / name for name in self.fs.list_dir(directory)]

    def list_entries(self, folder: str | None = None) -> list[DocumentEntry]:
        """List entries with type and size information.

        Args:
            folder: Optional folder name under the root.

        Returns:
            One DocumentEntry per direct child.
        """
        with self._lock:
            entries = []
            for location in self.list_locations(folder):
                is_dir = self.fs.is_dir(location)
                # Dangling links have no size to report
                sized = not is_dir and self.exists(location)
                entries.append(
                    DocumentEntry(
                        name=location.name,
                        path=location,
                        is_dir=is_dir,
                        size=self.fs.file_size(location) if sized else None,
                    )
                )
            return entries

    def copy(self, source: Path, destination: Path, replace: bool = True) -> None:
        """Copy a file or folder to a new location.

        Args:
            source: Path to copy from.
            destination: Path to copy to.
            replace: If True, remove an existing destination before copying.

        Raises:
            FileExistsError: If replace is False and the destination exists.
            FileNotFoundError: If the source or destination parent is missing.
        """
        with self._lock:
            if replace:
                self.remove(destination)
            elif self._occupied(destination):
                raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(destination))

            logger.debug("Copying %s -> %s", source, destination)
            if self.fs.is_dir(source):
                self.fs.copytree(source, destination)
            else:
                self.fs.copy_file(source, destination)

    def remove(self, path: Path) -> None:
        """Remove a file or folder. Missing paths are ignored.

        Args:
            path: Path to remove.
        """
        with self._lock:
            if not self._occupied(path):
                return

            logger.debug("Removing %s", path)
            if self.fs.is_dir(path) and not self.fs.is_symlink(path):
                self.fs.rmtree(path)
            else:
                self.fs.unlink(path)

    # ========================================================================
    # Folders
    # ========================================================================

    def folder_location(self, name: str) -> Path:
        """Get the location of a named folder under the root.

        Args:
            name: Folder name.

        Returns:
            Absolute folder path (the folder need not exist).
        """
        return self.document_root / name

    def create_folder(self, name: str) -> Path:
        """Create a named folder, including missing parents, if absent.

        Args:
            name: Folder name.

        Returns:
            Absolute folder path.
        """
        with self._lock:
            location = self.folder_location(name)
            if not self.exists(location):
                logger.debug("Creating folder %s", location)
                self.fs.mkdir(location, parents=True, exist_ok=True)
            return location

    def remove_folder(self, name: str) -> None:
        """Remove a named folder and its contents. Missing folders are ignored.

        Args:
            name: Folder name.
        """
        with self._lock:
            self.remove(self.folder_location(name))

    def delete_contents(self, name: str) -> None:
        """Remove every direct child of a named folder, keeping the folder.

        Children are removed one at a time. If a removal fails the error
        propagates and children already removed stay removed.

        Args:
            name: Folder name.

        Raises:
            FileNotFoundError: If the folder does not exist.
        """
        with self._lock:
            for location in self.list_locations(name):
                try:
                    self.remove(location)
                except OSError:
                    logger.debug("Clearing folder '%s' stopped at %s", name, location)
                    raise

    def _occupied(self, path: Path) -> bool:
        """Check for an entry at path, counting links whose target is gone."""
        return self.exists(path) or self.fs.is_symlink(path)

    def _directory(self, folder: str | None) -> Path:
        """Get the root, or a named folder under it."""
        if folder is None:
            return self.document_root
        return self.folder_location(folder)
