"""Filesystem abstraction for testability.

This module provides a filesystem abstraction that lets the document
manager be tested with injected doubles. The RealFileSystem implementation
wraps standard library operations and lets their OSErrors propagate.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path, os and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        """Check if a path is a symbolic link."""
        return path.is_symlink()

    def list_dir(self, path: Path) -> list[str]:
        """List entry names directly inside a directory, in enumeration order."""
        return os.listdir(path)

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a single file, preserving metadata."""
        shutil.copy2(src, dst)

    def copytree(self, src: Path, dst: Path) -> None:
        """Copy a directory tree."""
        shutil.copytree(src, dst)

    def file_size(self, path: Path) -> int:
        """Return the size of a file in bytes."""
        return path.stat().st_size
