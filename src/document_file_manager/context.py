"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols (abstract interfaces) rather than
concrete implementations, so test doubles can be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from document_file_manager.protocols import DocumentStore


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    manager: DocumentStore


def create_context(root: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Args:
        root: Override the document root (defaults to ~/Documents).

    Returns:
        Configured AppContext with all dependencies.
    """
    from document_file_manager.filesystem import RealFileSystem
    from document_file_manager.manager import DocumentFileManager

    filesystem = RealFileSystem()
    manager = (
        DocumentFileManager.create(root, filesystem=filesystem)
        if root
        else DocumentFileManager.create_default(filesystem=filesystem)
    )

    return AppContext(manager=manager)
