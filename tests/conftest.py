"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from document_file_manager.manager import DocumentFileManager


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def documents_dir(tmp_path: Path) -> Path:
    """Create an empty document root."""
    root = tmp_path / "Documents"
    root.mkdir()
    return root


@pytest.fixture
def manager(documents_dir: Path) -> DocumentFileManager:
    """Create a manager rooted at the temporary documents directory."""
    return DocumentFileManager.create(documents_dir)


@pytest.fixture
def sample_file(documents_dir: Path) -> Path:
    """Write the sample file into the document root."""
    path = documents_dir / "TestSample"
    path.write_bytes(b"TestData")
    return path


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_symlink.return_value = False
    fs.list_dir.return_value = []
    return fs
