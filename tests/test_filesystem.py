"""Tests for filesystem abstraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from document_file_manager.filesystem import RealFileSystem
from document_file_manager.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test RealFileSystem satisfies the FileSystem protocol."""
        assert isinstance(RealFileSystem(), FileSystem)

    def test_exists_true(self, tmp_path: Path) -> None:
        """Test exists returns True for existing path."""
        fs = RealFileSystem()
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert fs.exists(test_file) is True

    def test_exists_false(self, tmp_path: Path) -> None:
        """Test exists returns False for non-existent path."""
        fs = RealFileSystem()

        assert fs.exists(tmp_path / "missing.txt") is False

    def test_is_dir_false_for_file(self, tmp_path: Path) -> None:
        """Test is_dir returns False for file."""
        fs = RealFileSystem()
        test_file = tmp_path / "file.txt"
        test_file.touch()

        assert fs.is_dir(test_file) is False

    def test_is_symlink(self, tmp_path: Path) -> None:
        """Test is_symlink distinguishes links from their targets."""
        fs = RealFileSystem()
        target = tmp_path / "target"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target, target_is_directory=True)

        assert fs.is_symlink(link) is True
        assert fs.is_symlink(target) is False

    def test_list_dir_is_shallow(self, tmp_path: Path) -> None:
        """Test list_dir returns only direct children."""
        fs = RealFileSystem()
        (tmp_path / "a.txt").touch()
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "nested.txt").touch()

        assert sorted(fs.list_dir(tmp_path)) == ["a.txt", "sub"]

    def test_list_dir_missing_raises(self, tmp_path: Path) -> None:
        """Test listing a non-existent directory raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.list_dir(tmp_path / "missing")

    def test_mkdir_parents(self, tmp_path: Path) -> None:
        """Test creating nested directories with parents=True."""
        fs = RealFileSystem()
        nested_dir = tmp_path / "a" / "b" / "c"

        fs.mkdir(nested_dir, parents=True)

        assert nested_dir.is_dir()

    def test_mkdir_raises_without_exist_ok(self, tmp_path: Path) -> None:
        """Test mkdir raises FileExistsError without exist_ok."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        with pytest.raises(FileExistsError):
            fs.mkdir(existing_dir, exist_ok=False)

    def test_unlink_missing_raises(self, tmp_path: Path) -> None:
        """Test unlinking non-existent file raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.unlink(tmp_path / "missing.txt")

    def test_rmtree(self, tmp_path: Path) -> None:
        """Test removing a directory tree."""
        fs = RealFileSystem()
        tree_dir = tmp_path / "tree"
        (tree_dir / "subdir").mkdir(parents=True)
        (tree_dir / "file1.txt").touch()
        (tree_dir / "subdir" / "file2.txt").touch()

        fs.rmtree(tree_dir)

        assert not tree_dir.exists()

    def test_copy_file(self, tmp_path: Path) -> None:
        """Test copying a single file."""
        fs = RealFileSystem()
        src = tmp_path / "src.txt"
        src.write_text("content")
        dst = tmp_path / "dst.txt"

        fs.copy_file(src, dst)

        assert dst.read_text() == "content"

    def test_copy_file_missing_source_raises(self, tmp_path: Path) -> None:
        """Test copying a missing file raises FileNotFoundError."""
        fs = RealFileSystem()

        with pytest.raises(FileNotFoundError):
            fs.copy_file(tmp_path / "missing.txt", tmp_path / "dst.txt")

    def test_copytree(self, tmp_path: Path) -> None:
        """Test copying a directory tree."""
        fs = RealFileSystem()
        src_dir = tmp_path / "source"
        (src_dir / "subdir").mkdir(parents=True)
        (src_dir / "file1.txt").write_text("content1")
        (src_dir / "subdir" / "file2.txt").write_text("content2")
        dst_dir = tmp_path / "destination"

        fs.copytree(src_dir, dst_dir)

        assert (dst_dir / "file1.txt").read_text() == "content1"
        assert (dst_dir / "subdir" / "file2.txt").read_text() == "content2"

    def test_file_size(self, tmp_path: Path) -> None:
        """Test file_size reports bytes on disk."""
        fs = RealFileSystem()
        test_file = tmp_path / "sized.bin"
        test_file.write_bytes(b"12345")

        assert fs.file_size(test_file) == 5
