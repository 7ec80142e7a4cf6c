"""Tests for the recursive directory walker."""

import os

import pytest

from report_uploader.errors import NotFoundError
from report_uploader.walker import iter_files, list_files


class TestListFiles:
    """Tests for list_files()."""

    def test_finds_nested_files(self, report_dir):
        """Every regular file in the tree should be listed exactly once."""
        files = list_files(report_dir)
        assert len(files) == 4
        assert len(set(files)) == 4

    def test_returns_absolute_paths(self, report_dir):
        for path in list_files(report_dir):
            assert os.path.isabs(path)
            assert os.path.isfile(path)

    def test_sorted_traversal_order(self, report_dir):
        """Entries within each directory are visited in name order."""
        names = [os.path.relpath(p, report_dir) for p in list_files(report_dir)]
        assert names == [
            os.path.join("assets", "screenshot.png"),
            "data.json",
            "index.html",
            "style.css",
        ]

    def test_relative_root_gives_absolute_paths(self, report_dir, monkeypatch):
        monkeypatch.chdir(report_dir.parent)
        files = list_files(report_dir.name)
        assert os.path.join(str(report_dir), "style.css") in files

    def test_empty_directory(self, tmp_path):
        assert list_files(tmp_path) == []

    def test_empty_subdirectories_are_ignored(self, tmp_path):
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "deep.txt").write_text("x")
        assert list_files(tmp_path) == [str(tmp_path / "a" / "b" / "deep.txt")]

    def test_symlinked_directory_not_followed(self, report_dir):
        os.symlink(report_dir / "assets", report_dir / "linked-assets")
        files = list_files(report_dir)
        assert len(files) == 4
        assert not any("linked-assets" in p for p in files)

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(NotFoundError):
            list_files(tmp_path / "missing")

    def test_file_root_raises(self, report_dir):
        with pytest.raises(NotFoundError):
            list_files(report_dir / "style.css")


class TestIterFiles:
    """Tests for the lazy iter_files() generator."""

    def test_is_lazy(self, tmp_path):
        """The missing-root error only surfaces once iteration starts."""
        gen = iter_files(tmp_path / "missing")
        with pytest.raises(NotFoundError):
            next(gen)

    def test_not_found_is_file_not_found_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(iter_files(tmp_path / "missing"))
