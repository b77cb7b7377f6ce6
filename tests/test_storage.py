"""Tests for prdwiz.pm.storage module."""

import json

import pytest

from prdwiz.lib.config import WizardOptions
from prdwiz.lib.validate import ValidationError
from prdwiz.pm.storage import (
    ensure_directory,
    file_exists,
    markdown_path_for,
    prd_exists,
    resolve_output_dir,
    write_file,
    write_prd_json,
)


class TestEnsureDirectory:
    """Tests for ensure_directory()."""

    def test_creates_missing_parents(self, tmp_path):
        target = tmp_path / "a" / "b" / "tasks"
        ensure_directory(target)
        assert target.is_dir()

    def test_idempotent(self, tmp_path):
        target = tmp_path / "tasks"
        ensure_directory(target)
        (target / "keep.md").write_text("x")
        ensure_directory(target)
        assert (target / "keep.md").read_text() == "x"

    def test_file_in_the_way_raises(self, tmp_path):
        target = tmp_path / "tasks"
        target.write_text("not a dir")
        with pytest.raises(NotADirectoryError):
            ensure_directory(target)


class TestWriteFile:
    """Tests for write_file() and file_exists()."""

    def test_writes_and_overwrites(self, tmp_path):
        path = tmp_path / "prd-x.md"
        assert not file_exists(path)
        write_file(path, "first")
        assert file_exists(path)
        write_file(path, "second")
        assert path.read_text() == "second"


class TestWritePrdJson:
    """Tests for write_prd_json()."""

    def test_writes_valid_document(self, tmp_path):
        doc = {
            "name": "Export CSV",
            "description": "",
            "branchName": "feat/export-csv",
            "slug": "export-csv",
            "userStories": [{"id": "US-001", "title": "Export", "priority": 1, "passes": False}],
        }
        path = tmp_path / "prd.json"
        write_prd_json(path, doc)
        assert json.loads(path.read_text()) == doc

    def test_refuses_invalid_document(self, tmp_path):
        path = tmp_path / "prd.json"
        with pytest.raises(ValidationError) as exc_info:
            write_prd_json(path, {"name": "Missing everything"})
        assert "not writing" in str(exc_info.value)
        assert not path.exists()


class TestOutputPaths:
    """Tests for resolve_output_dir() and markdown_path_for()."""

    def test_relative_output_dir(self, tmp_path):
        options = WizardOptions(cwd=tmp_path)
        assert resolve_output_dir(options) == (tmp_path / "tasks").resolve()

    def test_absolute_output_dir(self, tmp_path):
        options = WizardOptions(cwd=tmp_path / "elsewhere", output_dir=str(tmp_path / "docs"))
        assert resolve_output_dir(options) == (tmp_path / "docs").resolve()

    def test_markdown_filename(self, tmp_path):
        assert markdown_path_for(tmp_path, "add-x") == tmp_path / "prd-add-x.md"


class TestPrdExists:
    """Tests for prd_exists()."""

    def test_none_before_and_path_after(self, tmp_path):
        options = WizardOptions(cwd=tmp_path)
        assert prd_exists("Add dark mode toggle", options) is None

        expected = resolve_output_dir(options) / "prd-add-dark-mode-toggle.md"
        expected.parent.mkdir(parents=True)
        expected.write_text("# PRD")

        assert prd_exists("Add dark mode toggle", options) == expected
        assert prd_exists("Add dark mode toggle", options) == expected

    def test_accepts_full_description(self, tmp_path):
        """A description resolves to the same PRD as its derived name."""
        options = WizardOptions(cwd=tmp_path)
        path = resolve_output_dir(options) / "prd-add-dark-mode-toggle.md"
        path.parent.mkdir(parents=True)
        path.write_text("# PRD")

        assert prd_exists("add dark mode toggle. With a keyboard shortcut too.", options) == path

    def test_does_not_create_directories(self, tmp_path):
        prd_exists("Anything", WizardOptions(cwd=tmp_path))
        assert not (tmp_path / "tasks").exists()
