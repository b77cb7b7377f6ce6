"""Tests for prdwiz.lib.validate module."""

import pytest

from prdwiz.lib.validate import ValidationError, validate


def valid_document():
    return {
        "name": "Export CSV",
        "description": "Export reports as CSV",
        "branchName": "feat/export-csv",
        "slug": "export-csv",
        "userStories": [
            {"id": "US-001", "title": "Download button", "priority": 1, "passes": False},
        ],
    }


class TestValidate:
    """Tests for validate() against the prd schema."""

    def test_valid_document_passes(self):
        validate(valid_document(), "prd")

    def test_missing_field_fails(self):
        doc = valid_document()
        del doc["userStories"]
        with pytest.raises(ValidationError) as exc_info:
            validate(doc, "prd")
        assert exc_info.value.schema_name == "prd"
        assert "userStories" in str(exc_info.value)

    def test_priority_out_of_range_reports_path(self):
        doc = valid_document()
        doc["userStories"][0]["priority"] = 5
        with pytest.raises(ValidationError) as exc_info:
            validate(doc, "prd")
        assert exc_info.value.path == "userStories.0.priority"

    def test_slug_must_be_normalized(self):
        doc = valid_document()
        doc["slug"] = "Export CSV"
        with pytest.raises(ValidationError):
            validate(doc, "prd")

    def test_unknown_schema(self):
        with pytest.raises(ValidationError) as exc_info:
            validate({}, "no_such_schema")
        assert "no schema file" in str(exc_info.value)
