"""
JSON Schema checks for the tracker document.

Schemas live in prdwiz/schemas as <name>.schema.json. A document that does
not match is never written to disk; the caller gets a ValidationError naming
the offending field instead.
"""

import json
from pathlib import Path

import jsonschema

SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"


class ValidationError(Exception):
    """A document did not match its schema."""

    def __init__(self, schema_name: str, message: str, path: str = None):
        self.schema_name = schema_name
        self.path = path
        location = f" (field: {path})" if path else ""
        super().__init__(f"{schema_name} schema: {message}{location}")


_loaded: dict[str, dict] = {}


def load_schema(schema_name: str) -> dict:
    """Return the parsed schema for schema_name, reading it once per process."""
    if schema_name in _loaded:
        return _loaded[schema_name]

    schema_file = SCHEMAS_DIR / f"{schema_name}.schema.json"
    if not schema_file.is_file():
        raise ValidationError(schema_name, f"no schema file at {schema_file}")

    _loaded[schema_name] = json.loads(schema_file.read_text(encoding="utf-8"))
    return _loaded[schema_name]


def validate(data: dict, schema_name: str) -> None:
    """Check data against a named schema.

    The first mismatch is reported with its location as a dotted path,
    e.g. "userStories.0.priority", or "(root)" for top-level problems.
    """
    try:
        jsonschema.validate(instance=data, schema=load_schema(schema_name))
    except jsonschema.ValidationError as e:
        location = ".".join(str(part) for part in e.absolute_path) or "(root)"
        raise ValidationError(schema_name, e.message, location) from None


def validate_before_write(data: dict, schema_name: str, filepath: Path) -> None:
    """Like validate(), with the target file named in the error."""
    try:
        validate(data, schema_name)
    except ValidationError as e:
        raise ValidationError(schema_name, f"not writing {filepath}: {e}", e.path) from None
