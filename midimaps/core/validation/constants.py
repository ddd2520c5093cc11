"""Stable validation codes for programmatic handling."""

from __future__ import annotations

# Document-level decode failure (malformed YAML/JSON), distinct from schema errors.
PARSE_ERROR = "PARSE_ERROR"

REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
INVALID_TYPE = "INVALID_TYPE"
INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"
VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
SCHEMA_VIOLATION = "SCHEMA_VIOLATION"

DUPLICATE_MIDI_INPUT = "DUPLICATE_MIDI_INPUT"
MISSING_DESCRIPTION = "MISSING_DESCRIPTION"
MISSING_AUTHOR = "MISSING_AUTHOR"

ROOT_PATH = "root"

# pydantic-core error type → stable code
PYDANTIC_ERROR_CODES: dict[str, str] = {
    "missing": REQUIRED_FIELD_MISSING,
    "literal_error": INVALID_ENUM_VALUE,
    "enum": INVALID_ENUM_VALUE,
    "greater_than": VALUE_OUT_OF_RANGE,
    "greater_than_equal": VALUE_OUT_OF_RANGE,
    "less_than": VALUE_OUT_OF_RANGE,
    "less_than_equal": VALUE_OUT_OF_RANGE,
}
