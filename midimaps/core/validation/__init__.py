"""
Canonical map validation package.

Validates decoded canonical map documents:
1. Schema validation (required fields, types, enums, ranges), all errors in one pass
2. Advisory warnings (duplicate MIDI inputs, missing description/author)

Public API:
    validate_document(document) -> ParseResult
    validate(document) -> ValidationResult
"""

from midimaps.core.validation.models import (
    ParseResult,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from midimaps.core.validation.constants import (
    DUPLICATE_MIDI_INPUT,
    INVALID_ENUM_VALUE,
    INVALID_TYPE,
    MISSING_AUTHOR,
    MISSING_DESCRIPTION,
    PARSE_ERROR,
    REQUIRED_FIELD_MISSING,
    SCHEMA_VIOLATION,
    VALUE_OUT_OF_RANGE,
)
from midimaps.core.validation.advisories import generate_warnings
from midimaps.core.validation.validators import parse_failure, validate, validate_document

__all__ = [
    # Models
    "ParseResult",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    # Codes
    "DUPLICATE_MIDI_INPUT",
    "INVALID_ENUM_VALUE",
    "INVALID_TYPE",
    "MISSING_AUTHOR",
    "MISSING_DESCRIPTION",
    "PARSE_ERROR",
    "REQUIRED_FIELD_MISSING",
    "SCHEMA_VIOLATION",
    "VALUE_OUT_OF_RANGE",
    # Entrypoints
    "generate_warnings",
    "parse_failure",
    "validate",
    "validate_document",
]
