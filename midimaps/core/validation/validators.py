"""Main validation entrypoints."""

from __future__ import annotations

import logging

from midimaps.core.validation.constants import PARSE_ERROR, ROOT_PATH
from midimaps.core.validation.models import ParseResult, ValidationError, ValidationResult
from midimaps.core.validation.schema import _validate_schema
from midimaps.core.validation.advisories import generate_warnings

logger = logging.getLogger(__name__)


def validate_document(document: object) -> ParseResult:
    """
    Validate an already-decoded document against the canonical schema.

    Steps:
    1. Schema validation (every violation collected, no short-circuit)
    2. Advisory warnings (only when step 1 passed)

    A map is either fully valid or absent; warnings never affect validity.
    """
    canonical_map, errors = _validate_schema(document)
    if canonical_map is None:
        logger.debug("Canonical map rejected with %d schema error(s)", len(errors))
        return ParseResult(validation=ValidationResult(valid=False, errors=errors))

    warnings = generate_warnings(canonical_map)
    return ParseResult(
        validation=ValidationResult(valid=True, errors=[], warnings=warnings),
        map=canonical_map,
    )


def validate(document: object) -> ValidationResult:
    """Validate a decoded document, returning only the outcome."""
    return validate_document(document).validation


def parse_failure(message: str) -> ParseResult:
    """Document-level decode failure: one ``PARSE_ERROR`` at the root, no map."""
    return ParseResult(
        validation=ValidationResult(
            valid=False,
            errors=[ValidationError(path=ROOT_PATH, message=message, code=PARSE_ERROR)],
        ),
    )
