"""Structural validation: pydantic errors → path/message/code triples."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError as PydanticValidationError

from midimaps.core.validation.constants import (
    INVALID_TYPE,
    PYDANTIC_ERROR_CODES,
    ROOT_PATH,
    SCHEMA_VIOLATION,
)
from midimaps.core.validation.models import ValidationError
from midimaps.models.canonical import CanonicalMidiMap


def _format_path(loc: Sequence[int | str]) -> str:
    """Dot-join a pydantic ``loc`` tuple; the empty location is the document root."""
    if not loc:
        return ROOT_PATH
    return ".".join(str(part) for part in loc)


def _error_code(error_type: str) -> str:
    if error_type in PYDANTIC_ERROR_CODES:
        return PYDANTIC_ERROR_CODES[error_type]
    if error_type.endswith("_type") or error_type.endswith("_parsing"):
        return INVALID_TYPE
    return SCHEMA_VIOLATION


def _validate_schema(document: object) -> tuple[CanonicalMidiMap | None, list[ValidationError]]:
    """Validate *document* against the canonical schema.

    pydantic reports every independent field violation in a single pass, so
    a document missing two required fields yields two errors.
    """
    try:
        return CanonicalMidiMap.model_validate(document), []
    except PydanticValidationError as exc:
        errors = [
            ValidationError(
                path=_format_path(err["loc"]),
                message=err["msg"],
                code=_error_code(err["type"]),
            )
            for err in exc.errors(include_url=False)
        ]
        return None, errors
