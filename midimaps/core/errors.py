"""Exception types for the conversion core.

Validation itself never raises: bad documents come back as a
``ValidationResult``.  These exceptions exist for the convenience layer that
turns text straight into target text, and for operations the core refuses to
perform at all.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from midimaps.core.validation.models import ValidationResult


class MidiMapError(Exception):
    """Base class for all midimaps failures."""


class InvalidCanonicalMapError(MidiMapError):
    """The source document failed to decode or failed schema validation.

    ``details`` lists every error so the caller can report them all at once
    instead of one-at-a-time whack-a-mole.
    """

    def __init__(self, validation: ValidationResult) -> None:
        self.validation = validation
        self.details = [str(e) for e in validation.errors]
        super().__init__(f"Invalid canonical map: {'; '.join(self.details)}")


class UnsupportedOperationError(MidiMapError, NotImplementedError):
    """Raised for operations the core does not implement.

    Decoding a target-format document back into a map is the main one.  This
    is neither a decode error nor a schema error: the input was never looked at.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Not implemented: {operation} is not supported")
