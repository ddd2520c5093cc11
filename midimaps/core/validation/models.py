"""Dataclass models for canonical map validation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from midimaps.models.canonical import CanonicalMidiMap


@dataclass(frozen=True)
class ValidationError:
    """A single validation error.

    ``path`` is dot-joined from the document root (``mappings.0.midiInput.type``);
    document-level failures use ``root``.
    """

    path: str
    message: str
    code: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class ValidationWarning:
    """Advisory finding on an otherwise valid map. Never blocks conversion."""

    path: str
    message: str
    code: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Result of canonical map validation."""

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def error_message(self) -> str:
        if not self.errors:
            return ""
        return "; ".join(str(e) for e in self.errors)


@dataclass
class ParseResult:
    """A typed map (only when valid) paired with its validation outcome."""

    validation: ValidationResult
    map: Optional[CanonicalMidiMap] = None

    @property
    def valid(self) -> bool:
        return self.validation.valid and self.map is not None
