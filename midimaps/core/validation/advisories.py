"""Advisory checks run on maps that already passed schema validation."""

from __future__ import annotations

from midimaps.core.validation.constants import (
    DUPLICATE_MIDI_INPUT,
    MISSING_AUTHOR,
    MISSING_DESCRIPTION,
)
from midimaps.core.validation.models import ValidationWarning
from midimaps.models.canonical import CanonicalMidiMap, MidiMapping

# Grouping fallbacks for omitted channel/number (duplicate detection only).
_GROUP_DEFAULT_CHANNEL = 1
_GROUP_DEFAULT_NUMBER = 0


def _input_key(mapping: MidiMapping) -> tuple[str, int, int]:
    midi_input = mapping.midi_input
    channel = midi_input.channel if midi_input.channel is not None else _GROUP_DEFAULT_CHANNEL
    number = midi_input.number if midi_input.number is not None else _GROUP_DEFAULT_NUMBER
    return midi_input.type, channel, number


def _check_duplicate_inputs(canonical_map: CanonicalMidiMap) -> list[ValidationWarning]:
    """One warning per (kind, channel, number) shared by more than one mapping."""
    groups: dict[tuple[str, int, int], list[str]] = {}
    for mapping in canonical_map.mappings:
        groups.setdefault(_input_key(mapping), []).append(mapping.id)

    warnings: list[ValidationWarning] = []
    for (kind, channel, number), ids in groups.items():
        if len(ids) > 1:
            warnings.append(ValidationWarning(
                path="mappings",
                message=f"Duplicate MIDI input ({kind}-{channel}-{number}) used by mappings: {', '.join(ids)}",
                code=DUPLICATE_MIDI_INPUT,
            ))
    return warnings


def _check_metadata(canonical_map: CanonicalMidiMap) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    if not canonical_map.metadata.description:
        warnings.append(ValidationWarning(
            path="metadata.description",
            message="Consider adding a description for better documentation",
            code=MISSING_DESCRIPTION,
        ))
    if not canonical_map.metadata.author:
        warnings.append(ValidationWarning(
            path="metadata.author",
            message="Consider adding an author for better tracking",
            code=MISSING_AUTHOR,
        ))
    return warnings


def generate_warnings(canonical_map: CanonicalMidiMap) -> list[ValidationWarning]:
    """All advisory warnings for a valid map, duplicates first."""
    return _check_duplicate_inputs(canonical_map) + _check_metadata(canonical_map)
