"""Binding resolution entrypoints.

Pure functions: the same mapping and context always produce the same
outcome, and nothing here raises for an unrecognised target.  Unbound is a
normal result (``NO_REFERENCE``), reachable only through ``enabled: false``.
"""

from __future__ import annotations

import logging

from midimaps.core.resolution.models import (
    BindingFlags,
    ControllerContext,
    Reference,
    Resolution,
    TargetProbe,
)
from midimaps.core.resolution.rules import RESOLUTION_RULES
from midimaps.models.canonical import MidiMapping

logger = logging.getLogger(__name__)

_DEFAULT_CONTEXT = ControllerContext()


def resolve_flags(mapping: MidiMapping) -> BindingFlags:
    """Encoder/momentary flags from the input's interaction mode.

    Independent of the resolved reference: a relative CC is an encoder and a
    momentary CC or note is momentary, whatever it ends up bound to.
    """
    midi_input = mapping.midi_input
    mode = midi_input.behavior.mode if midi_input.behavior else None
    return BindingFlags(
        encoder=midi_input.type == "cc" and mode == "relative",
        momentary=midi_input.type in ("cc", "note") and mode == "momentary",
    )


def resolve_binding(mapping: MidiMapping, context: ControllerContext | None = None) -> Resolution:
    """Resolve one mapping to its reference, flags, and deciding rule path."""
    probe = TargetProbe.from_mapping(mapping, context or _DEFAULT_CONTEXT)
    rule, reference = RESOLUTION_RULES.evaluate(probe)
    logger.debug("Resolved mapping %r via %s → %s", mapping.id, rule, reference)
    return Resolution(reference=reference, flags=resolve_flags(mapping), rule=rule)


def resolve(mapping: MidiMapping, context: ControllerContext | None = None) -> Reference:
    """Target control reference for *mapping*: function, parameter path, or none."""
    return resolve_binding(mapping, context).reference
