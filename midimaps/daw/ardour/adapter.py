"""Ardour target emitter: concrete ``TargetEmitter`` for Ardour ``.map`` files.

This is the only file that assembles the Ardour-specific pieces (resolution,
builder, serializer) into a single ``TargetEmitter`` implementation.
"""
from __future__ import annotations

from typing import Optional

from midimaps.core.parser import MapSyntax
from midimaps.core.resolution.models import ControllerContext
from midimaps.daw.ardour.converter import convert_document, convert_map, target_filename
from midimaps.daw.ardour.models import ArdourMidiMap
from midimaps.daw.ardour.serializer import ArdourXMLSerializer
from midimaps.daw.ports import TargetEmitter
from midimaps.models.canonical import CanonicalMidiMap


class ArdourEmitter:
    """``TargetEmitter`` implementation for Ardour generic MIDI binding maps."""

    def __init__(self, serializer: Optional[ArdourXMLSerializer] = None) -> None:
        self._serializer = serializer or ArdourXMLSerializer()

    @property
    def name(self) -> str:
        return "ardour"

    def target_filename(self, source_name: str) -> str:
        return target_filename(source_name)

    def emit(
        self,
        canonical_map: CanonicalMidiMap,
        context: Optional[ControllerContext] = None,
    ) -> str:
        return convert_map(canonical_map, context, self._serializer).xml

    def emit_text(
        self,
        content: str,
        syntax: MapSyntax = MapSyntax.YAML,
        context: Optional[ControllerContext] = None,
    ) -> str:
        return convert_document(content, syntax, context, self._serializer).xml

    def parse(self, content: str) -> ArdourMidiMap:
        return self._serializer.parse_midi_map(content)


# Module-level singleton, created on first access.
_emitter: ArdourEmitter | None = None


def get_emitter() -> ArdourEmitter:
    """Return the singleton ``ArdourEmitter`` instance."""
    global _emitter
    if _emitter is None:
        _emitter = ArdourEmitter()
    return _emitter


_proto_check: type[TargetEmitter] = ArdourEmitter
