"""Ardour generic MIDI binding maps.

Public API:
    MidiMapBuilder, ArdourXMLSerializer, render
    build_target_map, convert_map, convert_text, convert_batch
    get_emitter() -> ArdourEmitter
"""
from midimaps.daw.ardour.models import (
    ArdourMidiMap,
    Binding,
    ControlChange,
    DeviceInfo,
    MidiSource,
    Note,
)
from midimaps.daw.ardour.builder import (
    STRIP_CC_FUNCTIONS,
    STRIP_NOTE_FUNCTIONS,
    TRANSPORT_FUNCTIONS,
    MidiMapBuilder,
)
from midimaps.daw.ardour.serializer import ArdourXMLSerializer, escape_xml, render
from midimaps.daw.ardour.converter import (
    ConversionReport,
    ConversionResult,
    build_target_map,
    convert_batch,
    convert_document,
    convert_map,
    convert_text,
    target_filename,
    target_map_name,
)
from midimaps.daw.ardour.adapter import ArdourEmitter, get_emitter

__all__ = [
    "ArdourMidiMap",
    "Binding",
    "ControlChange",
    "DeviceInfo",
    "MidiSource",
    "Note",
    "STRIP_CC_FUNCTIONS",
    "STRIP_NOTE_FUNCTIONS",
    "TRANSPORT_FUNCTIONS",
    "MidiMapBuilder",
    "ArdourXMLSerializer",
    "escape_xml",
    "render",
    "ConversionReport",
    "ConversionResult",
    "build_target_map",
    "convert_batch",
    "convert_document",
    "convert_map",
    "convert_text",
    "target_filename",
    "target_map_name",
    "ArdourEmitter",
    "get_emitter",
]
