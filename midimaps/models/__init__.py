"""Canonical map data model."""
from midimaps.models.base import CamelModel, to_camel
from midimaps.models.canonical import (
    CanonicalMidiMap,
    ControllerDefinition,
    InputBehavior,
    MapMetadata,
    MappingBehavior,
    MidiInputDefinition,
    MidiMapping,
    PluginDefinition,
    PluginTargetDefinition,
    ValueRange,
)

__all__ = [
    "CamelModel",
    "to_camel",
    "CanonicalMidiMap",
    "ControllerDefinition",
    "InputBehavior",
    "MapMetadata",
    "MappingBehavior",
    "MidiInputDefinition",
    "MidiMapping",
    "PluginDefinition",
    "PluginTargetDefinition",
    "ValueRange",
]
