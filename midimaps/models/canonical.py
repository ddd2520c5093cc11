"""Pydantic models for canonical MIDI maps.

A canonical map describes, once per controller + plugin pair, which physical
control drives which plugin parameter, independent of any DAW.  The target
emitters (``midimaps.daw``) translate a validated ``CanonicalMidiMap`` into a
DAW-specific binding file.

Example (YAML):

    metadata: {name: SSL Channel Strip, version: 1.0.0}
    controller: {manufacturer: Novation, model: Launch Control XL}
    plugin: {manufacturer: Waves, name: CLA-76, format: VST3}
    mappings:
      - id: input-gain
        midiInput: {type: cc, channel: 1, number: 13}
        pluginTarget: {type: parameter, identifier: "0", name: Input Gain, category: preamp}

Numbers must be numbers and strings must be strings: the models never coerce
``"13"`` into ``13``.  ``midiInput.channel`` / ``midiInput.number`` may be
omitted; defaults are applied at resolution time, not here.
"""
from __future__ import annotations

import datetime
from typing import Annotated, Literal, Optional

from pydantic import Field, Strict, StrictBool, StrictStr, field_validator

from midimaps.models.base import CamelModel

MidiInputType = Literal["cc", "note", "pitchbend", "aftertouch", "program"]
InteractionMode = Literal["absolute", "relative", "toggle", "momentary"]
CurveType = Literal["linear", "exponential", "logarithmic", "custom"]
PluginTargetType = Literal["parameter", "bypass", "preset", "macro"]
PluginFormat = Literal["VST", "VST3", "AU", "AAX", "LV2", "CLAP"]

Number = Annotated[float, Strict()]
UnitInterval = Annotated[float, Strict(), Field(ge=0, le=1)]
MidiChannel = Annotated[int, Strict(), Field(ge=1, le=16)]
MidiNumber = Annotated[int, Strict(), Field(ge=0, le=127)]


class ValueRange(CamelModel):
    min: Number
    max: Number
    default: Optional[Number] = None


class InputBehavior(CamelModel):
    """How the physical control behaves (absolute knob, endless encoder, button...)."""

    mode: Optional[InteractionMode] = None
    sensitivity: Optional[UnitInterval] = None
    deadzone: Optional[UnitInterval] = None
    curve: Optional[CurveType] = None
    invert: Optional[StrictBool] = None


class MappingBehavior(CamelModel):
    """Value shaping applied between the MIDI input and the plugin parameter."""

    scaling: Optional[CurveType] = None
    curve: Optional[list[Number]] = None
    quantize: Optional[Number] = None
    smoothing: Optional[UnitInterval] = None
    bipolar: Optional[StrictBool] = None


class MidiInputDefinition(CamelModel):
    type: MidiInputType = Field(..., description="MIDI message kind: cc, note, pitchbend, aftertouch, program")
    channel: Optional[MidiChannel] = Field(default=None, description="MIDI channel 1-16; defaults to 1 at resolution time")
    number: Optional[MidiNumber] = Field(default=None, description="CC or note number 0-127; defaults to 0 at resolution time")
    range: Optional[ValueRange] = None
    behavior: Optional[InputBehavior] = None


class PluginTargetDefinition(CamelModel):
    type: PluginTargetType = Field(..., description="Target kind: parameter, bypass, preset, macro")
    identifier: StrictStr = Field(..., description="Plugin-side parameter identifier, passed through verbatim")
    name: Optional[StrictStr] = None
    range: Optional[ValueRange] = None
    units: Optional[StrictStr] = None
    category: Optional[StrictStr] = None


class MidiMapping(CamelModel):
    """One physical control → plugin target declaration."""

    id: StrictStr
    description: Optional[StrictStr] = None
    midi_input: MidiInputDefinition
    plugin_target: PluginTargetDefinition
    mapping: Optional[MappingBehavior] = None
    enabled: StrictBool = True


class MapMetadata(CamelModel):
    name: StrictStr
    version: StrictStr
    description: Optional[StrictStr] = None
    author: Optional[StrictStr] = None
    created: Optional[StrictStr] = None
    updated: Optional[StrictStr] = None
    tags: Optional[list[StrictStr]] = None

    @field_validator("created", "updated", mode="before")
    @classmethod
    def _normalize_timestamp(cls, v: object) -> object:
        # YAML turns unquoted 2024-05-01 into a date; keep the text form.
        if isinstance(v, (datetime.date, datetime.datetime)):
            return v.isoformat()
        return v


class ControllerDefinition(CamelModel):
    manufacturer: StrictStr
    model: StrictStr
    version: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    midi_channel: Optional[MidiChannel] = None
    notes: Optional[StrictStr] = None


class PluginDefinition(CamelModel):
    manufacturer: StrictStr
    name: StrictStr
    version: Optional[StrictStr] = None
    format: Optional[PluginFormat] = None
    description: Optional[StrictStr] = None
    notes: Optional[StrictStr] = None


class CanonicalMidiMap(CamelModel):
    """Root of a canonical map document."""

    metadata: MapMetadata
    controller: ControllerDefinition
    plugin: PluginDefinition
    mappings: list[MidiMapping]
