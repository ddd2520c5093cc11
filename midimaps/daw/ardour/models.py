"""Ardour MIDI binding map model.

A ``Binding`` listens to exactly one MIDI source (a control change or a
note), and that choice is a type, not a pair of optional numbers.  Likewise
the bound control is one ``Reference`` (function, parameter path, or none).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from midimaps.core.resolution.models import (
    NO_REFERENCE,
    FunctionRef,
    ParameterPath,
    Reference,
)


@dataclass(frozen=True)
class ControlChange:
    number: int


@dataclass(frozen=True)
class Note:
    number: int


MidiSource = Union[ControlChange, Note]

DeviceAttribute = Union[str, int, float, bool]


@dataclass(frozen=True)
class Binding:
    """One ``<Binding/>`` element."""

    channel: int
    source: MidiSource
    reference: Reference = NO_REFERENCE
    encoder: bool = False
    momentary: bool = False
    action: Optional[str] = None
    threshold: Optional[int] = None
    # Encoder and RPN/NRPN routing, rendered between the source and the reference.
    enc_r: Optional[int] = None
    rpn: Optional[int] = None
    nrpn: Optional[int] = None
    rpn14: Optional[int] = None
    nrpn14: Optional[int] = None

    @property
    def ctl(self) -> Optional[int]:
        return self.source.number if isinstance(self.source, ControlChange) else None

    @property
    def note(self) -> Optional[int]:
        return self.source.number if isinstance(self.source, Note) else None

    @property
    def function(self) -> Optional[str]:
        return self.reference.name if isinstance(self.reference, FunctionRef) else None

    @property
    def uri(self) -> Optional[str]:
        return self.reference.path if isinstance(self.reference, ParameterPath) else None


@dataclass(frozen=True)
class DeviceInfo:
    """Controller family descriptor (bank size, motorized faders, ...).

    ``attributes`` keep insertion order; that order is the emission order.
    """

    name: Optional[str] = None
    attributes: dict[str, DeviceAttribute] = field(default_factory=dict)


@dataclass(frozen=True)
class ArdourMidiMap:
    """Snapshot produced by ``MidiMapBuilder.build()``."""

    name: str
    bindings: tuple[Binding, ...] = ()
    version: Optional[str] = None
    device_info: Optional[DeviceInfo] = None
