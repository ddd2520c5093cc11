"""Accumulator for Ardour MIDI binding maps.

The builder trusts its caller: channel and note/CC ranges were checked
against the canonical model upstream, so nothing here validates them.
One builder belongs to one conversion at a time; it is not thread-safe.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from midimaps.core.resolution.models import NO_REFERENCE, FunctionRef, Reference
from midimaps.daw.ardour.models import (
    ArdourMidiMap,
    Binding,
    ControlChange,
    DeviceInfo,
    Note,
)

TRANSPORT_FUNCTIONS: tuple[str, ...] = (
    "transport-stop",
    "transport-roll",
    "toggle-rec-enable",
    "toggle-roll",
    "stop-forget",
)

# (offset from base CC, function): fader/knob group of a channel strip
STRIP_CC_FUNCTIONS: tuple[tuple[int, str], ...] = (
    (0, "track-set-gain"),
    (1, "track-set-pan"),
    (2, "track-set-send-gain"),
)

# (offset from base note, function, momentary): button group of a channel strip
STRIP_NOTE_FUNCTIONS: tuple[tuple[int, str, bool], ...] = (
    (0, "toggle-track-mute", False),
    (1, "toggle-track-solo", False),
    (2, "toggle-rec-enable", False),
    (3, "track-select", True),
)


class MidiMapBuilder:
    """Collects bindings in order, then hands out immutable snapshots."""

    def __init__(
        self,
        name: str,
        version: Optional[str] = None,
        device_info: Optional[DeviceInfo] = None,
    ) -> None:
        self.name = name
        self.version = version
        self.device_info = device_info
        self._bindings: list[Binding] = []

    def add_cc_binding(
        self,
        channel: int,
        controller: int,
        reference: Reference = NO_REFERENCE,
        *,
        encoder: bool = False,
        momentary: bool = False,
        action: Optional[str] = None,
        threshold: Optional[int] = None,
        enc_r: Optional[int] = None,
        rpn: Optional[int] = None,
        nrpn: Optional[int] = None,
        rpn14: Optional[int] = None,
        nrpn14: Optional[int] = None,
    ) -> "MidiMapBuilder":
        self._bindings.append(Binding(
            channel=channel,
            source=ControlChange(controller),
            reference=reference,
            encoder=encoder,
            momentary=momentary,
            action=action,
            threshold=threshold,
            enc_r=enc_r,
            rpn=rpn,
            nrpn=nrpn,
            rpn14=rpn14,
            nrpn14=nrpn14,
        ))
        return self

    def add_note_binding(
        self,
        channel: int,
        note: int,
        reference: Reference = NO_REFERENCE,
        *,
        momentary: bool = False,
        action: Optional[str] = None,
        threshold: Optional[int] = None,
    ) -> "MidiMapBuilder":
        self._bindings.append(Binding(
            channel=channel,
            source=Note(note),
            reference=reference,
            momentary=momentary,
            action=action,
            threshold=threshold,
        ))
        return self

    def add_transport_controls(self, channel: int, start_note: int) -> "MidiMapBuilder":
        """Stop, roll, rec-enable, toggle-roll, stop-forget on consecutive notes."""
        for offset, function in enumerate(TRANSPORT_FUNCTIONS):
            self.add_note_binding(channel, start_note + offset, FunctionRef(function), momentary=True)
        return self

    def add_channel_strip_controls(self, channel: int, strip: int, base_cc: int) -> "MidiMapBuilder":
        """Gain/pan/send on CCs from *base_cc*; mute/solo/rec/select on notes from *base_cc*."""
        for offset, function in STRIP_CC_FUNCTIONS:
            self.add_cc_binding(channel, base_cc + offset, FunctionRef(f"{function}[{strip}]"))
        for offset, function, momentary in STRIP_NOTE_FUNCTIONS:
            self.add_note_binding(
                channel, base_cc + offset, FunctionRef(f"{function}[{strip}]"), momentary=momentary,
            )
        return self

    def build(self) -> ArdourMidiMap:
        """Snapshot the current bindings; later mutation does not leak into it."""
        return ArdourMidiMap(
            name=self.name,
            bindings=tuple(self._bindings),
            version=self.version,
            device_info=(
                replace(self.device_info, attributes=dict(self.device_info.attributes))
                if self.device_info is not None else None
            ),
        )

    def clear(self) -> "MidiMapBuilder":
        self._bindings = []
        return self

    @property
    def binding_count(self) -> int:
        return len(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)
