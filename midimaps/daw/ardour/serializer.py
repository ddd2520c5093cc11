"""Ardour MIDI binding map → XML text.

Rendering is a pure transform of an ``ArdourMidiMap`` snapshot:

    <?xml version="1.0" encoding="UTF-8"?>
    <ArdourMIDIBindings version="1.0.0" name="...">
      <DeviceInfo bank-size="8"/>
      <Binding channel="1" ctl="13" function="track-set-gain[1]"/>
    </ArdourMIDIBindings>

Bindings are emitted in sequence order.  Attribute order inside a binding is
fixed: channel, ctl|note, enc-r, rpn, nrpn, rpn-14, nrpn-14, function|uri,
action, encoder, momentary, threshold.  Textual attribute values go through
the five named XML entities; numeric ones are written as-is.
"""
from __future__ import annotations

from typing import Optional
from xml.sax.saxutils import escape

from midimaps.config import TARGET_FORMAT_VERSION, settings
from midimaps.core.errors import UnsupportedOperationError
from midimaps.daw.ardour.models import ArdourMidiMap, Binding, DeviceAttribute, DeviceInfo

XML_PROLOGUE = '<?xml version="1.0" encoding="UTF-8"?>'

# saxutils.escape handles & < >; quotes need explicit entities inside attributes.
_ATTRIBUTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(text: str) -> str:
    """Replace ``& < > " '`` with their named character references."""
    return escape(text, _ATTRIBUTE_ENTITIES)


def _device_value(value: DeviceAttribute) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (int, float)):
        return str(value)
    return escape_xml(value)


def _device_attributes(info: DeviceInfo) -> list[str]:
    return [f'{key}="{_device_value(value)}"' for key, value in info.attributes.items()]


class ArdourXMLSerializer:
    """Render ``ArdourMidiMap`` snapshots as Ardour ``.map`` XML."""

    def __init__(self, indent: Optional[str] = None, newline: Optional[str] = None) -> None:
        self.indent = settings.xml_indent if indent is None else indent
        self.newline = settings.xml_newline if newline is None else newline

    def serialize_midi_map(self, midi_map: ArdourMidiMap) -> str:
        lines = [
            XML_PROLOGUE,
            f'<ArdourMIDIBindings version="{TARGET_FORMAT_VERSION}" name="{escape_xml(midi_map.name)}">',
        ]
        if midi_map.device_info is not None:
            lines.append(self.indent + self._device_info_element(midi_map.device_info))
        for binding in midi_map.bindings:
            lines.append(self.indent + self.serialize_binding(binding))
        lines.append("</ArdourMIDIBindings>")
        return self.newline.join(lines)

    def serialize_device_info(self, device_info: DeviceInfo) -> str:
        """Standalone DeviceInfo document, as shipped beside some maps."""
        name = escape_xml(device_info.name or "")
        lines = [XML_PROLOGUE, f'<DeviceInfo name="{name}">']
        attributes = _device_attributes(device_info)
        if attributes:
            lines.append(f"{self.indent}<GlobalButtons {' '.join(attributes)}/>")
        lines.append("</DeviceInfo>")
        return self.newline.join(lines)

    def _device_info_element(self, device_info: DeviceInfo) -> str:
        attributes = _device_attributes(device_info)
        if device_info.name:
            attributes.insert(0, f'device-name="{escape_xml(device_info.name)}"')
        return f"<DeviceInfo {' '.join(attributes)}/>" if attributes else "<DeviceInfo/>"

    def serialize_binding(self, binding: Binding) -> str:
        attributes = [f'channel="{binding.channel}"']

        if binding.ctl is not None:
            attributes.append(f'ctl="{binding.ctl}"')
        if binding.note is not None:
            attributes.append(f'note="{binding.note}"')

        for attribute, value in (
            ("enc-r", binding.enc_r),
            ("rpn", binding.rpn),
            ("nrpn", binding.nrpn),
            ("rpn-14", binding.rpn14),
            ("nrpn-14", binding.nrpn14),
        ):
            if value is not None:
                attributes.append(f'{attribute}="{value}"')

        if binding.function is not None:
            attributes.append(f'function="{escape_xml(binding.function)}"')
        if binding.uri is not None:
            attributes.append(f'uri="{escape_xml(binding.uri)}"')

        if binding.action is not None:
            attributes.append(f'action="{escape_xml(binding.action)}"')
        if binding.encoder:
            attributes.append('encoder="yes"')
        if binding.momentary:
            attributes.append('momentary="yes"')
        if binding.threshold is not None:
            attributes.append(f'threshold="{binding.threshold}"')

        return f"<Binding {' '.join(attributes)}/>"

    def parse_midi_map(self, xml: str) -> ArdourMidiMap:
        """Target → model decoding is not supported; always raises."""
        raise UnsupportedOperationError("Ardour XML parsing")


def render(midi_map: ArdourMidiMap, indent: Optional[str] = None, newline: Optional[str] = None) -> str:
    """Module-level shortcut for ``ArdourXMLSerializer(...).serialize_midi_map``."""
    return ArdourXMLSerializer(indent=indent, newline=newline).serialize_midi_map(midi_map)
