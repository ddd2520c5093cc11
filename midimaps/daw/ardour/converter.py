"""Canonical map → Ardour map conversion.

Pipeline: text → ``parse_from_text`` → ``CanonicalMidiMap`` → ``resolve_binding``
per mapping → ``MidiMapBuilder`` → ``ArdourXMLSerializer`` → text.

No I/O happens here.  Tooling reads source files, hands their text in, and
writes the returned XML wherever it installs maps.
"""
from __future__ import annotations

import logging
import posixpath
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Optional

from midimaps.config import settings
from midimaps.core.errors import InvalidCanonicalMapError, MidiMapError
from midimaps.core.parser import MapSyntax, parse_from_text
from midimaps.core.resolution import NO_REFERENCE, ControllerContext, resolve_binding
from midimaps.core.validation import ValidationWarning
from midimaps.daw.ardour.builder import MidiMapBuilder
from midimaps.daw.ardour.models import ArdourMidiMap, DeviceInfo
from midimaps.daw.ardour.serializer import ArdourXMLSerializer
from midimaps.models.canonical import CanonicalMidiMap, MidiMapping

logger = logging.getLogger(__name__)

ContextFactory = Callable[[CanonicalMidiMap], ControllerContext]


@dataclass
class ConversionReport:
    """Everything one conversion produced.

    Attributes:
        target_map: The built Ardour map snapshot.
        xml: Rendered ``.map`` text.
        skipped: Ids of mappings with no binding (unsupported input kind,
            or disabled while unbound bindings are not emitted).
        warnings: Advisory validation warnings of the source map.
    """

    target_map: ArdourMidiMap
    xml: str
    skipped: list[str] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Outcome of one source in a batch. Failures carry ``error``, not ``output``."""

    source: str
    target: str
    success: bool
    output: Optional[str] = None
    error: Optional[str] = None
    skipped: list[str] = field(default_factory=list)


def target_map_name(canonical_map: CanonicalMidiMap) -> str:
    """``"<manufacturer> <model> for <plugin>"``."""
    controller = canonical_map.controller
    return f"{controller.manufacturer} {controller.model} for {canonical_map.plugin.name}"


def target_filename(source_name: str, extension: Optional[str] = None) -> str:
    """Base name of *source_name* without its extension, plus ``.map``."""
    base = posixpath.basename(source_name.replace("\\", "/"))
    stem, _ = posixpath.splitext(base)
    return f"{stem}{extension or settings.target_file_extension}"


def _channel_for(mapping: MidiMapping, canonical_map: CanonicalMidiMap, default_channel: int) -> int:
    if mapping.midi_input.channel is not None:
        return mapping.midi_input.channel
    if canonical_map.controller.midi_channel is not None:
        return canonical_map.controller.midi_channel
    return default_channel


def _device_info_for(context: ControllerContext) -> Optional[DeviceInfo]:
    if not context.needs_device_info:
        return None
    return DeviceInfo(attributes=dict(context.device_attributes()))


def build_target_map(
    canonical_map: CanonicalMidiMap,
    context: Optional[ControllerContext] = None,
    *,
    emit_unbound: Optional[bool] = None,
    default_channel: Optional[int] = None,
    default_number: Optional[int] = None,
) -> tuple[ArdourMidiMap, list[str]]:
    """Resolve every mapping and accumulate the bindings.

    Returns the built map and the ids of mappings that produced no binding.
    """
    context = context or ControllerContext.for_map(canonical_map)
    emit_unbound = settings.emit_unbound_bindings if emit_unbound is None else emit_unbound
    default_channel = settings.default_midi_channel if default_channel is None else default_channel
    default_number = settings.default_midi_number if default_number is None else default_number

    builder = MidiMapBuilder(
        name=target_map_name(canonical_map),
        version=canonical_map.metadata.version,
        device_info=_device_info_for(context),
    )
    skipped: list[str] = []

    for mapping in canonical_map.mappings:
        midi_input = mapping.midi_input
        if midi_input.type not in ("cc", "note"):
            logger.warning(
                "Skipping mapping %r: %s input has no Ardour binding shape", mapping.id, midi_input.type,
            )
            skipped.append(mapping.id)
            continue

        resolution = resolve_binding(mapping, context)
        if resolution.reference == NO_REFERENCE and not emit_unbound:
            logger.debug("Skipping unbound mapping %r", mapping.id)
            skipped.append(mapping.id)
            continue

        channel = _channel_for(mapping, canonical_map, default_channel)
        number = midi_input.number if midi_input.number is not None else default_number
        if midi_input.type == "cc":
            builder.add_cc_binding(
                channel,
                number,
                resolution.reference,
                encoder=resolution.flags.encoder,
                momentary=resolution.flags.momentary,
            )
        else:
            builder.add_note_binding(
                channel,
                number,
                resolution.reference,
                momentary=resolution.flags.momentary,
            )

    return builder.build(), skipped


def convert_map(
    canonical_map: CanonicalMidiMap,
    context: Optional[ControllerContext] = None,
    serializer: Optional[ArdourXMLSerializer] = None,
) -> ConversionReport:
    """Convert an already-validated map."""
    target_map, skipped = build_target_map(canonical_map, context)
    xml = (serializer or ArdourXMLSerializer()).serialize_midi_map(target_map)
    logger.info(
        "Converted %r: %d binding(s), %d skipped", target_map.name, len(target_map.bindings), len(skipped),
    )
    return ConversionReport(target_map=target_map, xml=xml, skipped=skipped)


def convert_document(
    content: str,
    syntax: MapSyntax = MapSyntax.YAML,
    context: Optional[ControllerContext] = None,
    serializer: Optional[ArdourXMLSerializer] = None,
) -> ConversionReport:
    """Parse, validate and convert. Raises ``InvalidCanonicalMapError`` on bad input."""
    parsed = parse_from_text(content, syntax)
    if not parsed.valid or parsed.map is None:
        raise InvalidCanonicalMapError(parsed.validation)
    report = convert_map(parsed.map, context, serializer)
    report.warnings = list(parsed.validation.warnings)
    return report


def convert_text(
    content: str,
    syntax: MapSyntax = MapSyntax.YAML,
    context: Optional[ControllerContext] = None,
) -> str:
    """Canonical map text in, Ardour ``.map`` XML out."""
    return convert_document(content, syntax, context).xml


def convert_batch(
    sources: Mapping[str, str],
    context_for: Optional[ContextFactory] = None,
) -> list[ConversionResult]:
    """Convert ``{source_name: text}`` in order; one failure never aborts the rest.

    The syntax of each source is picked from its name (``.json`` → JSON,
    anything else → YAML).  *context_for* supplies per-map controller quirks.
    """
    results: list[ConversionResult] = []
    for source_name, content in sources.items():
        target = target_filename(source_name)
        try:
            parsed = parse_from_text(content, MapSyntax.from_filename(source_name))
            if not parsed.valid or parsed.map is None:
                raise InvalidCanonicalMapError(parsed.validation)
            context = context_for(parsed.map) if context_for is not None else None
            report = convert_map(parsed.map, context)
        except MidiMapError as exc:
            logger.error("Failed to convert %s: %s", source_name, exc)
            results.append(ConversionResult(source=source_name, target=target, success=False, error=str(exc)))
            continue
        results.append(ConversionResult(
            source=source_name, target=target, success=True, output=report.xml, skipped=report.skipped,
        ))

    succeeded = sum(1 for r in results if r.success)
    logger.info("Batch conversion: %d succeeded, %d failed", succeeded, len(results) - succeeded)
    return results
