"""Canonical map parser: text ⇄ validated ``CanonicalMidiMap``.

Two surface syntaxes are accepted and are functionally interchangeable:
both decode to the same plain tree before schema validation.

  ``parse_from_text(content, syntax)``: decode, then validate.  A decode
      failure short-circuits into a single ``PARSE_ERROR``; a successful
      decode always goes through full schema validation.
  ``serialize(map, syntax)``: inverse for canonical maps only.
      Re-parsing the output validates and compares equal to the input.

Target-format documents are never parsed here; see
``ArdourXMLSerializer.parse_midi_map``.
"""
from __future__ import annotations

import json
import logging
from enum import Enum

import yaml

from midimaps.core.validation import ParseResult, ValidationResult, parse_failure, validate_document
from midimaps.models.canonical import CanonicalMidiMap

logger = logging.getLogger(__name__)


class MapSyntax(str, Enum):
    """Structured-text encodings accepted for canonical maps."""

    YAML = "yaml"
    JSON = "json"

    @classmethod
    def from_filename(cls, filename: str) -> "MapSyntax":
        """Pick the syntax from a file name; anything not ``.json`` is YAML."""
        return cls.JSON if filename.lower().endswith(".json") else cls.YAML


def _decode(content: str, syntax: MapSyntax) -> object:
    if syntax is MapSyntax.JSON:
        return json.loads(content)
    return yaml.safe_load(content)


def parse_from_text(content: str, syntax: MapSyntax = MapSyntax.YAML) -> ParseResult:
    """Decode *content* in *syntax* and validate it as a canonical map."""
    try:
        document = _decode(content, MapSyntax(syntax))
    except (yaml.YAMLError, json.JSONDecodeError, RecursionError) as exc:
        logger.debug("Canonical map %s decode failed: %s", MapSyntax(syntax).value, exc)
        return parse_failure(str(exc) or f"Unknown {MapSyntax(syntax).value} parsing error")
    return validate_document(document)


def parse_from_yaml(content: str) -> ParseResult:
    return parse_from_text(content, MapSyntax.YAML)


def parse_from_json(content: str) -> ParseResult:
    return parse_from_text(content, MapSyntax.JSON)


def _to_document(canonical_map: CanonicalMidiMap) -> dict[str, object]:
    """camelCase plain tree with absent optional fields omitted."""
    return canonical_map.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_to_yaml(canonical_map: CanonicalMidiMap) -> str:
    return yaml.safe_dump(
        _to_document(canonical_map),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        indent=2,
        width=100,
    )


def serialize_to_json(canonical_map: CanonicalMidiMap, pretty: bool = True) -> str:
    if pretty:
        return json.dumps(_to_document(canonical_map), indent=2, ensure_ascii=False)
    return json.dumps(_to_document(canonical_map), separators=(",", ":"), ensure_ascii=False)


def serialize(canonical_map: CanonicalMidiMap, syntax: MapSyntax = MapSyntax.YAML) -> str:
    """Encode a canonical map back to text in *syntax*."""
    if MapSyntax(syntax) is MapSyntax.JSON:
        return serialize_to_json(canonical_map)
    return serialize_to_yaml(canonical_map)


def validate_text(content: str, syntax: MapSyntax = MapSyntax.YAML) -> ValidationResult:
    """Validation outcome only, for lint-style callers."""
    return parse_from_text(content, syntax).validation
