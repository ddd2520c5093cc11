"""
Tests for canonical map schema validation.

Every independent violation must be reported in one pass, each with a
dotted path and a stable code.  Warnings only ever accompany valid maps.
"""
from __future__ import annotations

import datetime

import pytest

from midimaps.core.validation import (
    DUPLICATE_MIDI_INPUT,
    INVALID_ENUM_VALUE,
    INVALID_TYPE,
    MISSING_AUTHOR,
    MISSING_DESCRIPTION,
    REQUIRED_FIELD_MISSING,
    VALUE_OUT_OF_RANGE,
    validate,
    validate_document,
)
from midimaps.models.canonical import CanonicalMidiMap


class TestValidDocuments:
    """Well-formed documents produce a typed map."""

    def test_valid_document_produces_map(self, document: dict) -> None:
        parsed = validate_document(document)

        assert parsed.valid
        assert isinstance(parsed.map, CanonicalMidiMap)
        assert parsed.validation.errors == []

    def test_camel_case_keys_become_snake_case_attributes(self, document: dict) -> None:
        document["controller"]["midiChannel"] = 3
        parsed = validate_document(document)

        assert parsed.map is not None
        assert parsed.map.controller.midi_channel == 3
        assert parsed.map.mappings[0].midi_input.number == 20
        assert parsed.map.mappings[0].plugin_target.identifier == "band1_gain"

    def test_enabled_defaults_to_true(self, document: dict) -> None:
        parsed = validate_document(document)

        assert parsed.map is not None
        assert all(m.enabled for m in parsed.map.mappings)

    def test_channel_and_number_may_be_omitted(self, document: dict) -> None:
        """Fallbacks are applied at resolution time, not during validation."""
        document["mappings"][0]["midiInput"] = {"type": "cc"}
        parsed = validate_document(document)

        assert parsed.valid
        assert parsed.map is not None
        assert parsed.map.mappings[0].midi_input.channel is None
        assert parsed.map.mappings[0].midi_input.number is None

    def test_unknown_keys_are_ignored(self, document: dict) -> None:
        document["metadata"]["license"] = "MIT"
        assert validate(document).valid

    def test_date_values_are_kept_as_text(self, document: dict) -> None:
        document["metadata"]["created"] = datetime.date(2024, 5, 1)
        parsed = validate_document(document)

        assert parsed.map is not None
        assert parsed.map.metadata.created == "2024-05-01"

    def test_empty_mappings_list_is_valid(self, document: dict) -> None:
        document["mappings"] = []
        assert validate(document).valid


class TestSchemaViolations:
    """Violations are collected exhaustively with path + code."""

    def test_two_missing_fields_give_two_errors(self, document: dict) -> None:
        del document["metadata"]["name"]
        del document["plugin"]["manufacturer"]

        result = validate(document)

        assert not result.valid
        paths = [e.path for e in result.errors]
        assert paths == ["metadata.name", "plugin.manufacturer"]
        assert all(e.code == REQUIRED_FIELD_MISSING for e in result.errors)

    def test_invalid_result_has_no_map(self, document: dict) -> None:
        del document["controller"]
        parsed = validate_document(document)

        assert not parsed.valid
        assert parsed.map is None
        assert parsed.validation.warnings == []

    def test_nested_mapping_path(self, document: dict) -> None:
        del document["mappings"][1]["pluginTarget"]["identifier"]
        result = validate(document)

        assert [e.path for e in result.errors] == ["mappings.1.pluginTarget.identifier"]

    def test_enum_violation(self, document: dict) -> None:
        document["mappings"][0]["midiInput"]["type"] = "knob"
        result = validate(document)

        assert len(result.errors) == 1
        assert result.errors[0].path == "mappings.0.midiInput.type"
        assert result.errors[0].code == INVALID_ENUM_VALUE

    def test_plugin_format_enum(self, document: dict) -> None:
        document["plugin"]["format"] = "DX"
        result = validate(document)

        assert result.errors[0].path == "plugin.format"
        assert result.errors[0].code == INVALID_ENUM_VALUE

    @pytest.mark.parametrize("channel", [0, 17])
    def test_channel_out_of_range(self, document: dict, channel: int) -> None:
        document["mappings"][0]["midiInput"]["channel"] = channel
        result = validate(document)

        assert result.errors[0].path == "mappings.0.midiInput.channel"
        assert result.errors[0].code == VALUE_OUT_OF_RANGE

    def test_midi_number_out_of_range(self, document: dict) -> None:
        document["mappings"][0]["midiInput"]["number"] = 128
        result = validate(document)

        assert result.errors[0].code == VALUE_OUT_OF_RANGE

    def test_normalized_value_out_of_range(self, document: dict) -> None:
        document["mappings"][0]["midiInput"]["behavior"] = {"sensitivity": 1.5}
        result = validate(document)

        assert result.errors[0].path == "mappings.0.midiInput.behavior.sensitivity"
        assert result.errors[0].code == VALUE_OUT_OF_RANGE

    def test_numeric_strings_are_not_coerced(self, document: dict) -> None:
        document["mappings"][0]["midiInput"]["number"] = "20"
        result = validate(document)

        assert result.errors[0].path == "mappings.0.midiInput.number"
        assert result.errors[0].code == INVALID_TYPE

    def test_numeric_identifier_is_a_type_error(self, document: dict) -> None:
        document["mappings"][0]["pluginTarget"]["identifier"] = 7
        result = validate(document)

        assert result.errors[0].code == INVALID_TYPE

    def test_non_mapping_root(self) -> None:
        result = validate(["not", "a", "map"])

        assert not result.valid
        assert result.errors[0].path == "root"

    def test_independent_violations_across_sections(self, document: dict) -> None:
        document["controller"]["midiChannel"] = 99
        document["mappings"][0]["midiInput"]["type"] = "knob"
        document["mappings"][1]["pluginTarget"]["type"] = "volume"

        result = validate(document)

        assert [e.path for e in result.errors] == [
            "controller.midiChannel",
            "mappings.0.midiInput.type",
            "mappings.1.pluginTarget.type",
        ]

    def test_error_str_includes_path(self, document: dict) -> None:
        del document["metadata"]["version"]
        result = validate(document)

        assert str(result.errors[0]).startswith("metadata.version: ")
        assert "metadata.version" in result.error_message


class TestWarnings:
    """Advisory warnings never change validity."""

    def test_complete_document_has_no_warnings(self, document: dict) -> None:
        assert validate(document).warnings == []

    def test_duplicate_input_single_warning_lists_both_ids(self, document: dict) -> None:
        document["mappings"] = [
            {
                "id": "sustain-a",
                "midiInput": {"type": "cc", "channel": 1, "number": 64},
                "pluginTarget": {"type": "parameter", "identifier": "a"},
            },
            {
                "id": "sustain-b",
                "midiInput": {"type": "cc", "channel": 1, "number": 64},
                "pluginTarget": {"type": "parameter", "identifier": "b"},
            },
        ]

        result = validate(document)

        assert result.valid
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.code == DUPLICATE_MIDI_INPUT
        assert warning.path == "mappings"
        assert "sustain-a, sustain-b" in warning.message

    def test_omitted_channel_groups_with_channel_one(self, document: dict) -> None:
        document["mappings"] = [
            {"id": "x", "midiInput": {"type": "cc", "number": 7}, "pluginTarget": {"type": "parameter", "identifier": "a"}},
            {"id": "y", "midiInput": {"type": "cc", "channel": 1, "number": 7}, "pluginTarget": {"type": "parameter", "identifier": "b"}},
            {"id": "z", "midiInput": {"type": "note", "channel": 1, "number": 7}, "pluginTarget": {"type": "parameter", "identifier": "c"}},
        ]

        warnings = validate(document).warnings

        assert len(warnings) == 1
        assert warnings[0].message.endswith("x, y")

    def test_missing_description_and_author(self, document: dict) -> None:
        del document["metadata"]["description"]
        del document["metadata"]["author"]

        result = validate(document)

        assert result.valid
        assert [w.code for w in result.warnings] == [MISSING_DESCRIPTION, MISSING_AUTHOR]
        assert [w.path for w in result.warnings] == ["metadata.description", "metadata.author"]
