"""Pytest configuration and fixtures."""
from __future__ import annotations

import copy

import pytest

from midimaps.core.parser import parse_from_yaml
from midimaps.daw.ardour.builder import MidiMapBuilder
from midimaps.models.canonical import CanonicalMidiMap


SAMPLE_YAML = """\
metadata:
  name: Launch Control XL for CLA-76
  version: 1.2.0
  description: Channel strip style control of the CLA-76
  author: Studio Team
  created: 2024-05-01
  tags: [compressor, vintage]
controller:
  manufacturer: Novation
  model: Launch Control XL
  midiChannel: 1
plugin:
  manufacturer: Waves
  name: CLA-76
  format: VST3
mappings:
  - id: input-gain
    description: Top knob, column 1
    midiInput:
      type: cc
      channel: 1
      number: 13
      range: {min: 0, max: 127}
      behavior: {mode: absolute, sensitivity: 0.5, curve: linear}
    pluginTarget:
      type: parameter
      identifier: "input"
      name: Input Gain
      category: preamp
      units: dB
    mapping: {scaling: linear, smoothing: 0.25, bipolar: false}
  - id: comp-ratio
    midiInput: {type: cc, number: 29, behavior: {mode: relative}}
    pluginTarget: {type: parameter, identifier: "ratio", name: Ratio, category: compressor}
  - id: bypass
    midiInput: {type: note, channel: 1, number: 41, behavior: {mode: momentary}}
    pluginTarget: {type: bypass, identifier: "bypass"}
  - id: mystery
    midiInput: {type: cc, channel: 2, number: 77}
    pluginTarget: {type: parameter, identifier: "param_42", name: Attack, category: dynamics}
  - id: wheel
    midiInput: {type: pitchbend, channel: 1}
    pluginTarget: {type: parameter, identifier: "mix", name: Mix}
"""


def _document() -> dict[str, object]:
    return {
        "metadata": {
            "name": "Test Map",
            "version": "1.0.0",
            "description": "Fixture map",
            "author": "Tests",
        },
        "controller": {"manufacturer": "Akai", "model": "MPK Mini"},
        "plugin": {"manufacturer": "FabFilter", "name": "Pro-Q 3", "format": "VST3"},
        "mappings": [
            {
                "id": "low-band",
                "midiInput": {"type": "cc", "channel": 1, "number": 20},
                "pluginTarget": {"type": "parameter", "identifier": "band1_gain", "name": "Low Band", "category": "EQ"},
            },
            {
                "id": "play",
                "midiInput": {"type": "note", "channel": 10, "number": 36},
                "pluginTarget": {"type": "macro", "identifier": "m1", "name": "Play", "category": "transport"},
            },
        ],
    }


@pytest.fixture
def sample_yaml() -> str:
    return SAMPLE_YAML


@pytest.fixture
def sample_map() -> CanonicalMidiMap:
    parsed = parse_from_yaml(SAMPLE_YAML)
    assert parsed.map is not None, parsed.validation.error_message
    return parsed.map


@pytest.fixture
def document() -> dict[str, object]:
    """A fresh, valid canonical document (plain dict) per test."""
    return copy.deepcopy(_document())


@pytest.fixture
def builder() -> MidiMapBuilder:
    return MidiMapBuilder(name="Test Map", version="1.0.0")
