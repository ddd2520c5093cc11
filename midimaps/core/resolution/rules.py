"""Ordered resolution rules: plugin target → Ardour control reference.

Substring tests overlap across categories, so the order of each table is
part of its contract.  A target named "Low Shelf
Gain" in category "EQ" hits the gain rule before the EQ rule ever runs.

Every table ends in a fallback; no probe can fall through unresolved.
"""

from __future__ import annotations

from midimaps.config import PARAMETER_PATH_ANCHOR, SELECTED_STRIP
from midimaps.core.resolution.models import (
    NO_REFERENCE,
    FunctionRef,
    ParameterPath,
    Predicate,
    Rule,
    RuleTable,
    TargetProbe,
)

TOGGLE_PLUGIN_BYPASS = FunctionRef("toggle-plugin-bypass")
TOGGLE_EDITOR_WINDOW = FunctionRef("toggle-editor-window")
TRACK_SET_GAIN = FunctionRef("track-set-gain[1]")
TRACK_SET_TRIM = FunctionRef("track-set-trim[1]")
TRACK_SET_PAN = FunctionRef("track-set-pan[1]")
TRACK_SELECT = FunctionRef("track-select[1]")


def send_gain(send: int) -> FunctionRef:
    """``track-set-send-gain`` on strip 1 for the given send slot."""
    return FunctionRef(f"track-set-send-gain[1,{send}]")


def parameter_path(identifier: str) -> ParameterPath:
    """Addressable path for the selected strip; *identifier* is not validated."""
    return ParameterPath(f"{PARAMETER_PATH_ANCHOR} {SELECTED_STRIP} {identifier}")


def _probe_path(probe: TargetProbe) -> ParameterPath:
    return parameter_path(probe.identifier)


def _always(probe: TargetProbe) -> bool:
    return True


def _category_has(*needles: str) -> Predicate:
    def predicate(probe: TargetProbe) -> bool:
        return any(n in probe.category for n in needles)
    return predicate


def _name_has(*needles: str) -> Predicate:
    def predicate(probe: TargetProbe) -> bool:
        return any(n in probe.name for n in needles)
    return predicate


def _name_has_without(needle: str, excluded: str) -> Predicate:
    def predicate(probe: TargetProbe) -> bool:
        return needle in probe.name and excluded not in probe.name
    return predicate


def _category_or_name(category: str, name: str) -> Predicate:
    def predicate(probe: TargetProbe) -> bool:
        return category in probe.category or name in probe.name
    return predicate


# ---------------------------------------------------------------------------
# Sub-tables
# ---------------------------------------------------------------------------

GAIN_RULES = RuleTable(
    name="gain",
    rules=(
        Rule("mic", _name_has("mic"), TRACK_SET_GAIN),
    ),
    fallback=Rule("trim", _always, TRACK_SET_TRIM),
)

EQ_BAND_RULES = RuleTable(
    name="eq",
    rules=(
        Rule("low", _name_has_without("low", "mid"), send_gain(1)),
        Rule("low-mid", _name_has("low-mid", "low mid"), send_gain(2)),
        Rule("high-mid", _name_has("high-mid", "high mid"), send_gain(3)),
        Rule("high", _name_has_without("high", "mid"), send_gain(4)),
    ),
    fallback=Rule("band-1", _always, send_gain(1)),
)

COMPRESSOR_RULES = RuleTable(
    name="compressor",
    rules=(
        Rule("threshold", _name_has("threshold"), send_gain(5)),
        Rule("ratio", _name_has("ratio"), send_gain(6)),
        Rule("release", _name_has("release"), send_gain(7)),
    ),
    fallback=Rule("other", _always, send_gain(8)),
)

GLOBAL_RULES = RuleTable(
    name="global",
    rules=(
        Rule("bypass", _name_has("bypass"), TOGGLE_PLUGIN_BYPASS),
        Rule("window", _name_has("window"), TOGGLE_EDITOR_WINDOW),
    ),
    fallback=Rule("select", _always, TRACK_SELECT),
)


# ---------------------------------------------------------------------------
# Top-level table
# ---------------------------------------------------------------------------

RESOLUTION_RULES = RuleTable(
    name="resolve",
    rules=(
        Rule("disabled", lambda p: not p.enabled, NO_REFERENCE),
        Rule("bypass", lambda p: p.kind == "bypass", TOGGLE_PLUGIN_BYPASS),
        Rule(
            "addressable-parameter",
            lambda p: p.kind == "parameter" and p.context.prefer_addressable,
            _probe_path,
        ),
        Rule("gain", _category_or_name("preamp", "gain"), GAIN_RULES),
        Rule("eq", _category_has("eq"), EQ_BAND_RULES),
        Rule("compressor", _category_or_name("compressor", "comp"), COMPRESSOR_RULES),
        Rule("limiter", _category_or_name("limiter", "limit"), TRACK_SET_TRIM),
        Rule("tape", _category_or_name("tape", "tape"), TRACK_SET_PAN),
        Rule("filter", _category_has("filter"), send_gain(1)),
        Rule("global", _category_has("global"), GLOBAL_RULES),
    ),
    fallback=Rule("generic-parameter", _always, _probe_path),
)
