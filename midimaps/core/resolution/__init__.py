"""
Binding resolution package.

Decides, for each canonical mapping, which Ardour control it becomes:
a symbolic function (``FunctionRef``), an addressable parameter path
(``ParameterPath``), or nothing (``NO_REFERENCE``).

Public API:
    resolve(mapping, context) -> Reference
    resolve_flags(mapping) -> BindingFlags
    resolve_binding(mapping, context) -> Resolution
"""

from midimaps.core.resolution.models import (
    NO_REFERENCE,
    BindingFlags,
    ControllerContext,
    ControllerQuirks,
    FunctionRef,
    NoReference,
    ParameterPath,
    Reference,
    Resolution,
    Rule,
    RuleTable,
    TargetProbe,
)
from midimaps.core.resolution.rules import (
    COMPRESSOR_RULES,
    EQ_BAND_RULES,
    GAIN_RULES,
    GLOBAL_RULES,
    RESOLUTION_RULES,
    parameter_path,
    send_gain,
)
from midimaps.core.resolution.resolver import resolve, resolve_binding, resolve_flags

__all__ = [
    # Models
    "NO_REFERENCE",
    "BindingFlags",
    "ControllerContext",
    "ControllerQuirks",
    "FunctionRef",
    "NoReference",
    "ParameterPath",
    "Reference",
    "Resolution",
    "Rule",
    "RuleTable",
    "TargetProbe",
    # Rule tables
    "COMPRESSOR_RULES",
    "EQ_BAND_RULES",
    "GAIN_RULES",
    "GLOBAL_RULES",
    "RESOLUTION_RULES",
    "parameter_path",
    "send_gain",
    # Entrypoints
    "resolve",
    "resolve_binding",
    "resolve_flags",
]
