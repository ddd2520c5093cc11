"""Dataclass models for binding resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from typing_extensions import TypedDict, Unpack

from midimaps.models.canonical import CanonicalMidiMap, MidiMapping


@dataclass(frozen=True)
class FunctionRef:
    """A named target-runtime action, e.g. ``track-set-gain[1]``."""
    name: str


@dataclass(frozen=True)
class ParameterPath:
    """An addressable plugin parameter path, e.g. ``/route/plugin/parameter S1 7``."""
    path: str


@dataclass(frozen=True)
class NoReference:
    """Deliberately unbound. A normal outcome, not an error."""


Reference = Union[FunctionRef, ParameterPath, NoReference]
NO_REFERENCE = NoReference()


@dataclass(frozen=True)
class BindingFlags:
    """Interaction-mode flags, computed independently of the reference."""
    encoder: bool = False
    momentary: bool = False


@dataclass(frozen=True)
class Resolution:
    """Reference + flags for one mapping, and the rule path that decided it."""
    reference: Reference
    flags: BindingFlags
    rule: str


class ControllerQuirks(TypedDict, total=False):
    """Per-family controller options accepted by ``ControllerContext.for_map``."""

    prefer_addressable: bool
    bank_size: int
    motorized: bool


@dataclass(frozen=True)
class ControllerContext:
    """What the surrounding tooling knows about the controller.

    Attributes:
        manufacturer: Controller manufacturer.
        model: Controller model.
        prefer_addressable: Bind ``parameter`` targets by parameter path
            instead of the category heuristics.
        bank_size: When set, the target map carries a device descriptor
            with this many strips per bank.
        motorized: Device descriptor quirk for motorized faders.
    """

    manufacturer: str = ""
    model: str = ""
    prefer_addressable: bool = False
    bank_size: Optional[int] = None
    motorized: bool = False

    @classmethod
    def for_map(cls, canonical_map: CanonicalMidiMap, **quirks: Unpack[ControllerQuirks]) -> "ControllerContext":
        """Default context for a map's controller, with optional family quirks."""
        return cls(
            manufacturer=canonical_map.controller.manufacturer,
            model=canonical_map.controller.model,
            **quirks,
        )

    @property
    def needs_device_info(self) -> bool:
        return self.bank_size is not None or self.motorized

    def device_attributes(self) -> dict[str, int | bool]:
        """Device descriptor attributes in emission order."""
        attrs: dict[str, int | bool] = {}
        if self.bank_size is not None:
            attrs["bank-size"] = self.bank_size
        if self.motorized:
            attrs["motorized"] = True
        return attrs


@dataclass(frozen=True)
class TargetProbe:
    """The fields of one mapping the rule predicates look at.

    ``category`` and ``name`` are lower-cased; ``identifier`` is verbatim.
    """

    kind: str
    identifier: str
    category: str
    name: str
    enabled: bool = True
    context: ControllerContext = field(default_factory=ControllerContext)

    @classmethod
    def from_mapping(cls, mapping: MidiMapping, context: ControllerContext) -> "TargetProbe":
        target = mapping.plugin_target
        return cls(
            kind=target.type,
            identifier=target.identifier,
            category=(target.category or "").lower(),
            name=(target.name or "").lower(),
            enabled=mapping.enabled,
            context=context,
        )


Predicate = Callable[[TargetProbe], bool]
Outcome = Union[FunctionRef, ParameterPath, NoReference, "RuleTable", Callable[[TargetProbe], Reference]]


@dataclass(frozen=True)
class Rule:
    """A (predicate, outcome) pair. Outcomes may be a fixed reference, a
    callable building one from the probe, or a nested table."""
    name: str
    when: Predicate
    then: Outcome


@dataclass(frozen=True)
class RuleTable:
    """Ordered rules evaluated top-to-bottom; first match wins.

    ``fallback`` always applies when nothing matched, so evaluation is total.
    """
    name: str
    rules: tuple[Rule, ...]
    fallback: Rule

    def evaluate(self, probe: TargetProbe) -> tuple[str, Reference]:
        """Return ``(rule_path, reference)`` for *probe*."""
        chosen = next((rule for rule in self.rules if rule.when(probe)), self.fallback)
        return _apply(chosen, probe)


def _apply(rule: Rule, probe: TargetProbe) -> tuple[str, Reference]:
    outcome = rule.then
    if isinstance(outcome, (FunctionRef, ParameterPath, NoReference)):
        return rule.name, outcome
    if isinstance(outcome, RuleTable):
        sub_name, reference = outcome.evaluate(probe)
        return f"{rule.name}/{sub_name}", reference
    return rule.name, outcome(probe)
