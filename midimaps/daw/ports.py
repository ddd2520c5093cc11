"""Target emitter protocol: the only DAW interface surrounding tooling depends on.

Concrete emitters (e.g. ``midimaps.daw.ardour.adapter.ArdourEmitter``)
implement this protocol.  Install scripts import ``TargetEmitter``; they
never import a concrete emitter's builder or serializer directly.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from midimaps.core.parser import MapSyntax
    from midimaps.core.resolution.models import ControllerContext
    from midimaps.models.canonical import CanonicalMidiMap


@runtime_checkable
class TargetEmitter(Protocol):
    """Port that every DAW target must satisfy."""

    @property
    def name(self) -> str:
        """Short DAW identifier, e.g. ``"ardour"``."""
        ...

    def target_filename(self, source_name: str) -> str:
        """Output file name for a canonical source file name."""
        ...

    def emit(
        self,
        canonical_map: CanonicalMidiMap,
        context: Optional[ControllerContext] = None,
    ) -> str:
        """Render a validated canonical map in the DAW's format."""
        ...

    def emit_text(
        self,
        content: str,
        syntax: MapSyntax,
        context: Optional[ControllerContext] = None,
    ) -> str:
        """Parse, validate and render canonical map text."""
        ...

    def parse(self, content: str) -> object:
        """Decode a target document. Emitters may refuse with ``UnsupportedOperationError``."""
        ...
