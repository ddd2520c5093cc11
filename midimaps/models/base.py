"""Shared Pydantic base with camelCase wire-format serialization."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


def to_camel(name: str) -> str:
    """Convert snake_case to camelCase for map documents."""
    parts = name.split("_")
    return parts[0] + "".join(w.capitalize() for w in parts[1:])


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys in map documents.

    - Python code uses snake_case field names (PEP 8)
    - Canonical YAML/JSON documents use camelCase (``midiInput``, ``pluginTarget``)
    - ``model_dump(by_alias=True)`` returns the document shape

    Models are frozen: a validated canonical map is never mutated.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
