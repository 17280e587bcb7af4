"""Model schema descriptors – PropertySchema, ModelSchema."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable


@dataclasses.dataclass(frozen=True)
class PropertySchema:
    """A single declared property of a model."""

    name: str
    searchable: bool = False


@dataclasses.dataclass(frozen=True)
class ModelSchema:
    """Ordered, read-only property list of one model.

    Property order is the declaration order; it is only significant as the
    fallback property set for a bare criterion such as ``*has``.
    """

    name: str
    properties: tuple[PropertySchema, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for prop in self.properties:
            if prop.name in seen:
                raise ValueError(f"duplicate property {prop.name!r} on model {self.name!r}")
            seen.add(prop.name)

    @classmethod
    def of(
        cls,
        name: str,
        properties: Iterable[PropertySchema | tuple[str, bool]],
    ) -> "ModelSchema":
        """Build a schema from ``PropertySchema`` objects or ``(name, searchable)`` pairs."""
        return cls(
            name=name,
            properties=tuple(
                p if isinstance(p, PropertySchema) else PropertySchema(p[0], bool(p[1]))
                for p in properties
            ),
        )

    def get(self, property_name: str) -> PropertySchema | None:
        for prop in self.properties:
            if prop.name == property_name:
                return prop
        return None

    def searchable_properties(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.properties if p.searchable)


__all__ = ["ModelSchema", "PropertySchema"]
