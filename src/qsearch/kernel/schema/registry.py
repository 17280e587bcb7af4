"""Schema registry port and its in-memory implementation."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping

from qsearch.kernel.errors import UnknownModelError
from qsearch.kernel.schema.property import ModelSchema, PropertySchema


class SchemaRegistry(abc.ABC):
    """Port: resolve a model name to its schema.

    Concrete implementations live here (:class:`InMemorySchemaRegistry`) and
    in ``adapters/sqlalchemy``.
    """

    @abc.abstractmethod
    def properties_of(self, model: str) -> ModelSchema:
        """Return the schema of *model* or raise :class:`UnknownModelError`."""

    def __contains__(self, model: object) -> bool:
        if not isinstance(model, str):
            return False
        try:
            self.properties_of(model)
        except UnknownModelError:
            return False
        return True


class InMemorySchemaRegistry(SchemaRegistry):
    """Dict-backed registry.

    Usage::

        registry = InMemorySchemaRegistry({
            "page": [("title", True), ("description", True), ("body", False)],
        })
    """

    def __init__(
        self,
        models: Mapping[str, Iterable[PropertySchema | tuple[str, bool]]] | None = None,
    ) -> None:
        self._models: dict[str, ModelSchema] = {}
        for name, properties in (models or {}).items():
            self.register(ModelSchema.of(name, properties))

    def register(self, schema: ModelSchema) -> None:
        self._models[schema.name] = schema

    def properties_of(self, model: str) -> ModelSchema:
        try:
            return self._models[model]
        except KeyError:
            raise UnknownModelError(model) from None

    def models(self) -> list[str]:
        return list(self._models)


__all__ = ["InMemorySchemaRegistry", "SchemaRegistry"]
