"""Unit tests for model schema descriptors and the in-memory registry."""

from __future__ import annotations

import pytest

from qsearch.kernel.errors import UnknownModelError
from qsearch.kernel.schema import (
    InMemorySchemaRegistry,
    ModelSchema,
    PropertySchema,
    SchemaRegistry,
)


class TestModelSchema:
    def test_of_accepts_pairs_and_descriptors(self) -> None:
        schema = ModelSchema.of("page", [("title", True), PropertySchema("body")])
        assert schema.properties == (PropertySchema("title", True), PropertySchema("body", False))

    def test_get(self) -> None:
        schema = ModelSchema.of("page", [("title", True)])
        assert schema.get("title") == PropertySchema("title", True)
        assert schema.get("missing") is None

    def test_searchable_properties_keep_declaration_order(self) -> None:
        schema = ModelSchema.of("page", [("b", True), ("x", False), ("a", True)])
        assert schema.searchable_properties() == ("b", "a")

    def test_duplicate_property_rejected(self) -> None:
        with pytest.raises(ValueError):
            ModelSchema.of("page", [("title", True), ("title", False)])

    def test_is_frozen(self) -> None:
        schema = ModelSchema.of("page", [])
        with pytest.raises((AttributeError, TypeError)):
            schema.name = "other"  # type: ignore[misc]


class TestInMemorySchemaRegistry:
    def test_properties_of(self) -> None:
        registry = InMemorySchemaRegistry({"page": [("title", True)]})
        assert registry.properties_of("page").searchable_properties() == ("title",)

    def test_unknown_model(self) -> None:
        registry = InMemorySchemaRegistry()
        with pytest.raises(UnknownModelError):
            registry.properties_of("ghost")

    def test_register_and_contains(self) -> None:
        registry = InMemorySchemaRegistry()
        registry.register(ModelSchema.of("page", [("title", True)]))
        assert "page" in registry
        assert "ghost" not in registry
        assert registry.models() == ["page"]

    def test_is_schema_registry(self) -> None:
        assert isinstance(InMemorySchemaRegistry(), SchemaRegistry)
