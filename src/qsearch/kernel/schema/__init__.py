"""Kernel schema – property descriptors and the schema registry port."""
from qsearch.kernel.schema.property import ModelSchema, PropertySchema
from qsearch.kernel.schema.registry import InMemorySchemaRegistry, SchemaRegistry

__all__ = ["InMemorySchemaRegistry", "ModelSchema", "PropertySchema", "SchemaRegistry"]
