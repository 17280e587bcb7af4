"""SQLAlchemy adapter – SqlAlchemySchemaRegistry."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Table, inspect

from qsearch.kernel.errors import UnknownModelError
from qsearch.kernel.schema import ModelSchema, PropertySchema, SchemaRegistry


class SqlAlchemySchemaRegistry(SchemaRegistry):
    """Schema registry derived from declarative models or ``Table`` objects.

    The model name is the table name. A column is searchable when its
    ``info`` mapping says so::

        class Page(Base):
            __tablename__ = "page"

            id: Mapped[int] = mapped_column(primary_key=True)
            title: Mapped[str] = mapped_column(String(200), info={"searchable": True})
            body: Mapped[str] = mapped_column(Text)
    """

    INFO_KEY = "searchable"

    def __init__(self, *models: Any) -> None:
        self._models: dict[str, ModelSchema] = {}
        for model in models:
            self.register(model)

    def register(self, model: Any) -> ModelSchema:
        table = model if isinstance(model, Table) else inspect(model).local_table
        schema = ModelSchema(
            name=table.name,
            properties=tuple(
                PropertySchema(column.name, bool(column.info.get(self.INFO_KEY, False)))
                for column in table.columns
            ),
        )
        self._models[schema.name] = schema
        return schema

    def properties_of(self, model: str) -> ModelSchema:
        try:
            return self._models[model]
        except KeyError:
            raise UnknownModelError(model) from None


__all__ = ["SqlAlchemySchemaRegistry"]
