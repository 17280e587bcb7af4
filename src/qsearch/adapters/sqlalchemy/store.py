"""SQLAlchemy adapter – SqlAlchemyStore."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from qsearch.config.settings import SearchSettings
from qsearch.kernel.errors import StoreError


class SqlAlchemyStore:
    """:class:`~qsearch.application.search.Store` over a synchronous engine.

    Each model maps to the table of the same name. Predicates and ORDER BY
    clauses are executed as textual SQL with their bound parameters; rows
    come back as plain dicts. Driver failures, and integers too wide for the
    driver to bind, are raised as
    :class:`~qsearch.kernel.errors.StoreError` with the original exception
    as cause.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: SearchSettings, **engine_kwargs: Any) -> "SqlAlchemyStore":
        engine = create_engine(settings.database_url, echo=settings.echo_sql, **engine_kwargs)
        return cls(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def quote_identifier(self, name: str) -> str:
        """Quote *name* for this dialect when it is reserved or not a bare identifier."""
        return self._engine.dialect.identifier_preparer.quote(name)

    def find(
        self,
        model: str,
        predicate: str,
        order_by: str,
        params: Mapping[str, Any],
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[dict[str, Any]]:
        sql = f"SELECT * FROM {self.quote_identifier(model)}"
        if predicate:
            sql += f" WHERE {predicate}"
        if order_by:
            sql += f" {order_by}"
        bound = dict(params)
        if limit is not None:
            sql += " LIMIT :limit"
            bound["limit"] = limit
            if offset is not None:
                sql += " OFFSET :offset"
                bound["offset"] = offset
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(text(sql), bound).mappings().all()
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(model, cause=exc) from exc
        return [dict(row) for row in rows]

    def count(self, model: str, predicate: str, params: Mapping[str, Any]) -> int:
        sql = f"SELECT COUNT(*) FROM {self.quote_identifier(model)}"
        if predicate:
            sql += f" WHERE {predicate}"
        try:
            with self._engine.connect() as conn:
                return int(conn.execute(text(sql), dict(params)).scalar_one())
        except (SQLAlchemyError, OverflowError) as exc:
            raise StoreError(model, cause=exc) from exc

    def dispose(self) -> None:
        self._engine.dispose()


__all__ = ["SqlAlchemyStore"]
