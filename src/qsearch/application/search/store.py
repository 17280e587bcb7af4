"""Application search – Store capability consumed by the translator."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

__all__ = ["Store"]


@runtime_checkable
class Store(Protocol):
    """Executes translated searches against one record collection per model.

    ``predicate`` is a parameterized SQL boolean expression (empty for "all
    records") and ``order_by`` a full ``ORDER BY ...`` clause or empty.
    Errors raised by implementations propagate unchanged through
    :class:`~qsearch.application.search.service.Search`.

    A store may also offer ``quote_identifier(name) -> str``; when present,
    property names are passed through it before they are written into the
    predicate and the ORDER BY clause.
    """

    def find(
        self,
        model: str,
        predicate: str,
        order_by: str,
        params: Mapping[str, Any],
        limit: int | None = None,
        offset: int | None = None,
    ) -> Sequence[Any]: ...

    def count(self, model: str, predicate: str, params: Mapping[str, Any]) -> int: ...
