"""Application search – SearchRequest accumulator."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, assert_never

from qsearch.application.search.parser import ensure_searchable, to_count, to_number
from qsearch.application.search.query import Criterion, Filter, ParsedSortValue
from qsearch.kernel.schema import ModelSchema

__all__ = ["SearchRequest"]


def _bare(name: str) -> str:
    return name


class SearchRequest:
    """Collects filter groups, sort terms and pagination for one ``find`` call.

    Every condition gets its own bound parameter (``value0``, ``value1``,
    ...); the counter runs across the whole request so names never clash.
    Property names go through *quote* before they reach the SQL text, so a
    store can quote reserved words such as ``group``. Not shared between
    calls.
    """

    def __init__(self, schema: ModelSchema, quote: Callable[[str], str] | None = None) -> None:
        self._schema = schema
        self._quote = quote or _bare
        self._groups: list[list[str]] = []
        self._sort_terms: list[str] = []
        self._params: dict[str, Any] = {}
        self._counter = 0
        self.limit: int | None = None
        self.offset: int | None = None

    def add_filter(self, token: Filter, value: str) -> None:
        conditions: list[str] = []
        for prop in token.properties:
            ensure_searchable(prop, self._schema)
            name = f"value{self._counter}"
            self._counter += 1
            operator, bound = self._condition(token.criterion, value)
            conditions.append(f"{self._quote(prop)} {operator} :{name}")
            self._params[name] = bound
        self._groups.append(conditions)

    @staticmethod
    def _condition(criterion: Criterion, value: str) -> tuple[str, Any]:
        match criterion:
            case Criterion.MIN:
                return ">=", to_number(value)
            case Criterion.MAX:
                return "<=", to_number(value)
            case Criterion.HAS:
                # % and _ in value are left as wildcards
                return "LIKE", f"%{value}%"
            case Criterion.IS:
                return "=", value
            case _:
                assert_never(criterion)

    def add_sort(self, parsed: ParsedSortValue) -> None:
        for prop in parsed.properties:
            ensure_searchable(prop, self._schema)
        for prop in parsed.properties:
            self._sort_terms.append(f"{self._quote(prop)} {parsed.direction.value}")

    def set_limit(self, value: str) -> None:
        self.limit = to_count(value)

    def set_offset(self, value: str) -> None:
        self.offset = to_count(value)

    @property
    def predicate(self) -> str:
        groups = [" OR ".join(conditions) for conditions in self._groups]
        if len(groups) > 1:
            return "(" + ") AND (".join(groups) + ")"
        if groups:
            return groups[0]
        return ""

    @property
    def order_by(self) -> str:
        if not self._sort_terms:
            return ""
        return "ORDER BY " + ", ".join(self._sort_terms)

    @property
    def params(self) -> dict[str, Any]:
        """Bound filter values; pagination bounds are never included."""
        return dict(self._params)

    @property
    def effective_offset(self) -> int | None:
        """Offset passed to the store: only meaningful alongside a limit."""
        if self.limit is None:
            return None
        return self.offset
