"""Application search – Search, the query-string to SQL translator.

Query structure examples::

    ?*has=<text>                                 all searchable properties
    ?title*has=<text>                            a single property
    ?price*min=10&price*max=20
    ?description*title*has=foo&title*has=bar&sort=title*asc&offset=10&limit=100
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from qsearch.application.pagination import current_page, split_fragments, total_pages
from qsearch.application.search.parser import (
    parse_left_hand_side,
    parse_right_hand_side_for_sort,
)
from qsearch.application.search.query import Filter, Limit, NotRecognized, Offset, Sort
from qsearch.application.search.request import SearchRequest
from qsearch.application.search.result import SearchResult
from qsearch.application.search.store import Store
from qsearch.kernel.errors import ValidationError
from qsearch.kernel.schema import ModelSchema, SchemaRegistry
from qsearch.observability.logging import get_logger

__all__ = ["Search"]

Params = Mapping[str, str] | Iterable[tuple[str, str]]

logger = get_logger(__name__)


class Search:
    """Search one model's records with query-string parameters.

    The schema is resolved once, at construction; an unknown model name
    raises :class:`~qsearch.kernel.errors.UnknownModelError`. Instances hold
    no per-call state and can be shared.

    Property names are quoted with the store's ``quote_identifier`` when it
    has one.
    """

    def __init__(self, model: str, registry: SchemaRegistry, store: Store) -> None:
        self._model = model
        self._schema = registry.properties_of(model)
        self._store = store
        self._quote = getattr(store, "quote_identifier", None)

    @property
    def model(self) -> str:
        return self._model

    @property
    def schema(self) -> ModelSchema:
        return self._schema

    def build(self, params: Params) -> SearchRequest:
        """Translate *params* without touching the store."""
        request = SearchRequest(self._schema, self._quote)
        for key, value in _pairs(params):
            match parse_left_hand_side(key, self._schema):
                case Sort():
                    parsed = parse_right_hand_side_for_sort(value)
                    if parsed is None:
                        logger.debug("search.sort_dropped", model=self._model, value=value)
                        continue
                    request.add_sort(parsed)
                case Offset():
                    request.set_offset(value)
                case Limit():
                    request.set_limit(value)
                case Filter() as token:
                    request.add_filter(token, value)
                case NotRecognized():
                    pass
        return request

    def find(self, params: Params) -> SearchResult[Any]:
        """Run the search described by *params*.

        Raises:
            ValidationError: a referenced property is unknown or not
                searchable, or a bare criterion targets a model without
                searchable properties.
        """
        pairs = _pairs(params)
        try:
            request = self.build(pairs)
        except ValidationError as exc:
            logger.warning("search.rejected", model=self._model, code=exc.code, detail=exc.detail)
            raise

        records = self._store.find(
            self._model,
            request.predicate,
            request.order_by,
            request.params,
            request.limit,
            request.effective_offset,
        )
        total = self._store.count(self._model, request.predicate, request.params)
        query, section = split_fragments(pairs)

        logger.info(
            "search.executed",
            model=self._model,
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
        return SearchResult(
            result=list(records),
            total=total,
            limit=request.limit,
            offset=request.offset,
            pages=total_pages(total, request.limit),
            page=current_page(request.effective_offset, request.limit),
            query=query,
            section=section,
            predicate=request.predicate,
            order_by=request.order_by,
        )


def _pairs(params: Params) -> list[tuple[str, str]]:
    if isinstance(params, Mapping):
        return list(params.items())
    return list(params)
