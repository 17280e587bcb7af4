"""Application search – query-string search translation."""
from qsearch.application.search.parser import (
    ensure_searchable,
    is_searchable,
    parse_left_hand_side,
    parse_right_hand_side_for_sort,
)
from qsearch.application.search.query import (
    Criterion,
    Direction,
    Filter,
    Limit,
    NotRecognized,
    Offset,
    ParsedKey,
    ParsedSortValue,
    Sort,
)
from qsearch.application.search.request import SearchRequest
from qsearch.application.search.result import SearchResult
from qsearch.application.search.service import Search
from qsearch.application.search.store import Store

__all__ = [
    "Criterion",
    "Direction",
    "Filter",
    "Limit",
    "NotRecognized",
    "Offset",
    "ParsedKey",
    "ParsedSortValue",
    "Search",
    "SearchRequest",
    "SearchResult",
    "Sort",
    "Store",
    "ensure_searchable",
    "is_searchable",
    "parse_left_hand_side",
    "parse_right_hand_side_for_sort",
]
