"""Application search – SearchResult container."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["SearchResult"]


@dataclass
class SearchResult(Generic[T]):
    """Records of one search plus the metadata needed for page links.

    ``limit`` and ``offset`` echo the request and are ``None`` when it did
    not supply them. ``pages`` needs a positive limit; ``page`` needs an
    offset as well.
    """

    result: list[T]
    total: int
    limit: int | None = None
    offset: int | None = None
    pages: int | None = None
    page: int | None = None
    query: str = ""
    section: str = ""
    predicate: str = field(default="", repr=False)
    order_by: str = field(default="", repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping without the keys that do not apply."""
        out: dict[str, Any] = {"result": self.result, "total": self.total}
        for key in ("limit", "offset", "pages", "page"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.query:
            out["query"] = self.query
        if self.section:
            out["section"] = self.section
        return out
