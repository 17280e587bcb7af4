"""Application pagination – page arithmetic for limit/offset searches."""
from __future__ import annotations

import math


def total_pages(total: int, limit: int | None) -> int | None:
    """Number of pages of *limit* records needed for *total* records.

    ``None`` when there is no positive limit.
    """
    if limit is None or limit <= 0:
        return None
    return math.ceil(total / limit)


def current_page(offset: int | None, limit: int | None) -> int | None:
    """Page reached by *offset*, i.e. ``ceil(offset / limit)``.

    ``None`` unless both an offset and a positive limit are set.
    """
    if offset is None or limit is None or limit <= 0:
        return None
    return math.ceil(offset / limit)


__all__ = ["current_page", "total_pages"]
