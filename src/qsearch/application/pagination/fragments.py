"""Application pagination – echo fragments for building page links."""
from __future__ import annotations

from collections.abc import Iterable

SECTION_KEYS = frozenset({"limit", "offset"})


def split_fragments(pairs: Iterable[tuple[str, str]]) -> tuple[str, str]:
    """Split raw parameters into ``(query, section)`` query-string fragments.

    ``section`` holds ``limit``/``offset``, ``query`` everything else. Input
    order and raw value text are kept, so links built from the fragments are
    stable.
    """
    query: list[str] = []
    section: list[str] = []
    for key, value in pairs:
        target = section if key in SECTION_KEYS else query
        target.append(f"{key}={value}")
    return "&".join(query), "&".join(section)


__all__ = ["SECTION_KEYS", "split_fragments"]
