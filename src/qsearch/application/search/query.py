"""Application search – tokens produced by the query-string parser."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "Criterion",
    "Direction",
    "Filter",
    "Limit",
    "NotRecognized",
    "Offset",
    "ParsedKey",
    "ParsedSortValue",
    "Sort",
]

SEPARATOR = "*"


class Criterion(str, Enum):
    """Filter operator, keyed by its parameter-name suffix."""

    MIN = "*min"
    MAX = "*max"
    HAS = "*has"
    IS = "*is"

    @property
    def suffix(self) -> str:
        return self.value


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @property
    def suffix(self) -> str:
        """Sort-value suffix, e.g. ``*asc``."""
        return SEPARATOR + self.value.lower()


@dataclass(frozen=True)
class Sort:
    """``sort=`` key; the value carries the properties and direction."""


@dataclass(frozen=True)
class Offset:
    pass


@dataclass(frozen=True)
class Limit:
    pass


@dataclass(frozen=True)
class Filter:
    """A ``<properties>*<criterion>`` key."""
    criterion: Criterion
    properties: tuple[str, ...]


@dataclass(frozen=True)
class NotRecognized:
    """Any other key; echoed back but never used for filtering."""


ParsedKey = Union[Sort, Offset, Limit, Filter, NotRecognized]


@dataclass(frozen=True)
class ParsedSortValue:
    direction: Direction
    properties: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.properties:
            raise ValueError("a sort value needs at least one property")
