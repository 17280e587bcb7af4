"""Application search – parameter key/value parsing.

We use ``*`` as the separator: ``-`` can appear in slugs and ``+`` is
decoded to a space by most query-string parsers.

Syntax::

    [property*...]*min=<number>     value from
    [property*...]*max=<number>     value to
    [property*...]*has=<text>       contains
    [property*...]*is=<text>        equal to
    sort=<property*...>*asc|*desc
    limit=<number>
    offset=<number>                 only applied together with limit

A criterion without properties (``*has=foo``) searches every searchable
property of the model.
"""
from __future__ import annotations

import re

from qsearch.application.search.query import (
    SEPARATOR,
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
from qsearch.kernel.errors import (
    NoSearchablePropertiesError,
    PropertyNotSearchableError,
    UnknownPropertyError,
)
from qsearch.kernel.schema import ModelSchema

__all__ = [
    "CRITERIA",
    "SEQUENCES",
    "ensure_searchable",
    "is_searchable",
    "parse_left_hand_side",
    "parse_right_hand_side_for_sort",
    "to_count",
    "to_number",
]

# Checked in this order; the first matching suffix wins.
CRITERIA: tuple[Criterion, ...] = (Criterion.MIN, Criterion.MAX, Criterion.HAS, Criterion.IS)
SEQUENCES: tuple[Direction, ...] = (Direction.ASC, Direction.DESC)

_SORT = Sort()
_OFFSET = Offset()
_LIMIT = Limit()
_NOT_RECOGNIZED = NotRecognized()

# Bounds of a signed 64-bit SQL integer
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_left_hand_side(key: str, schema: ModelSchema) -> ParsedKey:
    """Classify a parameter name.

    Raises:
        NoSearchablePropertiesError: bare criterion on a model that has no
            searchable properties.
    """
    if key == "sort":
        return _SORT
    if key == "offset":
        return _OFFSET
    if key == "limit":
        return _LIMIT

    for criterion in CRITERIA:
        if not key.endswith(criterion.suffix):
            continue
        prefix = key[: -len(criterion.suffix)]
        if prefix:
            properties = tuple(prefix.split(SEPARATOR))
        else:
            properties = schema.searchable_properties()
            if not properties:
                raise NoSearchablePropertiesError(schema.name)
        return Filter(criterion=criterion, properties=properties)

    return _NOT_RECOGNIZED


def parse_right_hand_side_for_sort(value: str) -> ParsedSortValue | None:
    """Parse a ``sort`` value; ``None`` means the token is dropped."""
    for direction in SEQUENCES:
        if not value.endswith(direction.suffix):
            continue
        remainder = value[: -len(direction.suffix)]
        if not remainder:
            return None
        return ParsedSortValue(direction=direction, properties=tuple(remainder.split(SEPARATOR)))
    return None


def is_searchable(property_name: str, schema: ModelSchema) -> bool:
    prop = schema.get(property_name)
    return prop is not None and prop.searchable


def ensure_searchable(property_name: str, schema: ModelSchema) -> None:
    """Raise unless *property_name* is declared on *schema* and searchable."""
    prop = schema.get(property_name)
    if prop is None:
        raise UnknownPropertyError(property_name, schema.name)
    if not prop.searchable:
        raise PropertyNotSearchableError(property_name, schema.name)


def to_number(raw: str) -> int | float:
    """Lenient numeric coercion of a query-string value.

    The leading numeric part is used (``"10abc"`` -> 10); anything without
    one coerces to 0. Integral values that fit a signed 64-bit column come
    back as ``int``, everything else stays ``float``.
    """
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return 0
    number = float(match.group())
    if number.is_integer() and INT64_MIN <= number <= INT64_MAX:
        return int(number)
    return number


def to_count(raw: str) -> int:
    """Coerce a ``limit``/``offset`` value to an integer in ``[0, INT64_MAX]``."""
    number = to_number(raw)
    if number <= 0:
        return 0
    if number >= INT64_MAX:
        return INT64_MAX
    return int(number)
