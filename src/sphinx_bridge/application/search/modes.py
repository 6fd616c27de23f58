"""Application search – symbolic name → Sphinx protocol constant tables."""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, TypeVar

from sphinx_bridge.kernel.errors import UnknownEnumValueError

E = TypeVar("E", bound=Enum)


class MatchMode(IntEnum):
    """``SPH_MATCH_*`` constants."""
    ALL = 0
    ANY = 1
    PHRASE = 2
    BOOLEAN = 3
    EXTENDED = 4
    FULLSCAN = 5
    EXTENDED2 = 6


class SortMode(IntEnum):
    """``SPH_SORT_*`` constants."""
    RELEVANCE = 0
    ATTR_DESC = 1
    ATTR_ASC = 2
    TIME_SEGMENTS = 3
    EXTENDED = 4
    EXPR = 5


class GroupByFunction(IntEnum):
    """``SPH_GROUPBY_*`` constants."""
    DAY = 0
    WEEK = 1
    MONTH = 2
    YEAR = 3
    ATTR = 4
    ATTRPAIR = 5


def resolve_enum(enum_cls: type[E], value: Any, field: str) -> E:
    """Look *value* up in *enum_cls* by member or case-insensitive name.

    Raises :class:`UnknownEnumValueError` naming *value* and *field* when
    there is no such entry.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        member = enum_cls.__members__.get(value.upper())
        if member is not None:
            return member
    raise UnknownEnumValueError(value, field)


__all__ = ["GroupByFunction", "MatchMode", "SortMode", "resolve_enum"]
