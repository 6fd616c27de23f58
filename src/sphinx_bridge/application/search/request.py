"""Application search – SearchRequest value object."""
from __future__ import annotations

import dataclasses
from typing import Any

from sphinx_bridge.application.search.modes import GroupByFunction, MatchMode, SortMode


@dataclasses.dataclass(frozen=True)
class GroupBy:
    """Group matches by *attribute* using *function*."""
    attribute: str
    function: GroupByFunction


@dataclasses.dataclass(frozen=True)
class SearchRequest:
    """Fully-resolved parameters for one ``searchd`` query.

    ``page`` never appears here: it is folded into ``offset`` by
    :class:`~sphinx_bridge.application.search.options.OptionTranslator`.
    """

    query: str
    index: str
    host: str
    port: int
    offset: int = 0
    limit: int = 20
    weights: tuple[int, ...] | None = None
    id_range: tuple[int, int] | None = None
    filters: dict[str, tuple[Any, ...]] = dataclasses.field(default_factory=dict)
    filter_ranges: dict[str, tuple[Any, Any]] = dataclasses.field(default_factory=dict)
    group_by: tuple[GroupBy, ...] = ()
    match_mode: MatchMode | None = None
    sort_mode: SortMode | None = None
    sort_expr: str = ""

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset must be >= 0")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")


__all__ = ["GroupBy", "SearchRequest"]
