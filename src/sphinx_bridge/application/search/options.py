"""Application search – OptionTranslator.

Turns a loose mapping of search options into a :class:`SearchRequest`.

Merge order (right wins)::

    {"offset": 0, "limit": <default_limit>}  <-  defaults  <-  options

When both ``page`` and ``limit`` are present the offset is recomputed as
``limit * (page - 1)`` and clamped to ``0``. This is the only place the
offset is derived; callers read it back from the returned request.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sphinx_bridge.application.search.modes import (
    GroupByFunction,
    MatchMode,
    SortMode,
    resolve_enum,
)
from sphinx_bridge.application.search.request import GroupBy, SearchRequest
from sphinx_bridge.kernel.errors import InvalidOptionError
from sphinx_bridge.observability.logging import get_logger

logger = get_logger(__name__)

VALID_OPTIONS: frozenset[str] = frozenset({
    "mode",
    "offset",
    "page",
    "limit",
    "index",
    "weights",
    "host",
    "port",
    "range",
    "filter",
    "filter_range",
    "group_by",
    "sort_mode",
})

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3312
ALL_INDEXES = "*"


def check_option_keys(options: Mapping[str, Any]) -> None:
    """Raise :class:`InvalidOptionError` if *options* has unrecognised keys."""
    unknown = [key for key in options if key not in VALID_OPTIONS]
    if unknown:
        raise InvalidOptionError(unknown)


def _as_int(name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidOptionError([name], f"Option '{name}' must be an integer, got {value!r}") from exc


def _pair(name: str, value: Any) -> tuple[Any, Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise InvalidOptionError([name], f"Option '{name}' expects a (min, max) pair, got {value!r}")
    items = tuple(value)
    if len(items) != 2:
        raise InvalidOptionError([name], f"Option '{name}' expects a (min, max) pair, got {value!r}")
    return items[0], items[1]


def _values(value: Any) -> tuple[Any, ...]:
    # a scalar filter value means "this one value"
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return (value,)
    return tuple(value)


def _group_by_pairs(value: Any) -> list[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return list(value.items())
    items = list(value)
    if len(items) == 2 and isinstance(items[0], str) and not isinstance(items[1], (list, tuple)):
        return [(items[0], items[1])]
    return [_pair("group_by", item) for item in items]


class OptionTranslator:
    """Validate, merge and resolve search options into a :class:`SearchRequest`.

    Stateless apart from *default_limit*; safe to share between threads.
    """

    def __init__(self, default_limit: int = 20) -> None:
        self._base: dict[str, Any] = {"offset": 0, "limit": default_limit}

    def merge(
        self,
        options: Mapping[str, Any] | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a new dict of the merged options (inputs untouched)."""
        options = options or {}
        defaults = defaults or {}
        check_option_keys(options)
        check_option_keys(defaults)
        return {**self._base, **defaults, **options}

    def build(
        self,
        query: str,
        options: Mapping[str, Any] | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> SearchRequest:
        merged = self.merge(options, defaults)

        limit = _as_int("limit", merged["limit"])
        offset = _as_int("offset", merged["offset"])
        if merged.get("page") is not None:
            offset = max(limit * (_as_int("page", merged["page"]) - 1), 0)
        if limit < 1:
            raise InvalidOptionError(["limit"], f"Option 'limit' must be >= 1, got {limit}")
        if offset < 0:
            raise InvalidOptionError(["offset"], f"Option 'offset' must be >= 0, got {offset}")

        weights = merged.get("weights")
        id_range = merged.get("range")
        filters = merged.get("filter") or {}
        filter_ranges = merged.get("filter_range") or {}
        group_by = merged.get("group_by")
        mode = merged.get("mode")
        sort_mode = merged.get("sort_mode")

        sort_member: SortMode | None = None
        sort_expr = ""
        if sort_mode is not None:
            if isinstance(sort_mode, (str, SortMode)):
                sort_name = sort_mode
            else:
                sort_name, *rest = _values(sort_mode) or (None,)
                sort_expr = rest[0] if rest and rest[0] is not None else ""
            sort_member = resolve_enum(SortMode, sort_name, "sort_mode")

        request = SearchRequest(
            query=query,
            index=merged.get("index") or ALL_INDEXES,
            host=merged.get("host") or DEFAULT_HOST,
            port=_as_int("port", merged.get("port") or DEFAULT_PORT),
            offset=offset,
            limit=limit,
            weights=tuple(weights) if weights else None,
            id_range=_pair("range", id_range) if id_range else None,
            filters={str(attr): _values(values) for attr, values in dict(filters).items()},
            filter_ranges={
                str(attr): _pair("filter_range", bounds) for attr, bounds in dict(filter_ranges).items()
            },
            group_by=tuple(
                GroupBy(str(attr), resolve_enum(GroupByFunction, func, "group_by"))
                for attr, func in (_group_by_pairs(group_by) if group_by else [])
            ),
            match_mode=resolve_enum(MatchMode, mode, "mode") if mode is not None else None,
            sort_mode=sort_member,
            sort_expr=sort_expr,
        )
        logger.debug(
            "sphinx.request_built",
            index=request.index,
            offset=request.offset,
            limit=request.limit,
            page=merged.get("page"),
        )
        return request


__all__ = ["ALL_INDEXES", "DEFAULT_HOST", "DEFAULT_PORT", "OptionTranslator", "VALID_OPTIONS", "check_option_keys"]
