"""Application search – ResultAssembler: hydrate matches and annotate them."""
from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, Generic, Iterable, TypeVar

from sphinx_bridge.application.search.response import SearchResponse
from sphinx_bridge.application.search.result import AnnotatedResultSet
from sphinx_bridge.kernel.errors import BaseError, HydrationError
from sphinx_bridge.observability.logging import get_logger

T = TypeVar("T")

HydrateFn = Callable[[list[Any]], Iterable[T]]

logger = get_logger(__name__)


class ResultAssembler(Generic[T]):
    """Turn a :class:`SearchResponse` into an :class:`AnnotatedResultSet`.

    *id_getter* reads the identifier off a hydrated record; it defaults to
    the record's ``id`` attribute.
    """

    def __init__(self, id_getter: Callable[[T], Any] | None = None) -> None:
        self._id_getter: Callable[[T], Any] = id_getter or attrgetter("id")

    def assemble(
        self,
        response: SearchResponse,
        hydrate_fn: HydrateFn[T],
        effective_limit: int,
        effective_offset: int,
    ) -> AnnotatedResultSet[T]:
        records: list[T] = []
        if response.matches:
            records = self._hydrate(response, hydrate_fn)
            order = {doc_id: (-info.pos, rank) for rank, (doc_id, info) in enumerate(response.matches.items())}
            records.sort(key=lambda record: order[self._id_getter(record)])

        return AnnotatedResultSet(
            records=tuple(records),
            total=response.total,
            total_found=response.total_found,
            time=response.time,
            limit=effective_limit,
            offset=effective_offset,
        )

    def _hydrate(self, response: SearchResponse, hydrate_fn: HydrateFn[T]) -> list[T]:
        ids = response.ids
        try:
            records = list(hydrate_fn(ids))
        except BaseError:
            raise
        except Exception as exc:
            raise HydrationError(
                f"Failed to load {len(ids)} matched record(s): {exc}",
                identifiers=ids,
                cause=exc,
            ) from exc

        if len(records) > len(ids):
            raise HydrationError(
                f"Loaded {len(records)} record(s) for {len(ids)} matched id(s)",
                identifiers=ids,
            )
        try:
            unexpected = [rid for rid in map(self._id_getter, records) if rid not in response.matches]
        except AttributeError as exc:
            raise HydrationError("Hydrated record has no identifier", identifiers=ids, cause=exc) from exc
        if unexpected:
            raise HydrationError(
                f"Loaded record(s) that were not matched: {unexpected!r}",
                identifiers=ids,
                detail={"unexpected": unexpected},
            )
        if len(records) < len(ids):
            logger.info("sphinx.records_missing", matched=len(ids), loaded=len(records))
        return records


__all__ = ["HydrateFn", "ResultAssembler"]
