"""Application search – AnnotatedResultSet."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterator, Sequence
from typing import Any, Callable, TypeVar, overload

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class AnnotatedResultSet(Sequence[T]):
    """Hydrated records in relevance order plus search and paging metadata.

    ``total`` is the number of hits retrieved, ``total_found`` the number
    found while scanning the index and ``time`` the daemon's query time in
    seconds. ``limit`` and ``offset`` are the effective values sent to the
    daemon, after any ``page`` recomputation.
    """

    records: tuple[T, ...]
    total: int
    total_found: int
    time: float
    limit: int
    offset: int

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self.records[index]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[T]:
        return iter(self.records)

    @property
    def page(self) -> int:
        return self.offset // self.limit + 1 if self.limit > 0 else 1

    @property
    def total_pages(self) -> int:
        if self.limit <= 0 or self.total_found <= 0:
            return 0
        return math.ceil(self.total_found / self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "AnnotatedResultSet[Any]":
        """Return a new result set with each record transformed by *fn*."""
        return dataclasses.replace(self, records=tuple(fn(record) for record in self.records))

    @classmethod
    def empty(cls, *, total: int = 0, total_found: int = 0, time: float = 0.0,
              limit: int = 20, offset: int = 0) -> "AnnotatedResultSet[Any]":
        return cls(records=(), total=total, total_found=total_found, time=time, limit=limit, offset=offset)


__all__ = ["AnnotatedResultSet"]
