"""Application search – SearchClient capability protocol.

Method names follow the Sphinx client API so any ``sphinxapi``-style client
object can be passed in unchanged.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class SearchClient(Protocol):
    def SetServer(self, host: str, port: int) -> Any: ...  # noqa: N802
    def SetLimits(self, offset: int, limit: int) -> Any: ...  # noqa: N802
    def SetWeights(self, weights: Sequence[int]) -> Any: ...  # noqa: N802
    def SetIDRange(self, minid: int, maxid: int) -> Any: ...  # noqa: N802
    def SetFilter(self, attribute: str, values: Sequence[Any]) -> Any: ...  # noqa: N802
    def SetFilterRange(self, attribute: str, min_: Any, max_: Any) -> Any: ...  # noqa: N802
    def SetGroupBy(self, attribute: str, func: int) -> Any: ...  # noqa: N802
    def SetMatchMode(self, mode: int) -> Any: ...  # noqa: N802
    def SetSortMode(self, mode: int, clause: str = "") -> Any: ...  # noqa: N802
    def Query(self, query: str, index: str = "*") -> Mapping[str, Any] | None: ...  # noqa: N802
    def GetLastError(self) -> str: ...  # noqa: N802


SearchClientFactory = Callable[[], SearchClient]

__all__ = ["SearchClient", "SearchClientFactory"]
