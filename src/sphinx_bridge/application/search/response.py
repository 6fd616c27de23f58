"""Application search – SearchResponse returned by ``searchd``."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any


@dataclasses.dataclass(frozen=True)
class MatchInfo:
    """Per-document match metadata."""
    pos: int
    weight: int | None = None
    attrs: Mapping[str, Any] = dataclasses.field(default_factory=dict)


@dataclasses.dataclass(frozen=True)
class SearchResponse:
    """Ordered matches plus the aggregate counters reported by the daemon."""

    matches: dict[Any, MatchInfo]
    total: int = 0
    total_found: int = 0
    time: float = 0.0
    words: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    warning: str = ""

    @property
    def ids(self) -> list[Any]:
        return list(self.matches)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "SearchResponse":
        """Build from the result a Sphinx client returns.

        Two ``matches`` shapes are understood:

        * a mapping of document id to ``{"pos": ..., "weight": ..., "attrs": {...}}``;
        * the ``sphinxapi`` list of ``{"id": ..., "weight": ..., "attrs": {...}}``
          in daemon order, best first. Entries get ``pos = len(matches) - i``
          so that descending ``pos`` reproduces that order.

        ``words`` may likewise be a mapping or a list of ``{"word": ...}``
        entries; counters sit at the top level and may arrive as strings.
        """
        raw_matches = raw.get("matches") or {}
        matches: dict[Any, MatchInfo] = {}
        if isinstance(raw_matches, Mapping):
            for doc_id, info in raw_matches.items():
                if isinstance(info, MatchInfo):
                    matches[doc_id] = info
                    continue
                matches[doc_id] = MatchInfo(
                    pos=info["pos"],
                    weight=info.get("weight"),
                    attrs=info.get("attrs") or {},
                )
        else:
            entries = list(raw_matches)
            for i, info in enumerate(entries):
                matches[info["id"]] = MatchInfo(
                    pos=len(entries) - i,
                    weight=info.get("weight"),
                    attrs=info.get("attrs") or {},
                )

        words = raw.get("words") or {}
        if not isinstance(words, Mapping):
            words = {entry["word"]: {k: v for k, v in entry.items() if k != "word"} for entry in words}

        return cls(
            matches=matches,
            total=int(raw.get("total") or 0),
            total_found=int(raw.get("total_found") or 0),
            time=float(raw.get("time") or 0.0),
            words=words,
            warning=raw.get("warning") or "",
        )


__all__ = ["MatchInfo", "SearchResponse"]
