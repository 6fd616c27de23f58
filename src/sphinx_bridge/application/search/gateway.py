"""Application search – SearchGateway: drive a SearchClient with a SearchRequest."""
from __future__ import annotations

from sphinx_bridge.application.search.client import SearchClient, SearchClientFactory
from sphinx_bridge.application.search.request import SearchRequest
from sphinx_bridge.application.search.response import SearchResponse
from sphinx_bridge.kernel.errors import SearchServiceError
from sphinx_bridge.observability.logging import get_logger

logger = get_logger(__name__)


class SearchGateway:
    """Issue one blocking query per call against a fresh client.

    Client failures surface as :class:`SearchServiceError`; nothing is retried.
    """

    def __init__(self, client_factory: SearchClientFactory) -> None:
        self._client_factory = client_factory

    def configure(self, client: SearchClient, request: SearchRequest) -> None:
        """Apply every populated field of *request* to *client*."""
        client.SetServer(request.host, request.port)
        client.SetLimits(request.offset, request.limit)
        if request.weights:
            client.SetWeights(list(request.weights))
        if request.id_range:
            client.SetIDRange(*request.id_range)
        for attribute, values in request.filters.items():
            client.SetFilter(attribute, list(values))
        for attribute, (min_, max_) in request.filter_ranges.items():
            client.SetFilterRange(attribute, min_, max_)
        for group in request.group_by:
            client.SetGroupBy(group.attribute, int(group.function))
        if request.match_mode is not None:
            client.SetMatchMode(int(request.match_mode))
        if request.sort_mode is not None:
            client.SetSortMode(int(request.sort_mode), request.sort_expr)

    def execute(self, request: SearchRequest) -> SearchResponse:
        log = logger.bind(host=request.host, port=request.port, index=request.index)
        try:
            client = self._client_factory()
            self.configure(client, request)
            raw = client.Query(request.query, request.index)
        except Exception as exc:
            log.warning("sphinx.query_failed", error=repr(exc))
            raise SearchServiceError(
                f"Search daemon query failed: {exc}",
                host=request.host,
                port=request.port,
                index=request.index,
                cause=exc,
            ) from exc

        if raw is None:
            reason = client.GetLastError() or "no result returned"
            log.warning("sphinx.query_failed", error=reason)
            raise SearchServiceError(
                f"Search daemon query failed: {reason}",
                host=request.host,
                port=request.port,
                index=request.index,
            )

        try:
            response = SearchResponse.from_raw(raw)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise SearchServiceError(
                f"Malformed search daemon response: {exc!r}",
                host=request.host,
                port=request.port,
                index=request.index,
                cause=exc,
            ) from exc
        log.debug(
            "sphinx.query",
            matches=len(response.matches),
            total_found=response.total_found,
            time=response.time,
        )
        if response.warning:
            log.warning("sphinx.query_warning", warning=response.warning)
        return response


__all__ = ["SearchGateway"]
