"""Application search – SearchService: translate, query, hydrate."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from sphinx_bridge.application.search.assembler import HydrateFn, ResultAssembler
from sphinx_bridge.application.search.client import SearchClientFactory
from sphinx_bridge.application.search.gateway import SearchGateway
from sphinx_bridge.application.search.options import OptionTranslator
from sphinx_bridge.application.search.registry import SearchRegistry
from sphinx_bridge.application.search.request import SearchRequest
from sphinx_bridge.application.search.response import SearchResponse
from sphinx_bridge.application.search.result import AnnotatedResultSet

T = TypeVar("T")


class SearchService:
    """Entry point for searching a registered model.

    Example::

        registry = SearchRegistry()
        registry.register(Article, index="articles", mode="extended")
        service = SearchService(registry, sphinxapi.SphinxClient)
        hits = service.find(Article, "python", loader, {"page": 2, "limit": 10})
        hits.total_found, hits.offset  # metadata travels with the records
    """

    def __init__(
        self,
        registry: SearchRegistry,
        client_factory: SearchClientFactory,
        translator: OptionTranslator | None = None,
        assembler: ResultAssembler[Any] | None = None,
    ) -> None:
        self._registry = registry
        self._gateway = SearchGateway(client_factory)
        self._translator = translator or OptionTranslator(default_limit=registry.settings.default_limit)
        self._assembler = assembler or ResultAssembler()

    @property
    def registry(self) -> SearchRegistry:
        return self._registry

    def build_request(
        self, model: type, query: str, options: Mapping[str, Any] | None = None
    ) -> SearchRequest:
        config = self._registry.config_for(model)
        return self._translator.build(query, options, config.as_options())

    def ask(self, model: type, query: str, options: Mapping[str, Any] | None = None) -> SearchResponse:
        """Run the query and return the raw daemon response."""
        return self._gateway.execute(self.build_request(model, query, options))

    def find(
        self,
        model: type,
        query: str,
        hydrate_fn: HydrateFn[T],
        options: Mapping[str, Any] | None = None,
    ) -> AnnotatedResultSet[T]:
        """Run the query and return hydrated records in relevance order."""
        request = self.build_request(model, query, options)
        response = self._gateway.execute(request)
        return self._assembler.assemble(response, hydrate_fn, request.limit, request.offset)


__all__ = ["SearchService"]
