"""Application search – option translation, daemon gateway, result assembly."""
from sphinx_bridge.application.search.assembler import HydrateFn, ResultAssembler
from sphinx_bridge.application.search.client import SearchClient, SearchClientFactory
from sphinx_bridge.application.search.gateway import SearchGateway
from sphinx_bridge.application.search.modes import GroupByFunction, MatchMode, SortMode, resolve_enum
from sphinx_bridge.application.search.options import VALID_OPTIONS, OptionTranslator
from sphinx_bridge.application.search.registry import SearchConfig, SearchRegistry, tableize
from sphinx_bridge.application.search.request import GroupBy, SearchRequest
from sphinx_bridge.application.search.response import MatchInfo, SearchResponse
from sphinx_bridge.application.search.result import AnnotatedResultSet
from sphinx_bridge.application.search.service import SearchService

__all__ = [
    "AnnotatedResultSet",
    "GroupBy",
    "GroupByFunction",
    "HydrateFn",
    "MatchInfo",
    "MatchMode",
    "OptionTranslator",
    "ResultAssembler",
    "SearchClient",
    "SearchClientFactory",
    "SearchConfig",
    "SearchGateway",
    "SearchRegistry",
    "SearchRequest",
    "SearchResponse",
    "SearchService",
    "SortMode",
    "VALID_OPTIONS",
    "resolve_enum",
    "tableize",
]
