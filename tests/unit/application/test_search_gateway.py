"""Unit tests for SearchGateway and SearchResponse parsing."""

from __future__ import annotations

import pytest

from sphinx_bridge.application.search import (
    MatchInfo,
    OptionTranslator,
    SearchClient,
    SearchGateway,
    SearchResponse,
)
from sphinx_bridge.kernel.errors import SearchServiceError
from sphinx_bridge.testing import FakeSearchClient

RAW = {
    "matches": {5: {"pos": 2, "weight": 3}, 7: {"pos": 5, "attrs": {"category_id": 1}}},
    "total": 2,
    "total_found": 12,
    "time": 0.004,
}


def _request(options=None):
    defaults = {"host": "db1", "port": 9312, "index": "articles"}
    return OptionTranslator().build("python", options, defaults)


class TestSearchResponse:
    def test_from_raw(self) -> None:
        response = SearchResponse.from_raw(RAW)
        assert response.ids == [5, 7]
        assert response.matches[5] == MatchInfo(pos=2, weight=3)
        assert response.matches[7].attrs == {"category_id": 1}
        assert response.total == 2
        assert response.total_found == 12
        assert response.time == pytest.approx(0.004)

    def test_from_raw_empty(self) -> None:
        response = SearchResponse.from_raw({"matches": {}, "total": 0, "total_found": 0, "time": 0})
        assert response.matches == {}
        assert response.ids == []

    def test_from_raw_match_list(self) -> None:
        response = SearchResponse.from_raw({
            "matches": [
                {"id": 7, "weight": 4, "attrs": {"category_id": 1}},
                {"id": 5, "weight": 2, "attrs": {}},
                {"id": 9, "weight": 2, "attrs": {}},
            ],
            "total": "3",
            "total_found": "40",
            "time": "0.012",
            "words": [{"word": "python", "docs": 40, "hits": 77}],
        })
        assert response.ids == [7, 5, 9]
        assert [response.matches[i].pos for i in response.ids] == [3, 2, 1]
        assert response.matches[7] == MatchInfo(pos=3, weight=4, attrs={"category_id": 1})
        assert (response.total, response.total_found) == (3, 40)
        assert response.time == pytest.approx(0.012)
        assert response.words == {"python": {"docs": 40, "hits": 77}}

    def test_from_raw_empty_match_list(self) -> None:
        assert SearchResponse.from_raw({"matches": [], "total": 0}).matches == {}

    def test_from_raw_match_list_without_id(self) -> None:
        with pytest.raises(KeyError):
            SearchResponse.from_raw({"matches": [{"weight": 1}]})

    def test_from_raw_missing_counters(self) -> None:
        response = SearchResponse.from_raw({})
        assert (response.total, response.total_found, response.time) == (0, 0, 0.0)


class TestFakeSearchClient:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(FakeSearchClient(), SearchClient)


class TestSearchGatewayConfigure:
    def test_minimal_request(self) -> None:
        client = FakeSearchClient(RAW)
        SearchGateway(lambda: client).execute(_request())
        assert client.calls == [
            ("SetServer", ("db1", 9312)),
            ("SetLimits", (0, 20)),
            ("Query", ("python", "articles")),
        ]

    def test_full_request_order(self) -> None:
        client = FakeSearchClient(RAW)
        request = _request({
            "page": 3,
            "limit": 10,
            "weights": [10, 1],
            "range": (1, 1000),
            "filter": {"category_id": 4},
            "filter_range": {"price": (5, 50)},
            "group_by": ["published_at", "week"],
            "mode": "extended",
            "sort_mode": ["attr_desc", "published_at"],
        })
        SearchGateway(lambda: client).execute(request)
        assert client.calls == [
            ("SetServer", ("db1", 9312)),
            ("SetLimits", (20, 10)),
            ("SetWeights", ([10, 1],)),
            ("SetIDRange", (1, 1000)),
            ("SetFilter", ("category_id", [4])),
            ("SetFilterRange", ("price", 5, 50)),
            ("SetGroupBy", ("published_at", 1)),
            ("SetMatchMode", (4,)),
            ("SetSortMode", (1, "published_at")),
            ("Query", ("python", "articles")),
        ]

    def test_constants_sent_as_plain_ints(self) -> None:
        client = FakeSearchClient(RAW)
        SearchGateway(lambda: client).execute(_request({"mode": "any"}))
        assert client.args_of("SetMatchMode") == [(1,)]
        assert type(client.args_of("SetMatchMode")[0][0]) is int

    def test_fresh_client_per_call(self) -> None:
        created: list[FakeSearchClient] = []

        def factory() -> FakeSearchClient:
            created.append(FakeSearchClient(RAW))
            return created[-1]

        gateway = SearchGateway(factory)
        gateway.execute(_request())
        gateway.execute(_request())
        assert len(created) == 2


class TestSearchGatewayErrors:
    def test_returns_parsed_response(self) -> None:
        response = SearchGateway(lambda: FakeSearchClient(RAW)).execute(_request())
        assert isinstance(response, SearchResponse)
        assert response.total_found == 12

    def test_match_list_response(self) -> None:
        raw = {"matches": [{"id": 5, "weight": 2, "attrs": {}}], "total": 1, "total_found": 1, "time": "0.001"}
        response = SearchGateway(lambda: FakeSearchClient(raw)).execute(_request())
        assert response.ids == [5]

    def test_client_exception_wrapped(self) -> None:
        cause = OSError("connection refused")
        client = FakeSearchClient(error=cause)
        with pytest.raises(SearchServiceError) as exc_info:
            SearchGateway(lambda: client).execute(_request())
        err = exc_info.value
        assert err.__cause__ is cause
        assert err.host == "db1"
        assert err.port == 9312
        assert err.index == "articles"
        assert "connection refused" in err.message

    def test_none_result_uses_last_error(self) -> None:
        client = FakeSearchClient(None, last_error="index 'articles': no such index")
        with pytest.raises(SearchServiceError) as exc_info:
            SearchGateway(lambda: client).execute(_request())
        assert "no such index" in exc_info.value.message

    def test_factory_failure_wrapped(self) -> None:
        def factory() -> FakeSearchClient:
            raise RuntimeError("no client")

        with pytest.raises(SearchServiceError):
            SearchGateway(factory).execute(_request())

    def test_malformed_response(self) -> None:
        client = FakeSearchClient({"matches": {1: {"weight": 1}}})
        with pytest.raises(SearchServiceError) as exc_info:
            SearchGateway(lambda: client).execute(_request())
        assert isinstance(exc_info.value.__cause__, KeyError)
