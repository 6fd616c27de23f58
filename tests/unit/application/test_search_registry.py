"""Unit tests for SearchRegistry, SearchConfig and tableize."""

from __future__ import annotations

import dataclasses

import pytest

from sphinx_bridge.application.search import SearchConfig, SearchRegistry, tableize
from sphinx_bridge.config import SearchSettings
from sphinx_bridge.kernel.errors import InvalidOptionError, ModelNotRegisteredError


class Article:
    pass


class BlogPost:
    pass


class Stored:
    __tablename__ = "stored_things"


class TestTableize:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Article", "articles"),
            ("BlogPost", "blog_posts"),
            ("Category", "categories"),
            ("Day", "days"),
            ("Box", "boxes"),
            ("Match", "matches"),
            ("HTTPLog", "http_logs"),
        ],
    )
    def test_names(self, name: str, expected: str) -> None:
        assert tableize(name) == expected


class TestSearchConfig:
    def test_frozen(self) -> None:
        config = SearchConfig(host="h", port=1, index="i")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 2  # type: ignore[misc]

    def test_defaults_are_read_only_copy(self) -> None:
        source = {"mode": "any"}
        config = SearchConfig(host="h", port=1, index="i", defaults=source)
        source["mode"] = "all"
        assert config.defaults["mode"] == "any"
        with pytest.raises(TypeError):
            config.defaults["mode"] = "boolean"  # type: ignore[index]

    def test_as_options(self) -> None:
        config = SearchConfig(host="h", port=1, index="i", defaults={"limit": 5})
        assert config.as_options() == {"limit": 5, "host": "h", "port": 1, "index": "i"}


class TestSearchRegistry:
    def test_register_defaults(self) -> None:
        registry = SearchRegistry()
        config = registry.register(BlogPost)
        assert config == SearchConfig(host="localhost", port=3312, index="blog_posts")

    def test_index_from_tablename(self) -> None:
        assert SearchRegistry().register(Stored).index == "stored_things"

    def test_settings_supply_server(self) -> None:
        registry = SearchRegistry(SearchSettings(host="search.internal", port=9312))
        config = registry.register(Article)
        assert (config.host, config.port) == ("search.internal", 9312)

    def test_explicit_options(self) -> None:
        config = SearchRegistry().register(Article, host="db2", port=9400, index="idx_articles")
        assert (config.host, config.port, config.index) == ("db2", 9400, "idx_articles")

    def test_search_options_become_defaults(self) -> None:
        config = SearchRegistry().register(Article, mode="extended", limit=50)
        assert dict(config.defaults) == {"mode": "extended", "limit": 50}

    def test_unknown_key_rejected(self) -> None:
        registry = SearchRegistry()
        with pytest.raises(InvalidOptionError) as exc_info:
            registry.register(Article, hots="typo")
        assert exc_info.value.keys == ("hots",)
        assert Article not in registry

    def test_port_string_coerced(self) -> None:
        assert SearchRegistry().register(Article, port="9312").port == 9312

    def test_non_numeric_port_rejected(self) -> None:
        registry = SearchRegistry()
        with pytest.raises(InvalidOptionError) as exc_info:
            registry.register(Article, port="abc")
        assert exc_info.value.keys == ("port",)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert Article not in registry

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_out_of_range_port_not_replaced(self, port: int) -> None:
        registry = SearchRegistry(SearchSettings(port=9312))
        with pytest.raises(InvalidOptionError) as exc_info:
            registry.register(Article, port=port)
        assert exc_info.value.keys == ("port",)
        assert Article not in registry

    def test_empty_host_rejected(self) -> None:
        with pytest.raises(InvalidOptionError) as exc_info:
            SearchRegistry().register(Article, host="")
        assert exc_info.value.keys == ("host",)

    def test_empty_index_rejected(self) -> None:
        with pytest.raises(InvalidOptionError) as exc_info:
            SearchRegistry().register(Article, index="")
        assert exc_info.value.keys == ("index",)

    def test_config_for_unregistered(self) -> None:
        with pytest.raises(ModelNotRegisteredError):
            SearchRegistry().config_for(Article)

    def test_reregister_replaces(self) -> None:
        registry = SearchRegistry()
        first = registry.register(Article, index="a1")
        second = registry.register(Article, index="a2")
        assert registry.config_for(Article) is second
        assert first.index == "a1"
        assert len(registry) == 1

    def test_registries_are_independent(self) -> None:
        one, two = SearchRegistry(), SearchRegistry()
        one.register(Article)
        assert one.is_registered(Article)
        assert not two.is_registered(Article)

    def test_subclass_not_implicitly_registered(self) -> None:
        class Special(Article):
            pass

        registry = SearchRegistry()
        registry.register(Article)
        assert Special not in registry
