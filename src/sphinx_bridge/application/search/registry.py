"""Application search – per-model SearchConfig and the SearchRegistry."""
from __future__ import annotations

import dataclasses
import re
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from sphinx_bridge.application.search.options import _as_int, check_option_keys
from sphinx_bridge.config.settings import SearchSettings
from sphinx_bridge.kernel.errors import InvalidOptionError, ModelNotRegisteredError
from sphinx_bridge.observability.logging import get_logger

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def tableize(name: str) -> str:
    """``"BlogPost"`` → ``"blog_posts"``, ``"Category"`` → ``"categories"``."""
    snake = _CAMEL_BOUNDARY.sub("_", name).lower()
    if re.search(r"[^aeiou]y$", snake):
        return snake[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", snake):
        return snake + "es"
    return snake + "s"


@dataclasses.dataclass(frozen=True)
class SearchConfig:
    """Where and how a model class is searched.

    ``defaults`` holds search options applied to every query for the model
    unless the call overrides them.
    """

    host: str
    port: int
    index: str
    defaults: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    def as_options(self) -> dict[str, Any]:
        """Defaults for :meth:`OptionTranslator.build`, server keys included."""
        return {**self.defaults, "host": self.host, "port": self.port, "index": self.index}


class SearchRegistry:
    """Map model classes to their :class:`SearchConfig`.

    Configs are immutable; registering a model again replaces its config.
    """

    def __init__(self, settings: SearchSettings | None = None) -> None:
        self._settings = settings or SearchSettings()
        self._configs: dict[type, SearchConfig] = {}
        self._lock = threading.Lock()

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    def register(self, model: type, **options: Any) -> SearchConfig:
        """Associate *model* with a Sphinx index.

        ``host`` and ``port`` default to the registry settings; ``index``
        defaults to the model's ``__tablename__`` or its tableized class
        name. Any other recognised search option becomes a per-model default.
        An explicit port must lie in 1..65535; it is never replaced by the
        settings port.
        """
        check_option_keys(options)
        host = options.pop("host", None)
        if host is None:
            host = self._settings.host
        port = options.pop("port", None)
        if port is None:
            port = self._settings.port
        else:
            port = _as_int("port", port)
            if not 0 < port < 65536:
                raise InvalidOptionError(["port"], f"Option 'port' must be between 1 and 65535, got {port!r}")
        index = options.pop("index", None)
        if index is None:
            index = getattr(model, "__tablename__", None) or tableize(model.__name__)
        if not host or not index:
            raise InvalidOptionError(
                [key for key, value in (("host", host), ("index", index)) if not value],
                "Options 'host' and 'index' must not be empty",
            )
        config = SearchConfig(host=host, port=port, index=index, defaults=options)
        with self._lock:
            self._configs[model] = config
        logger.info("sphinx.model_registered", model=model.__name__, host=host, port=port, index=index)
        return config

    def config_for(self, model: type) -> SearchConfig:
        try:
            return self._configs[model]
        except KeyError:
            raise ModelNotRegisteredError(model) from None

    def is_registered(self, model: type) -> bool:
        return model in self._configs

    def __contains__(self, model: object) -> bool:
        return model in self._configs

    def __len__(self) -> int:
        return len(self._configs)


__all__ = ["SearchConfig", "SearchRegistry", "tableize"]
