"""Config settings – Settings base class and SearchSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from sphinx_bridge.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    ``_prefix`` is a class attribute, never a field: subclasses may declare
    required fields after it.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_var(cls, name: str) -> str:
        """Environment variable backing field *name*, e.g. ``SPHINX_PORT``."""
        return f"{cls._prefix}_{name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _invalid(self, name: str, reason: str) -> InvalidSettingValueError:
        return InvalidSettingValueError(name, getattr(self, name), reason, env_var=self.env_var(name))


@dataclasses.dataclass
class SearchSettings(Settings):
    """Process-wide fallbacks for every registered model.

    Read from ``SPHINX_HOST``, ``SPHINX_PORT`` and ``SPHINX_DEFAULT_LIMIT``
    by :class:`~sphinx_bridge.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "SPHINX"

    host: str = "localhost"
    port: int = 3312
    default_limit: int = 20

    def _validate(self) -> None:
        if not self.host:
            raise self._invalid("host", "searchd host must not be empty")
        if not 0 < self.port < 65536:
            raise self._invalid("port", "searchd port must be between 1 and 65535")
        if self.default_limit < 1:
            raise self._invalid("default_limit", "page size must be >= 1")


__all__ = ["SearchSettings", "Settings"]
