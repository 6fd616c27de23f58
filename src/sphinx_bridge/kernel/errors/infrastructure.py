"""Infrastructure errors — search daemon and persistence failures."""

from __future__ import annotations

from typing import Any

from sphinx_bridge.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service


class SearchServiceError(ExternalServiceError):
    """The Sphinx client reported a network, protocol or daemon-side failure."""

    default_code = "search_service_error"

    def __init__(
        self,
        message: str | None = None,
        *,
        host: str | None = None,
        port: int | None = None,
        index: str | None = None,
        **kwargs: Any,
    ) -> None:
        service = f"searchd://{host}:{port}" if host is not None else "searchd"
        super().__init__(service, message or "Search daemon query failed", **kwargs)
        self.host = host
        self.port = port
        self.index = index
        self.detail.setdefault("index", index)


class HydrationError(InfrastructureError):
    """Matched identifiers could not be resolved to records."""

    default_code = "hydration_error"

    def __init__(
        self,
        message: str,
        *,
        identifiers: list[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.identifiers: list[Any] = identifiers or []


__all__ = [
    "ExternalServiceError",
    "HydrationError",
    "InfrastructureError",
    "SearchServiceError",
]
