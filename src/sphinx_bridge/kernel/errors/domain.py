"""Domain errors — rejected search options and unknown models."""

from __future__ import annotations

from typing import Any, Iterable

from sphinx_bridge.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when caller input breaks a search rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidOptionError(ValidationError):
    """One or more option keys are outside the recognised set."""

    default_code = "invalid_option"

    def __init__(self, keys: Iterable[Any], message: str | None = None, **kwargs: Any) -> None:
        self.keys: tuple[str, ...] = tuple(sorted(str(k) for k in keys))
        super().__init__(
            message or f"Unknown option(s): {', '.join(self.keys)}",
            errors=[{"field": key, "error": "unknown option"} for key in self.keys],
            **kwargs,
        )


class UnknownEnumValueError(ValidationError):
    """A symbolic name has no entry in its enumeration table."""

    default_code = "unknown_enum_value"

    def __init__(self, value: Any, field: str, **kwargs: Any) -> None:
        self.value = value
        self.field = field
        super().__init__(
            f"Unknown {field} '{value}'",
            errors=[{"field": field, "error": f"unknown value {value!r}"}],
            **kwargs,
        )


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ModelNotRegisteredError(NotFoundError):
    """A model class was searched before being registered with an index."""

    default_code = "model_not_registered"

    def __init__(self, model: Any, **kwargs: Any) -> None:
        name = getattr(model, "__name__", repr(model))
        super().__init__("Search configuration", name, **kwargs)
        self.model = model


__all__ = [
    "DomainError",
    "InvalidOptionError",
    "ModelNotRegisteredError",
    "NotFoundError",
    "UnknownEnumValueError",
    "ValidationError",
]
