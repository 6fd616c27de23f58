"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   │   ├── InvalidOptionError
    │   │   └── UnknownEnumValueError
    │   └── NotFoundError
    │       └── ModelNotRegisteredError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (sphinx_bridge.config.validation)
    └── InfrastructureError      (infrastructure.py)
        ├── ExternalServiceError
        │   └── SearchServiceError
        └── HydrationError
"""

from sphinx_bridge.kernel.errors.application import ApplicationError
from sphinx_bridge.kernel.errors.base import BaseError
from sphinx_bridge.kernel.errors.domain import (
    DomainError,
    InvalidOptionError,
    ModelNotRegisteredError,
    NotFoundError,
    UnknownEnumValueError,
    ValidationError,
)
from sphinx_bridge.kernel.errors.infrastructure import (
    ExternalServiceError,
    HydrationError,
    InfrastructureError,
    SearchServiceError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "HydrationError",
    "InfrastructureError",
    "InvalidOptionError",
    "ModelNotRegisteredError",
    "NotFoundError",
    "SearchServiceError",
    "UnknownEnumValueError",
    "ValidationError",
]
