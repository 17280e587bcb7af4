"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                      (domain.py)
    │   └── ValidationError
    │       ├── UnknownPropertyError
    │       ├── PropertyNotSearchableError
    │       └── NoSearchablePropertiesError
    ├── ApplicationError                 (application.py)
    │   ├── ConstructionError
    │   │   └── UnknownModelError
    │   └── ConfigError
    │       └── InvalidSettingValueError
    └── InfrastructureError              (infrastructure.py)
        └── StoreError
"""

from qsearch.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    ConstructionError,
    InvalidSettingValueError,
    UnknownModelError,
)
from qsearch.kernel.errors.base import BaseError
from qsearch.kernel.errors.domain import (
    DomainError,
    NoSearchablePropertiesError,
    PropertyNotSearchableError,
    UnknownPropertyError,
    ValidationError,
)
from qsearch.kernel.errors.infrastructure import InfrastructureError, StoreError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "ConstructionError",
    "DomainError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "NoSearchablePropertiesError",
    "PropertyNotSearchableError",
    "StoreError",
    "UnknownModelError",
    "UnknownPropertyError",
    "ValidationError",
]
