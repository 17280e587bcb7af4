"""Application-layer errors – wiring, construction and settings failures."""

from __future__ import annotations

from typing import Any

from qsearch.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ConstructionError(ApplicationError):
    """A search translator could not be built."""

    default_code = "construction_error"


class UnknownModelError(ConstructionError):
    """The schema registry has no model with the requested name."""

    default_code = "unknown_model"

    def __init__(self, model: str, **kwargs: Any) -> None:
        super().__init__(f"No such model: {model!r}", detail={"model": model}, **kwargs)
        self.model = model


class ConfigError(ApplicationError):
    """Search settings could not be loaded."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``QSEARCH_*`` variable holds a value the search stack cannot use.

    ``variable`` is the environment variable name, so the message points at
    what an operator has to change.
    """

    default_code = "invalid_setting_value"

    def __init__(self, variable: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"{variable}={value!r} rejected: {reason}",
            detail={"variable": variable, "value": value},
            **kwargs,
        )
        self.variable = variable
        self.value = value
        self.reason = reason


__all__ = [
    "ApplicationError",
    "ConfigError",
    "ConstructionError",
    "InvalidSettingValueError",
    "UnknownModelError",
]
