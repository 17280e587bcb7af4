"""Domain errors – rejected search expressions."""

from __future__ import annotations

from typing import Any

from qsearch.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A search request violates a rule of the model it targets."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A search expression references something the model does not allow.

    ``property`` and ``model`` name the offending property and model when
    known; both are mirrored into ``detail``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        property: str | None = None,  # noqa: A002
        model: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if property is not None:
            detail.setdefault("property", property)
        if model is not None:
            detail.setdefault("model", model)
        super().__init__(message, detail=detail, **kwargs)
        self.property = property
        self.model = model


class UnknownPropertyError(ValidationError):
    """The property is not declared on the model."""

    default_code = "unknown_property"

    def __init__(self, property: str, model: str | None = None, **kwargs: Any) -> None:  # noqa: A002
        super().__init__(
            f"{property} is not a property of {model or 'this model'}.",
            property=property,
            model=model,
            **kwargs,
        )


class PropertyNotSearchableError(ValidationError):
    """The property exists but is not flagged searchable."""

    default_code = "property_not_searchable"

    def __init__(self, property: str, model: str | None = None, **kwargs: Any) -> None:  # noqa: A002
        super().__init__(f"{property} is not searchable.", property=property, model=model, **kwargs)


class NoSearchablePropertiesError(ValidationError):
    """A bare criterion was used on a model without searchable properties."""

    default_code = "no_searchable_properties"

    def __init__(self, model: str | None = None, **kwargs: Any) -> None:
        super().__init__("This model has no searchable properties.", model=model, **kwargs)


__all__ = [
    "DomainError",
    "NoSearchablePropertiesError",
    "PropertyNotSearchableError",
    "UnknownPropertyError",
    "ValidationError",
]
