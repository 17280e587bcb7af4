"""Infrastructure errors – failures raised by the record store."""

from __future__ import annotations

from typing import Any

from qsearch.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a rule violation."""

    default_code = "infrastructure_error"


class StoreError(InfrastructureError):
    """The record store failed to execute a query.

    The store's own exception is kept as ``cause``; it is not interpreted
    or retried.
    """

    default_code = "store_error"

    def __init__(
        self,
        model: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Store query on '{model}' failed", **kwargs)
        self.model = model


__all__ = ["InfrastructureError", "StoreError"]
