"""Application-layer errors — caller mistakes and misuse of a service."""

from __future__ import annotations

from typing import Any

from cloud_flags.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidArgumentError(ApplicationError, ValueError):
    """An argument is missing, empty or otherwise unusable.

    ``argument`` names the offending parameter when known.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.argument = argument

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.argument is not None:
            base["argument"] = self.argument
        return base


class InvalidOperationError(ApplicationError, RuntimeError):
    """The operation is not valid in the object's current state."""

    default_code = "invalid_operation"


__all__ = [
    "ApplicationError",
    "InvalidArgumentError",
    "InvalidOperationError",
]
