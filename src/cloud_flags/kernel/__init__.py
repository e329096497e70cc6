"""Kernel – framework-agnostic building blocks."""

from cloud_flags.kernel.errors import (
    ApplicationError,
    BaseError,
    InvalidArgumentError,
    InvalidOperationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InvalidArgumentError",
    "InvalidOperationError",
]
