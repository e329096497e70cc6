"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError          (application.py)
        ├── InvalidArgumentError  (also ValueError)
        ├── InvalidOperationError (also RuntimeError)
        └── ConfigError           (cloud_flags.config.validation)
"""

from cloud_flags.kernel.errors.application import (
    ApplicationError,
    InvalidArgumentError,
    InvalidOperationError,
)
from cloud_flags.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InvalidArgumentError",
    "InvalidOperationError",
]
