"""Observability – structured logging."""

from cloud_flags.observability.logging import JsonLoggerFactory, Logger, SensitiveFieldsFilter, get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "get_logger",
]
