"""Observability – structured logging ports and helpers."""
from cloud_flags.observability.logging.protocol import Logger
from cloud_flags.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from cloud_flags.observability.logging.factory import JsonLoggerFactory
from cloud_flags.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "get_logger",
]
