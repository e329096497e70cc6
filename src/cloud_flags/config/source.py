"""Config – ConfigurationSource port.

Any object exposing ``get(key)`` qualifies: a plain ``dict``, ``os.environ``,
or an application's own configuration object.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigurationSource(Protocol):
    """Port: read a single configuration value by name."""

    def get(self, key: str, /) -> str | None: ...


def get_value(source: ConfigurationSource, key: str) -> str | None:
    """Return the value stored under *key*, or ``None`` when absent or blank."""
    value = source.get(key)
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


__all__ = ["ConfigurationSource", "get_value"]
