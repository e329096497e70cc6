"""LaunchDarkly adapter – LaunchDarklySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from cloud_flags.config.settings import Settings
from cloud_flags.config.validation import InvalidSettingValueError

SDK_KEY_CONFIG_NAME = "LaunchDarklySdkKey"


@dataclasses.dataclass
class LaunchDarklySettings(Settings):
    """Client options read from ``LAUNCHDARKLY_*`` environment variables.

    ``LAUNCHDARKLY_SDK_KEY`` is required when loading from the environment;
    an explicitly empty key is still rejected by the service.
    """

    _prefix: ClassVar[str] = "LAUNCHDARKLY"

    sdk_key: str
    offline: bool = False
    start_wait: float = 5.0

    def _validate(self) -> None:
        if self.start_wait < 0:
            raise InvalidSettingValueError("start_wait", self.start_wait, "must not be negative")

    def __repr__(self) -> str:
        masked = "***" if self.sdk_key else ""
        return (
            f"LaunchDarklySettings(sdk_key={masked!r}, offline={self.offline!r}, "
            f"start_wait={self.start_wait!r})"
        )


__all__ = ["SDK_KEY_CONFIG_NAME", "LaunchDarklySettings"]
