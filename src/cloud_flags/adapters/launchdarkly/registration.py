"""LaunchDarkly adapter – process-wide registration.

Composition root helper: build the :class:`FeatureFlagProvider` once at
startup and hand the same instance to every consumer::

    registration = add_launchdarkly_feature_flags(config=os.environ)
    flags = registration.resolve()
"""
from __future__ import annotations

import threading
from typing import Callable

from cloud_flags.adapters.launchdarkly.client import LdClientProtocol
from cloud_flags.adapters.launchdarkly.service import LaunchDarklyService
from cloud_flags.application.feature_flags import FeatureFlagProvider
from cloud_flags.config.source import ConfigurationSource
from cloud_flags.kernel.errors import InvalidArgumentError
from cloud_flags.observability.logging import Logger, get_logger


class FeatureFlagRegistration:
    """Singleton slot for a :class:`FeatureFlagProvider`.

    The factory runs at most once successfully; a factory that raises leaves
    the slot empty so the next :meth:`resolve` tries again.
    """

    def __init__(self, factory: Callable[[], FeatureFlagProvider]) -> None:
        self._factory = factory
        self._instance: FeatureFlagProvider | None = None
        self._lock = threading.Lock()

    @classmethod
    def of(cls, instance: FeatureFlagProvider) -> "FeatureFlagRegistration":
        """Registration wrapping an already built provider."""
        registration = cls(lambda: instance)
        registration._instance = instance
        return registration

    @property
    def is_resolved(self) -> bool:
        return self._instance is not None

    def resolve(self) -> FeatureFlagProvider:
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = self._factory()
        return self._instance


def add_launchdarkly_feature_flags(
    *,
    config: ConfigurationSource | None = None,
    sdk_key: str | None = None,
    client: LdClientProtocol | None = None,
    logger: Logger | None = None,
) -> FeatureFlagRegistration:
    """Register a :class:`LaunchDarklyService` as the process feature-flag provider.

    Exactly one of *config*, *sdk_key* or *client* selects how the service is
    built:

    * ``config`` – deferred; the ``LaunchDarklySdkKey`` entry is read on the
      first :meth:`FeatureFlagRegistration.resolve`, so a missing key surfaces
      there as :class:`InvalidArgumentError`.
    * ``sdk_key`` – built now; an empty key fails immediately.
    * ``client`` – built now around the given client.
    """
    chosen = [name for name, value in (("config", config), ("sdk_key", sdk_key), ("client", client)) if value is not None]
    if len(chosen) != 1:
        raise InvalidArgumentError(
            "Exactly one of config, sdk_key or client must be given "
            f"(got {', '.join(chosen) or 'none'})",
            argument="config|sdk_key|client",
        )

    if config is not None:
        service_logger = logger if logger is not None else get_logger(LaunchDarklyService.__module__)
        return FeatureFlagRegistration(lambda: LaunchDarklyService.from_config(config, service_logger))
    if client is not None:
        return FeatureFlagRegistration.of(LaunchDarklyService.from_client(client, logger))
    return FeatureFlagRegistration.of(LaunchDarklyService.from_sdk_key(sdk_key, logger))


__all__ = ["FeatureFlagRegistration", "add_launchdarkly_feature_flags"]
