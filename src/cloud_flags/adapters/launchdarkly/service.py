"""LaunchDarkly adapter – LaunchDarklyService."""
from __future__ import annotations

import functools
import threading
from typing import Any

from cloud_flags.adapters.launchdarkly.client import (
    ClientFactory,
    LdClientProtocol,
    create_ld_client,
    evaluation_context,
)
from cloud_flags.adapters.launchdarkly.settings import SDK_KEY_CONFIG_NAME, LaunchDarklySettings
from cloud_flags.application.feature_flags import FeatureFlagProvider
from cloud_flags.config.source import ConfigurationSource, get_value
from cloud_flags.kernel.errors import InvalidArgumentError, InvalidOperationError
from cloud_flags.observability.logging import Logger

_ERROR_KIND = "ERROR"
_WRONG_TYPE = "WRONG_TYPE"


class LaunchDarklyService(FeatureFlagProvider):
    """Boolean feature flags evaluated by a LaunchDarkly client.

    The client is either passed in or built from an SDK key on first use.
    A failed build is logged and retried on the next access; until one
    succeeds :meth:`get_feature_flag` raises :class:`InvalidOperationError`.

    Evaluation errors reported by the client never reach the caller: they are
    logged (when a logger is present) and the caller's default is returned.

    Usage::

        flags = LaunchDarklyService(os.environ["LAUNCHDARKLY_SDK_KEY"], logger=get_logger(__name__))
        if flags.get_feature_flag("new-checkout", False):
            ...
    """

    def __init__(
        self,
        sdk_key: str | None = None,
        logger: Logger | None = None,
        *,
        client: LdClientProtocol | None = None,
        client_factory: ClientFactory | None = None,
        identity: str | None = None,
    ) -> None:
        if client is None and not sdk_key:
            raise InvalidArgumentError(
                "LaunchDarkly SDK key cannot be None or empty", argument="sdk_key"
            )
        self._client = client
        self._sdk_key = sdk_key if client is None else None
        self._logger = logger
        self._client_factory: ClientFactory = client_factory or create_ld_client
        self._context = evaluation_context(identity)
        self._lock = threading.Lock()
        self._build_error: Exception | None = None

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_client(
        cls, client: LdClientProtocol, logger: Logger | None = None, **kwargs: Any
    ) -> "LaunchDarklyService":
        """Wrap an already configured client; no SDK key is needed."""
        return cls(logger=logger, client=client, **kwargs)

    @classmethod
    def from_sdk_key(
        cls, sdk_key: str | None, logger: Logger | None = None, **kwargs: Any
    ) -> "LaunchDarklyService":
        return cls(sdk_key, logger, **kwargs)

    @classmethod
    def from_config(
        cls, config: ConfigurationSource, logger: Logger | None, **kwargs: Any
    ) -> "LaunchDarklyService":
        """Read the SDK key from the ``LaunchDarklySdkKey`` configuration entry."""
        sdk_key = get_value(config, SDK_KEY_CONFIG_NAME)
        if sdk_key is None:
            raise InvalidArgumentError(
                "LaunchDarkly SDK key cannot be resolved from configuration "
                f'(looking for "{SDK_KEY_CONFIG_NAME}")',
                argument=SDK_KEY_CONFIG_NAME,
                detail={"config_key": SDK_KEY_CONFIG_NAME},
            )
        return cls(sdk_key, logger, **kwargs)

    @classmethod
    def from_settings(
        cls, settings: LaunchDarklySettings, logger: Logger | None = None, **kwargs: Any
    ) -> "LaunchDarklyService":
        """Build from :class:`LaunchDarklySettings`, passing its client options on."""
        kwargs.setdefault(
            "client_factory",
            functools.partial(
                create_ld_client, offline=settings.offline, start_wait=settings.start_wait
            ),
        )
        return cls(settings.sdk_key, logger, **kwargs)

    # ------------------------------------------------------------------
    # Client access
    # ------------------------------------------------------------------

    @property
    def ld_client(self) -> LdClientProtocol | None:
        """The wrapped client, built from the SDK key when not yet available."""
        if self._client is not None or not self._sdk_key:
            return self._client
        with self._lock:
            if self._client is None:
                try:
                    self._client = self._client_factory(self._sdk_key)
                    self._build_error = None
                except Exception as exc:  # noqa: BLE001
                    self._build_error = exc
                    if self._logger is not None:
                        self._logger.error(
                            "Exception occurred when initialising LaunchDarkly client",
                            exc_info=exc,
                        )
            return self._client

    def get_feature_flag(self, key: str, default_value: bool) -> bool:
        client = self.ld_client
        if client is None or not client.is_initialized():
            raise InvalidOperationError(
                "LaunchDarkly client is not initialized.", cause=self._build_error
            )

        if not key:
            raise InvalidArgumentError("Feature flag key must be set", argument="key")

        detail = client.variation_detail(key, self._context, default_value)
        reason = detail.reason or {}

        if reason.get("kind") == _ERROR_KIND:
            error_kind = reason.get("errorKind")
        elif not isinstance(detail.value, bool):
            error_kind = _WRONG_TYPE
        else:
            return detail.value

        if self._logger is not None:
            self._logger.error(f"Failed to get feature flag. Reason: {error_kind}")
        return default_value

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the wrapped client (stops SDK background work) if one was built."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    def __enter__(self) -> "LaunchDarklyService":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


__all__ = ["LaunchDarklyService"]
