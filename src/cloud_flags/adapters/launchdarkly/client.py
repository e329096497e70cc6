"""LaunchDarkly adapter – client factory and evaluation subject."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable, Protocol

from ldclient import Context, LDClient
from ldclient.config import Config
from ldclient.evaluation import EvaluationDetail

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], "LdClientProtocol"]


class LdClientProtocol(Protocol):
    """The slice of :class:`ldclient.LDClient` the service relies on."""

    def is_initialized(self) -> bool: ...

    def variation_detail(self, key: str, context: Context, default: Any) -> EvaluationDetail: ...

    def close(self) -> None: ...


def create_ld_client(
    sdk_key: str,
    *,
    offline: bool = False,
    start_wait: float = 5.0,
    **options: Any,
) -> LDClient:
    """Build an :class:`ldclient.LDClient` for *sdk_key*.

    Blocks for up to *start_wait* seconds while the SDK connects; extra
    keyword arguments are passed straight to :class:`ldclient.config.Config`.
    """
    config = Config(sdk_key, offline=offline, **options)
    client = LDClient(config=config, start_wait=start_wait)
    logger.debug(
        "launchdarkly.client_created offline=%s initialized=%s",
        offline,
        client.is_initialized(),
    )
    return client


def application_identity() -> str:
    """Name of the running program, used as the evaluation subject key."""
    if sys.argv and sys.argv[0]:
        name = Path(sys.argv[0]).stem
        if name:
            return name
    return Path(sys.executable).stem or "python"


def evaluation_context(identity: str | None = None) -> Context:
    """Return the context flags are evaluated against for this process."""
    return Context.create(identity or application_identity())


__all__ = [
    "ClientFactory",
    "LdClientProtocol",
    "application_identity",
    "create_ld_client",
    "evaluation_context",
]
