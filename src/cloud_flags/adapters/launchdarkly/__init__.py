"""LaunchDarkly adapter – boolean feature flags through the LaunchDarkly server SDK."""
from cloud_flags.adapters.launchdarkly.client import (
    LdClientProtocol,
    application_identity,
    create_ld_client,
    evaluation_context,
)
from cloud_flags.adapters.launchdarkly.registration import (
    FeatureFlagRegistration,
    add_launchdarkly_feature_flags,
)
from cloud_flags.adapters.launchdarkly.service import LaunchDarklyService
from cloud_flags.adapters.launchdarkly.settings import SDK_KEY_CONFIG_NAME, LaunchDarklySettings

__all__ = [
    "FeatureFlagRegistration",
    "LaunchDarklyService",
    "LaunchDarklySettings",
    "LdClientProtocol",
    "SDK_KEY_CONFIG_NAME",
    "add_launchdarkly_feature_flags",
    "application_identity",
    "create_ld_client",
    "evaluation_context",
]
