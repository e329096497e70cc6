"""Application feature flags – ports."""
from cloud_flags.application.feature_flags.provider import FeatureFlagProvider

__all__ = ["FeatureFlagProvider"]
