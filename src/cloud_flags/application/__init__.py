"""Application – use-case building blocks (framework-agnostic)."""

from cloud_flags.application.feature_flags import FeatureFlagProvider

__all__ = ["FeatureFlagProvider"]
