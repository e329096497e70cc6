"""Application feature flags – FeatureFlagProvider port."""
from __future__ import annotations

import abc


class FeatureFlagProvider(abc.ABC):
    """Port: evaluate a boolean feature flag."""

    @abc.abstractmethod
    def get_feature_flag(self, key: str, default_value: bool) -> bool:
        """Return the flag value for *key*, or *default_value* when it cannot be evaluated."""


__all__ = ["FeatureFlagProvider"]
