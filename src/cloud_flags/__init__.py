"""
cloud_flags – boolean feature flags backed by LaunchDarkly.

Import path convention::

    from cloud_flags.kernel.errors import InvalidArgumentError
    from cloud_flags.application.feature_flags import FeatureFlagProvider
    from cloud_flags.adapters.launchdarkly import LaunchDarklyService
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
