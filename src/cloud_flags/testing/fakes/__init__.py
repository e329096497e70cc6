"""Testing fakes – in-memory doubles."""
from cloud_flags.testing.fakes.feature_flags import FakeFeatureFlagProvider
from cloud_flags.testing.fakes.launchdarkly import FakeLdClient

__all__ = ["FakeFeatureFlagProvider", "FakeLdClient"]
