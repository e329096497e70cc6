"""Testing support – in-memory doubles for the feature-flag port and the LaunchDarkly client."""

from cloud_flags.testing.fakes import FakeFeatureFlagProvider, FakeLdClient

__all__ = ["FakeFeatureFlagProvider", "FakeLdClient"]
