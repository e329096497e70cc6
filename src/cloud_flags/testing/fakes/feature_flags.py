"""Testing fakes – FakeFeatureFlagProvider."""
from __future__ import annotations

from cloud_flags.application.feature_flags.provider import FeatureFlagProvider


class FakeFeatureFlagProvider(FeatureFlagProvider):
    """In-memory :class:`FeatureFlagProvider` backed by a plain ``dict``.

    Use :meth:`enable` / :meth:`disable` to configure flags before running the
    code under test. Unknown flags return the caller's default.

    Usage::

        flags = FakeFeatureFlagProvider().enable("new_checkout_flow")
        assert flags.get_feature_flag("new_checkout_flow", False) is True
    """

    def __init__(self, flags: dict[str, bool] | None = None) -> None:
        self._flags: dict[str, bool] = dict(flags or {})
        self.calls: list[tuple[str, bool]] = []

    def get_feature_flag(self, key: str, default_value: bool) -> bool:
        self.calls.append((key, default_value))
        return self._flags.get(key, default_value)

    def enable(self, key: str) -> "FakeFeatureFlagProvider":
        self._flags[key] = True
        return self

    def disable(self, key: str) -> "FakeFeatureFlagProvider":
        self._flags[key] = False
        return self

    def reset(self) -> None:
        """Clear all configured flags and recorded calls."""
        self._flags.clear()
        self.calls.clear()


__all__ = ["FakeFeatureFlagProvider"]
