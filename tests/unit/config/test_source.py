"""Unit tests for the ConfigurationSource port."""

import os

import pytest

from cloud_flags.config import ConfigurationSource, get_value


class TestConfigurationSource:
    def test_dict_is_a_source(self) -> None:
        assert isinstance({}, ConfigurationSource)

    def test_environ_is_a_source(self) -> None:
        assert isinstance(os.environ, ConfigurationSource)


class TestGetValue:
    def test_present(self) -> None:
        assert get_value({"LaunchDarklySdkKey": "sdk-1"}, "LaunchDarklySdkKey") == "sdk-1"

    def test_absent(self) -> None:
        assert get_value({}, "LaunchDarklySdkKey") is None

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_is_absent(self, blank: str) -> None:
        assert get_value({"k": blank}, "k") is None

    def test_non_string_is_stringified(self) -> None:
        assert get_value({"k": 42}, "k") == "42"  # type: ignore[dict-item]
