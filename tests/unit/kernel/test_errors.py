"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from cloud_flags.kernel.errors import (
    ApplicationError,
    BaseError,
    InvalidArgumentError,
    InvalidOperationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_omits_empty_detail(self) -> None:
        assert BaseError("m").to_dict() == {"code": "base_error", "message": "m"}

    def test_cause_is_chained(self) -> None:
        root = RuntimeError("root")
        err = BaseError("wrap", cause=root)
        assert err.cause is root
        assert err.__cause__ is root
        assert err.to_dict()["cause"] == "RuntimeError: root"

    def test_no_cause(self) -> None:
        err = BaseError("plain")
        assert err.cause is None
        assert "cause" not in err.to_dict()

    def test_str_is_message(self) -> None:
        assert str(BaseError("oops", code="oops")) == "oops"

    def test_detail_is_copied(self) -> None:
        ctx = {"config_key": "LaunchDarklySdkKey"}
        err = BaseError("m", detail=ctx)
        ctx.clear()
        assert err.detail == {"config_key": "LaunchDarklySdkKey"}


class TestInvalidArgumentError:
    def test_code(self) -> None:
        assert InvalidArgumentError("bad").code == "invalid_argument"

    def test_is_value_error_and_application_error(self) -> None:
        err = InvalidArgumentError("bad")
        assert isinstance(err, ValueError)
        assert isinstance(err, ApplicationError)

    def test_argument_in_to_dict(self) -> None:
        err = InvalidArgumentError("bad", argument="key")
        assert err.argument == "key"
        assert err.to_dict()["argument"] == "key"

    def test_argument_omitted_when_none(self) -> None:
        assert "argument" not in InvalidArgumentError("bad").to_dict()

    def test_caught_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise InvalidArgumentError("bad")


class TestInvalidOperationError:
    def test_code(self) -> None:
        assert InvalidOperationError("nope").code == "invalid_operation"

    def test_is_runtime_error(self) -> None:
        err = InvalidOperationError("nope")
        assert isinstance(err, RuntimeError)
        assert isinstance(err, BaseError)
