"""Testing fakes – FakeLdClient."""
from __future__ import annotations

from typing import Any

from ldclient import Context
from ldclient.evaluation import EvaluationDetail


class FakeLdClient:
    """Stand-in for :class:`ldclient.LDClient` with scripted evaluation results.

    Flags set with :meth:`set_flag` evaluate with a ``FALLTHROUGH`` reason;
    :meth:`set_error` makes a flag report ``{"kind": "ERROR", "errorKind": ...}``.
    Unknown flags report the SDK's ``FLAG_NOT_FOUND`` error with the caller's default.
    """

    def __init__(self, *, initialized: bool = True) -> None:
        self.initialized = initialized
        self.closed = False
        self.evaluations: list[tuple[str, Context, Any]] = []
        self._details: dict[str, tuple[Any, int | None, dict[str, Any]]] = {}

    def set_flag(self, key: str, value: bool, variation_index: int = 0) -> "FakeLdClient":
        self._details[key] = (value, variation_index, {"kind": "FALLTHROUGH"})
        return self

    def set_error(self, key: str, error_kind: str = "EXCEPTION") -> "FakeLdClient":
        self._details[key] = (None, None, {"kind": "ERROR", "errorKind": error_kind})
        return self

    def is_initialized(self) -> bool:
        return self.initialized

    def variation_detail(self, key: str, context: Context, default: Any) -> EvaluationDetail:
        self.evaluations.append((key, context, default))
        value, index, reason = self._details.get(
            key, (None, None, {"kind": "ERROR", "errorKind": "FLAG_NOT_FOUND"})
        )
        return EvaluationDetail(default if value is None else value, index, reason)

    def close(self) -> None:
        self.closed = True


__all__ = ["FakeLdClient"]
