"""Shared error taxonomy for action-sheet."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

_SCALARS = (str, int, float, bool, type(None))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(item) for item in value]
    if isinstance(value, _SCALARS):
        return value
    return repr(value) if callable(value) else str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {str(key): _jsonable(val) for key, val in context.items()}


class ACSError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": self.error_type,
            "message": self.message,
            "context": self.context,
        }
        if self.__cause__ is not None:
            payload["cause"] = f"{type(self.__cause__).__name__}: {self.__cause__}"
        return payload


class ConfigurationError(ACSError):
    """Invalid layout input or sheet option, detected before anything is shown.

    ``setting`` names the offending argument (``max_per_row``, ``mode``,
    ``options``...) and is mirrored into the context.
    """

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        merged = dict(context or {})
        if setting is not None:
            merged.setdefault("setting", setting)
        super().__init__(message, context=merged, cause=cause)
        self.setting = setting


class SheetHostError(ACSError):
    """The modal host could not present the sheet."""


E = TypeVar("E", bound=ACSError)


def wrap_error(
    error_cls: type[E],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> E:
    """Create a typed ACSError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)
