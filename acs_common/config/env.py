"""Environment variable parsing utilities."""

from __future__ import annotations

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean switch.

    Unset, empty and unrecognised values give None so callers keep their
    default instead of silently turning a typo into False.
    """
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    return None


def parse_choice_env(value: str | None, choices: frozenset[str]) -> str | None:
    """Return the normalized value when it is one of ``choices``, else None."""
    if value is None:
        return None
    normalized = value.strip().lower()
    return normalized if normalized in choices else None
