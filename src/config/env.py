"""Tolerant environment parsing helpers shared by the config modules."""

from __future__ import annotations

import os

_TRUE_VALUES = {"1", "true", "yes", "y", "on"}
_DISABLED_VALUES = {"0", "none", "null", "disabled", "disable", "off", "false", "no"}


def _raw(name: str) -> str:
    return (os.getenv(name) or "").strip()


def get_str(name: str, default: str) -> str:
    return _raw(name) or default


def get_int(name: str, default: int) -> int:
    raw = _raw(name)
    if not raw:
        return int(default)
    if raw.lower() in _DISABLED_VALUES:
        return 0
    try:
        return int(raw)
    except ValueError:
        return int(default)


def get_float(name: str, default: float) -> float:
    raw = _raw(name)
    if not raw:
        return float(default)
    if raw.lower() in _DISABLED_VALUES:
        return 0.0
    try:
        return float(raw)
    except ValueError:
        return float(default)


def get_bool(name: str, default: bool) -> bool:
    raw = _raw(name).lower()
    if not raw:
        return bool(default)
    if raw in _DISABLED_VALUES:
        return False
    return raw in _TRUE_VALUES


def get_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Split a comma-separated variable, dropping blanks."""
    raw = _raw(name)
    if not raw:
        return tuple(default)
    items = tuple(part.strip() for part in raw.split(",") if part.strip())
    return items or tuple(default)


__all__ = ["get_bool", "get_float", "get_int", "get_list", "get_str"]
