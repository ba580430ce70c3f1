"""Normalizers coercing loosely typed input into canonical values."""

from __future__ import annotations

from typing import Any

from .predicates import ValueKind, is_empty, kind_of


class NormalizationError(ValueError):
    """Raised when a value cannot be normalized without guessing."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


_BOOLEAN_STRINGS = {"true": True, "false": False}


def normalize_boolean(value: Any) -> bool:
    """Coerce ``value`` into a strict boolean.

    Booleans pass through and numbers are true only when equal to ``1``. The
    strings ``"true"`` and ``"false"`` are parsed. Absent values and empty
    strings, sequences or mappings are false. Any other string and any
    non-empty sequence or mapping raises :class:`NormalizationError`.
    """

    kind = kind_of(value)
    if kind is ValueKind.BOOL:
        return value
    if kind is ValueKind.NUMBER:
        return bool(value == 1)
    if kind is ValueKind.STRING and value in _BOOLEAN_STRINGS:
        return _BOOLEAN_STRINGS[value]
    if kind in (ValueKind.STRING, ValueKind.SEQUENCE, ValueKind.MAPPING):
        if is_empty(value):
            return False
        raise NormalizationError(f"Cannot normalize {value!r} to a boolean", value=value)
    return False


__all__ = ["NormalizationError", "normalize_boolean"]
