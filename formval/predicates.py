"""Leaf predicates over arbitrary input values."""

from __future__ import annotations

import numbers
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any


class _Missing:
    """Marker type for an absent value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ValueKind(str, Enum):
    """Runtime classification of a candidate value."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_DATE_TIME = re.compile(r"\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2}", re.ASCII)
_DATE_UTC = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", re.ASCII)


def kind_of(value: Any) -> ValueKind:
    """Classify ``value``; ``bool`` is checked before numbers since it subclasses ``int``."""

    if value is MISSING:
        return ValueKind.UNDEFINED
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, numbers.Real):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def is_undef(value: Any) -> bool:
    return kind_of(value) is ValueKind.UNDEFINED


def is_null(value: Any) -> bool:
    return kind_of(value) is ValueKind.NULL


def is_null_or_undef(value: Any) -> bool:
    return kind_of(value) in (ValueKind.NULL, ValueKind.UNDEFINED)


def is_string(value: Any) -> bool:
    return kind_of(value) is ValueKind.STRING


def is_number(value: Any) -> bool:
    return kind_of(value) is ValueKind.NUMBER


def is_bool(value: Any) -> bool:
    return kind_of(value) is ValueKind.BOOL


def _matches(pattern: re.Pattern[str], value: Any) -> bool:
    return is_string(value) and pattern.fullmatch(value) is not None


def is_date(value: Any) -> bool:
    """Return True for strings shaped like ``YYYY-MM-DD``.

    Only the shape is checked, so ``"2021-13-99"`` passes.
    """

    return _matches(_DATE, value)


def is_date_time(value: Any) -> bool:
    """Return True for strings shaped like ``YYYY-MM-DD hh:mm:ss``."""

    return _matches(_DATE_TIME, value)


def is_date_utc(value: Any) -> bool:
    """Return True for strings shaped like ``YYYY-MM-DDThh:mm:ssZ``."""

    return _matches(_DATE_UTC, value)


def is_empty(value: Any) -> bool:
    """Return True for an empty string, sequence or mapping.

    Numbers, booleans and absent values are never empty; guard with
    :func:`is_null_or_undef` first.
    """

    kind = kind_of(value)
    if kind in (ValueKind.STRING, ValueKind.SEQUENCE, ValueKind.MAPPING):
        return len(value) == 0
    return False


__all__ = [
    "MISSING",
    "ValueKind",
    "kind_of",
    "is_undef",
    "is_null",
    "is_null_or_undef",
    "is_string",
    "is_number",
    "is_bool",
    "is_date",
    "is_date_time",
    "is_date_utc",
    "is_empty",
]
