"""Validator factories.

Every factory accepts an optional override message and returns a single
argument callable producing :data:`~formval.results.VALID` or an
:class:`~formval.results.Invalid` carrying a non-empty message.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from .messages import format_message, format_one_of
from .predicates import (
    ValueKind,
    is_bool,
    is_date,
    is_date_time,
    is_date_utc,
    is_empty,
    is_null_or_undef,
    is_number,
    is_string,
    kind_of,
)
from .results import VALID, Invalid, Result

ResultValidator = Callable[[Any], Result]

_SCALAR_KINDS = (ValueKind.BOOL, ValueKind.NUMBER, ValueKind.STRING, ValueKind.NULL, ValueKind.UNDEFINED)


def _check_override(message: Optional[str]) -> Optional[str]:
    if message is not None and not message:
        raise ValueError("override message must be a non-empty string")
    return message


def _predicate_validator(
    predicate: Callable[[Any], bool], kind: str, message: Optional[str]
) -> ResultValidator:
    override = _check_override(message)

    def validate(value: Any) -> Result:
        if predicate(value):
            return VALID
        return Invalid(format_message(override, value, kind))

    return validate


def valid_string(message: Optional[str] = None) -> ResultValidator:
    return _predicate_validator(is_string, "string", message)


def valid_number(message: Optional[str] = None) -> ResultValidator:
    return _predicate_validator(is_number, "number", message)


def valid_bool(message: Optional[str] = None) -> ResultValidator:
    return _predicate_validator(is_bool, "bool", message)


def valid_date_format(message: Optional[str] = None) -> ResultValidator:
    """Accept strings shaped like ``YYYY-MM-DD``; any other value fails."""

    return _predicate_validator(is_date, "date", message)


def valid_date_time_format(message: Optional[str] = None) -> ResultValidator:
    return _predicate_validator(is_date_time, "dateTime", message)


def valid_date_utc_format(message: Optional[str] = None) -> ResultValidator:
    return _predicate_validator(is_date_utc, "dateUTC", message)


def _strict_equals(left: Any, right: Any) -> bool:
    kind = kind_of(left)
    if kind is not kind_of(right):
        return False
    if kind in _SCALAR_KINDS:
        return left == right
    return left is right


def one_of(allowed: Iterable[Any], message: Optional[str] = None) -> ResultValidator:
    """Accept values strictly equal to one of ``allowed``.

    Scalars compare by kind and value, so ``1`` does not match ``True``.
    Containers and other objects compare by identity.
    """

    choices = tuple(allowed)
    override = _check_override(message)

    def validate(value: Any) -> Result:
        if any(_strict_equals(value, choice) for choice in choices):
            return VALID
        return Invalid(format_one_of(override, value, choices))

    return validate


def required(message: Optional[str] = None) -> ResultValidator:
    """Reject absent values and empty strings, sequences or mappings."""

    override = _check_override(message)

    def validate(value: Any) -> Result:
        if not is_null_or_undef(value) and not is_empty(value):
            return VALID
        return Invalid(format_message(override, "", "required"))

    return validate


__all__ = [
    "ResultValidator",
    "valid_string",
    "valid_number",
    "valid_bool",
    "valid_date_format",
    "valid_date_time_format",
    "valid_date_utc_format",
    "one_of",
    "required",
]
