"""Validation outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True, slots=True)
class Valid:
    """Successful validation."""

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Invalid:
    """Failed validation carrying an error payload, usually a message string."""

    message: Any

    def __bool__(self) -> bool:
        return False


VALID = Valid()

Result = Union[Valid, Invalid]
Validator = Callable[[Any], Any]


def as_result(outcome: Any) -> Result:
    """Coerce a validator return value into a :data:`Result`.

    Validators written against the plain ``True | payload`` convention are
    accepted: only ``True`` (or :class:`Valid`) counts as success and any other
    value becomes the payload of an :class:`Invalid`.
    """

    if isinstance(outcome, (Valid, Invalid)):
        return outcome
    if outcome is True:
        return VALID
    return Invalid(outcome)


__all__ = ["Valid", "Invalid", "VALID", "Result", "Validator", "as_result"]
