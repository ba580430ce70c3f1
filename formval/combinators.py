"""Combinators sequencing several validators over one value."""

from __future__ import annotations

from typing import Any, Callable

from .results import Invalid, Validator, as_result


def chain(*validators: Validator) -> Callable[[Any], list[Any]]:
    """Run every validator and collect all failure payloads in order."""

    def run(value: Any) -> list[Any]:
        errors: list[Any] = []
        for validator in validators:
            outcome = as_result(validator(value))
            if isinstance(outcome, Invalid):
                errors.append(outcome.message)
        return errors

    return run


def first_error(*validators: Validator) -> Callable[[Any], list[Any]]:
    """Run validators in order and stop at the first failure.

    Returns a single-element list holding that failure's payload, or an empty
    list when every validator succeeds.
    """

    def run(value: Any) -> list[Any]:
        for validator in validators:
            outcome = as_result(validator(value))
            if isinstance(outcome, Invalid):
                return [outcome.message]
        return []

    return run


__all__ = ["chain", "first_error"]
