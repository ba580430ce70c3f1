"""Composable single-value validators, combinators and normalizers."""

from .combinators import chain, first_error
from .messages import DEFAULT_MESSAGES
from .normalize import NormalizationError, normalize_boolean
from .predicates import (
    MISSING,
    ValueKind,
    is_bool,
    is_date,
    is_date_time,
    is_date_utc,
    is_empty,
    is_null,
    is_null_or_undef,
    is_number,
    is_string,
    is_undef,
    kind_of,
)
from .results import VALID, Invalid, Result, Valid, Validator, as_result
from .validators import (
    one_of,
    required,
    valid_bool,
    valid_date_format,
    valid_date_time_format,
    valid_date_utc_format,
    valid_number,
    valid_string,
)

__all__ = [
    "chain",
    "first_error",
    "DEFAULT_MESSAGES",
    "NormalizationError",
    "normalize_boolean",
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
    "VALID",
    "Valid",
    "Invalid",
    "Result",
    "Validator",
    "as_result",
    "valid_string",
    "valid_number",
    "valid_bool",
    "valid_date_format",
    "valid_date_time_format",
    "valid_date_utc_format",
    "one_of",
    "required",
]
