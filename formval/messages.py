"""Default error messages and message rendering."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "string": " is not of type string",
        "number": " is not of type number",
        "bool": " is not of type boolean",
        "date": " date format must be 'YYYY-MM-DD'",
        "dateTime": " dateTime format must be 'YYYY-MM-DD hh:mm:ss'",
        "dateUTC": " date format must be UTC: 'YYYY-MM-DDThh:mm:ssZ'",
        "required": "A non empty value is required",
    }
)


def render_value(value: Any) -> str:
    """Render a candidate value for inclusion in an error message.

    Values render as Python's ``str()`` does: ``None``, ``True`` and the
    absent-value sentinel render as ``None``, ``True`` and ``MISSING``.
    """

    return str(value)


def format_message(override: Optional[str], value: Any, kind: str) -> str:
    """Return ``override`` or the default message for ``kind`` prefixed by the value."""

    if override is not None:
        return override
    return render_value(value) + DEFAULT_MESSAGES[kind]


def format_one_of(override: Optional[str], value: Any, allowed: Iterable[Any]) -> str:
    """Return ``override`` or a message listing the allowed values in order."""

    if override is not None:
        return override
    choices = "', '".join(render_value(item) for item in allowed)
    return f"'{render_value(value)}' is not one of: '{choices}'"


__all__ = ["DEFAULT_MESSAGES", "render_value", "format_message", "format_one_of"]
