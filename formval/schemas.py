"""JSON schema definitions for validating rule files."""

from __future__ import annotations

STEP_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "validator": {"type": "string", "minLength": 1},
        "message": {"type": "string", "minLength": 1},
        "allowed": {"type": "array"},
    },
    "required": ["validator"],
    "additionalProperties": False,
    "if": {"properties": {"validator": {"const": "oneOf"}}},
    "then": {"required": ["validator", "allowed"]},
    "else": {"not": {"required": ["allowed"]}},
}

RULE_FILE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "mode": {"type": "string", "enum": ["chain", "first_error"]},
        "validators": {
            "type": "array",
            "items": STEP_SCHEMA,
        },
    },
    "required": ["validators"],
    "additionalProperties": False,
}

__all__ = ["STEP_SCHEMA", "RULE_FILE_SCHEMA"]
