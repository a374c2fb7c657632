"""JSON schemas for the routes config file and the generated manifest."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator

from pages_routes.constants import CATCH_ALL_RULE, MAX_RULES, ROUTES_VERSION

_RULE_LIST: dict[str, Any] = {
    "type": "array",
    "items": {"type": "string", "minLength": 1},
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "include": _RULE_LIST,
        "exclude": _RULE_LIST,
    },
    "additionalProperties": False,
}

# Shape of a file that nests the rules under a top-level "routes" key.
CONFIG_FILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "routes": {"type": ["object", "null"]},
    },
    "additionalProperties": False,
}

ROUTES_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "version": {"const": ROUTES_VERSION},
        "description": {"type": "string"},
        "include": {**_RULE_LIST, "minItems": 1},
        "exclude": _RULE_LIST,
    },
    "required": ["version", "include", "exclude"],
    "additionalProperties": False,
}


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def schema_errors(payload: Any, schema: dict[str, Any]) -> list[str]:
    validator = Draft202012Validator(schema)
    errors = sorted(
        validator.iter_errors(payload),
        key=lambda item: [str(part) for part in item.path],
    )
    return [format_schema_error(error) for error in errors]


def limit_issue(include: list, total: int) -> str:
    message = f"Rule count {total} exceeds the limit of {MAX_RULES}"
    if include == [CATCH_ALL_RULE] and total == MAX_RULES + 1:
        # Only a forced fallback include produces this shape.
        message += (
            f"; no include rules were left, so {CATCH_ALL_RULE!r} was added as a "
            "fallback and the next run drops the last exclude rule"
        )
    return message


def check_routes(payload: Any) -> list[str]:
    issues = schema_errors(payload, ROUTES_SCHEMA)
    if isinstance(payload, dict):
        include = payload.get("include")
        exclude = payload.get("exclude")
        if isinstance(include, list) and isinstance(exclude, list):
            total = len(include) + len(exclude)
            if total > MAX_RULES:
                issues.append(limit_issue(include, total))
    return issues
