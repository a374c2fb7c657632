"""Platform rule-count limit enforcement."""

from __future__ import annotations

from collections.abc import Callable

from pages_routes.constants import CATCH_ALL_RULE, LIMITS_URL, MAX_RULES

WarnCallback = Callable[[str], None]


def overflow_message(total: int, limit: int = MAX_RULES) -> str:
    dropped = total - limit
    return (
        f"Function includes/excludes exceed _routes.json limits ({total} > {limit}, "
        f"see {LIMITS_URL}). Dropping {dropped} rule(s) from the end; accessing "
        "some static assets or prerendered routes will cause function invocations."
    )


def empty_include_message() -> str:
    return (
        "No include rules left for _routes.json; "
        f"falling back to {CATCH_ALL_RULE!r} so every request reaches the function."
    )


def trim_to_limit(
    include: list[str],
    exclude: list[str],
    warn: WarnCallback,
    limit: int = MAX_RULES,
) -> tuple[list[str], list[str]]:
    include = list(include)
    exclude = list(exclude)
    total = len(include) + len(exclude)
    if total <= limit:
        return include, exclude

    warn(overflow_message(total, limit))
    while len(include) + len(exclude) > limit:
        if len(include) > len(exclude):
            include.pop()
        else:
            exclude.pop()
    return include, exclude


def ensure_include(include: list[str], warn: WarnCallback) -> list[str]:
    if include:
        return include
    warn(empty_include_message())
    return [CATCH_ALL_RULE]
