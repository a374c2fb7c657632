"""Placeholder expansion for the exclude list."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pages_routes.constants import RESERVED_FILENAMES
from pages_routes.routes.models import CATEGORY_ORDER, BuildOutput, Placeholder


def build_rules(build: BuildOutput) -> list[str]:
    return [f"/{build.app_dir}/*"]


def file_rules(build: BuildOutput) -> list[str]:
    prefix = f"{build.app_dir}/"
    return [
        f"/{path}"
        for path in build.assets
        if not path.startswith(prefix) and path not in RESERVED_FILENAMES
    ]


def prerendered_rules(build: BuildOutput) -> list[str]:
    return [path for path in build.prerendered if path not in build.redirects]


def category_rules(category: Placeholder, build: BuildOutput) -> list[str]:
    if category == Placeholder.BUILD:
        return build_rules(build)
    if category == Placeholder.FILES:
        return file_rules(build)
    if category == Placeholder.PRERENDERED:
        return prerendered_rules(build)
    raise ValueError(f"Not a single category placeholder: {category.value}")


def claimed_categories(rules: Iterable[str]) -> set[Placeholder]:
    claimed: set[Placeholder] = set()
    for rule in rules:
        token = Placeholder.parse(rule)
        if token is not None and token != Placeholder.ALL:
            claimed.add(token)
    return claimed


def expand_placeholders(rules: Sequence[str], build: BuildOutput) -> list[str]:
    """Splice auto-derived rules into ``rules`` at their placeholder positions.

    A category named by its own token anywhere in ``rules`` is expanded there,
    and ``<all>`` covers only the remaining categories. Each category is
    expanded once, at its first token; repeated tokens are dropped.
    """
    claimed = claimed_categories(rules)
    expanded: set[Placeholder] = set()
    result: list[str] = []

    for rule in rules:
        token = Placeholder.parse(rule)
        if token is None:
            result.append(rule)
            continue

        if token == Placeholder.ALL:
            categories = [
                category
                for category in CATEGORY_ORDER
                if category not in claimed and category not in expanded
            ]
        elif token in expanded:
            categories = []
        else:
            categories = [token]

        for category in categories:
            result.extend(category_rules(category, build))
            expanded.add(category)

    return result
