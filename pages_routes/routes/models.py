"""Route rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pages_routes.constants import (
    CATCH_ALL_RULE,
    DEFAULT_APP_DIR,
    ROUTES_DESCRIPTION,
    ROUTES_VERSION,
)


class Placeholder(str, Enum):
    """Sentinel entries of the raw exclude list."""

    BUILD = "<build>"
    FILES = "<files>"
    PRERENDERED = "<prerendered>"
    ALL = "<all>"

    @classmethod
    def parse(cls, value: str) -> "Placeholder | None":
        for member in cls:
            if member.value == value:
                return member
        return None


# Expansion order used by Placeholder.ALL.
CATEGORY_ORDER: tuple[Placeholder, ...] = (
    Placeholder.BUILD,
    Placeholder.FILES,
    Placeholder.PRERENDERED,
)


@dataclass(frozen=True)
class BuildOutput:
    assets: tuple[str, ...] = ()
    prerendered: tuple[str, ...] = ()
    redirects: frozenset[str] = frozenset()
    app_dir: str = DEFAULT_APP_DIR


@dataclass(frozen=True)
class RoutesConfig:
    include: tuple[str, ...] = (CATCH_ALL_RULE,)
    exclude: tuple[str, ...] = (Placeholder.ALL.value,)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "RoutesConfig":
        defaults = cls()
        include = raw.get("include")
        exclude = raw.get("exclude")
        return cls(
            include=defaults.include if include is None else tuple(include),
            exclude=defaults.exclude if exclude is None else tuple(exclude),
        )


@dataclass(frozen=True)
class RoutesSpec:
    include: tuple[str, ...]
    exclude: tuple[str, ...]
    version: int = ROUTES_VERSION
    description: str = ROUTES_DESCRIPTION
    warnings: tuple[str, ...] = field(default=(), compare=False)

    @property
    def rule_count(self) -> int:
        return len(self.include) + len(self.exclude)

    def as_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "description": self.description,
            "include": list(self.include),
            "exclude": list(self.exclude),
        }

    def as_config(self) -> RoutesConfig:
        return RoutesConfig(include=self.include, exclude=self.exclude)
