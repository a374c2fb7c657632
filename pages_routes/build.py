"""Collect build output metadata for rule resolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pages_routes.constants import DEFAULT_APP_DIR, ROUTES_FILENAME
from pages_routes.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    MissingBuildOutputError,
    MissingConfigFileError,
)
from pages_routes.routes.models import BuildOutput


def collect_assets(output_dir: Path) -> list[str]:
    if not output_dir.is_dir():
        raise MissingBuildOutputError(output_dir)
    assets: list[str] = []
    for path in output_dir.rglob("*"):
        if not path.is_file():
            continue
        relative = path.relative_to(output_dir).as_posix()
        if relative == ROUTES_FILENAME:
            continue
        assets.append(relative)
    return sorted(assets)


def _string_list(raw: dict[str, Any], key: str, path: Path) -> list[str]:
    value = raw.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvalidConfigSchemaError(path, f"'{key}' must be a list of strings")
    return value


def load_prerendered(path: Path) -> tuple[list[str], set[str]]:
    if not path.exists():
        raise MissingConfigFileError(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8") or "{}")
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc
    if not isinstance(raw, dict):
        raise InvalidConfigSchemaError(path, "expected a JSON object")

    paths = _string_list(raw, "paths", path)
    redirects = set(_string_list(raw, "redirects", path))
    return paths, redirects


class BuildOutputRepository:
    def __init__(
        self,
        output_dir: Path,
        app_dir: str = DEFAULT_APP_DIR,
        prerendered_path: Optional[Path] = None,
    ) -> None:
        self.output_dir = output_dir
        self.app_dir = app_dir.strip("/")
        self.prerendered_path = prerendered_path

    @property
    def routes_path(self) -> Path:
        return self.output_dir / ROUTES_FILENAME

    def load(self) -> BuildOutput:
        assets = collect_assets(self.output_dir)
        prerendered: list[str] = []
        redirects: set[str] = set()
        if self.prerendered_path is not None:
            prerendered, redirects = load_prerendered(self.prerendered_path)
        return BuildOutput(
            assets=tuple(assets),
            prerendered=tuple(prerendered),
            redirects=frozenset(redirects),
            app_dir=self.app_dir,
        )
