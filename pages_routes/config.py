"""Load the user routes configuration from YAML or JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator

from pages_routes.constants import CONFIG_ROOT_KEY, YAML_SUFFIXES
from pages_routes.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    InvalidYamlFormatError,
    MissingConfigFileError,
)
from pages_routes.routes.models import RoutesConfig
from pages_routes.routes.schema import (
    CONFIG_FILE_SCHEMA,
    CONFIG_SCHEMA,
    format_schema_error,
)


def parse_config_text(path: Path, text: str) -> Any:
    if not text.strip():
        return None
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InvalidYamlFormatError(path, str(exc)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc


def validate_config(
    path: Path, raw: Any, schema: dict[str, Any] = CONFIG_SCHEMA, prefix: str = ""
) -> None:
    validator = Draft202012Validator(schema)
    error = next(iter(validator.iter_errors(raw)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, prefix + format_schema_error(error))


class RoutesConfigRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def load(self) -> RoutesConfig:
        if self._path is None:
            return RoutesConfig()
        if not self._path.exists():
            raise MissingConfigFileError(self._path)

        raw = parse_config_text(self._path, self._path.read_text(encoding="utf-8"))
        if raw is None:
            return RoutesConfig()
        prefix = ""
        if isinstance(raw, dict) and CONFIG_ROOT_KEY in raw:
            validate_config(self._path, raw, CONFIG_FILE_SCHEMA)
            raw = raw[CONFIG_ROOT_KEY] or {}
            prefix = f"{CONFIG_ROOT_KEY}: "

        validate_config(self._path, raw, prefix=prefix)
        return RoutesConfig.from_dict(raw)
