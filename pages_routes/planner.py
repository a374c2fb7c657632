import json
from pathlib import Path
from typing import Any, Optional

from pages_routes.build import BuildOutputRepository
from pages_routes.config import RoutesConfigRepository
from pages_routes.errors import RoutesAppError
from pages_routes.models import Action, ActionKind, ActionStatus, ManifestPlan
from pages_routes.routes import resolve_routes
from pages_routes.routes.limits import WarnCallback
from pages_routes.routes.models import RoutesSpec
from pages_routes.routes.schema import ROUTES_SCHEMA, schema_errors


def load_manifest(path: Path) -> tuple[Any | None, str | None]:
    """Read an existing manifest; missing or empty files yield ``(None, None)``."""
    if not path.is_file() or path.stat().st_size == 0:
        return None, None
    try:
        return json.loads(path.read_text(encoding="utf-8")), None
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        return None, str(exc)


def manifest_matches(path: Path, payload: dict) -> bool:
    existing, error = load_manifest(path)
    return error is None and existing == payload


class ManifestPlanner:
    def __init__(
        self,
        build: BuildOutputRepository,
        config: Optional[RoutesConfigRepository] = None,
        target: Optional[Path] = None,
        warn: Optional[WarnCallback] = None,
    ) -> None:
        self.build_repo = build
        self.config_repo = config or RoutesConfigRepository()
        self.target = target or build.routes_path
        self.warn = warn

        self.actions: list[Action] = []
        self.errors: list[Exception] = []
        self.warnings: list[str] = []

    def build(self) -> ManifestPlan:
        try:
            build_output = self.build_repo.load()
            config = self.config_repo.load()
        except RoutesAppError as exc:
            self.errors.append(exc)
            return self._plan()

        spec = resolve_routes(build_output, config, warn=self._warn)
        payload = spec.as_dict()

        problems = schema_errors(payload, ROUTES_SCHEMA)
        if problems:
            self.errors.append(
                RoutesAppError(f"Generated routes are invalid: {problems[0]}")
            )
            return self._plan(spec)

        self.actions.append(self._write_action(payload, spec.rule_count))
        return self._plan(spec)

    def _warn(self, message: str) -> None:
        self.warnings.append(message)
        if self.warn is not None:
            self.warn(message)

    def _write_action(self, payload: dict, rule_count: int) -> Action:
        if manifest_matches(self.target, payload):
            return Action(
                ActionKind.WRITE_JSON,
                self.target,
                ActionStatus.NOOP,
                "already up to date",
                payload=payload,
            )
        status = ActionStatus.UPDATE if self.target.exists() else ActionStatus.CREATE
        return Action(
            ActionKind.WRITE_JSON,
            self.target,
            status,
            f"{status.value} routes manifest ({rule_count} rules)",
            payload=payload,
        )

    def _plan(self, spec: Optional[RoutesSpec] = None) -> ManifestPlan:
        return ManifestPlan(
            actions=self.actions,
            errors=self.errors,
            warnings=self.warnings,
            spec=spec,
        )
