import json
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Protocol

from pages_routes.models import Action, ActionKind, ActionStatus, ManifestPlan


def backup_manifest(path: Path) -> Path:
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    backup_path = path.with_name(f"{path.name}.bak-{stamp}")
    shutil.copy2(path, backup_path)
    return backup_path


def write_manifest(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")


class ActionHandler(Protocol):
    def handle(self, action: Action) -> tuple[bool, Optional[str]]: ...


class WriteJsonHandler:
    def __init__(self, backup: bool = True) -> None:
        self.backup = backup

    def handle(self, action: Action) -> tuple[bool, Optional[str]]:
        if action.status == ActionStatus.NOOP:
            return False, None
        if action.payload is None:
            return False, f"Missing JSON payload for write action: {action.path}"
        if self.backup and action.path.exists():
            backup_manifest(action.path)
        write_manifest(action.path, action.payload)
        return True, None


class ManifestExecutor:
    def __init__(self, backup: bool = True) -> None:
        self.handlers: dict[ActionKind, ActionHandler] = {
            ActionKind.WRITE_JSON: WriteJsonHandler(backup=backup),
        }

    def execute(self, plan: ManifestPlan) -> tuple[int, int, list[str]]:
        applied = 0
        failed = 0
        failures: list[str] = []

        for action in plan.actions:
            try:
                handler = self.handlers.get(action.kind)
                if handler is None:
                    failed += 1
                    failures.append(f"Unknown action kind: {action.kind.value}")
                    continue

                changed, failure = handler.handle(action)
                if failure is not None:
                    failed += 1
                    failures.append(failure)
                    continue
                if changed:
                    applied += 1
            except Exception as exc:
                failed += 1
                failures.append(f"{action.kind.value} failed for {action.path}: {exc}")

        return applied, failed, failures
