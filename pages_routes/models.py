from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pages_routes.routes.models import RoutesSpec


class ActionKind(str, Enum):
    WRITE_JSON = "write_json"


class ActionStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"


@dataclass
class Action:
    kind: ActionKind
    path: Path
    status: ActionStatus
    detail: str
    payload: Optional[Any] = None


@dataclass
class ManifestPlan:
    actions: list[Action]
    errors: list[Exception]
    warnings: list[str] = field(default_factory=list)
    spec: Optional[RoutesSpec] = None

    def is_valid(self) -> bool:
        return not self.errors

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in ActionStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["errors"] = len(self.errors)
        counts["warnings"] = len(self.warnings)
        return counts
