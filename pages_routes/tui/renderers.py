from rich.console import Console
from rich.markup import escape

from pages_routes.models import ManifestPlan
from pages_routes.tui.enums import UIStyle
from pages_routes.tui.tables import PlanTable, RulesTable, display_path, panel


def _bullets(items: list) -> str:
    return "\n".join([f"- {escape(display_path(str(item)))}" for item in items])


class RoutesConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_plan(self, plan: ManifestPlan, mode: str) -> None:
        self.console.print(
            panel("plan overview", PlanTable.summary_block(plan, mode=mode))
        )
        if plan.spec is not None:
            self.console.print(
                panel("routes", RulesTable.rules_table(plan.spec), UIStyle.CYAN.value)
            )
        if plan.actions:
            self.console.print(
                panel(
                    "manifest",
                    PlanTable.actions_table(plan.actions),
                    UIStyle.MAGENTA.value,
                )
            )
        if plan.warnings:
            self.console.print(
                panel("warnings", _bullets(plan.warnings), UIStyle.YELLOW.value)
            )
        if plan.errors:
            self.console.print(panel("errors", _bullets(plan.errors), UIStyle.RED.value))

    def render_apply_result(
        self, applied: int, failed: int, failures: list[str]
    ) -> None:
        style = UIStyle.RED.value if failed else UIStyle.GREEN.value
        self.console.print(
            panel("apply", f"Applied: {applied}  Failed: {failed}", style)
        )
        if failures:
            self.console.print(panel("failures", _bullets(failures), UIStyle.RED.value))

    def render_check(self, path: str, issues: list[str]) -> None:
        target = escape(display_path(path))
        if not issues:
            self.console.print(
                panel("check", f"Routes manifest is valid: {target}", UIStyle.GREEN.value)
            )
            return
        self.console.print(
            panel(
                "check",
                f"Routes manifest has {len(issues)} issue(s): {target}\n{_bullets(issues)}",
                UIStyle.RED.value,
            )
        )
