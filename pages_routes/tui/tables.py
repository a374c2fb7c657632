from collections import Counter
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.table import Column, Table

from pages_routes.constants import MAX_RULES
from pages_routes.models import Action, ManifestPlan
from pages_routes.routes.models import RoutesSpec
from pages_routes.tui.enums import ACTION_STATUS_STYLE, UIStyle


def display_path(text: str | Path) -> str:
    """Shorten home-relative build paths in ``text`` to ``~/...``."""
    home = str(Path.home())
    text = str(text)
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")


def panel(title: str, body, style: str = UIStyle.BLUE.value) -> Panel:
    return Panel(body, title=title, border_style=style, padding=(0, 1))


class PlanTable:
    @staticmethod
    def summary_block(plan: ManifestPlan, mode: str) -> Table:
        counts = Counter(action.status.value for action in plan.actions)
        chips = [f"{key}={value}" for key, value in sorted(counts.items())]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Manifest", "  ".join(chips) or "none")
        if plan.spec is not None:
            table.add_row(
                "Rules",
                f"{len(plan.spec.include)} include + {len(plan.spec.exclude)} exclude"
                f" = {plan.spec.rule_count}/{MAX_RULES}",
            )
        if plan.warnings:
            table.add_row("Warnings", str(len(plan.warnings)))
        return table

    @staticmethod
    def actions_table(actions: list[Action]) -> Table:
        table = Table(
            Column(header="Status", width=8),
            Column(header="Target", overflow="ellipsis", max_width=58),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            style = ACTION_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{action.status.value}[/{style}]",
                escape(display_path(action.path)),
                escape(action.detail),
            )
        return table


class RulesTable:
    @staticmethod
    def rules_table(spec: RoutesSpec) -> Table:
        table = Table(
            Column(header="#", justify="right", width=4),
            Column(header="Kind", width=8),
            Column(header="Rule", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        rows = [("include", UIStyle.CYAN, rule) for rule in spec.include]
        rows += [("exclude", UIStyle.MAGENTA, rule) for rule in spec.exclude]
        for position, (kind, style, rule) in enumerate(rows, start=1):
            table.add_row(str(position), f"[{style.value}]{kind}[/]", escape(rule))
        return table
