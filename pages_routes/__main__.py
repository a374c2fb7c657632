import json
from pathlib import Path
from typing import Callable, Dict, Optional

import click
from rich.console import Console

from pages_routes.build import BuildOutputRepository
from pages_routes.config import RoutesConfigRepository
from pages_routes.constants import DEFAULT_APP_DIR
from pages_routes.executor import ManifestExecutor
from pages_routes.models import ManifestPlan
from pages_routes.planner import ManifestPlanner, load_manifest
from pages_routes.routes.schema import check_routes
from pages_routes.tui import RoutesConsoleUI


def _build_options(func: Callable) -> Callable:
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Routes config file (YAML or JSON) with include/exclude rules.",
    )(func)
    func = click.option(
        "--prerendered",
        "prerendered_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="JSON file listing prerendered paths and redirects.",
    )(func)
    func = click.option(
        "--app-dir",
        default=DEFAULT_APP_DIR,
        show_default=True,
        help="Name of the framework's internal asset directory.",
    )(func)
    func = click.argument(
        "output_dir", type=click.Path(path_type=Path, file_okay=False)
    )(func)
    return func


def _build_plan(
    output_dir: Path,
    app_dir: str,
    prerendered_path: Optional[Path],
    config_path: Optional[Path],
) -> ManifestPlan:
    build_repo = BuildOutputRepository(
        output_dir, app_dir=app_dir, prerendered_path=prerendered_path
    )
    config_repo = RoutesConfigRepository(config_path)
    try:
        return ManifestPlanner(build=build_repo, config=config_repo).build()
    except Exception as exc:
        raise click.ClickException(f"Fatal: {exc}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Generate _routes.json rules for static hosting with functions."""
    ctx.obj = {}


@cli.command(help="Resolve routes and print a dry-run plan.")
@_build_options
@click.option("--json", "as_json", is_flag=True, help="Print only the routes JSON.")
@click.pass_obj
def plan(
    obj: Dict[str, str],
    output_dir: Path,
    app_dir: str,
    prerendered_path: Optional[Path],
    config_path: Optional[Path],
    as_json: bool,
) -> None:
    plan_result = _build_plan(output_dir, app_dir, prerendered_path, config_path)

    if as_json:
        if plan_result.errors or plan_result.spec is None:
            detail = plan_result.errors[0] if plan_result.errors else "no routes resolved"
            raise click.ClickException(str(detail))
        for message in plan_result.warnings:
            click.echo(f"Warning: {message}", err=True)
        click.echo(json.dumps(plan_result.spec.as_dict(), indent=2))
        return

    RoutesConsoleUI(Console()).render_plan(plan_result, mode="plan")
    if plan_result.errors:
        raise click.exceptions.Exit(1)


@cli.command(help="Resolve routes and write _routes.json.")
@_build_options
@click.option("--no-backup", is_flag=True, help="Do not back up an existing manifest.")
@click.pass_obj
def apply(
    obj: Dict[str, str],
    output_dir: Path,
    app_dir: str,
    prerendered_path: Optional[Path],
    config_path: Optional[Path],
    no_backup: bool,
) -> None:
    ui = RoutesConsoleUI(Console())
    plan_result = _build_plan(output_dir, app_dir, prerendered_path, config_path)

    ui.render_plan(plan_result, mode="apply")

    if plan_result.errors:
        raise click.ClickException(
            "Apply aborted due to planning/parsing errors above."
        )

    applied, failed, failures = ManifestExecutor(backup=not no_backup).execute(
        plan_result
    )
    ui.render_apply_result(applied, failed, failures)

    if failed:
        raise click.exceptions.Exit(1)


@cli.command(help="Validate an existing _routes.json file.")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_obj
def check(obj: Dict[str, str], path: Path) -> None:
    ui = RoutesConsoleUI(Console())
    if not path.exists():
        raise click.ClickException(f"Routes manifest not found: {path}")

    payload, error = load_manifest(path)
    if error is not None:
        issues = [f"Invalid JSON format ({error})"]
    else:
        issues = check_routes(payload)

    ui.render_check(str(path), issues)
    if issues:
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
