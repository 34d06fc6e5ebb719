"""create-puppeteer-app command: scaffold a Puppeteer project.

Resolves flags and the environment into a ScaffoldConfig once, writes
the planned files, prints the summary, then runs the optional git and
install steps.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from create_puppeteer_app import __version__
from create_puppeteer_app.cli.output import render_next_steps, render_summary
from create_puppeteer_app.models.config import (
    PackageManager,
    ScaffoldConfig,
    validate_package_name,
)
from create_puppeteer_app.scaffold.driver import (
    ProjectExistsError,
    run_post_actions,
    write_project,
)

console = Console()
err_console = Console(stderr=True)

PROMPT = "\U0001f4c1 Enter directory name for your Puppeteer app"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"create-puppeteer-app {__version__}")
        raise typer.Exit()


def _package_name_callback(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    try:
        return validate_package_name(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _explicit_package_manager(
    use_pnpm: bool, use_npm: bool, use_yarn: bool
) -> PackageManager | None:
    """Pick the forced package manager; pnpm wins over npm over yarn."""
    if use_pnpm:
        return PackageManager.PNPM
    if use_npm:
        return PackageManager.NPM
    if use_yarn:
        return PackageManager.YARN
    return None


def create(
    project_name: Optional[str] = typer.Argument(
        None, help="Directory to create (prompted for when omitted)"
    ),
    use_pnpm: bool = typer.Option(False, "--use-pnpm", help="Install with pnpm"),
    use_npm: bool = typer.Option(False, "--use-npm", help="Install with npm"),
    use_yarn: bool = typer.Option(False, "--use-yarn", help="Install with yarn"),
    typescript: bool = typer.Option(False, "--ts", help="Use the TypeScript template"),
    core: bool = typer.Option(
        False, "--core", help="Depend on puppeteer-core and bring your own Chrome"
    ),
    skip_chromium: bool = typer.Option(
        False,
        "--skip-chromium",
        help="Set PUPPETEER_SKIP_DOWNLOAD=1 during install",
    ),
    git: bool = typer.Option(False, "--git", help="git init and make a first commit"),
    install: bool = typer.Option(
        True, "--install/--no-install", help="Install dependencies after scaffolding"
    ),
    example: bool = typer.Option(
        True, "--example/--no-example", help="Write the example script"
    ),
    package_name: Optional[str] = typer.Option(
        None,
        "--package-name",
        help="Override the generated package.json name",
        callback=_package_name_callback,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffold a new Puppeteer automation project.

    Writes package.json, .gitignore, an example script under src/ and,
    for TypeScript, tsconfig.json. Optionally runs git init and the
    package manager's install; failures there only warn.
    """
    if not project_name:
        project_name = typer.prompt(PROMPT, default="", show_default=False).strip()
        if not project_name:
            err_console.print("[red]❌ Directory name is required.[/red]")
            raise typer.Exit(code=1)

    try:
        config = ScaffoldConfig.from_options(
            project_name,
            package_manager=_explicit_package_manager(use_pnpm, use_npm, use_yarn),
            package_name=package_name,
            env=os.environ,
            use_typescript=typescript,
            use_core=core,
            skip_chromium_download=skip_chromium,
            init_git=git,
            install=install,
            include_example=example,
        )
    except ValidationError as e:
        err_console.print(f"[red]❌ Invalid project settings:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    cwd = Path.cwd()
    try:
        result = write_project(config, cwd / config.project_name)
    except ProjectExistsError as e:
        err_console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    render_summary(result, console)
    run_post_actions(result)
    if result.installed is None:
        console.print("⏭ Skipped dependency installation.")
    render_next_steps(result, console, cwd)
