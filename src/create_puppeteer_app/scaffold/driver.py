"""Effectful side of scaffolding: writes the plan and runs post actions.

Pre-write problems (an existing project) are fatal and raised before
anything touches the disk. git and install failures are downgraded to
warnings since the user can retry them by hand.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from create_puppeteer_app.models.config import ScaffoldConfig
from create_puppeteer_app.models.plan import PostAction, ProjectPlan
from create_puppeteer_app.scaffold.resolver import MANIFEST_PATH, resolve

console = Console()
err_console = Console(stderr=True)

GIT_COMMIT_MESSAGE = "chore: initial scaffold"


class ProjectExistsError(Exception):
    """Raised when the target directory already holds a project manifest."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(f'Directory "{directory.name}" already contains a project.')


class CommandError(Exception):
    """Raised when a subprocess cannot start or exits non-zero."""

    def __init__(self, command: Sequence[str], returncode: int | None) -> None:
        self.command = list(command)
        self.returncode = returncode
        joined = " ".join(self.command)
        if returncode is None:
            message = f"{joined} could not be started"
        else:
            message = f"{joined} exited with code {returncode}"
        super().__init__(message)


@dataclass
class ScaffoldResult:
    """Outcome of one scaffold run.

    ``git_initialized`` and ``installed`` are None when the step was
    not requested, otherwise whether it succeeded.
    """

    directory: Path
    plan: ProjectPlan
    written: list[str] = field(default_factory=list)
    git_initialized: bool | None = None
    installed: bool | None = None


def ensure_target_available(directory: Path) -> None:
    """Fail if ``directory`` already contains a package.json."""
    if (directory / MANIFEST_PATH).exists():
        raise ProjectExistsError(directory)


def write_plan(plan: ProjectPlan, directory: Path) -> list[str]:
    """Write every planned file under ``directory``.

    Returns:
        Relative paths written, in plan order.
    """
    (directory / "src").mkdir(parents=True, exist_ok=True)
    written: list[str] = []
    for relative_path, content in plan.files.items():
        target = directory / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        written.append(relative_path)
    return written


def run_command(
    command: Sequence[str],
    cwd: Path,
    env: Mapping[str, str] | None = None,
) -> None:
    """Run ``command`` in ``cwd`` with the terminal's standard streams.

    Raises:
        CommandError: If the executable is missing or exits non-zero.
    """
    try:
        result = subprocess.run(
            list(command),
            cwd=cwd,
            env=dict(env) if env is not None else None,
        )
    except OSError as e:
        raise CommandError(command, None) from e
    if result.returncode != 0:
        raise CommandError(command, result.returncode)


def init_git(directory: Path) -> bool:
    """git init, stage everything, and make the first commit."""
    try:
        run_command(["git", "init"], directory)
        run_command(["git", "add", "-A"], directory)
        run_command(["git", "commit", "-m", GIT_COMMIT_MESSAGE], directory)
    except CommandError as e:
        err_console.print(
            f"[yellow]⚠ Skipped git init (git not available?): {escape(str(e))}[/yellow]"
        )
        return False
    console.print("[green]✅ Initialized git repo.[/green]")
    return True


def install_dependencies(plan: ProjectPlan, directory: Path) -> bool:
    """Run the package manager's install with the plan's env overrides."""
    env = {**os.environ, **plan.install_env}
    console.print("\n\U0001f4e6 Installing dependencies...")
    try:
        run_command(plan.install_command, directory, env=env)
    except CommandError as e:
        err_console.print(
            f"[yellow]⚠ Dependency install failed ({escape(str(e))}). "
            f"You can run `{escape(' '.join(plan.install_command))}` manually later.[/yellow]"
        )
        return False
    console.print("[green]✅ Install complete.[/green]")
    return True


def write_project(config: ScaffoldConfig, directory: Path) -> ScaffoldResult:
    """Check the target, resolve the plan, and write its files.

    Raises:
        ProjectExistsError: If ``directory`` already holds a package.json.
    """
    directory = directory.resolve()
    ensure_target_available(directory)

    plan = resolve(config)
    result = ScaffoldResult(directory=directory, plan=plan)
    result.written = write_plan(plan, directory)
    return result


def run_post_actions(result: ScaffoldResult) -> ScaffoldResult:
    """Run the plan's post actions in order, recording their outcome."""
    for action in result.plan.post_actions:
        if action is PostAction.INIT_GIT:
            result.git_initialized = init_git(result.directory)
        elif action is PostAction.INSTALL:
            result.installed = install_dependencies(result.plan, result.directory)
    return result


def scaffold_project(config: ScaffoldConfig, directory: Path) -> ScaffoldResult:
    """Create the project described by ``config`` in ``directory``.

    Args:
        config: Resolved scaffold configuration.
        directory: Target project directory (created if absent).

    Returns:
        A ScaffoldResult describing what was written and run.

    Raises:
        ProjectExistsError: If ``directory`` already holds a package.json.
    """
    return run_post_actions(write_project(config, directory))
