"""Rich terminal output for scaffold summaries and next steps."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from create_puppeteer_app.scaffold.driver import ScaffoldResult
from create_puppeteer_app.scaffold.templates import EXECUTABLE_PATH_ENV

_TEMPLATE_LABELS: dict[bool, str] = {
    True: "TypeScript",
    False: "JavaScript (ESM)",
}

_BROWSER_LABELS: dict[bool, str] = {
    True: "puppeteer-core (bring your own Chrome)",
    False: "puppeteer (bundled Chromium)",
}


def render_summary(result: ScaffoldResult, console: Console) -> None:
    """Print what was created and which variant was chosen."""
    plan = result.plan
    console.print(f"\n\U0001f4c1 Created [bold]{escape(result.directory.name)}[/bold]\n")
    console.print(f"▶ Package manager: {plan.package_manager.value}")
    console.print(f"▶ Template: {_TEMPLATE_LABELS[plan.use_typescript]}")
    console.print(f"▶ Browser lib: {_BROWSER_LABELS[plan.use_core]}")
    if plan.use_core:
        console.print(
            f"   Note: Set {EXECUTABLE_PATH_ENV} env var to your "
            "Chrome/Chromium executable."
        )


def next_steps(result: ScaffoldResult, cwd: Path) -> list[str]:
    """Commands the user should run next, in order.

    The ``cd`` step is omitted when the project was created in ``cwd``.
    """
    steps: list[str] = []
    if result.directory != cwd.resolve():
        steps.append(f"cd {json.dumps(str(result.directory))}")
    steps.append(result.plan.run_command)
    return steps


def render_next_steps(result: ScaffoldResult, console: Console, cwd: Path) -> None:
    """Print the closing banner and next-step commands."""
    console.print("\n\U0001f389 [bold green]All set![/bold green] Next steps:\n")
    for step in next_steps(result, cwd):
        console.print(f"  {escape(step)}", soft_wrap=True)
    console.print()
