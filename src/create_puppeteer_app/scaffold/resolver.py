"""Pure resolution of a ScaffoldConfig into a ProjectPlan.

Nothing here touches the filesystem, the environment, or a subprocess;
the same config always yields an identical plan.
"""

from __future__ import annotations

from create_puppeteer_app.models.config import PackageManager, ScaffoldConfig
from create_puppeteer_app.models.plan import Manifest, PostAction, ProjectPlan
from create_puppeteer_app.scaffold.templates import (
    GITIGNORE,
    TSCONFIG,
    ExampleScript,
    browser_package,
)

MANIFEST_PATH = "package.json"
GITIGNORE_PATH = ".gitignore"
TSCONFIG_PATH = "tsconfig.json"
ENTRY_STEM = "src/index"

SKIP_DOWNLOAD_ENV = "PUPPETEER_SKIP_DOWNLOAD"

TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "tsx": "latest",
    "@types/node": "latest",
    "typescript": "latest",
}

# yarn v1 installs when invoked without a subcommand
INSTALL_COMMANDS: dict[PackageManager, tuple[str, ...]] = {
    PackageManager.NPM: ("npm", "install"),
    PackageManager.PNPM: ("pnpm", "install"),
    PackageManager.YARN: ("yarn",),
}


def entry_path(config: ScaffoldConfig) -> str:
    """Return the entry script path, ``.ts`` or ``.mjs``."""
    return f"{ENTRY_STEM}.ts" if config.use_typescript else f"{ENTRY_STEM}.mjs"


def start_command(config: ScaffoldConfig) -> str:
    """Command shared by the ``start`` and ``dev`` manifest scripts."""
    if config.use_typescript:
        return f"tsx {entry_path(config)}"
    return f"node {entry_path(config)}"


def run_command(config: ScaffoldConfig) -> str:
    """The next-step command printed after scaffolding."""
    script = "dev" if config.use_typescript else "start"
    if config.package_manager is PackageManager.NPM:
        return "npm start" if script == "start" else "npm run dev"
    return f"{config.package_manager.value} {script}"


def build_manifest(config: ScaffoldConfig) -> Manifest:
    """Assemble the package.json record."""
    command = start_command(config)
    return Manifest(
        name=config.package_name,
        scripts={"start": command, "dev": command},
        dependencies={browser_package(config.use_core): "latest"},
        dev_dependencies=dict(TYPESCRIPT_DEV_DEPENDENCIES) if config.use_typescript else {},
    )


def build_example(config: ScaffoldConfig) -> str:
    """Entry script contents; empty when the example is disabled."""
    if not config.include_example:
        return ""
    return ExampleScript.for_config(config).render()


def post_actions(config: ScaffoldConfig) -> tuple[PostAction, ...]:
    """Ordered post-write actions: git first, then install."""
    actions: list[PostAction] = []
    if config.init_git:
        actions.append(PostAction.INIT_GIT)
    if config.install:
        actions.append(PostAction.INSTALL)
    return tuple(actions)


def resolve(config: ScaffoldConfig) -> ProjectPlan:
    """Compute the full project plan for ``config``.

    Args:
        config: The invocation's resolved configuration.

    Returns:
        A ProjectPlan holding the manifest, ignore file, optional
        tsconfig, exactly one entry script, and the post-write actions.
    """
    manifest = build_manifest(config)
    entry = entry_path(config)

    files: dict[str, str] = {
        MANIFEST_PATH: manifest.to_json(),
        GITIGNORE_PATH: GITIGNORE,
    }
    if config.use_typescript:
        files[TSCONFIG_PATH] = TSCONFIG
    files[entry] = build_example(config)

    install_env: dict[str, str] = {}
    if config.skip_chromium_download:
        install_env[SKIP_DOWNLOAD_ENV] = "1"

    return ProjectPlan(
        files=files,
        entry_path=entry,
        manifest=manifest,
        package_manager=config.package_manager,
        use_typescript=config.use_typescript,
        use_core=config.use_core,
        post_actions=post_actions(config),
        install_command=INSTALL_COMMANDS[config.package_manager],
        install_env=install_env,
        run_command=run_command(config),
    )
