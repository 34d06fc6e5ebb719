"""Project plan models produced by the resolver.

A ProjectPlan is the complete description of what the driver writes
and runs: relative file paths with their contents, plus the ordered
post-write actions and the commands they need.
"""

from __future__ import annotations

import json
from enum import Enum

from pydantic import BaseModel, Field

from create_puppeteer_app.models.config import PackageManager


class PostAction(str, Enum):
    """Side-effecting steps run after the files are written."""

    INIT_GIT = "init_git"
    INSTALL = "install"


class Manifest(BaseModel):
    """The package.json record for the generated project."""

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    name: str
    version: str = "0.1.0"
    private: bool = True
    type: str = "module"
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    def to_json(self) -> str:
        """Render as two-space indented JSON with manifest key names."""
        return json.dumps(self.model_dump(by_alias=True), indent=2)


class ProjectPlan(BaseModel):
    """Everything the driver needs to materialise one project."""

    model_config = {"extra": "forbid", "frozen": True}

    files: dict[str, str]
    entry_path: str
    manifest: Manifest
    package_manager: PackageManager
    use_typescript: bool
    use_core: bool
    post_actions: tuple[PostAction, ...] = ()
    install_command: tuple[str, ...] = ()
    install_env: dict[str, str] = Field(default_factory=dict)
    run_command: str
