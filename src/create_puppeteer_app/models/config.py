"""Scaffold configuration model.

Captures one invocation's choices (package manager, template kind,
browser library, post-write actions) as an immutable value built once
at the CLI boundary and passed into the resolver.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Mapping

from pydantic import BaseModel, field_validator

# Characters allowed in a generated manifest name.
_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9\-_~.]", re.IGNORECASE | re.ASCII)
# Overrides may carry an npm scope, e.g. "@acme/scraper".
_VALID_PACKAGE_NAME = re.compile(r"^(@[a-z0-9\-_~.]+/)?[a-z0-9\-_~.]+$")
_HAS_ALNUM = re.compile(r"[a-z0-9]")

FALLBACK_PACKAGE_NAME = "puppeteer-app"
USER_AGENT_ENV = "npm_config_user_agent"


class PackageManager(str, Enum):
    """Package managers the scaffold knows how to drive."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"


def sanitize_package_name(project_name: str) -> str:
    """Derive a manifest name from a project directory name.

    Every character outside ``[A-Za-z0-9-_~.]`` becomes ``-`` and the
    result is lowercased, so ``"My Scraper!"`` gives ``"my-scraper-"``.
    Names left without any letter or digit (``"."``, emoji-only names)
    fall back to ``puppeteer-app``.
    """
    candidate = _INVALID_NAME_CHARS.sub("-", project_name).lower()
    if not _HAS_ALNUM.search(candidate):
        return FALLBACK_PACKAGE_NAME
    return candidate


def validate_package_name(value: str) -> str:
    """Check an explicit manifest name override.

    Raises:
        ValueError: If the value looks like a flag or has invalid characters.
    """
    if value.startswith("--"):
        raise ValueError(f"package name {value!r} looks like a flag")
    if not _VALID_PACKAGE_NAME.match(value):
        raise ValueError(
            f"package name {value!r} may only contain lowercase letters, "
            "digits, '-', '_', '~' and '.', with an optional '@scope/' prefix"
        )
    return value


def detect_package_manager(user_agent: str | None) -> PackageManager | None:
    """Guess the invoking package manager from ``npm_config_user_agent``."""
    if not user_agent:
        return None
    if user_agent.startswith("pnpm"):
        return PackageManager.PNPM
    if user_agent.startswith("yarn"):
        return PackageManager.YARN
    return None


def resolve_package_manager(
    explicit: PackageManager | None,
    env: Mapping[str, str] | None = None,
) -> PackageManager:
    """Apply the precedence explicit flag > detected > npm."""
    if explicit is not None:
        return explicit
    detected = detect_package_manager((env or {}).get(USER_AGENT_ENV))
    return detected or PackageManager.NPM


class ScaffoldConfig(BaseModel):
    """Resolved configuration for a single scaffold invocation."""

    model_config = {"extra": "forbid", "frozen": True}

    project_name: str
    package_name: str
    package_manager: PackageManager = PackageManager.NPM
    use_typescript: bool = False
    use_core: bool = False
    skip_chromium_download: bool = False
    init_git: bool = False
    install: bool = True
    include_example: bool = True

    @field_validator("project_name")
    @classmethod
    def _project_name_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        return value

    @field_validator("package_name")
    @classmethod
    def _package_name_valid(cls, value: str) -> str:
        return validate_package_name(value)

    @classmethod
    def from_options(
        cls,
        project_name: str,
        *,
        package_manager: PackageManager | None = None,
        package_name: str | None = None,
        env: Mapping[str, str] | None = None,
        **flags: bool,
    ) -> ScaffoldConfig:
        """Build a config from CLI options and an explicit environment.

        Args:
            project_name: Target directory name as typed by the user.
            package_manager: Manager forced by a ``--use-*`` flag, if any.
            package_name: Explicit manifest name override.
            env: Environment used for package-manager detection.
            **flags: Remaining boolean fields (``use_typescript``, ...).

        Raises:
            pydantic.ValidationError: If the name or override is invalid.
        """
        return cls(
            project_name=project_name,
            package_name=(
                package_name
                if package_name is not None
                else sanitize_package_name(project_name.strip())
            ),
            package_manager=resolve_package_manager(package_manager, env),
            **flags,
        )
