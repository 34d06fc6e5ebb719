"""Scaffold data models - re-exports all public model classes."""

from create_puppeteer_app.models.config import PackageManager, ScaffoldConfig
from create_puppeteer_app.models.plan import Manifest, PostAction, ProjectPlan

__all__ = [
    "Manifest",
    "PackageManager",
    "PostAction",
    "ProjectPlan",
    "ScaffoldConfig",
]
