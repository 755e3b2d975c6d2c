"""Skillref package."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from skillref.constants.resolution import PROJECT_PLUGIN_NAME
from skillref.plugins import read_plugin_name
from skillref.resolution import locate_skill_tier, qualify_skill_name, qualify_skill_names
from skillref.types import QualificationResult, SkillInvocation, TierLocation
from skillref.workspace import derive_workspace_slug, extract_workspace_slug

__all__ = [
    "PROJECT_PLUGIN_NAME",
    "QualificationResult",
    "SkillInvocation",
    "TierLocation",
    "__version__",
    "derive_workspace_slug",
    "extract_workspace_slug",
    "locate_skill_tier",
    "qualify_skill_name",
    "qualify_skill_names",
    "read_plugin_name",
]

try:
    __version__ = version("skillref")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
