"""Tiered skill lookup across project and workspace registries."""

from __future__ import annotations

import logging
from pathlib import Path

from skillref.constants.resolution import (
    PATH_SEPARATORS,
    PROJECT_SKILLS_SUBDIR,
    QUALIFIER_SEPARATOR,
    RESERVED_SKILL_NAMES,
    SKILL_MARKDOWN_FILENAME,
    WORKSPACE_SKILLS_SUBDIR,
)
from skillref.types import TierLocation, TierSource

logger = logging.getLogger(__name__)


def build_tier_sources(
    workspace_root: Path | str,
    project_root: Path | str | None = None,
) -> tuple[TierSource, ...]:
    """Return tier sources in priority order, highest first."""
    sources: list[TierSource] = []
    if project_root is not None:
        project = Path(project_root)
        sources.append(
            TierSource(tier="project", root=project, skills_dir=project.joinpath(*PROJECT_SKILLS_SUBDIR))
        )
    workspace = Path(workspace_root)
    sources.append(
        TierSource(tier="workspace", root=workspace, skills_dir=workspace.joinpath(*WORKSPACE_SKILLS_SUBDIR))
    )
    return tuple(sources)


def is_locatable_skill_name(skill_name: str) -> bool:
    """Return True when *skill_name* is a bare name that maps to one directory entry."""
    if not skill_name or skill_name in RESERVED_SKILL_NAMES:
        return False
    if QUALIFIER_SEPARATOR in skill_name:
        return False
    return not any(separator in skill_name for separator in PATH_SEPARATORS)


def locate_skill_tier(
    skill_name: str,
    workspace_root: Path | str,
    project_root: Path | str | None = None,
) -> TierLocation:
    """Find the highest-priority tier holding *skill_name*.

    The project tier wins whenever both tiers hold the skill. Returns a
    ``"none"`` location when no tier does; the caller picks the fallback.
    """
    if not is_locatable_skill_name(skill_name):
        return TierLocation(tier="none")

    for source in build_tier_sources(workspace_root, project_root):
        skill_dir = source.skills_dir / skill_name
        if _has_skill_content(skill_dir):
            logger.debug("Located skill %s in %s tier at %s", skill_name, source.tier, skill_dir)
            return TierLocation(tier=source.tier, skill_dir=skill_dir)

    return TierLocation(tier="none")


def _has_skill_content(skill_dir: Path) -> bool:
    try:
        return skill_dir.is_dir() and (skill_dir / SKILL_MARKDOWN_FILENAME).is_file()
    except OSError:
        return False
