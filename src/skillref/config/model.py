"""Config data model for Skillref."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillref.constants.config import DEFAULT_FALLBACK_SLUG


@dataclass(frozen=True)
class SkillrefConfig:
    """Resolved settings for one workspace."""

    fallback_slug: str = DEFAULT_FALLBACK_SLUG
    project_root: Path | None = None
