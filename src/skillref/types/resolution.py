"""Typed records passed between the locator, qualifier, and callers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from skillref.types.common import SkillTier

SKILL_FIELD = "skill"


@dataclass(frozen=True)
class SkillInvocation:
    """A skill tool-call input: the ``skill`` field plus every sibling field.

    ``extras`` is a read-only, field-level copy of the siblings; values are
    shared with the caller, never copied. ``has_skill`` distinguishes an absent
    ``skill`` key from one set to ``None`` so that ``to_dict`` reproduces the
    caller's shape.
    """

    skill: object = None
    extras: Mapping[str, Any] = field(default_factory=dict)
    has_skill: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SkillInvocation:
        """Split a raw tool input into the skill field and a passthrough bag."""
        extras = {key: value for key, value in data.items() if key != SKILL_FIELD}
        return cls(skill=data.get(SKILL_FIELD), extras=extras, has_skill=SKILL_FIELD in data)

    def with_skill(self, skill: str) -> SkillInvocation:
        """Return a copy differing only in the skill field."""
        return SkillInvocation(skill=skill, extras=self.extras, has_skill=True)

    def to_dict(self) -> dict[str, Any]:
        """Render back to a plain mapping, ``skill`` first."""
        rendered: dict[str, Any] = {}
        if self.has_skill:
            rendered[SKILL_FIELD] = self.skill
        rendered.update(self.extras)
        return rendered


@dataclass(frozen=True)
class QualificationResult:
    """Outcome of qualifying one skill invocation."""

    input: SkillInvocation
    modified: bool


@dataclass(frozen=True)
class TierSource:
    """One ranked skill registry: its tier label, root, and skills directory."""

    tier: SkillTier
    root: Path
    skills_dir: Path


@dataclass(frozen=True)
class TierLocation:
    """Which tier, if any, holds a named skill."""

    tier: SkillTier
    skill_dir: Path | None = None

    @property
    def found(self) -> bool:
        return self.tier != "none"
