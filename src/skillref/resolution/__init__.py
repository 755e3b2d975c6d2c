"""Skill reference resolution: tier lookup and qualification."""

from .locator import build_tier_sources, is_locatable_skill_name, locate_skill_tier
from .qualifier import expected_prefix, qualify_skill_name, qualify_skill_names

__all__ = [
    "build_tier_sources",
    "expected_prefix",
    "is_locatable_skill_name",
    "locate_skill_tier",
    "qualify_skill_name",
    "qualify_skill_names",
]
