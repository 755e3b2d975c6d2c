"""Shared exception hierarchy for Skillref."""

from __future__ import annotations

from .base import SkillrefError
from .config import ConfigError

__all__ = ["ConfigError", "SkillrefError"]
