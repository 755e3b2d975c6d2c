"""Configuration-related exceptions."""

from __future__ import annotations

from skillref.exceptions.base import SkillrefError


class ConfigError(SkillrefError, ValueError):
    """Raised when resolver configuration is invalid."""
