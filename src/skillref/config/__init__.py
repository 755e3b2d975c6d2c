"""Configuration loading for Skillref."""

from __future__ import annotations

from skillref.config.loader import load_config
from skillref.config.model import SkillrefConfig

__all__ = ["SkillrefConfig", "load_config"]
