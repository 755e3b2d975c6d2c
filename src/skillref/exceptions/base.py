"""Root exception for Skillref."""

from __future__ import annotations


class SkillrefError(Exception):
    """Base class for all errors raised by Skillref."""
