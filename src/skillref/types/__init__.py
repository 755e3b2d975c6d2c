"""Shared type aliases and records for Skillref."""

from .common import JsonObject, JsonScalar, JsonValue, SkillTier
from .resolution import QualificationResult, SkillInvocation, TierLocation, TierSource

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "QualificationResult",
    "SkillInvocation",
    "SkillTier",
    "TierLocation",
    "TierSource",
]
