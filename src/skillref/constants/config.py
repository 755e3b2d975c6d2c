"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillref.yaml"
DEFAULT_FALLBACK_SLUG: str = "workspace"

CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({"fallback_slug", "project_root"})
