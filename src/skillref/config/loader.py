"""Config loading and normalization for Skillref."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillref.config.model import SkillrefConfig
from skillref.constants.config import CONFIG_ALLOWED_KEYS, CONFIG_FILENAME, DEFAULT_FALLBACK_SLUG
from skillref.exceptions import ConfigError


def load_config(workspace_root: Path, config_path: Path | None = None) -> SkillrefConfig:
    """Load and validate settings from ``skillref.yaml`` or an explicit path."""
    workspace_root = workspace_root.resolve()
    path = config_path.resolve() if config_path else (workspace_root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillrefConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    fallback_slug = raw.get("fallback_slug", DEFAULT_FALLBACK_SLUG)
    if not isinstance(fallback_slug, str) or not fallback_slug.strip():
        raise ConfigError("fallback_slug must be a non-empty string")

    return SkillrefConfig(
        fallback_slug=fallback_slug,
        project_root=_resolve_project_root(raw.get("project_root"), workspace_root),
    )


def _resolve_project_root(value: Any, workspace_root: Path) -> Path | None:
    """Resolve ``project_root`` relative to the workspace root."""
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("project_root must be a non-empty string path")
    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        candidate = workspace_root / candidate
    return candidate.resolve()
