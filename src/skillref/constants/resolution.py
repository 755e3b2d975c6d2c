"""Constants for tier layout, plugin manifests, and reference parsing."""

from __future__ import annotations

PLUGIN_MANIFEST_DIRNAME: str = ".claude-plugin"
PLUGIN_MANIFEST_FILENAME: str = "plugin.json"
PLUGIN_NAME_FIELD: str = "name"

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
WORKSPACE_SKILLS_SUBDIR: tuple[str, ...] = ("skills",)
PROJECT_SKILLS_SUBDIR: tuple[str, ...] = (".agents", "skills")

# Prefix for every project-tier skill, whatever the project manifest declares.
PROJECT_PLUGIN_NAME: str = ".agents"

QUALIFIER_SEPARATOR: str = ":"
PATH_SEPARATORS: tuple[str, ...] = ("/", "\\")
RESERVED_SKILL_NAMES: frozenset[str] = frozenset({".", ".."})
