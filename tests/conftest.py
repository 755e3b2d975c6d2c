"""Shared pytest fixtures that build workspace and project skill trees."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

WORKSPACE_SLUG = "my-workspace"


def write_skill(skills_dir: Path, name: str, title: str | None = None) -> Path:
    """Create ``<skills_dir>/<name>/SKILL.md`` and return the skill directory."""
    skill_dir = skills_dir / name
    skill_dir.mkdir(parents=True, exist_ok=True)
    (skill_dir / "SKILL.md").write_text(
        f"---\nname: {title or name}\ndescription: test\n---\n",
        encoding="utf-8",
    )
    return skill_dir


def write_plugin_manifest(root: Path, payload: object) -> Path:
    """Write ``.claude-plugin/plugin.json`` under *root*; strings are written raw."""
    manifest_dir = root / ".claude-plugin"
    manifest_dir.mkdir(parents=True, exist_ok=True)
    path = manifest_dir / "plugin.json"
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Workspace with ``ws-only`` and ``shared-skill`` under ``skills/``."""
    root = tmp_path / WORKSPACE_SLUG
    write_skill(root / "skills", "ws-only", "WS Only")
    write_skill(root / "skills", "shared-skill", "WS Shared")
    return root


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project with ``proj-only`` and ``shared-skill`` under ``.agents/skills/``."""
    root = tmp_path / "my-project"
    write_skill(root / ".agents" / "skills", "proj-only", "Proj Only")
    write_skill(root / ".agents" / "skills", "shared-skill", "Proj Shared")
    return root


@pytest.fixture
def make_skill():
    """Return the ``write_skill`` helper."""
    return write_skill


@pytest.fixture
def make_manifest():
    """Return the ``write_plugin_manifest`` helper."""
    return write_plugin_manifest
