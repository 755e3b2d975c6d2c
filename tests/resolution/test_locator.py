"""Tests for tiered skill lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillref.resolution import build_tier_sources, is_locatable_skill_name, locate_skill_tier


def test_workspace_only_skill(workspace_root: Path, project_root: Path) -> None:
    location = locate_skill_tier("ws-only", workspace_root, project_root)

    assert location.tier == "workspace"
    assert location.skill_dir == workspace_root / "skills" / "ws-only"
    assert location.found


def test_project_only_skill(workspace_root: Path, project_root: Path) -> None:
    location = locate_skill_tier("proj-only", workspace_root, project_root)

    assert location.tier == "project"
    assert location.skill_dir == project_root / ".agents" / "skills" / "proj-only"


def test_project_tier_wins_ties(workspace_root: Path, project_root: Path) -> None:
    assert locate_skill_tier("shared-skill", workspace_root, project_root).tier == "project"


def test_unknown_skill_is_none(workspace_root: Path, project_root: Path) -> None:
    location = locate_skill_tier("nonexistent", workspace_root, project_root)

    assert location.tier == "none"
    assert location.skill_dir is None
    assert not location.found


def test_without_project_root_only_workspace_checked(workspace_root: Path) -> None:
    assert locate_skill_tier("shared-skill", workspace_root).tier == "workspace"
    assert locate_skill_tier("proj-only", workspace_root).tier == "none"


def test_directory_without_skill_markdown_is_not_a_skill(tmp_path: Path) -> None:
    (tmp_path / "skills" / "empty-dir").mkdir(parents=True)

    assert locate_skill_tier("empty-dir", tmp_path).tier == "none"


def test_skill_markdown_file_at_tier_level_is_not_a_skill(tmp_path: Path) -> None:
    skills_dir = tmp_path / "skills"
    skills_dir.mkdir()
    (skills_dir / "flat").write_text("not a directory", encoding="utf-8")

    assert locate_skill_tier("flat", tmp_path).tier == "none"


def test_missing_roots_are_none(tmp_path: Path) -> None:
    assert locate_skill_tier("anything", tmp_path / "no-ws", tmp_path / "no-project").tier == "none"


def test_each_call_reads_current_filesystem(tmp_path: Path, make_skill) -> None:
    workspace = tmp_path / "ws"
    project = tmp_path / "proj"
    make_skill(workspace / "skills", "late")

    assert locate_skill_tier("late", workspace, project).tier == "workspace"

    make_skill(project / ".agents" / "skills", "late")

    assert locate_skill_tier("late", workspace, project).tier == "project"


@pytest.mark.parametrize(
    "name",
    ["", ".", "..", "ws:commit", "nested/skill", "..\\escape", "../skills/ws-only"],
    ids=["empty", "dot", "dotdot", "qualified", "slash", "backslash", "traversal"],
)
def test_non_bare_names_never_match(workspace_root: Path, project_root: Path, name: str) -> None:
    assert not is_locatable_skill_name(name)
    assert locate_skill_tier(name, workspace_root, project_root).tier == "none"


def test_tier_sources_ordered_by_priority(tmp_path: Path) -> None:
    sources = build_tier_sources(tmp_path / "ws", tmp_path / "proj")

    assert [source.tier for source in sources] == ["project", "workspace"]
    assert sources[0].skills_dir == tmp_path / "proj" / ".agents" / "skills"
    assert sources[1].skills_dir == tmp_path / "ws" / "skills"


def test_tier_sources_without_project(tmp_path: Path) -> None:
    sources = build_tier_sources(str(tmp_path))

    assert len(sources) == 1
    assert sources[0].tier == "workspace"
    assert sources[0].root == tmp_path
