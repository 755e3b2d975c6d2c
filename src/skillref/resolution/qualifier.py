"""Qualify skill references to ``<plugin>:<skill>`` form.

Bare references get the prefix of the tier that holds the skill. References
already carrying a prefix are re-qualified when the prefix disagrees with the
tier the skill resolves to now; callers often guess the workspace slug without
seeing the project tier.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from skillref.constants.resolution import PROJECT_PLUGIN_NAME, QUALIFIER_SEPARATOR
from skillref.resolution.locator import locate_skill_tier
from skillref.types import QualificationResult, SkillInvocation

logger = logging.getLogger(__name__)

type DebugSink = Callable[[str], None]


def expected_prefix(
    skill_name: str,
    workspace_slug: str,
    workspace_root: Path | str | None = None,
    project_root: Path | str | None = None,
) -> str:
    """Return the plugin prefix *skill_name* should carry under the given roots.

    Without a workspace root the filesystem is not consulted and the skill is
    assumed to live in the workspace tier.
    """
    if workspace_root is None:
        return workspace_slug

    location = locate_skill_tier(skill_name, workspace_root, project_root)
    if location.tier == "project":
        return PROJECT_PLUGIN_NAME
    return workspace_slug


def qualify_skill_name(
    invocation: SkillInvocation | Mapping[str, Any],
    workspace_slug: str,
    workspace_root: Path | str | None = None,
    project_root: Path | str | None = None,
    debug: DebugSink | None = None,
) -> QualificationResult:
    """Qualify the ``skill`` field of *invocation*.

    Never raises for malformed input: a missing or non-string skill and a
    trailing-colon reference such as ``"ws:"`` come back unmodified. All other
    fields are copied through unchanged.
    """
    if not isinstance(invocation, SkillInvocation):
        invocation = SkillInvocation.from_mapping(invocation)

    skill = invocation.skill
    if not isinstance(skill, str):
        return QualificationResult(input=invocation, modified=False)

    prefix, separator, name = skill.partition(QUALIFIER_SEPARATOR)
    if not separator:
        name = skill
    if not name:
        return QualificationResult(input=invocation, modified=False)

    target = expected_prefix(name, workspace_slug, workspace_root, project_root)
    qualified = f"{target}{QUALIFIER_SEPARATOR}{name}"

    if not separator:
        message = f"Auto-qualified skill name: {skill} -> {qualified}"
    elif prefix == target:
        return QualificationResult(input=invocation, modified=False)
    else:
        message = f"Re-qualified skill name: {skill} -> {qualified}"

    logger.debug("%s", message)
    if debug is not None:
        debug(message)
    return QualificationResult(input=invocation.with_skill(qualified), modified=True)


def qualify_skill_names(
    invocations: Iterable[SkillInvocation | Mapping[str, Any]],
    workspace_slug: str,
    workspace_root: Path | str | None = None,
    project_root: Path | str | None = None,
    debug: DebugSink | None = None,
) -> tuple[QualificationResult, ...]:
    """Qualify a batch of invocations, preserving input order."""
    return tuple(
        qualify_skill_name(invocation, workspace_slug, workspace_root, project_root, debug)
        for invocation in invocations
    )
