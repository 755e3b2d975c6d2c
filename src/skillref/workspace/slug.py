"""Workspace slug derivation."""

from __future__ import annotations

import re
from pathlib import Path

from skillref.constants.resolution import PATH_SEPARATORS
from skillref.plugins import read_plugin_name

_SEPARATOR_PATTERN = re.compile("[" + re.escape("".join(PATH_SEPARATORS)) + "]")


def split_path_segments(path: Path | str) -> list[str]:
    """Split *path* on both ``/`` and ``\\``, dropping empty segments."""
    return [segment for segment in _SEPARATOR_PATTERN.split(str(path)) if segment]


def derive_workspace_slug(workspace_root: Path | str, fallback: str) -> str:
    """Return the prefix used to qualify workspace-tier skills.

    Precedence: declared plugin name, then the last path segment of
    *workspace_root*, then *fallback*.
    """
    declared = read_plugin_name(workspace_root)
    if declared is not None:
        return declared

    segments = split_path_segments(workspace_root)
    if segments:
        return segments[-1]
    return fallback


extract_workspace_slug = derive_workspace_slug
