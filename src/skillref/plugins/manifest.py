"""Read the declared plugin identity from a tier root."""

from __future__ import annotations

import logging
from pathlib import Path

from skillref.constants.resolution import (
    PLUGIN_MANIFEST_DIRNAME,
    PLUGIN_MANIFEST_FILENAME,
    PLUGIN_NAME_FIELD,
)
from skillref.io import load_json_file

logger = logging.getLogger(__name__)


def plugin_manifest_path(tier_root: Path | str) -> Path:
    """Return the ``.claude-plugin/plugin.json`` location under *tier_root*."""
    return Path(tier_root) / PLUGIN_MANIFEST_DIRNAME / PLUGIN_MANIFEST_FILENAME


def read_plugin_name(tier_root: Path | str) -> str | None:
    """Return the plugin ``name`` declared at *tier_root*, or ``None`` if undeclared.

    Missing, unreadable, or malformed manifests are all treated as undeclared.
    The name is returned verbatim.
    """
    if not str(tier_root):
        return None

    path = plugin_manifest_path(tier_root)
    try:
        if not path.is_file():
            return None
        payload = load_json_file(path)
    except (OSError, ValueError, RecursionError) as exc:
        logger.debug("Ignoring unreadable plugin manifest %s: %s", path, exc)
        return None

    if not isinstance(payload, dict):
        logger.debug("Ignoring plugin manifest %s: top level is not an object", path)
        return None

    name = payload.get(PLUGIN_NAME_FIELD)
    if isinstance(name, str) and name:
        return name
    return None
