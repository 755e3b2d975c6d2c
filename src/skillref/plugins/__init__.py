"""Plugin manifest helpers."""

from .manifest import plugin_manifest_path, read_plugin_name

__all__ = ["plugin_manifest_path", "read_plugin_name"]
