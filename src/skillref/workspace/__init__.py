"""Workspace naming helpers."""

from .slug import derive_workspace_slug, extract_workspace_slug, split_path_segments

__all__ = ["derive_workspace_slug", "extract_workspace_slug", "split_path_segments"]
