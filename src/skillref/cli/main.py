"""CLI entrypoint for Skillref."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from skillref import __version__
from skillref.config import SkillrefConfig, load_config
from skillref.constants.branding import CLI_DESCRIPTION
from skillref.exceptions import ConfigError
from skillref.resolution import locate_skill_tier, qualify_skill_names
from skillref.workspace import derive_workspace_slug

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skillref",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    slug = subparsers.add_parser("slug", help="Print the plugin prefix for workspace-tier skills")
    _add_workspace_arguments(slug)
    slug.add_argument("--fallback", default=None, help="Slug used when the root yields no name")

    locate = subparsers.add_parser("locate", help="Show which tier holds a skill")
    _add_workspace_arguments(locate)
    _add_project_argument(locate)
    locate.add_argument("name", help="Bare skill name")

    qualify = subparsers.add_parser("qualify", help="Qualify skill references to <plugin>:<skill>")
    _add_workspace_arguments(qualify)
    _add_project_argument(qualify)
    qualify.add_argument("--fallback", default=None, help="Slug used when the root yields no name")
    qualify.add_argument("skills", nargs="+", help="Skill references, bare or qualified")

    return parser


def _add_workspace_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-w", "--workspace-root", type=Path, required=True, help="Workspace root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show resolution diagnostics")


def _add_project_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-p", "--project-root", type=Path, default=None, help="Project root path")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    workspace_root = args.workspace_root.resolve()
    try:
        config = load_config(workspace_root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "slug":
        print(derive_workspace_slug(workspace_root, args.fallback or config.fallback_slug))
        return 0

    project_root = _effective_project_root(args, config)

    if args.command == "locate":
        location = locate_skill_tier(args.name, workspace_root, project_root)
        print(json.dumps({"name": args.name, "tier": location.tier, "path": _path_or_none(location.skill_dir)}))
        return 0

    if args.command == "qualify":
        workspace_slug = derive_workspace_slug(workspace_root, args.fallback or config.fallback_slug)
        results = qualify_skill_names(
            ({"skill": skill} for skill in args.skills),
            workspace_slug,
            workspace_root,
            project_root,
            debug=logger.info,
        )
        for result in results:
            print(json.dumps({"skill": result.input.skill, "modified": result.modified}))
        return 0

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _effective_project_root(args: argparse.Namespace, config: SkillrefConfig) -> Path | None:
    """Command-line project root wins over the configured one."""
    if args.project_root is not None:
        return args.project_root.resolve()
    return config.project_root


def _path_or_none(path: Path | None) -> str | None:
    return str(path) if path is not None else None


if __name__ == "__main__":
    raise SystemExit(main())
