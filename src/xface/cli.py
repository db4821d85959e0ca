# CLI interface for xface
import argparse
import logging
import sys
import traceback
from pathlib import Path

from xface import __version__
from xface.errors import XFaceError
from xface.fetcher import LibraryFetcher
from xface.hooks import HookDispatcher
from xface.platform_ops import (
    add_platforms,
    list_platforms_report,
    prepare,
    remove_platforms,
    update_platform,
)
from xface.project import find_project_root

# ABOUTME: Exit codes
# 0 = success, 1 = operation failed, 2 = not inside a project
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NOT_A_PROJECT = 2

logger = logging.getLogger("xface")


def configure_logging(verbose: bool, silent: bool) -> None:
    """Route xface log records to stdout.

    ABOUTME: -d/--verbose shows debug output, --silent only warnings and errors
    """
    if verbose:
        level = logging.DEBUG
    elif silent:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)


def cmd_platform(args: argparse.Namespace, project_root: Path) -> int:
    """Execute platform add/remove/update/list."""
    hooks = HookDispatcher(project_root)
    action = args.action or "list"

    if action in ("list", "ls"):
        print(list_platforms_report(project_root, hooks))
    elif action == "add":
        fetcher = LibraryFetcher(hooks)
        add_platforms(project_root, args.platforms, hooks, fetcher)
    elif action in ("remove", "rm"):
        remove_platforms(project_root, args.platforms, hooks)
    elif action in ("update", "up"):
        fetcher = LibraryFetcher(hooks)
        update_platform(project_root, args.platforms, hooks, fetcher)
    return EXIT_SUCCESS


def cmd_prepare(args: argparse.Namespace, project_root: Path) -> int:
    prepared = prepare(project_root, args.platforms, HookDispatcher(project_root))
    logger.info(f"Prepared {', '.join(prepared)}")
    return EXIT_SUCCESS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xface",
        description="Manage xFace multi-platform application projects"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"xface {__version__}"
    )
    parser.add_argument(
        "-d", "--verbose",
        action="store_true",
        help="Show debug output"
    )
    parser.add_argument(
        "--silent",
        action="store_true",
        help="Only show warnings and errors"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    platform_parser = subparsers.add_parser(
        "platform",
        help="Add, remove, update or list platforms"
    )
    platform_parser.add_argument(
        "action",
        nargs="?",
        choices=["add", "remove", "rm", "update", "up", "list", "ls"],
        help="Platform sub-command (default: list)"
    )
    platform_parser.add_argument(
        "platforms",
        nargs="*",
        help="Platform names"
    )

    prepare_parser = subparsers.add_parser(
        "prepare",
        help="Copy web assets and config into platform projects"
    )
    prepare_parser.add_argument(
        "platforms",
        nargs="*",
        help="Platform names (default: all installed)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for xface CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.silent)

    if args.command is None:
        parser.print_help()
        return EXIT_SUCCESS

    project_root = find_project_root()
    if project_root is None:
        print("Error: Current working directory is not a xFace-based project.")
        return EXIT_NOT_A_PROJECT

    try:
        if args.command == "platform":
            return cmd_platform(args, project_root)
        return cmd_prepare(args, project_root)
    except XFaceError as e:
        if args.verbose:
            traceback.print_exc()
        print(f"Error: {e}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
