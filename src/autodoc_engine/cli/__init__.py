"""Unified CLI for autodoc.

Usage:
    autodoc docs update <doc> <command-file> [--dry-run]
    autodoc docs sync [--docs-dir <dir>] [--commands-dir <dir>] [--dry-run]
    autodoc docs check [--docs-dir <dir>] [--commands-dir <dir>]
    autodoc registry show <option>
    autodoc registry list
    autodoc registry validate
    autodoc commands list [--commands-dir <dir>]
    autodoc commands validate [--commands-dir <dir>]
"""

import argparse
import os
import sys
from pathlib import Path

from autodoc_engine.cli.commands import cmd_commands_list, cmd_commands_validate
from autodoc_engine.cli.docs import cmd_docs_check, cmd_docs_sync, cmd_docs_update
from autodoc_engine.cli.registry import (
    cmd_registry_list,
    cmd_registry_show,
    cmd_registry_validate,
)


def _resolve_root(args: argparse.Namespace) -> Path:
    """Resolve the project root from args or environment."""
    raw = getattr(args, "root", None)
    if raw:
        return Path(raw).expanduser().resolve()
    env = os.environ.get("AUTODOC_ROOT")
    if env:
        return Path(env).expanduser().resolve()
    return Path.cwd()


def _add_dir_args(parser: argparse.ArgumentParser, docs: bool = True) -> None:
    if docs:
        parser.add_argument(
            "--docs-dir", default=None,
            help="Directory of command docs (default: <root>/docs/commands)",
        )
    parser.add_argument(
        "--commands-dir", default=None,
        help="Directory of command descriptors (default: <root>/commands)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autodoc",
        description="Regenerate autogenerated sections of command docs",
    )
    parser.add_argument(
        "--root", default=None,
        help="Project root (default: $AUTODOC_ROOT or current directory)",
    )
    parser.add_argument(
        "--definitions", default=None,
        help="Path to definitions.yaml",
    )
    parser.add_argument(
        "--aliases", default=None,
        help="Path to aliases.yaml",
    )
    sub = parser.add_subparsers(dest="command")

    # docs
    docs = sub.add_parser("docs", help="Command doc generation")
    docs_sub = docs.add_subparsers(dest="subcommand")

    upd = docs_sub.add_parser("update", help="Update a single doc")
    upd.add_argument("doc", help="Path to the markdown doc")
    upd.add_argument("command_file", help="Path to the command descriptor")
    upd.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    sync = docs_sub.add_parser("sync", help="Update every doc in the docs directory")
    _add_dir_args(sync)
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )

    check = docs_sub.add_parser(
        "check", help="Fail if any doc is out of date",
    )
    _add_dir_args(check)

    # registry
    reg = sub.add_parser("registry", help="Config option registry")
    reg_sub = reg.add_subparsers(dest="subcommand")
    show = reg_sub.add_parser("show", help="Render one option's description")
    show.add_argument("option")
    reg_sub.add_parser("list", help="List all options")
    reg_sub.add_parser("validate", help="Validate option definitions")

    # commands
    cmds = sub.add_parser("commands", help="Command descriptors")
    cmds_sub = cmds.add_subparsers(dest="subcommand")
    _add_dir_args(cmds_sub.add_parser("list", help="List command descriptors"), docs=False)
    _add_dir_args(
        cmds_sub.add_parser("validate", help="Check params against the registry"),
        docs=False,
    )

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 0

    os.environ["AUTODOC_ROOT"] = str(_resolve_root(args))

    dispatch = {
        ("docs", "update"): cmd_docs_update,
        ("docs", "sync"): cmd_docs_sync,
        ("docs", "check"): cmd_docs_check,
        ("registry", "show"): cmd_registry_show,
        ("registry", "list"): cmd_registry_list,
        ("registry", "validate"): cmd_registry_validate,
        ("commands", "list"): cmd_commands_list,
        ("commands", "validate"): cmd_commands_validate,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if handler:
        return handler(args)

    parser.parse_args([args.command, "--help"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
