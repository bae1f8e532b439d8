"""Doc generation CLI commands."""

import argparse
import sys
from functools import partial

from autodoc_engine.docsync.splice import MalformedDocumentError
from autodoc_engine.registry.definitions import UnknownOptionError


def cmd_docs_update(args: argparse.Namespace) -> int:
    from autodoc_engine.commands.aliases import describe_aliases, load_aliases
    from autodoc_engine.docsync.sync import update_document
    from autodoc_engine.registry.loader import load_definitions

    try:
        registry = load_definitions(args.definitions)
        alias_lookup = partial(describe_aliases, alias_map=load_aliases(args.aliases))
        result = update_document(
            args.doc, args.command_file, registry, alias_lookup, dry_run=args.dry_run,
        )
    except (MalformedDocumentError, UnknownOptionError, ValueError, OSError) as e:
        print(f"ERROR: {args.doc}: {e}", file=sys.stderr)
        return 1

    for w in result.warnings:
        print(f"WARNING: {w}", file=sys.stderr)
    for e in result.errors:
        print(f"WARNING: {e}", file=sys.stderr)

    print(f"{result.action}: {result.path}")
    if result.dry_run:
        print("\n[DRY RUN] No files were modified.")
    return 0


def _run_sync(args: argparse.Namespace, dry_run: bool) -> dict:
    from autodoc_engine.docsync.sync import sync_all

    return sync_all(
        docs_dir=args.docs_dir,
        commands_dir=args.commands_dir,
        definitions_path=args.definitions,
        aliases_path=args.aliases,
        dry_run=dry_run,
    )


def cmd_docs_sync(args: argparse.Namespace) -> int:
    result = _run_sync(args, args.dry_run)

    for w in result["warnings"]:
        print(f"WARNING: {w}", file=sys.stderr)

    print("Command Doc Sync Results")
    print("─" * 40)
    print(f"  Updated:   {len(result['updated'])}")
    print(f"  Unchanged: {len(result['unchanged'])}")
    print(f"  Skipped:   {len(result['skipped'])}")
    if result["errors"]:
        print(f"  Errors:    {len(result['errors'])}")
        for e in result["errors"]:
            print(f"    - {e['path']}: {e['error']}")

    if result.get("dry_run"):
        print("\n[DRY RUN] No files were modified.")

    return 1 if result["errors"] else 0


def cmd_docs_check(args: argparse.Namespace) -> int:
    """Exit non-zero when any doc is out of date with its sources."""
    result = _run_sync(args, dry_run=True)

    for e in result["errors"]:
        print(f"ERROR: {e['path']}: {e['error']}", file=sys.stderr)

    if result["updated"]:
        print(f"{len(result['updated'])} doc(s) out of date:")
        for path in result["updated"]:
            print(f"  {path}")
        return 1
    if result["errors"]:
        return 1

    print("All generated doc sections are up to date.")
    return 0
