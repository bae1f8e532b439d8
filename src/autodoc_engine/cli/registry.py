"""Registry CLI commands."""

import argparse
import sys

from autodoc_engine.registry.definitions import UnknownOptionError
from autodoc_engine.registry.loader import load_definitions


def cmd_registry_show(args: argparse.Namespace) -> int:
    registry = load_definitions(args.definitions)
    try:
        print(registry.describe(args.option))
    except UnknownOptionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_registry_list(args: argparse.Namespace) -> int:
    registry = load_definitions(args.definitions)
    for key in registry:
        definition = registry[key]
        flag = "  [deprecated]" if definition.deprecated else ""
        print(f"  {key:<30} {definition.type}{flag}")
    print(f"\n{len(registry)} options")
    return 0


def cmd_registry_validate(args: argparse.Namespace) -> int:
    from autodoc_engine.registry.validator import validate_definitions

    result = validate_definitions(load_definitions(args.definitions))
    print(result.summary())
    return 0 if result.passed else 1
