"""Command descriptor CLI commands."""

import argparse

from autodoc_engine.commands.discover import discover_commands
from autodoc_engine.commands.reader import read_command


def cmd_commands_list(args: argparse.Namespace) -> int:
    paths = discover_commands(args.commands_dir)
    for path in paths:
        command = read_command(path)
        usage = len(command.usage or [])
        print(f"  {command.name:<20} {len(command.params):>3} params  {usage:>2} usage")
    print(f"\n{len(paths)} commands")
    return 0


def cmd_commands_validate(args: argparse.Namespace) -> int:
    from autodoc_engine.registry.loader import load_definitions
    from autodoc_engine.registry.validator import validate_commands

    registry = load_definitions(args.definitions)
    commands = [read_command(p) for p in discover_commands(args.commands_dir)]
    result = validate_commands(commands, registry)
    print(result.summary())
    return 0 if result.passed else 1
