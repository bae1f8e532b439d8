"""Command module — descriptors, aliases, and doc discovery."""

from autodoc_engine.commands.aliases import describe_aliases, load_aliases
from autodoc_engine.commands.discover import (
    command_file_for,
    command_name_from_doc,
    discover_commands,
    discover_documents,
)
from autodoc_engine.commands.reader import CommandDescriptor, read_command

__all__ = [
    "CommandDescriptor",
    "command_file_for",
    "command_name_from_doc",
    "describe_aliases",
    "discover_commands",
    "discover_documents",
    "load_aliases",
    "read_command",
]
