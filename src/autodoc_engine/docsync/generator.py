"""Generate the bodies of the autogenerated doc sections.

Two section kinds:
- Config descriptions: one rendered block per option a command accepts
- Usage synopsis: a fenced bash block with each invocation form and aliases
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Callable, Iterable

from autodoc_engine.commands.discover import command_name_from_doc
from autodoc_engine.docsync import provenance
from autodoc_engine.registry.definitions import OptionRegistry


def describe_all(names: Iterable[str], registry: OptionRegistry) -> str:
    """Render descriptions for the named options, in the order given.

    Raises:
        UnknownOptionError: If a name has no registry entry.
    """
    separator = f"\n\n{provenance(registry.source)}\n\n"
    return separator.join(registry[name].describe() for name in names)


def describe_usage(
    doc_path: Path | str,
    usage: list[str] | None,
    alias_lookup: Callable[[str], str] | None = None,
) -> str:
    """Render the usage synopsis for the command a doc describes.

    The command name comes from the doc filename rather than the descriptor,
    since ``npx`` is documented from the ``exec`` descriptor.

    Args:
        doc_path: Path of the doc being generated.
        usage: Invocation patterns, or None for a bare invocation.
        alias_lookup: Returns the alias line for a command name.

    Returns:
        Fenced bash code block.
    """
    synopsis = ["\n```bash"]
    command_name = command_name_from_doc(doc_path)

    if not command_name:
        warnings.warn(f"could not determine command name from {doc_path}", stacklevel=2)
    elif command_name == "npx":
        # npx is a facade over exec: exec's usage, no npm prefix, no aliases
        synopsis.append("\n".join(f"npx {u}" for u in usage) if usage else "npx")
    else:
        base = f"npm {command_name}"
        if not usage:
            synopsis.append(base)
        else:
            synopsis.append("\n".join(f"{base} {u}" for u in usage))

        aliases = alias_lookup(command_name).strip() if alias_lookup else ""
        if aliases:
            synopsis.append(f"\n{aliases}")

    synopsis.append("```")
    return "\n".join(synopsis)
