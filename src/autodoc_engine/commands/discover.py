"""Discover command docs and pair them with their descriptors."""

from __future__ import annotations

from pathlib import Path

from autodoc_engine.paths import commands_dir as _default_commands_dir
from autodoc_engine.paths import docs_dir as _default_docs_dir

# Docs documented against another command's descriptor
DESCRIPTOR_OVERRIDES = {"npx": "exec"}


def command_name_from_doc(doc_path: Path | str) -> str:
    """Derive the command name from a doc filename.

    ``docs/commands/npm-install.md`` -> ``install``. Everything from the
    first dot of the filename is dropped, then a leading ``npm-``.
    """
    filename = str(doc_path).replace("\\", "/").split("/")[-1]
    return filename.split(".")[0].removeprefix("npm-")


def discover_documents(docs_dir: Path | str | None = None) -> list[Path]:
    """Find all markdown docs in the docs directory.

    Returns:
        Sorted list of paths to *.md files found.
    """
    root = Path(docs_dir) if docs_dir else _default_docs_dir()
    if not root.is_dir():
        return []
    return sorted(p for p in root.glob("*.md") if p.is_file())


def discover_commands(commands_dir: Path | str | None = None) -> list[Path]:
    """Find all command descriptor files."""
    root = Path(commands_dir) if commands_dir else _default_commands_dir()
    if not root.is_dir():
        return []
    return sorted(p for p in root.glob("*.yaml") if p.is_file())


def command_file_for(doc_path: Path | str, commands_dir: Path | str | None = None) -> Path:
    """Return the descriptor path a doc is generated from."""
    root = Path(commands_dir) if commands_dir else _default_commands_dir()
    name = command_name_from_doc(doc_path)
    return root / f"{DESCRIPTOR_OVERRIDES.get(name, name)}.yaml"
