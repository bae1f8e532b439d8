"""Command alias lookup."""

from __future__ import annotations

from pathlib import Path

import yaml

from autodoc_engine.paths import aliases_path


def load_aliases(path: Path | str | None = None) -> dict[str, str]:
    """Load the alias -> command map.

    A missing file means no command has aliases.
    """
    alias_file = Path(path) if path else aliases_path()
    if not alias_file.is_file():
        return {}
    with open(alias_file, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    aliases = data.get("aliases", {}) if isinstance(data, dict) else None
    if not isinstance(aliases, dict):
        raise ValueError(f"{alias_file} has no 'aliases' mapping")
    return {str(k): str(v) for k, v in aliases.items()}


def aliases_for(command: str, alias_map: dict[str, str]) -> list[str]:
    """Aliases of a command, in declaration order."""
    return [alias for alias, target in alias_map.items() if target == command]


def describe_aliases(command: str, alias_map: dict[str, str]) -> str:
    """Render the alias line shown under a command's synopsis.

    Returns ``alias: x`` for one alias, ``aliases: a, b`` for several,
    and an empty string when the command has none.
    """
    names = aliases_for(command, alias_map)
    if not names:
        return ""
    label = "alias" if len(names) == 1 else "aliases"
    return f"{label}: {', '.join(names)}"
