"""Load the config option registry from definitions.yaml."""

from __future__ import annotations

from pathlib import Path

import yaml

from autodoc_engine.paths import definitions_path, display_path
from autodoc_engine.registry.definitions import OptionDefinition, OptionRegistry


def _text(value: object) -> str:
    """Render a scalar the way it reads in YAML (true, null, ...)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _deprecation(key: str, value: object) -> str | None:
    """Deprecation text, or None. A bare ``true`` gets a generic notice."""
    if not value:
        return None
    if value is True:
        return f"`{key}` is deprecated."
    if not isinstance(value, str):
        raise ValueError(f"definition '{key}' has a non-text 'deprecated' value")
    return value


def _build_definition(key: str, entry: dict) -> OptionDefinition:
    if not isinstance(entry, dict):
        raise ValueError(f"definition '{key}' is not a YAML mapping")
    return OptionDefinition(
        key=key,
        default=_text(entry.get("default")),
        type=str(entry.get("type") or ""),
        description=str(entry.get("description", "") or ""),
        deprecated=_deprecation(key, entry.get("deprecated")),
        env_export=bool(entry.get("env_export", True)),
    )


def load_definitions(
    path: Path | str | None = None,
    source: str | None = None,
) -> OptionRegistry:
    """Load the option registry from disk.

    Args:
        path: Path to definitions.yaml. Defaults to the project location.
        source: Label used in provenance comments. Defaults to the path
            relative to the project root.

    Returns:
        OptionRegistry preserving declaration order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the file is not a mapping of definitions.
    """
    defs_path = Path(path) if path else definitions_path()
    with open(defs_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get("definitions"), dict):
        raise ValueError(f"{defs_path} has no 'definitions' mapping")

    definitions = {
        str(key): _build_definition(str(key), entry or {})
        for key, entry in data["definitions"].items()
    }
    return OptionRegistry(definitions, source or display_path(defs_path))
