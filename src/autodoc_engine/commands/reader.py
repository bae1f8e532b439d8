"""Parse command descriptor YAML files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from autodoc_engine.paths import display_path


@dataclass(frozen=True)
class CommandDescriptor:
    """What a command accepts and how it is invoked."""

    name: str
    params: list[str] = field(default_factory=list)
    usage: list[str] | None = None
    source: str = ""


def read_command(path: Path | str) -> CommandDescriptor:
    """Read and parse a command descriptor.

    Args:
        path: Path to <command>.yaml.

    Returns:
        Parsed CommandDescriptor.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the file is not a YAML mapping.
    """
    command_path = Path(path)
    with open(command_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"command descriptor at {command_path} is not a YAML mapping")

    params = data.get("params") or []
    if isinstance(params, str):
        params = [params]
    if not isinstance(params, list):
        raise ValueError(f"params in {command_path} is not a list")

    usage = data.get("usage")
    if isinstance(usage, str):
        usage = [usage]
    if usage is not None and not isinstance(usage, list):
        raise ValueError(f"usage in {command_path} is not a list")

    return CommandDescriptor(
        name=str(data.get("name") or command_path.stem),
        params=[str(p) for p in params],
        usage=[str(u) for u in usage] if usage is not None else None,
        source=display_path(command_path),
    )
