"""Project path resolution.

Resolves canonical paths to documentation sources. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    AUTODOC_ROOT — project root (default: current directory)
    AUTODOC_DEFINITIONS — config option registry (default: <root>/config/definitions.yaml)
    AUTODOC_ALIASES — command alias map (default: <root>/config/aliases.yaml)
"""

from __future__ import annotations

import os
from pathlib import Path


def project_root() -> Path:
    """Return the project root directory."""
    return Path(os.environ.get("AUTODOC_ROOT", os.getcwd()))


def definitions_path() -> Path:
    """Return the path to the config option registry."""
    env = os.environ.get("AUTODOC_DEFINITIONS")
    if env:
        return Path(env)
    return project_root() / "config" / "definitions.yaml"


def aliases_path() -> Path:
    """Return the path to the command alias map."""
    env = os.environ.get("AUTODOC_ALIASES")
    if env:
        return Path(env)
    return project_root() / "config" / "aliases.yaml"


def docs_dir() -> Path:
    """Return the directory holding per-command documentation."""
    return project_root() / "docs" / "commands"


def commands_dir() -> Path:
    """Return the directory holding command descriptors."""
    return project_root() / "commands"


def display_path(path: Path | str) -> str:
    """Render a path for provenance comments.

    Paths under the project root are shown relative to it so generated
    output does not depend on where the checkout lives.
    """
    p = Path(path)
    if p.is_absolute():
        root = project_root()
        for base in (root, root.resolve()):
            try:
                return p.relative_to(base).as_posix()
            except ValueError:
                continue
    return p.as_posix()
