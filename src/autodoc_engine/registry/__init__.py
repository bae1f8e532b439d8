"""Registry module — load, query, and validate config option definitions."""

from autodoc_engine.registry.definitions import (
    OptionDefinition,
    OptionRegistry,
    UnknownOptionError,
)
from autodoc_engine.registry.loader import load_definitions
from autodoc_engine.registry.validator import validate_commands, validate_definitions

__all__ = [
    "OptionDefinition",
    "OptionRegistry",
    "UnknownOptionError",
    "load_definitions",
    "validate_commands",
    "validate_definitions",
]
