"""Validate the option registry and the commands that reference it."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from autodoc_engine.registry.definitions import OptionRegistry

REQUIRED_FIELDS = ("type", "description")


@dataclass
class ValidationResult:
    """Result of a validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_checked: int = 0
    label: str = "Registry"

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [f"{self.label} Validation: {self.total_checked} entries checked"]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed and not self.warnings:
            lines.append("All checks passed.")
        return "\n".join(lines)


def validate_definitions(registry: OptionRegistry) -> ValidationResult:
    """Check that every definition carries the fields its description needs.

    Checks:
    - type and description present and non-empty
    - deprecated options still explain what they did
    """
    result = ValidationResult(label="Registry")

    for key in registry:
        result.total_checked += 1
        definition = registry[key]

        for f in REQUIRED_FIELDS:
            if not getattr(definition, f).strip():
                result.errors.append(f"{key}: missing required field '{f}'")

        if definition.deprecated and not definition.description.strip():
            result.warnings.append(f"{key}: deprecated without a description")

    return result


def validate_commands(commands: Iterable, registry: OptionRegistry) -> ValidationResult:
    """Check that every command only declares params the registry knows.

    Args:
        commands: CommandDescriptor objects.
        registry: Loaded option registry.

    Returns:
        ValidationResult with unknown params as errors and duplicates as warnings.
    """
    result = ValidationResult(label="Commands")

    for command in commands:
        result.total_checked += 1
        for param in command.params:
            if param not in registry:
                result.errors.append(
                    f"{command.name}: unknown config option '{param}' ({command.source})"
                )
        for param, count in Counter(command.params).items():
            if count > 1:
                result.warnings.append(f"{command.name}: '{param}' declared {count} times")

    return result
