"""Config option definitions and the registry that holds them."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Iterator

# Generated descriptions are wrapped to this many columns
WRAP_WIDTH = 75

NO_ENV_EXPORT_NOTE = "This value is not exported to the environment for child processes."


class UnknownOptionError(KeyError):
    """Raised when a name has no entry in the option registry."""

    def __init__(self, name: str, source: str = "") -> None:
        self.name = name
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"unknown config option '{name}'{where}")

    def __str__(self) -> str:
        return self.args[0]


def _wrap_block(block: str) -> str:
    """Wrap one paragraph, keeping list items on their own lines."""
    items = block.split("\n* ")
    wrapped = [
        textwrap.fill(" ".join(item.split()), width=WRAP_WIDTH)
        for item in items
    ]
    return "\n* ".join(wrapped)


def wrap_all(text: str) -> str:
    """Wrap markdown prose paragraph by paragraph.

    Fenced code blocks and tables pass through untouched.
    """
    out = []
    in_code = False
    for block in text.split("\n\n"):
        if in_code or block.startswith("```"):
            in_code = not block.rstrip().endswith("```")
            out.append(block)
        elif block.startswith("|"):
            out.append(block)
        else:
            out.append(_wrap_block(block))
    return "\n\n".join(out)


@dataclass(frozen=True)
class OptionDefinition:
    """A single configuration option and its documentation."""

    key: str
    default: str
    type: str
    description: str
    deprecated: str | None = None
    env_export: bool = True

    def describe(self) -> str:
        """Render the markdown description for this option."""
        description = textwrap.dedent(self.description).strip()
        lines = [
            f"#### `{self.key}`",
            "",
            f"* Default: {textwrap.dedent(self.default).strip()}",
            f"* Type: {textwrap.dedent(self.type).strip()}",
        ]
        if self.deprecated:
            lines.append(f"* DEPRECATED: {textwrap.dedent(self.deprecated).strip()}")
        lines.extend(["", wrap_all(description)])
        if not self.env_export:
            lines.extend(["", NO_ENV_EXPORT_NOTE])
        return "\n".join(lines)


class OptionRegistry:
    """Ordered, read-only mapping of option keys to definitions.

    ``source`` is the canonical path of the registry file, shown in the
    provenance comments of every generated config section.
    """

    def __init__(self, definitions: dict[str, OptionDefinition], source: str) -> None:
        self._definitions = dict(definitions)
        self.source = source

    def __getitem__(self, name: str) -> OptionDefinition:
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownOptionError(name, self.source) from None

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def keys(self) -> list[str]:
        return list(self._definitions)

    def describe(self, name: str) -> str:
        return self[name].describe()
