"""Command doc auto-generator.

Regenerates the machine-maintained sections of per-command markdown docs
from the config option registry and the command descriptors.

Auto-generated sections are demarcated:
    <!-- AUTOGENERATED CONFIG DESCRIPTIONS START -->
    ...
    <!-- AUTOGENERATED CONFIG DESCRIPTIONS END -->

    <!-- AUTOGENERATED USAGE DESCRIPTIONS START -->
    ...
    <!-- AUTOGENERATED USAGE DESCRIPTIONS END -->

Anything outside these markers is preserved untouched.
"""

from typing import NamedTuple


class Tag(NamedTuple):
    start: str
    end: str


# Marker constants used by generator and sync
CONFIG_TAG = Tag(
    "<!-- AUTOGENERATED CONFIG DESCRIPTIONS START -->",
    "<!-- AUTOGENERATED CONFIG DESCRIPTIONS END -->",
)
USAGE_TAG = Tag(
    "<!-- AUTOGENERATED USAGE DESCRIPTIONS START -->",
    "<!-- AUTOGENERATED USAGE DESCRIPTIONS END -->",
)

DO_NOT_EDIT = "<!-- automatically generated, do not edit manually -->"


def provenance(source: str) -> str:
    """The comment pair naming the file a generated section comes from."""
    return f"{DO_NOT_EDIT}\n<!-- see {source} -->"
