"""Command doc sync — updates auto-generated sections in command docs.

The sync process:
1. Load the option registry and alias map once
2. Walk the docs directory, pairing each doc with its command descriptor
3. For each doc, splice the config and usage sections between their markers
4. Write the doc back (always, so build tools see it as fresh)

Commands without params skip this whole process. Preserves all
manually-written content outside the AUTOGENERATED markers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Any, Callable

from autodoc_engine.commands.reader import CommandDescriptor, read_command
from autodoc_engine.docsync import CONFIG_TAG, USAGE_TAG
from autodoc_engine.docsync.generator import describe_all, describe_usage
from autodoc_engine.docsync.splice import splice
from autodoc_engine.registry.definitions import OptionRegistry


@dataclass
class UpdateResult:
    """Outcome of updating a single doc."""

    path: str
    action: str = "skipped"
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    dry_run: bool = False


def update_document(
    doc_path: Path | str,
    command: CommandDescriptor | Path | str,
    registry: OptionRegistry,
    alias_lookup: Callable[[str], str] | None = None,
    dry_run: bool = False,
) -> UpdateResult:
    """Regenerate the autogenerated sections of one doc.

    Args:
        doc_path: Markdown doc to update in place.
        command: Descriptor of the documented command, or the path to it.
        registry: Option registry supplying config descriptions.
        alias_lookup: Returns the alias line for a command name.
        dry_run: If True, report the action without writing.

    Returns:
        UpdateResult whose action is one of updated, unchanged, skipped, error.

    Raises:
        MalformedDocumentError: If a present region has repeated or missing markers.
        UnknownOptionError: If the command declares a param the registry lacks.
    """
    doc_path = Path(doc_path)
    if not isinstance(command, CommandDescriptor):
        command = read_command(command)
    result = UpdateResult(path=str(doc_path), dry_run=dry_run)

    try:
        content = doc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        result.action = "error"
        result.errors.append(f"file cannot be open: {doc_path} ({e})")
        return result

    if not command.params:
        return result

    has_config = CONFIG_TAG.start in content
    has_usage = USAGE_TAG.start in content
    new_content = content

    if has_config:
        new_content = splice(
            new_content, CONFIG_TAG.start, CONFIG_TAG.end,
            describe_all(command.params, registry), registry.source,
        )
    else:
        result.warnings.append(f"did not find config description section {doc_path}")

    if command.usage:
        if has_usage:
            new_content = splice(
                new_content, USAGE_TAG.start, USAGE_TAG.end,
                describe_usage(doc_path, command.usage, alias_lookup), command.source,
            )
        else:
            result.warnings.append(f"did not find usage description section {doc_path}")

    result.action = "unchanged" if new_content == content else "updated"
    if not dry_run:
        doc_path.write_text(new_content, encoding="utf-8")
    return result


def sync_all(
    docs_dir: Path | str | None = None,
    commands_dir: Path | str | None = None,
    definitions_path: Path | str | None = None,
    aliases_path: Path | str | None = None,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Sync auto-generated sections across all command docs."""
    from autodoc_engine.commands.aliases import describe_aliases, load_aliases
    from autodoc_engine.commands.discover import command_file_for, discover_documents
    from autodoc_engine.registry.loader import load_definitions

    registry = load_definitions(definitions_path)
    alias_lookup = partial(describe_aliases, alias_map=load_aliases(aliases_path))

    updated = []
    unchanged = []
    skipped = []
    warnings = []
    errors = []

    for doc in discover_documents(docs_dir):
        command_file = command_file_for(doc, commands_dir)
        if not command_file.is_file():
            skipped.append(str(doc))
            continue

        try:
            res = update_document(doc, command_file, registry, alias_lookup, dry_run)
        except Exception as e:
            errors.append({"path": str(doc), "error": str(e)})
            continue

        warnings.extend(res.warnings)
        for msg in res.errors:
            errors.append({"path": res.path, "error": msg})
        if res.action == "updated": updated.append(res.path)
        elif res.action == "unchanged": unchanged.append(res.path)
        elif res.action == "skipped": skipped.append(res.path)

    return {
        "updated": updated,
        "unchanged": unchanged,
        "skipped": skipped,
        "warnings": warnings,
        "errors": errors,
        "dry_run": dry_run,
    }
