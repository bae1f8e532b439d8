"""Tests for doc updates and workspace-wide sync."""

from functools import partial
from pathlib import Path
from unittest.mock import patch

import pytest

from autodoc_engine.commands.aliases import describe_aliases, load_aliases
from autodoc_engine.commands.reader import CommandDescriptor
from autodoc_engine.docsync import CONFIG_TAG, USAGE_TAG
from autodoc_engine.docsync.splice import MalformedDocumentError
from autodoc_engine.docsync.sync import sync_all, update_document
from autodoc_engine.registry.definitions import UnknownOptionError
from autodoc_engine.registry.loader import load_definitions


@pytest.fixture
def project_registry(project):
    return load_definitions()


@pytest.fixture
def alias_lookup(project):
    return partial(describe_aliases, alias_map=load_aliases())


def _doc(project: Path, name: str) -> Path:
    return project / "docs" / "commands" / name


def _cmd(project: Path, name: str) -> Path:
    return project / "commands" / f"{name}.yaml"


class TestUpdateDocument:
    def test_updates_both_sections(self, project, project_registry, alias_lookup):
        doc = _doc(project, "npm-install.md")
        result = update_document(doc, _cmd(project, "install"), project_registry, alias_lookup)
        assert result.action == "updated"
        assert result.warnings == []

        content = doc.read_text()
        assert "npm install [<package-spec> ...]\nnpm install <folder>\n\naliases: i, in, add" in content
        assert "#### `save`" in content
        assert "#### `registry`" in content
        assert "<!-- see config/definitions.yaml -->" in content
        assert "<!-- see commands/install.yaml -->" in content

    def test_preserves_manual_prose(self, project, project_registry):
        doc = _doc(project, "npm-install.md")
        original = doc.read_text()
        update_document(doc, _cmd(project, "install"), project_registry)
        content = doc.read_text()

        head = original.split(USAGE_TAG.start)[0]
        tail = original.split(CONFIG_TAG.end)[1]
        assert content.startswith(head + USAGE_TAG.start)
        assert content.endswith(CONFIG_TAG.end + tail)
        assert "This command installs a package" in content

    def test_second_run_is_unchanged(self, project, project_registry, alias_lookup):
        doc = _doc(project, "npm-install.md")
        update_document(doc, _cmd(project, "install"), project_registry, alias_lookup)
        first = doc.read_text()
        result = update_document(doc, _cmd(project, "install"), project_registry, alias_lookup)
        assert result.action == "unchanged"
        assert doc.read_text() == first

    def test_npx_doc_uses_exec_usage(self, project, project_registry, alias_lookup):
        doc = _doc(project, "npx.md")
        update_document(doc, _cmd(project, "exec"), project_registry, alias_lookup)
        content = doc.read_text()
        assert "npx -- <pkg>[@<version>] [args...]" in content
        assert "npm npx" not in content
        assert "alias: x" not in content
        assert "#### `package`" in content

    def test_empty_params_skips_without_writing(self, project, project_registry):
        doc = _doc(project, "npm-whoami.md")
        with patch.object(Path, "write_text") as mock_write:
            result = update_document(doc, _cmd(project, "whoami"), project_registry)
        assert result.action == "skipped"
        mock_write.assert_not_called()

    def test_missing_config_marker_warns(self, project, project_registry):
        doc = _doc(project, "npm-ping.md")
        original = doc.read_text()
        result = update_document(doc, _cmd(project, "ping"), project_registry)
        assert result.action == "unchanged"
        assert len(result.warnings) == 1
        assert "config description section" in result.warnings[0]
        assert doc.read_text() == original

    def test_missing_usage_marker_warns(self, project, project_registry):
        doc = _doc(project, "npm-install.md")
        doc.write_text(f"# install\n\n{CONFIG_TAG.start}\n{CONFIG_TAG.end}\n")
        result = update_document(doc, _cmd(project, "install"), project_registry)
        assert result.action == "updated"
        assert any("usage description section" in w for w in result.warnings)
        assert "#### `save`" in doc.read_text()

    def test_usage_updated_without_config_marker(self, project, project_registry):
        doc = _doc(project, "npm-install.md")
        doc.write_text(f"# install\n\n{USAGE_TAG.start}\n{USAGE_TAG.end}\n")
        result = update_document(doc, _cmd(project, "install"), project_registry)
        assert result.action == "updated"
        assert any("config description section" in w for w in result.warnings)
        assert "npm install <folder>" in doc.read_text()

    def test_unreadable_doc_reported(self, project, project_registry):
        missing = _doc(project, "npm-missing.md")
        result = update_document(missing, _cmd(project, "install"), project_registry)
        assert result.action == "error"
        assert "file cannot be open" in result.errors[0]
        assert not missing.exists()

    def test_malformed_doc_raises(self, project, project_registry):
        doc = _doc(project, "npm-install.md")
        broken = f"{CONFIG_TAG.start}\n{CONFIG_TAG.start}\n{CONFIG_TAG.end}\n"
        doc.write_text(broken)
        with pytest.raises(MalformedDocumentError):
            update_document(doc, _cmd(project, "install"), project_registry)
        assert doc.read_text() == broken

    def test_unknown_param_raises(self, project, project_registry):
        doc = _doc(project, "npm-install.md")
        command = CommandDescriptor(name="install", params=["bogus"], usage=None)
        with pytest.raises(UnknownOptionError):
            update_document(doc, command, project_registry)

    def test_dry_run_does_not_write(self, project, project_registry):
        doc = _doc(project, "npm-install.md")
        original = doc.read_text()
        result = update_document(doc, _cmd(project, "install"), project_registry, dry_run=True)
        assert result.action == "updated"
        assert result.dry_run
        assert doc.read_text() == original

    def test_accepts_descriptor(self, project, project_registry):
        doc = _doc(project, "npm-install.md")
        command = CommandDescriptor(
            name="install", params=["global"], usage=["<folder>"], source="lib/install.js",
        )
        update_document(doc, command, project_registry)
        content = doc.read_text()
        assert "<!-- see lib/install.js -->" in content
        assert "#### `save`" not in content


class TestSyncAll:
    def test_sync_fixture_project(self, project):
        result = sync_all()
        assert [Path(p).name for p in result["updated"]] == ["npm-install.md", "npx.md"]
        assert [Path(p).name for p in result["unchanged"]] == ["npm-ping.md"]
        assert sorted(Path(p).name for p in result["skipped"]) == [
            "npm-unknown.md",
            "npm-whoami.md",
        ]
        assert result["errors"] == []
        assert len(result["warnings"]) == 1

    def test_second_sync_is_clean(self, project):
        sync_all()
        result = sync_all()
        assert result["updated"] == []
        assert len(result["unchanged"]) == 3

    def test_dry_run(self, project):
        doc = _doc(project, "npm-install.md")
        original = doc.read_text()
        result = sync_all(dry_run=True)
        assert result["dry_run"] is True
        assert len(result["updated"]) == 2
        assert doc.read_text() == original

    def test_errors_collected_per_doc(self, project):
        doc = _doc(project, "npm-install.md")
        doc.write_text(f"{USAGE_TAG.start}\n{USAGE_TAG.end}\n{USAGE_TAG.end}\n")
        result = sync_all()
        assert len(result["errors"]) == 1
        assert result["errors"][0]["path"] == str(doc)
        assert [Path(p).name for p in result["updated"]] == ["npx.md"]

    def test_explicit_paths(self, project, tmp_path, monkeypatch):
        monkeypatch.setenv("AUTODOC_ROOT", str(tmp_path))
        result = sync_all(
            docs_dir=project / "docs" / "commands",
            commands_dir=project / "commands",
            definitions_path=project / "config" / "definitions.yaml",
            aliases_path=project / "config" / "aliases.yaml",
        )
        assert len(result["updated"]) == 2
        content = _doc(project, "npm-install.md").read_text()
        assert "<!-- see project/config/definitions.yaml -->" in content
