"""Shared test fixtures for autodoc-engine."""

import shutil
from pathlib import Path

import pytest

from autodoc_engine.registry.loader import load_definitions

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolated_root(tmp_path, monkeypatch):
    """Point the project root at a scratch directory for every test."""
    monkeypatch.setenv("AUTODOC_ROOT", str(tmp_path))
    monkeypatch.delenv("AUTODOC_DEFINITIONS", raising=False)
    monkeypatch.delenv("AUTODOC_ALIASES", raising=False)


@pytest.fixture
def registry():
    return load_definitions(FIXTURES / "definitions.yaml")


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A project tree laid out the way the default paths expect.

    <root>/config/definitions.yaml
    <root>/config/aliases.yaml
    <root>/commands/*.yaml
    <root>/docs/commands/*.md
    """
    root = tmp_path / "project"
    (root / "config").mkdir(parents=True)
    shutil.copy(FIXTURES / "definitions.yaml", root / "config" / "definitions.yaml")
    shutil.copy(FIXTURES / "aliases.yaml", root / "config" / "aliases.yaml")
    shutil.copytree(FIXTURES / "commands", root / "commands")
    shutil.copytree(FIXTURES / "docs", root / "docs" / "commands")
    monkeypatch.setenv("AUTODOC_ROOT", str(root))
    return root
