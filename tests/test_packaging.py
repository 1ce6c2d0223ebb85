"""Tests for the installed package layout."""

import importlib
from pathlib import Path

import pytest

import modhelper

SUBPACKAGES = [
    "archive",
    "ci",
    "cli",
    "config",
    "javadoc",
    "manifest",
    "publishing",
    "resources",
]


class TestPackageLayout:
    @pytest.mark.parametrize("name", SUBPACKAGES)
    def test_subpackage_is_regular_package(self, name):
        module = importlib.import_module(f"modhelper.{name}")
        # Namespace packages have no __file__ and are skipped by packages.find
        assert module.__file__ is not None
        assert Path(module.__file__).name == "__init__.py"

    def test_every_source_directory_listed(self):
        root = Path(modhelper.__file__).parent
        found = sorted(
            p.name for p in root.iterdir() if p.is_dir() and p.name != "__pycache__"
        )
        assert found == SUBPACKAGES
