"""Shared fixtures for shscaffold tests."""

from pathlib import Path

import pytest

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "src" / "shscaffold" / "script-templates"


@pytest.fixture
def full_template():
    return (TEMPLATES_DIR / "script-template.sh").read_text(encoding="utf-8")


@pytest.fixture
def simple_template():
    return (TEMPLATES_DIR / "simple-script-template.sh").read_text(encoding="utf-8")
