"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fieldrules.registry import DEFAULT_REGISTRY  # noqa: E402


@pytest.fixture
def registry():
    """The built-in registry."""
    return DEFAULT_REGISTRY


@pytest.fixture
def rules_yaml(tmp_path):
    """Write a registry config file and return its path."""

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
