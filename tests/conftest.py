"""Pytest configuration and shared fixtures for flexdiff tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def lenient_text() -> str:
    """Return a JSON-like document using every tolerated deviation."""
    return (
        "{\n"
        "    name: 'Widget',\n"
        "    'tags': ['blue', 'small',],\n"
        "    active: True,\n"
        "    owner: None,\n"
        "    'note': 'It\\'s here',\n"
        "}"
    )


@pytest.fixture
def old_config() -> dict[str, Any]:
    """Return the 'before' side of a typical config comparison."""
    return {
        "service": "api",
        "version": 1,
        "replicas": 2,
        "env": {"DEBUG": False, "REGION": "eu-west-1"},
        "ports": [80, 443],
        "legacy": True,
    }


@pytest.fixture
def new_config() -> dict[str, Any]:
    """Return the 'after' side of a typical config comparison."""
    return {
        "service": "api",
        "version": 2,
        "replicas": 2,
        "env": {"DEBUG": True, "REGION": "eu-west-1", "TRACE": "on"},
        "ports": [80, 8443, 9000],
    }


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes text to a file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        filepath = tmp_path / name
        filepath.write_text(content, encoding="utf-8")
        return filepath

    return _write
