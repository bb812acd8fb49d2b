"""Shared pytest fixtures for the PUT test suite."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tmp_project(tmp_path):
    """Create a minimal PUT project in a temp dir."""
    (tmp_path / "project.zom").write_text(
        "# testproj\n"
        "## Project Info\n"
        "- name: testproj\n"
        "- version: 1.0.0\n"
        "\n"
        "## Dependencies\n"
        "- tensors: 0.3\n"
        "\n"
        "## Build Settings\n"
        "- entry: src/main.put\n"
    )
    src = tmp_path / "src"
    src.mkdir()
    (src / "main.put").write_text("var x = (42 + 5) * 2 - 3 / 1.5;\n")
    return tmp_path
