# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semver_engine tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory whose pyproject.toml extends the range syntax."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "test-project"
version = "1.0.0"

[tool.semver-engine]
allow-prefix = true

[tool.semver-engine.operators]
"==" = "EQ"
"""
    )
    return project_dir


@pytest.fixture
def int_digit_limit() -> Generator[int, None, None]:
    """Pin the interpreter's int/str conversion limit to its default of 4300 digits."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str conversion limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
