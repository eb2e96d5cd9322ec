# SPDX-License-Identifier: MIT
"""Tests for the semver-engine command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from semver_engine.cli import cli


class TestParseCommand:
    """Tests for the parse command."""

    def test_valid(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["parse", "1.2.3-rc.1+build.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.2.3-rc.1+build.5"

    def test_json(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["parse", "--json", "1.2.3-rc.1+build.5"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": ["rc", 1],
            "build": ["build", "5"],
            "canonical": "1.2.3-rc.1+build.5",
        }

    def test_invalid(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["parse", "1.02.3"])
        assert result.exit_code == 1
        assert "leading zeros" in result.output
        assert "offset 2" in result.output

    def test_prefix_rejected_by_default(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["parse", "v1.0.0"])
        assert result.exit_code == 1


class TestCompareCommand:
    """Tests for the compare command."""

    def test_less(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.0.0-alpha < 1.0.0"

    def test_equal_ignores_build(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["compare", "1.0.0+a", "1.0.0+b"])
        assert result.output.strip() == "1.0.0+a = 1.0.0+b"

    def test_greater(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["compare", "1.10.0", "1.9.0"])
        assert result.output.strip() == "1.10.0 > 1.9.0"


class TestSortCommand:
    """Tests for the sort command."""

    def test_sort(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["sort", "1.10.0", "1.2.0", "1.2.0-beta"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.2.0-beta", "1.2.0", "1.10.0"]

    def test_reverse(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["sort", "-r", "1.0.0", "2.0.0"])
        assert result.output.splitlines() == ["2.0.0", "1.0.0"]

    def test_requires_versions(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["sort"])
        assert result.exit_code != 0


class TestRangeCommand:
    """Tests for the range command."""

    def test_normalized(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["range", ">= 1.2   <2 || ~1.2"])
        assert result.exit_code == 0
        assert result.output.strip() == ">=1.2.x <2.x || ~1.2.x"

    def test_intervals(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["range", "--intervals", ">=1.2 <2 || * || >*"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            ">=1.2.x <2.x || * || >*",
            "group 0:",
            "  >=1.2.x: >=1.2.0",
            "  <2.x: <2.0.0",
            "group 1:",
            "  *: *",
            "group 2:",
            "  >*: <nothing>",
        ]

    def test_invalid(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["range", "=>1.0.0"])
        assert result.exit_code == 1
        assert "Unknown operator '=>'" in result.output


class TestSatisfiesCommand:
    """Tests for the satisfies and max-satisfying commands."""

    def test_matches(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            cli, ["satisfies", "^1.2 || 2.x", "1.4.0", "2.0.1", "3.0.0", "1.5.0-beta"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.4.0", "2.0.1"]

    def test_no_match(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["satisfies", "^3", "1.0.0"])
        assert result.exit_code == 1
        assert "No version satisfies ^3.x" in result.output

    def test_invalid_version(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["satisfies", "*", "1.0"])
        assert result.exit_code == 1

    def test_max_satisfying(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["max-satisfying", "~1.2", "1.2.0", "1.2.9", "1.3.0"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.2.9"

    def test_max_satisfying_none(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["max-satisfying", "~1.2", "2.0.0"])
        assert result.exit_code == 1


class TestProjectConfig:
    """Tests for options that read pyproject.toml."""

    def test_directory_option(self, cli_runner: CliRunner, temp_project: Path):
        result = cli_runner.invoke(
            cli, ["-C", str(temp_project), "satisfies", "==v1.0.0", "v1.0.0", "1.0.1"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.0.0"]

    def test_default_syntax_without_directory(self, cli_runner: CliRunner, tmp_path: Path):
        with cli_runner.isolated_filesystem(temp_dir=tmp_path):
            result = cli_runner.invoke(cli, ["range", "==1.0.0"])
        assert result.exit_code == 1
        assert "Unknown operator '=='" in result.output

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[tool.semver-engine]\nor-separator = 5\n")
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "range", "*"])
        assert result.exit_code != 0

    def test_verbose(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["-v", "parse", "1.0.0"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output
