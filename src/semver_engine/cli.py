# SPDX-License-Identifier: MIT
"""CLI entry point for the semver-engine command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .compare import Ordering, compare_versions, sort_versions
from .config import RangeSyntax, load_syntax
from .errors import ConfigError, ParseError
from .ranges import ConstraintSet, filter_satisfying, max_satisfying, parse_range
from .semver import Version, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.syntax: Optional[RangeSyntax] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_syntax(self) -> RangeSyntax:
        """Load the range syntax, caching the result."""
        if self.syntax is None:
            self.syntax = load_syntax(self.project_dir)
        return self.syntax

    def parse_version(self, text: str) -> Version:
        try:
            return parse_version(text, allow_prefix=self.load_syntax().allow_prefix)
        except ParseError as e:
            echo_error(str(e))
            raise SystemExit(1)

    def parse_versions(self, texts: tuple[str, ...]) -> list[Version]:
        return [self.parse_version(text) for text in texts]

    def parse_range(self, text: str) -> ConstraintSet:
        try:
            return parse_range(text, self.load_syntax())
        except ParseError as e:
            echo_error(str(e))
            raise SystemExit(1)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="semver-engine")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read [tool.semver-engine] from this directory's pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version parsing, comparison and range matching.

    \b
    Examples:
        semver-engine parse 1.2.3-rc.1+build.5
        semver-engine compare 1.0.0-alpha 1.0.0
        semver-engine sort 1.10.0 1.2.0 1.2.0-beta
        semver-engine satisfies "^1.2 || 2.x" 1.4.0 2.0.1 3.0.0
        semver-engine max-satisfying "~1.2" 1.2.0 1.2.9 1.3.0
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed fields as JSON.")
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Validate VERSION and print its canonical form."""
    v = ctx.parse_version(version)
    if as_json:
        fields = {
            "major": v.major,
            "minor": v.minor,
            "patch": v.patch,
            "prerelease": [
                identifier.value for identifier in v.prerelease
            ],
            "build": list(v.build),
            "canonical": str(v),
        }
        echo_info(json.dumps(fields, indent=2))
    else:
        echo_info(str(v))


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Compare two versions by precedence (build metadata is ignored)."""
    v1 = ctx.parse_version(version1)
    v2 = ctx.parse_version(version2)
    symbol = {Ordering.LESS: "<", Ordering.EQUAL: "=", Ordering.GREATER: ">"}[
        compare_versions(v1, v2)
    ]
    echo_info(f"{v1} {symbol} {v2}")


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort from highest to lowest.")
@pass_context
def sort_command(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS sorted by precedence."""
    for v in sort_versions(ctx.parse_versions(versions), reverse=reverse):
        echo_info(str(v))


@cli.command("range")
@click.argument("expression")
@click.option("--intervals", is_flag=True, help="Show the interval of each comparator.")
@pass_context
def range_command(ctx: Context, expression: str, intervals: bool) -> None:
    """Validate a range EXPRESSION and print its normalized form."""
    constraint_set = ctx.parse_range(expression)
    echo_info(str(constraint_set))
    if intervals:
        for index, group in enumerate(constraint_set.groups):
            echo_info(f"group {index}:")
            for comparator in group:
                interval = comparator.interval
                echo_info(f"  {comparator}: {interval if interval is not None else '<nothing>'}")


@cli.command()
@click.argument("expression")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def satisfies(ctx: Context, expression: str, versions: tuple[str, ...]) -> None:
    """Print the VERSIONS that satisfy the range EXPRESSION.

    Exits with status 1 when no version matches.
    """
    constraint_set = ctx.parse_range(expression)
    matches = filter_satisfying(ctx.parse_versions(versions), constraint_set)
    if not matches:
        echo_error(f"No version satisfies {constraint_set}")
        raise SystemExit(1)
    for v in matches:
        echo_success(str(v))


@cli.command("max-satisfying")
@click.argument("expression")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def max_satisfying_command(ctx: Context, expression: str, versions: tuple[str, ...]) -> None:
    """Print the highest of VERSIONS that satisfies the range EXPRESSION."""
    constraint_set = ctx.parse_range(expression)
    best = max_satisfying(ctx.parse_versions(versions), constraint_set)
    if best is None:
        echo_error(f"No version satisfies {constraint_set}")
        raise SystemExit(1)
    echo_success(str(best))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
