# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .compare import sort_versions
from .config import ConfigError, SemverConfig, load_config
from .errors import SemverError
from .parser import parse, try_parse
from .version import Version

logger = logging.getLogger(__name__)

BUMP_PARTS = ("major", "minor", "patch", "pre-release", "build")


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


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
@click.version_option(version=__version__, prog_name="semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory to read pyproject.toml from.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare and bump semantic versions.

    \b
    Examples:
        semver validate 1.0.0-rc.1
        semver compare 1.0.0-alpha 1.0.0
        semver sort 1.0.0 1.0.0-beta 0.9.0
        semver bump minor 1.2.3
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def validate(versions: tuple[str, ...]) -> None:
    """Check that each VERSION is a valid semantic version."""
    failed = False
    for text in versions:
        result = try_parse(text)
        if result.ok:
            echo_success(f"{text}: valid")
        else:
            failed = True
            echo_error(f"{text}: {result.error} [{result.error.kind.value}]")
    if failed:
        sys.exit(1)


@cli.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--builds/--no-builds",
    default=None,
    help="Break ties on build metadata.",
)
@pass_context
def compare(ctx: Context, version1: str, version2: str, builds: Optional[bool]) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2."""
    try:
        if builds is None:
            builds = ctx.load_config().build_aware
        first, second = parse(version1), parse(version2)
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        sys.exit(1)

    result = first.compare_with_builds(second) if builds else first.compare(second)
    echo_info(str(result))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--builds/--no-builds",
    default=None,
    help="Order versions of equal precedence by build metadata.",
)
@click.option("-r", "--reverse", is_flag=True, help="Print the highest version first.")
@pass_context
def sort_command(
    ctx: Context, versions: tuple[str, ...], builds: Optional[bool], reverse: bool
) -> None:
    """Print VERSIONS in ascending order, one per line."""
    try:
        if builds is None:
            builds = ctx.load_config().build_aware
        ordered = sort_versions(versions, build_aware=builds, reverse=reverse)
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        sys.exit(1)

    for version in ordered:
        echo_info(str(version))


@cli.command()
@click.argument("part", type=click.Choice(BUMP_PARTS))
@click.argument("version", required=False)
@click.option(
    "--pre",
    "pre_release",
    default=None,
    help="Pre-release to attach after a major, minor or patch bump.",
)
@pass_context
def bump(ctx: Context, part: str, version: Optional[str], pre_release: Optional[str]) -> None:
    """Print VERSION with PART incremented.

    When VERSION is omitted, the project version from pyproject.toml is used.
    """
    try:
        config = ctx.load_config()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    text = version or config.version
    if not text:
        raise click.UsageError("No VERSION given and no [project] version found")
    if pre_release is None and config.default_pre_release:
        pre_release = config.default_pre_release

    try:
        bumped = _bump(parse(text), part, pre_release)
    except SemverError as e:
        echo_error(str(e))
        sys.exit(1)

    logger.debug("Bumped %s of %s", part, text)
    echo_info(str(bumped))


def _bump(version: Version, part: str, pre_release: Optional[str]) -> Version:
    if part == "major":
        return version.increment_major(pre_release)
    if part == "minor":
        return version.increment_minor(pre_release)
    if part == "patch":
        return version.increment_patch(pre_release)
    if part == "pre-release":
        return version.increment_pre_release()
    return version.increment_build_metadata()


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (SemverError, ConfigError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
