"""CLI entry point for release-version."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click
from pydantic import ValidationError

from release_version.compat import to_semver
from release_version.errors import VersionError
from release_version.models import ProjectVersion, VersionBump
from release_version.normal import Arity, DigitPos
from release_version.parser import parse_version
from release_version.shell import fatal, info, step
from release_version.toml import (
    get_project_name,
    get_project_version,
    load_pyproject,
    save_pyproject,
    set_project_version,
)
from release_version.version import Version

STRATEGIES = ("version", "latest", "core", "build")

F = TypeVar("F", bound=Callable[..., Any])


def _arity(four: bool) -> Arity:
    return Arity.FOUR if four else Arity.THREE


def _parse(text: str, four: bool) -> Version:
    try:
        return parse_version(text, _arity(four))
    except VersionError as exc:
        fatal(str(exc))


def bump_version(
    version: Version,
    strategy: str = "version",
    position: DigitPos | None = None,
    branch: str | None = None,
    build: str | None = None,
    extension: str | None = None,
) -> Version:
    """Apply one of the increment strategies to ``version``.

    Strategies:
        version: increment ``position`` (default least significant), or the
            build counter if there is build metadata.
        latest: move to the next release line, or the build counter if
            there is build metadata.
        core: increment ``position`` and never touch the build counter.
        build: increment only the build counter.
    """
    if strategy == "version":
        return version.increment_version(position, branch, build, extension)
    if strategy == "latest":
        return version.increment_latest(position, branch, build, extension)
    if strategy == "core":
        pos = position or version.normal.least_significant
        increment = {
            DigitPos.MAJOR: version.increment_major,
            DigitPos.MINOR: version.increment_minor,
            DigitPos.PATCH: version.increment_patch,
            DigitPos.HOTFIX: version.increment_hotfix,
        }[pos]
        return increment(branch, build, extension)
    if strategy == "build":
        return version.increment_build_metadata()
    raise ValueError(f"Unknown bump strategy: {strategy}")


def _bump_options(func: F) -> F:
    func = click.option("--extension", default=None, help="New extension (SNAPSHOT or LOCAL).")(func)
    func = click.option("--build", "build_", default=None, help="New build metadata, e.g. rc.1.")(func)
    func = click.option("--branch", default=None, help="New branch metadata.")(func)
    func = click.option(
        "-p",
        "--position",
        type=click.Choice([p.value for p in DigitPos]),
        default=None,
        help="Component to increment. Defaults to the least significant one.",
    )(func)
    func = click.option(
        "-s",
        "--strategy",
        type=click.Choice(STRATEGIES),
        default="version",
        show_default=True,
        help="How to increment.",
    )(func)
    func = click.option("--four", is_flag=True, help="Treat short versions as four digits.")(func)
    return func


def _run_bump(
    version: Version,
    strategy: str,
    position: str | None,
    branch: str | None,
    build: str | None,
    extension: str | None,
) -> Version:
    try:
        return bump_version(
            version,
            strategy,
            DigitPos(position) if position else None,
            branch,
            build,
            extension,
        )
    except (VersionError, ValidationError) as exc:
        fatal(str(exc))


@click.group()
@click.version_option(package_name="release-version")
def cli() -> None:
    """Parse, compare and bump three and four digit release versions."""


@cli.command("parse")
@click.argument("version")
@click.option("--four", is_flag=True, help="Treat short versions as four digits.")
@click.option("-v", "--verbose", is_flag=True, help="Show the parsed parts.")
def parse_cmd(version: str, four: bool, verbose: bool) -> None:
    """Print the canonical form of VERSION."""
    v = _parse(version, four)
    click.echo(str(v))
    info(f"core:      {v.normal}", verbose)
    info(f"branch:    {str(v.branch) or '<none>'}", verbose)
    info(f"build:     {str(v.build) or '<none>'}", verbose)
    info(f"extension: {str(v.extension) or '<none>'}", verbose)
    if verbose and v.arity is Arity.THREE:
        try:
            info(f"semver:    {to_semver(v)}")
        except ValueError as exc:
            info(f"semver:    <none> ({exc})")


@cli.command()
@click.argument("left")
@click.argument("right")
@click.option("--four", is_flag=True, help="Treat short versions as four digits.")
def compare(left: str, right: str, four: bool) -> None:
    """Print <, = or > for LEFT compared to RIGHT."""
    result = _parse(left, four).compare_to(_parse(right, four))
    click.echo({-1: "<", 0: "=", 1: ">"}[result])


@cli.command("sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--four", is_flag=True, help="Treat short versions as four digits.")
@click.option("-r", "--reverse", is_flag=True, help="Highest version first.")
def sort_cmd(versions: tuple[str, ...], four: bool, reverse: bool) -> None:
    """Print VERSIONS in ascending order, as they were written."""
    parsed = sorted((_parse(v, four) for v in versions), reverse=reverse)
    for v in parsed:
        click.echo(v.to_string_from_original())


@cli.command()
@click.argument("version")
@_bump_options
def bump(
    version: str,
    four: bool,
    strategy: str,
    position: str | None,
    branch: str | None,
    build_: str | None,
    extension: str | None,
) -> None:
    """Print VERSION incremented."""
    new = _run_bump(_parse(version, four), strategy, position, branch, build_, extension)
    click.echo(str(new))


@cli.command("bump-project")
@click.argument(
    "pyproject",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default="pyproject.toml",
)
@_bump_options
@click.option("-n", "--dry-run", is_flag=True, help="Show the new version without writing it.")
def bump_project(
    pyproject: Path,
    four: bool,
    strategy: str,
    position: str | None,
    branch: str | None,
    build_: str | None,
    extension: str | None,
    dry_run: bool,
) -> None:
    """Bump [project].version in PYPROJECT (default: ./pyproject.toml)."""
    doc = load_pyproject(pyproject)
    project = ProjectVersion(
        name=get_project_name(doc, pyproject.parent.name),
        path=str(pyproject),
        version=get_project_version(doc),
    )
    step(f"Bumping {project.name}")

    new = _run_bump(_parse(project.version, four), strategy, position, branch, build_, extension)
    change = VersionBump(old=project.version, new=str(new))
    click.echo(f"  {project.name}: {change}")

    if dry_run:
        info("dry run, nothing written")
        return
    set_project_version(doc, change.new)
    save_pyproject(pyproject, doc)
    info(f"wrote {project.path}")
