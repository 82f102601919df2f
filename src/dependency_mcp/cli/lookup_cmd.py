"""``dependency-mcp latest|exists|info`` — Registry lookups from the shell.

A single package runs the single-item lookup; several packages run the
batch lookup, where a failing package is reported in its own row instead
of aborting the command.

Exit Codes:
    0 — Every package was found (and, for ``exists``, every version exists).
    1 — At least one package was not found, failed, or lacks the version.
    2 — Invalid input, unsupported registry, or a registry request failed.
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any, Awaitable, Callable, Sequence

import click

from dependency_mcp.checker import PackageVersionChecker
from dependency_mcp.exceptions import DependencyMCPError
from dependency_mcp.models import PackageResult, PackageVersionRequest, Registry


def _run_async(coro: Awaitable[Any]) -> Any:
    """Run an async coroutine in a synchronous context."""
    return asyncio.run(coro)  # type: ignore[arg-type]


def _get_checker() -> PackageVersionChecker:
    """Create the checker used by the lookup commands."""
    return PackageVersionChecker()


registry_option = click.option(
    "--registry", "-r",
    required=True,
    type=click.Choice(Registry.tags()),
    help="Package registry to query.",
)

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def _lookup(
    items: Sequence[Any],
    single: Callable[[Any], Awaitable[PackageResult]],
    batch: Callable[[list[Any]], Awaitable[list[PackageResult]]],
) -> list[PackageResult]:
    """Run the single lookup for one item and the batch lookup otherwise.

    Exits with code 2 when the lookup raises.
    """
    try:
        if len(items) == 1:
            return [_run_async(single(items[0]))]
        return _run_async(batch(list(items)))
    except DependencyMCPError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)


def _emit(results: list[PackageResult], output_format: str, title: str) -> None:
    if output_format == "json":
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        from dependency_mcp.cli.output import print_results
        print_results(results, title=title)


def _parse_pin(pin: str) -> PackageVersionRequest:
    """Parse ``NAME==VERSION`` into a request."""
    name, sep, version = pin.rpartition("==")
    if not sep or not name or not version:
        raise click.BadParameter(f"expected NAME==VERSION, got {pin!r}", param_hint="PIN")
    return PackageVersionRequest(package_name=name, version=version)


@click.command("latest")
@click.argument("packages", nargs=-1, required=True)
@registry_option
@format_option
def latest_command(packages: tuple[str, ...], registry: str, output_format: str) -> None:
    """Show the latest version of one or more PACKAGES.

    Examples:

        dependency-mcp latest -r npm express lodash

        dependency-mcp latest -r go golang.org/x/text --format json
    """
    checker = _get_checker()
    results = _lookup(
        packages,
        lambda name: checker.get_latest_version(name, registry),
        lambda names: checker.get_latest_versions(names, registry),
    )
    _emit(results, output_format, title=f"Latest versions ({registry})")
    sys.exit(0 if all(r.found for r in results) else 1)


@click.command("exists")
@click.argument("pins", nargs=-1, required=True, metavar="PIN...")
@registry_option
@format_option
def exists_command(pins: tuple[str, ...], registry: str, output_format: str) -> None:
    """Check that each PIN (NAME==VERSION) was published.

    Examples:

        dependency-mcp exists -r pypi requests==2.28.0

        dependency-mcp exists -r maven org.slf4j:slf4j-api==2.0.9
    """
    requests = [_parse_pin(pin) for pin in pins]
    checker = _get_checker()
    results = _lookup(
        requests,
        lambda req: checker.check_version_exists(req.package_name, req.version, registry),
        lambda reqs: checker.check_versions_exist(reqs, registry),
    )
    _emit(results, output_format, title=f"Version checks ({registry})")
    sys.exit(0 if all(r.found and r.exists for r in results) else 1)


@click.command("info")
@click.argument("packages", nargs=-1, required=True)
@registry_option
@format_option
def info_command(packages: tuple[str, ...], registry: str, output_format: str) -> None:
    """Show metadata and published versions of one or more PACKAGES.

    Examples:

        dependency-mcp info -r crates serde

        dependency-mcp info -r rubygems rails --format json
    """
    checker = _get_checker()
    results = _lookup(
        packages,
        lambda name: checker.get_package_info(name, registry),
        lambda names: checker.get_packages_info(names, registry),
    )
    _emit(results, output_format, title=f"Package info ({registry})")
    sys.exit(0 if all(r.found for r in results) else 1)
