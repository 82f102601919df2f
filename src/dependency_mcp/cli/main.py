"""dependency-mcp CLI: package version lookups across public registries.

Entry point for the ``dependency-mcp`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    latest     — Latest version of one or more packages.
    exists     — Whether specific package versions exist.
    info       — Full metadata and version list of one or more packages.
    registries — List the supported registries.
    serve      — Run the MCP tool server over stdio.

Usage::

    dependency-mcp latest -r npm express
    dependency-mcp latest -r pypi flask requests --format json
    dependency-mcp exists -r crates serde==1.0.200
    dependency-mcp info -r maven org.springframework:spring-core
    dependency-mcp serve
"""

from __future__ import annotations

import click

from dependency_mcp import __version__
from dependency_mcp.cli.lookup_cmd import exists_command, info_command, latest_command
from dependency_mcp.cli.registries_cmd import registries_command
from dependency_mcp.cli.serve_cmd import serve_command
from dependency_mcp.console import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log requests and retries to stderr.")
def cli(verbose: bool) -> None:
    """dependency-mcp: Check package versions on npm, PyPI, Maven Central,
    NuGet, RubyGems, crates.io and the Go module proxy.
    """
    setup_logging(verbose=verbose)


# Register all subcommands
cli.add_command(latest_command)
cli.add_command(exists_command)
cli.add_command(info_command)
cli.add_command(registries_command)
cli.add_command(serve_command)
