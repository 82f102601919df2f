"""``dependency-mcp registries`` — List the supported registries.

Exit Codes:
    0 — Always (informational command, cannot fail).
"""

from __future__ import annotations

import click

from dependency_mcp import __version__
from dependency_mcp.models import Registry

# Each tuple: (registry, human_name, endpoint, naming hint)
_REGISTRIES: tuple[tuple[Registry, str, str, str], ...] = (
    (Registry.NPM, "npm", "registry.npmjs.org", "express, @types/node"),
    (Registry.PYPI, "PyPI", "pypi.org/pypi", "requests"),
    (Registry.MAVEN, "Maven Central", "search.maven.org", "groupId:artifactId"),
    (Registry.NUGET, "NuGet", "api.nuget.org/v3-flatcontainer", "Newtonsoft.Json"),
    (Registry.RUBYGEMS, "RubyGems", "rubygems.org/api/v1", "rails"),
    (Registry.CRATES, "crates.io", "crates.io/api/v1", "serde"),
    (Registry.GO, "Go modules", "proxy.golang.org", "golang.org/x/text"),
)

_ROW_FMT = "{tag:<10}  {name:<14}  {endpoint:<31}  {hint}"


def format_registries_table() -> str:
    """Build the registries table as a plain string."""
    lines = [f"dependency-mcp v{__version__} -- {len(_REGISTRIES)} supported registries", ""]
    lines.append(_ROW_FMT.format(tag="Tag", name="Registry", endpoint="Endpoint", hint="Example").rstrip())
    lines.append(_ROW_FMT.format(tag="-" * 10, name="-" * 14, endpoint="-" * 31, hint="-" * 20))
    for registry, name, endpoint, hint in _REGISTRIES:
        lines.append(_ROW_FMT.format(tag=registry.value, name=name, endpoint=endpoint, hint=hint))
    return "\n".join(lines)


@click.command("registries")
def registries_command() -> None:
    """List the supported registries and how packages are named on each."""
    click.echo(format_registries_table())
