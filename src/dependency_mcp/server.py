"""MCP tool server exposing package version lookups.

Registers six tools on a ``FastMCP`` server: three single-package lookups and
their batch counterparts. Every tool answers with the normalized
``PackageResult`` (or a list of them) serialized as indented JSON. Lookup
failures surface as tool errors carrying the exception message.

Run over stdio with ``dependency-mcp serve``.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field

from dependency_mcp.checker import MAX_BATCH_SIZE, PackageVersionChecker
from dependency_mcp.models import PackageResult, PackageVersionRequest

logger = logging.getLogger(__name__)

RegistryName = Literal["npm", "pypi", "maven", "nuget", "rubygems", "crates", "go"]

RegistryArg = Annotated[RegistryName, Field(description="Package registry/manager to check")]
PackageNameArg = Annotated[str, Field(description="Name of the package to check")]
VersionArg = Annotated[str, Field(description="Version to check for existence")]
PackageListArg = Annotated[
    list[str],
    Field(description=f"Package names to check (1 to {MAX_BATCH_SIZE})"),
]


class VersionQuery(BaseModel):
    """One package/version pair in a batch existence check."""

    package_name: str = Field(description="Name of the package to check")
    version: str = Field(description="Version to check for existence")


mcp = FastMCP(
    "dependency-mcp",
    instructions=(
        "Look up package versions on npm, PyPI, Maven Central, NuGet, RubyGems, "
        "crates.io and the Go module proxy. Maven packages are named groupId:artifactId."
    ),
)

checker = PackageVersionChecker()


def _to_json(result: PackageResult | list[PackageResult]) -> str:
    payload: Any
    if isinstance(result, list):
        payload = [r.to_dict() for r in result]
    else:
        payload = result.to_dict()
    return json.dumps(payload, indent=2)


@mcp.tool()
async def get_latest_version(package_name: PackageNameArg, registry: RegistryArg) -> str:
    """Get the latest version of a package.

    Use for dependency updates, version checks, or when you need the most
    recent release. Returns package name, latest version, description and
    timestamp.
    """
    result = await checker.get_latest_version(package_name, registry)
    return _to_json(result)


@mcp.tool()
async def check_version_exists(
    package_name: PackageNameArg, version: VersionArg, registry: RegistryArg
) -> str:
    """Check if a specific version of a package exists.

    Use for dependency validation, CI checks, or confirming version
    compatibility. Returns whether the version exists, with timestamp.
    """
    result = await checker.check_version_exists(package_name, version, registry)
    return _to_json(result)


@mcp.tool()
async def get_package_info(package_name: PackageNameArg, registry: RegistryArg) -> str:
    """Get detailed package information including all versions.

    Use for dependency audits and reviews. Returns the version list,
    homepage, repository and other metadata the registry provides.
    """
    result = await checker.get_package_info(package_name, registry)
    return _to_json(result)


@mcp.tool()
async def get_latest_versions(packages: PackageListArg, registry: RegistryArg) -> str:
    """Get latest versions for many packages at once.

    Processes up to 100 packages in parallel. Each package gets its own
    result; a failing package does not break the batch.
    """
    results = await checker.get_latest_versions(packages, registry)
    return _to_json(results)


@mcp.tool()
async def check_versions_exist(
    packages: Annotated[
        list[VersionQuery],
        Field(description="Package objects with name and version (1 to 100)"),
    ],
    registry: RegistryArg,
) -> str:
    """Check whether specific versions exist for many packages at once.

    Processes up to 100 package/version pairs in parallel with per-package
    error handling.
    """
    requests = [PackageVersionRequest(q.package_name, q.version) for q in packages]
    results = await checker.check_versions_exist(requests, registry)
    return _to_json(results)


@mcp.tool()
async def get_packages_info(packages: PackageListArg, registry: RegistryArg) -> str:
    """Get detailed package information for many packages at once.

    Processes up to 100 packages in parallel. Failed packages are reported
    individually and do not break the batch.
    """
    results = await checker.get_packages_info(packages, registry)
    return _to_json(results)


def run() -> None:
    """Serve the tools over stdio until the client disconnects."""
    logger.info("Starting dependency-mcp tool server on stdio")
    mcp.run()
