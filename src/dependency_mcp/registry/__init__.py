"""Registry handlers for package version lookups.

Provides the abstract ``RegistryHandler`` and one concrete handler per
supported registry, plus the shared request policy and retry wrapper.

Public API::

    from dependency_mcp.registry import HANDLER_TYPES, RegistryHandler
    from dependency_mcp.registry.npm_handler import NpmHandler
    from dependency_mcp.registry.http_client import RequestPolicy
"""

from __future__ import annotations

from dependency_mcp.models import Registry
from dependency_mcp.registry.base import NOT_FOUND_MESSAGE, RegistryHandler
from dependency_mcp.registry.crates_handler import CratesHandler
from dependency_mcp.registry.go_handler import GoHandler
from dependency_mcp.registry.http_client import RequestPolicy
from dependency_mcp.registry.maven_handler import MavenHandler
from dependency_mcp.registry.npm_handler import NpmHandler
from dependency_mcp.registry.nuget_handler import NuGetHandler
from dependency_mcp.registry.pypi_handler import PyPIHandler
from dependency_mcp.registry.rubygems_handler import RubyGemsHandler

HANDLER_TYPES: dict[Registry, type[RegistryHandler]] = {
    Registry.NPM: NpmHandler,
    Registry.PYPI: PyPIHandler,
    Registry.MAVEN: MavenHandler,
    Registry.NUGET: NuGetHandler,
    Registry.RUBYGEMS: RubyGemsHandler,
    Registry.CRATES: CratesHandler,
    Registry.GO: GoHandler,
}

__all__ = [
    "HANDLER_TYPES",
    "NOT_FOUND_MESSAGE",
    "RegistryHandler",
    "RequestPolicy",
]
