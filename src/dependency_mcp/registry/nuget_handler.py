"""NuGet handler backed by the v3 flat container index.

The flat container lists every version in ascending order, lower-cased and
normalized, so the last entry is the latest version.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from dependency_mcp.models import PackageResult, Registry
from dependency_mcp.registry.base import RegistryHandler, as_dict, as_list

logger = logging.getLogger(__name__)

NUGET_INDEX_URL: str = "https://api.nuget.org/v3-flatcontainer/{package}/index.json"


class NuGetHandler(RegistryHandler):
    """Handler for nuget.org."""

    registry = Registry.NUGET

    async def get_latest_version(self, package_name: str) -> PackageResult:
        versions = await self._fetch_versions(package_name)
        if not versions:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=versions[-1],
            description=f"NuGet package: {package_name}",
        )

    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        """Look up ``version`` in the lower-cased index; the match ignores case."""
        versions = await self._fetch_versions(package_name)
        if versions is None:
            return self._not_found(package_name, version=version)
        return self._success(
            package_name,
            version=version,
            exists=version.lower() in versions,
        )

    async def get_package_info(self, package_name: str) -> PackageResult:
        versions = await self._fetch_versions(package_name)
        if not versions:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=versions[-1],
            description=f"NuGet package: {package_name}",
            versions=versions,
        )

    async def _fetch_versions(self, package_name: str) -> list[str] | None:
        """Return the version index, or None when the package is unknown."""
        url = NUGET_INDEX_URL.format(package=quote(package_name.lower(), safe=""))
        data = await self._fetch(url)
        if data is None:
            return None
        return [str(v) for v in as_list(as_dict(data).get("versions"))]
