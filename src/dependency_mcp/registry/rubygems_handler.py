"""RubyGems handler.

Uses the gem document (``/api/v1/gems/{name}.json``) for the latest version
and metadata, and the version list (``/api/v1/versions/{name}.json``) for
existence checks and the full version history.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from dependency_mcp.models import PackageResult, Registry
from dependency_mcp.registry.base import RegistryHandler, as_dict, as_list, optional_str

logger = logging.getLogger(__name__)

RUBYGEMS_GEM_URL: str = "https://rubygems.org/api/v1/gems/{package}.json"
RUBYGEMS_VERSIONS_URL: str = "https://rubygems.org/api/v1/versions/{package}.json"


class RubyGemsHandler(RegistryHandler):
    """Handler for rubygems.org."""

    registry = Registry.RUBYGEMS

    async def get_latest_version(self, package_name: str) -> PackageResult:
        gem = await self._fetch_gem(package_name)
        if gem is None:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=optional_str(gem.get("version")),
            description=optional_str(gem.get("info")),
        )

    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        entries = await self._fetch_version_entries(package_name)
        if entries is None:
            return self._not_found(package_name, version=version)
        return self._success(
            package_name,
            version=version,
            exists=any(entry.get("number") == version for entry in entries),
        )

    async def get_package_info(self, package_name: str) -> PackageResult:
        gem = await self._fetch_gem(package_name)
        if gem is None:
            return self._not_found(package_name)
        entries = await self._fetch_version_entries(package_name) or []
        return self._success(
            package_name,
            latest_version=optional_str(gem.get("version")),
            description=optional_str(gem.get("info")),
            versions=[str(e["number"]) for e in entries if e.get("number")],
            homepage=optional_str(gem.get("homepage_uri")),
            repository=optional_str(gem.get("source_code_uri")),
            author=optional_str(gem.get("authors")),
        )

    async def _fetch_gem(self, package_name: str) -> dict[str, Any] | None:
        data = await self._fetch(RUBYGEMS_GEM_URL.format(package=quote(package_name, safe="")))
        return None if data is None else as_dict(data)

    async def _fetch_version_entries(self, package_name: str) -> list[dict[str, Any]] | None:
        url = RUBYGEMS_VERSIONS_URL.format(package=quote(package_name, safe=""))
        data = await self._fetch(url)
        if data is None:
            return None
        return [e for e in as_list(data) if isinstance(e, dict)]
