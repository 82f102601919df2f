"""crates.io handler.

crates.io rejects anonymous clients without a descriptive User-Agent; the
shared ``RequestPolicy`` always sends one.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from dependency_mcp.models import PackageResult, Registry
from dependency_mcp.registry.base import RegistryHandler, as_dict, as_list, optional_str

logger = logging.getLogger(__name__)

CRATES_CRATE_URL: str = "https://crates.io/api/v1/crates/{package}"
CRATES_VERSIONS_URL: str = "https://crates.io/api/v1/crates/{package}/versions"


class CratesHandler(RegistryHandler):
    """Handler for crates.io."""

    registry = Registry.CRATES

    async def get_latest_version(self, package_name: str) -> PackageResult:
        crate = await self._fetch_crate(package_name)
        if crate is None:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=optional_str(crate.get("newest_version")),
            description=optional_str(crate.get("description")),
        )

    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        entries = await self._fetch_version_entries(package_name)
        if entries is None:
            return self._not_found(package_name, version=version)
        return self._success(
            package_name,
            version=version,
            exists=any(entry.get("num") == version for entry in entries),
        )

    async def get_package_info(self, package_name: str) -> PackageResult:
        crate = await self._fetch_crate(package_name)
        if crate is None:
            return self._not_found(package_name)
        entries = await self._fetch_version_entries(package_name) or []
        return self._success(
            package_name,
            latest_version=optional_str(crate.get("newest_version")),
            description=optional_str(crate.get("description")),
            versions=[str(e["num"]) for e in entries if e.get("num")],
            homepage=optional_str(crate.get("homepage")),
            repository=optional_str(crate.get("repository")),
        )

    async def _fetch_crate(self, package_name: str) -> dict[str, Any] | None:
        """Return the ``crate`` object, or None when the crate is unknown."""
        data = await self._fetch(CRATES_CRATE_URL.format(package=quote(package_name, safe="")))
        crate = as_dict(data).get("crate")
        return crate if isinstance(crate, dict) else None

    async def _fetch_version_entries(self, package_name: str) -> list[dict[str, Any]] | None:
        url = CRATES_VERSIONS_URL.format(package=quote(package_name, safe=""))
        data = await self._fetch(url)
        if data is None:
            return None
        return [e for e in as_list(as_dict(data).get("versions")) if isinstance(e, dict)]
