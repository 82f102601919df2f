"""PyPI handler backed by the JSON API (``GET /pypi/{name}/json``)."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from dependency_mcp.models import PackageResult, Registry
from dependency_mcp.registry.base import RegistryHandler, as_dict, optional_str

logger = logging.getLogger(__name__)

PYPI_JSON_API: str = "https://pypi.org/pypi/{package}/json"


class PyPIHandler(RegistryHandler):
    """Handler for the Python Package Index."""

    registry = Registry.PYPI

    async def get_latest_version(self, package_name: str) -> PackageResult:
        data = await self._fetch_metadata(package_name)
        if data is None:
            return self._not_found(package_name)
        info = as_dict(data.get("info"))
        return self._success(
            package_name,
            latest_version=optional_str(info.get("version")),
            description=optional_str(info.get("summary")),
        )

    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        data = await self._fetch_metadata(package_name)
        if data is None:
            return self._not_found(package_name, version=version)
        return self._success(
            package_name,
            version=version,
            exists=version in as_dict(data.get("releases")),
        )

    async def get_package_info(self, package_name: str) -> PackageResult:
        data = await self._fetch_metadata(package_name)
        if data is None:
            return self._not_found(package_name)
        info = as_dict(data.get("info"))
        return self._success(
            package_name,
            latest_version=optional_str(info.get("version")),
            description=optional_str(info.get("summary")),
            versions=list(as_dict(data.get("releases"))),
            homepage=optional_str(info.get("home_page")),
            author=optional_str(info.get("author")),
        )

    async def _fetch_metadata(self, package_name: str) -> dict[str, Any] | None:
        data = await self._fetch(PYPI_JSON_API.format(package=quote(package_name, safe="")))
        return None if data is None else as_dict(data)
