"""npm registry handler.

Reads the full package document (``GET /{name}``) and normalizes its
``dist-tags``, ``versions`` map and metadata fields.

Usage::

    handler = NpmHandler()
    result = await handler.get_latest_version("express")
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from dependency_mcp.models import PackageResult, Registry
from dependency_mcp.registry.base import RegistryHandler, as_dict, optional_str

logger = logging.getLogger(__name__)

NPM_PACKAGE_URL: str = "https://registry.npmjs.org/{package}"


class NpmHandler(RegistryHandler):
    """Handler for the npm registry."""

    registry = Registry.NPM

    async def get_latest_version(self, package_name: str) -> PackageResult:
        data = await self._fetch_document(package_name)
        if data is None:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=optional_str(as_dict(data.get("dist-tags")).get("latest")),
            description=optional_str(data.get("description")),
        )

    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        data = await self._fetch_document(package_name)
        if data is None:
            return self._not_found(package_name, version=version)
        return self._success(
            package_name,
            version=version,
            exists=version in as_dict(data.get("versions")),
        )

    async def get_package_info(self, package_name: str) -> PackageResult:
        data = await self._fetch_document(package_name)
        if data is None:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=optional_str(as_dict(data.get("dist-tags")).get("latest")),
            description=optional_str(data.get("description")),
            versions=list(as_dict(data.get("versions"))),
            homepage=optional_str(data.get("homepage")),
            repository=_extract_repository(data.get("repository")),
            author=_extract_author(data.get("author")),
        )

    async def _fetch_document(self, package_name: str) -> dict[str, Any] | None:
        # Scoped names keep the "@" and send the slash encoded.
        url = NPM_PACKAGE_URL.format(package=quote(package_name, safe="@"))
        data = await self._fetch(url)
        if data is None:
            return None
        return as_dict(data)


def _extract_repository(repo_data: Any) -> str | None:
    """Extract the repository URL from the string or object form."""
    if isinstance(repo_data, str):
        return repo_data or None
    if isinstance(repo_data, dict):
        return optional_str(repo_data.get("url"))
    return None


def _extract_author(author_data: Any) -> str | None:
    """Extract the author name from the string or object form."""
    if isinstance(author_data, str):
        return author_data or None
    if isinstance(author_data, dict):
        return optional_str(author_data.get("name"))
    return None
