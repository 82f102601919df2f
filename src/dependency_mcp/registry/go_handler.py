"""Go module proxy handler (proxy.golang.org).

Module paths and versions are escaped as the module proxy protocol requires:
every upper-case letter becomes ``!`` followed by its lower-case form.

The version list (``@v/list``) is plain text, one version per line. It is a
best-effort extra for ``get_package_info``: when it cannot be fetched the
result still reports the module as found, with an empty version list.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

from dependency_mcp.exceptions import RegistryRequestError
from dependency_mcp.models import PackageResult, Registry
from dependency_mcp.registry.base import RegistryHandler, as_dict, optional_str

logger = logging.getLogger(__name__)

GO_PROXY_URL: str = "https://proxy.golang.org"

_UPPER_RE = re.compile(r"[A-Z]")


def escape_module_path(path: str) -> str:
    """Apply the module proxy case escaping and URL-quote each path segment."""
    escaped = _UPPER_RE.sub(lambda m: "!" + m.group(0).lower(), path)
    return quote(escaped, safe="/!")


class GoHandler(RegistryHandler):
    """Handler for the Go module proxy."""

    registry = Registry.GO

    async def get_latest_version(self, package_name: str) -> PackageResult:
        latest = await self._fetch(self._module_url(package_name, "@latest"))
        if latest is None:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=optional_str(as_dict(latest).get("Version")),
            description=f"Go module: {package_name}",
        )

    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        info_url = self._module_url(package_name, f"@v/{escape_module_path(version)}.info")
        info = await self._fetch(info_url)
        return self._success(package_name, version=version, exists=info is not None)

    async def get_package_info(self, package_name: str) -> PackageResult:
        latest = await self._fetch(self._module_url(package_name, "@latest"))
        if latest is None:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=optional_str(as_dict(latest).get("Version")),
            description=f"Go module: {package_name}",
            versions=await self._fetch_version_list(package_name),
        )

    async def _fetch_version_list(self, package_name: str) -> list[str]:
        try:
            text = await self._fetch(self._module_url(package_name, "@v/list"), as_text=True)
        except RegistryRequestError as exc:
            logger.info("Version list unavailable for %s: %s", package_name, exc)
            return []
        if not isinstance(text, str):
            return []
        return [line.strip() for line in text.splitlines() if line.strip()]

    @staticmethod
    def _module_url(module: str, suffix: str) -> str:
        return f"{GO_PROXY_URL}/{escape_module_path(module.strip('/'))}/{suffix}"
