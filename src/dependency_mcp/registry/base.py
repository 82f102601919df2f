"""Base class for registry handlers.

Defines the ``RegistryHandler`` abstract base class that all concrete
handlers (npm, PyPI, Maven, NuGet, RubyGems, crates.io, Go) implement.
Every handler answers the same three questions and reports the answer as a
``PackageResult`` built by ``_success`` or ``_error``, so callers never deal
with registry-specific response shapes.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from dependency_mcp.models import PackageResult, Registry, utc_timestamp
from dependency_mcp.registry.http_client import RequestPolicy

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE: str = "Package not found"


class RegistryHandler(ABC):
    """Abstract base class for registry handlers.

    Subclasses set ``registry`` and implement the three lookups. A handler
    instance is long-lived: its ``RequestPolicy`` carries the rate limiter
    state for that registry.

    Args:
        policy: Request policy to use. A default policy is created if omitted.
    """

    registry: ClassVar[Registry]

    def __init__(self, policy: RequestPolicy | None = None) -> None:
        self.policy = policy if policy is not None else RequestPolicy()

    @abstractmethod
    async def get_latest_version(self, package_name: str) -> PackageResult:
        """Look up the latest published version of a package.

        Args:
            package_name: Package name in the registry's own naming scheme.

        Returns:
            Result with ``latest_version`` and ``description`` on success.
        """

    @abstractmethod
    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        """Check whether a specific version of a package was published.

        Args:
            package_name: Package name in the registry's own naming scheme.
            version: Version string to look for.

        Returns:
            Result with ``version`` and ``exists`` on success.
        """

    @abstractmethod
    async def get_package_info(self, package_name: str) -> PackageResult:
        """Fetch package metadata including the full version list.

        Args:
            package_name: Package name in the registry's own naming scheme.

        Returns:
            Result with ``latest_version``, ``versions`` and whatever metadata
            the registry offers (homepage, repository, author).
        """

    async def _fetch(self, url: str, **kwargs: Any) -> Any:
        """Issue a request through this handler's policy."""
        return await self.policy.request(url, **kwargs)

    def _success(self, package_name: str, **fields: Any) -> PackageResult:
        """Build a ``found=True`` result stamped with the current time."""
        return PackageResult(
            package=package_name,
            registry=self.registry.value,
            found=True,
            timestamp=utc_timestamp(),
            **fields,
        )

    def _error(self, package_name: str, message: str, **fields: Any) -> PackageResult:
        """Build a ``found=False`` result carrying ``message`` as its error."""
        return PackageResult(
            package=package_name,
            registry=self.registry.value,
            found=False,
            timestamp=utc_timestamp(),
            error=message or "Unknown error",
            **fields,
        )

    def _not_found(self, package_name: str, **fields: Any) -> PackageResult:
        logger.debug("%s: %s not found", self.registry.value, package_name)
        return self._error(package_name, NOT_FOUND_MESSAGE, **fields)


def as_dict(value: Any) -> dict[str, Any]:
    """Return ``value`` if it is a dict, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    """Return ``value`` if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def optional_str(value: Any) -> str | None:
    """Coerce a metadata value to ``str``, keeping ``None`` and dropping blanks."""
    if value is None:
        return None
    text = str(value)
    return text if text else None
