"""Lookup dispatcher and batch fan-out.

``PackageVersionChecker`` is the entry point used by the tool server and the
CLI. It validates input, routes each request to the long-lived handler for
the target registry, and runs batch requests concurrently with per-item
error isolation.

Usage::

    checker = PackageVersionChecker()
    result = await checker.get_latest_version("express", "npm")
    results = await checker.get_latest_versions(["flask", "requests"], "pypi")
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Mapping, Sequence, TypeVar

from dependency_mcp.exceptions import UnsupportedRegistryError, ValidationError
from dependency_mcp.models import PackageResult, PackageVersionRequest, Registry, utc_timestamp
from dependency_mcp.registry import HANDLER_TYPES, RegistryHandler

logger = logging.getLogger(__name__)

MAX_BATCH_SIZE: int = 100
MAX_PACKAGE_NAME_LENGTH: int = 500
MAX_VERSION_LENGTH: int = 100

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


def validate_package_name(package_name: Any) -> str:
    """Return the trimmed package name.

    Raises:
        ValidationError: If the name is not a string, is blank, or is longer
            than ``MAX_PACKAGE_NAME_LENGTH`` characters after trimming.
    """
    if not isinstance(package_name, str) or not package_name.strip():
        raise ValidationError("Package name must be a non-empty string")
    name = package_name.strip()
    if len(name) > MAX_PACKAGE_NAME_LENGTH:
        raise ValidationError(
            f"Package name too long (max {MAX_PACKAGE_NAME_LENGTH} characters)"
        )
    return name


def validate_version(version: Any) -> str:
    """Return the trimmed version string.

    Raises:
        ValidationError: If the version is not a string, is blank, or is
            longer than ``MAX_VERSION_LENGTH`` characters after trimming.
    """
    if not isinstance(version, str) or not version.strip():
        raise ValidationError("Version must be a non-empty string")
    value = version.strip()
    if len(value) > MAX_VERSION_LENGTH:
        raise ValidationError(
            f"Version string too long (max {MAX_VERSION_LENGTH} characters)"
        )
    return value


# ---------------------------------------------------------------------------
# Batch fan-out
# ---------------------------------------------------------------------------


async def process_batch(
    items: Sequence[T],
    registry: Registry | str,
    operation: Callable[[T], Awaitable[PackageResult]],
) -> list[PackageResult]:
    """Run ``operation`` for every item concurrently.

    A failing item never fails the batch: its exception is turned into an
    error result for that item. Output order matches input order.

    Args:
        items: Between 1 and ``MAX_BATCH_SIZE`` items.
        registry: Registry tag reported on synthesized error results.
        operation: Async lookup applied to each item.

    Returns:
        One ``PackageResult`` per input item.

    Raises:
        UnsupportedRegistryError: If ``registry`` is not recognised.
        ValidationError: If ``items`` is empty, not a list, or too large.
    """
    kind = Registry.parse(registry)
    if not isinstance(items, (list, tuple)) or len(items) == 0:
        raise ValidationError("Packages must be a non-empty array")
    if len(items) > MAX_BATCH_SIZE:
        raise ValidationError(f"Maximum {MAX_BATCH_SIZE} packages allowed per request")

    results = await asyncio.gather(
        *(_run_isolated(item, kind, operation) for item in items)
    )
    return list(results)


async def _run_isolated(
    item: T,
    registry: Registry,
    operation: Callable[[T], Awaitable[PackageResult]],
) -> PackageResult:
    try:
        return await operation(item)
    except Exception as exc:
        name = _item_package_name(item)
        logger.warning("Batch lookup failed for %s on %s: %s", name, registry.value, exc)
        version = _item_version(item)
        return PackageResult(
            package=name,
            registry=registry.value,
            found=False,
            timestamp=utc_timestamp(),
            error=str(exc) or "Unknown error",
            version=version,
        )


def _item_package_name(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, PackageVersionRequest):
        value = item.package_name
    elif isinstance(item, Mapping):
        value = item.get("package_name")
    else:
        return ""
    return value if isinstance(value, str) else ""


def _item_version(item: Any) -> str | None:
    if isinstance(item, PackageVersionRequest):
        value = item.version
    elif isinstance(item, Mapping):
        value = item.get("version")
    else:
        return None
    return value if isinstance(value, str) else None


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class PackageVersionChecker:
    """Routes lookups to one long-lived handler per registry.

    Args:
        handlers: Handler table keyed by registry. Defaults to a fresh
            instance of every handler in ``HANDLER_TYPES``.
    """

    def __init__(self, handlers: Mapping[Registry, RegistryHandler] | None = None) -> None:
        if handlers is None:
            handlers = {kind: handler_type() for kind, handler_type in HANDLER_TYPES.items()}
        self._handlers: dict[Registry, RegistryHandler] = dict(handlers)

    def supported_registries(self) -> list[str]:
        """Return the tags of every registry this checker can answer for."""
        return [kind.value for kind in Registry if kind in self._handlers]

    def handler_for(self, registry: Registry | str) -> RegistryHandler:
        """Resolve the handler for a registry tag.

        Raises:
            UnsupportedRegistryError: If no handler serves the registry.
        """
        kind = Registry.parse(registry)
        handler = self._handlers.get(kind)
        if handler is None:
            raise UnsupportedRegistryError(f"Unsupported registry: {kind.value}")
        return handler

    async def get_latest_version(self, package_name: str, registry: Registry | str) -> PackageResult:
        """Latest version of one package."""
        name = validate_package_name(package_name)
        return await self.handler_for(registry).get_latest_version(name)

    async def check_version_exists(
        self, package_name: str, version: str, registry: Registry | str
    ) -> PackageResult:
        """Whether ``version`` of one package exists."""
        name = validate_package_name(package_name)
        checked = validate_version(version)
        return await self.handler_for(registry).check_version_exists(name, checked)

    async def get_package_info(self, package_name: str, registry: Registry | str) -> PackageResult:
        """Full metadata and version list of one package."""
        name = validate_package_name(package_name)
        return await self.handler_for(registry).get_package_info(name)

    async def get_latest_versions(
        self, packages: Sequence[str], registry: Registry | str
    ) -> list[PackageResult]:
        """Latest versions of up to ``MAX_BATCH_SIZE`` packages."""
        handler = self.handler_for(registry)

        async def lookup(package_name: str) -> PackageResult:
            return await handler.get_latest_version(validate_package_name(package_name))

        return await process_batch(packages, handler.registry, lookup)

    async def check_versions_exist(
        self,
        packages: Sequence[PackageVersionRequest | Mapping[str, Any]],
        registry: Registry | str,
    ) -> list[PackageResult]:
        """Version existence for up to ``MAX_BATCH_SIZE`` package/version pairs."""
        handler = self.handler_for(registry)

        async def lookup(item: PackageVersionRequest | Mapping[str, Any]) -> PackageResult:
            request = PackageVersionRequest.from_obj(item)
            name = validate_package_name(request.package_name)
            return await handler.check_version_exists(name, validate_version(request.version))

        return await process_batch(packages, handler.registry, lookup)

    async def get_packages_info(
        self, packages: Sequence[str], registry: Registry | str
    ) -> list[PackageResult]:
        """Full metadata for up to ``MAX_BATCH_SIZE`` packages."""
        handler = self.handler_for(registry)

        async def lookup(package_name: str) -> PackageResult:
            return await handler.get_package_info(validate_package_name(package_name))

        return await process_batch(packages, handler.registry, lookup)
