"""Data models shared by the registry handlers, the checker and the surfaces.

``PackageResult`` is the single normalized record every lookup produces,
whatever the registry and whether or not the lookup succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

from dependency_mcp.exceptions import UnsupportedRegistryError


class Registry(str, Enum):
    """Supported package registries, keyed by their tool-facing tag."""

    NPM = "npm"
    PYPI = "pypi"
    MAVEN = "maven"
    NUGET = "nuget"
    RUBYGEMS = "rubygems"
    CRATES = "crates"
    GO = "go"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def tags(cls) -> list[str]:
        """Return every registry tag in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: Registry | str) -> Registry:
        """Resolve a registry tag.

        Args:
            value: A ``Registry`` member or its string tag.

        Returns:
            The matching ``Registry`` member.

        Raises:
            UnsupportedRegistryError: If the tag is not recognised.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnsupportedRegistryError(
            f"Unsupported registry: {value}. Supported: {', '.join(cls.tags())}"
        )


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class PackageVersionRequest:
    """A (package, version) pair submitted to the batch version check.

    Attributes:
        package_name: Package name as understood by the target registry.
        version: Version string to look for.
    """

    package_name: str
    version: str

    @classmethod
    def from_obj(cls, obj: PackageVersionRequest | Mapping[str, Any]) -> PackageVersionRequest:
        """Build a request from a mapping with ``package_name`` and ``version``."""
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, Mapping):
            return cls(
                package_name=obj.get("package_name"),  # type: ignore[arg-type]
                version=obj.get("version"),  # type: ignore[arg-type]
            )
        raise TypeError(f"Expected a package/version mapping, got {type(obj).__name__}")


@dataclass(frozen=True)
class PackageResult:
    """Normalized outcome of one registry lookup.

    Attributes:
        package: Package name the lookup was made for.
        registry: Registry tag (e.g. ``"npm"``).
        found: Whether the package was found. Always False when ``error`` is set.
        timestamp: ISO-8601 UTC generation time.
        latest_version: Latest published version.
        description: Short description from registry metadata.
        version: The version that was checked (version-exists lookups).
        exists: Whether ``version`` exists (version-exists lookups only).
        versions: Every published version, in registry order.
        homepage: Project homepage URL.
        repository: Source repository URL.
        author: Author or maintainer name.
        error: Human-readable failure message.
    """

    package: str
    registry: str
    found: bool
    timestamp: str
    latest_version: str | None = None
    description: str | None = None
    version: str | None = None
    exists: bool | None = None
    versions: list[str] | None = None
    homepage: str | None = None
    repository: str | None = None
    author: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict, leaving out fields that were never set."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[f.name] = list(value) if f.name == "versions" else value
        return out
