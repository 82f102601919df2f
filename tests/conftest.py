"""Shared fixtures for dependency-mcp tests."""

from __future__ import annotations

from typing import Any

import pytest

from dependency_mcp.models import PackageResult, Registry, utc_timestamp


def make_result(
    package: str = "pkg",
    registry: Registry | str = Registry.NPM,
    *,
    found: bool = True,
    **fields: Any,
) -> PackageResult:
    """Build a PackageResult with sensible defaults."""
    return PackageResult(
        package=package,
        registry=str(registry),
        found=found,
        timestamp=utc_timestamp(),
        **fields,
    )


@pytest.fixture
def found_result() -> PackageResult:
    """A successful latest-version lookup."""
    return make_result("express", latest_version="4.19.2", description="Fast web framework")


@pytest.fixture
def missing_result() -> PackageResult:
    """A not-found lookup."""
    return make_result("nope-xyz", found=False, error="Package not found")
