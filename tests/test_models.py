"""Tests for the shared data models."""

from __future__ import annotations

import re

import pytest

from dependency_mcp.exceptions import UnsupportedRegistryError
from dependency_mcp.models import PackageResult, PackageVersionRequest, Registry, utc_timestamp
from tests.conftest import make_result


class TestRegistry:
    """Tests for registry tag parsing."""

    def test_tags_in_order(self) -> None:
        assert Registry.tags() == ["npm", "pypi", "maven", "nuget", "rubygems", "crates", "go"]

    @pytest.mark.parametrize("tag", ["npm", "pypi", "maven", "nuget", "rubygems", "crates", "go"])
    def test_parse_tag(self, tag: str) -> None:
        assert Registry.parse(tag).value == tag

    def test_parse_member(self) -> None:
        assert Registry.parse(Registry.GO) is Registry.GO

    def test_str_is_tag(self) -> None:
        assert str(Registry.CRATES) == "crates"

    @pytest.mark.parametrize("value", ["cargo", "NPM", "", None, 3])
    def test_parse_unknown(self, value: object) -> None:
        with pytest.raises(UnsupportedRegistryError, match="Unsupported registry") as exc_info:
            Registry.parse(value)  # type: ignore[arg-type]
        assert "npm, pypi, maven, nuget, rubygems, crates, go" in str(exc_info.value)


class TestTimestamp:
    def test_iso_utc_milliseconds(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


class TestPackageResult:
    """Tests for PackageResult serialization."""

    def test_to_dict_omits_unset_fields(self) -> None:
        result = make_result("express", latest_version="4.19.2")
        data = result.to_dict()
        assert set(data) == {"package", "registry", "found", "timestamp", "latest_version"}
        assert data["registry"] == "npm"

    def test_to_dict_keeps_false_and_empty(self) -> None:
        result = make_result("x", found=True, version="1.0.0", exists=False, versions=[])
        data = result.to_dict()
        assert data["exists"] is False
        assert data["versions"] == []

    def test_to_dict_copies_versions(self) -> None:
        versions = ["1.0.0"]
        data = make_result("x", versions=versions).to_dict()
        data["versions"].append("2.0.0")
        assert versions == ["1.0.0"]

    def test_error_result(self, missing_result: PackageResult) -> None:
        data = missing_result.to_dict()
        assert data["found"] is False
        assert data["error"] == "Package not found"
        assert "latest_version" not in data

    def test_frozen(self, found_result: PackageResult) -> None:
        with pytest.raises(AttributeError):
            found_result.found = False  # type: ignore[misc]


class TestPackageVersionRequest:
    def test_from_mapping(self) -> None:
        req = PackageVersionRequest.from_obj({"package_name": "serde", "version": "1.0.0"})
        assert req == PackageVersionRequest("serde", "1.0.0")

    def test_from_request_is_identity(self) -> None:
        req = PackageVersionRequest("serde", "1.0.0")
        assert PackageVersionRequest.from_obj(req) is req

    def test_from_mapping_missing_keys(self) -> None:
        req = PackageVersionRequest.from_obj({})
        assert req.package_name is None
        assert req.version is None

    def test_from_other_type(self) -> None:
        with pytest.raises(TypeError, match="str"):
            PackageVersionRequest.from_obj("serde==1.0.0")  # type: ignore[arg-type]
