"""Tests for RubyGemsHandler — HTTP served by httpx.MockTransport."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from dependency_mcp.registry.rubygems_handler import RubyGemsHandler
from tests.registry.helpers import mock_policy, request_path

GEM_PATH = "/api/v1/gems/rails.json"
VERSIONS_PATH = "/api/v1/versions/rails.json"

GEM = {
    "name": "rails",
    "version": "7.1.3",
    "info": "Ruby on Rails is a full-stack web framework.",
    "homepage_uri": "https://rubyonrails.org",
    "source_code_uri": "https://github.com/rails/rails",
    "authors": "David Heinemeier Hansson",
}
VERSIONS = [{"number": "7.1.3"}, {"number": "7.0.8"}, {"number": "6.1.7"}]


def _handler(routes: dict[str, Any], calls: list[httpx.Request] | None = None) -> RubyGemsHandler:
    return RubyGemsHandler(mock_policy(routes, calls=calls))


class TestRubyGemsHandler:
    """Tests for the three RubyGems lookups."""

    def test_latest(self) -> None:
        result = asyncio.run(_handler({GEM_PATH: GEM}).get_latest_version("rails"))
        assert result.found is True
        assert result.latest_version == "7.1.3"
        assert result.description == "Ruby on Rails is a full-stack web framework."

    def test_latest_not_found(self) -> None:
        result = asyncio.run(_handler({}).get_latest_version("nope"))
        assert result.found is False

    def test_exists_uses_versions_endpoint(self) -> None:
        calls: list[httpx.Request] = []
        result = asyncio.run(_handler({VERSIONS_PATH: VERSIONS}, calls).check_version_exists("rails", "7.0.8"))
        assert result.exists is True
        assert [request_path(c) for c in calls] == [VERSIONS_PATH]

    def test_exists_missing(self) -> None:
        result = asyncio.run(_handler({VERSIONS_PATH: VERSIONS}).check_version_exists("rails", "1.0.0"))
        assert result.found is True
        assert result.exists is False

    def test_exists_unknown_gem(self) -> None:
        result = asyncio.run(_handler({}).check_version_exists("nope", "1.0.0"))
        assert result.found is False
        assert result.version == "1.0.0"

    def test_info(self) -> None:
        calls: list[httpx.Request] = []
        result = asyncio.run(_handler({GEM_PATH: GEM, VERSIONS_PATH: VERSIONS}, calls).get_package_info("rails"))
        assert result.found is True
        assert result.versions == ["7.1.3", "7.0.8", "6.1.7"]
        assert result.homepage == "https://rubyonrails.org"
        assert result.repository == "https://github.com/rails/rails"
        assert result.author == "David Heinemeier Hansson"
        assert [request_path(c) for c in calls] == [GEM_PATH, VERSIONS_PATH]

    def test_info_without_version_list(self) -> None:
        result = asyncio.run(_handler({GEM_PATH: GEM}).get_package_info("rails"))
        assert result.found is True
        assert result.versions == []

    def test_info_not_found_skips_version_list(self) -> None:
        calls: list[httpx.Request] = []
        result = asyncio.run(_handler({}, calls).get_package_info("nope"))
        assert result.found is False
        assert len(calls) == 1
