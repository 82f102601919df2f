"""Tests for the Rich result table helpers."""

from __future__ import annotations

from dependency_mcp.cli.output import _detail, _status, print_results
from dependency_mcp.console import console
from dependency_mcp.registry import NOT_FOUND_MESSAGE
from tests.conftest import make_result


class TestStatus:
    def test_ok(self) -> None:
        assert _status(make_result(latest_version="1.0.0")).plain == "OK"

    def test_not_found(self) -> None:
        assert _status(make_result(found=False, error=NOT_FOUND_MESSAGE)).plain == "NOT FOUND"

    def test_other_error_containing_not_found(self) -> None:
        result = make_result(found=False, error=f"{NOT_FOUND_MESSAGE} upstream")
        assert _status(result).plain == "ERROR"

    def test_error(self) -> None:
        assert _status(make_result(found=False, error="Request timeout")).plain == "ERROR"

    def test_missing_version(self) -> None:
        assert _status(make_result(version="9.9.9", exists=False)).plain == "MISSING"


class TestDetail:
    def test_error_message(self) -> None:
        assert _detail(make_result(found=False, error="HTTP 403: Forbidden")) == "HTTP 403: Forbidden"

    def test_exists(self) -> None:
        assert _detail(make_result(version="1.2.3", exists=True)) == "1.2.3 exists"
        assert _detail(make_result(version="1.2.3", exists=False)) == "1.2.3 does not exist"

    def test_latest_only(self) -> None:
        assert _detail(make_result(latest_version="2.0.0")) == "2.0.0"

    def test_versions_truncated_to_newest(self) -> None:
        versions = [f"0.{i}.0" for i in range(8)]
        detail = _detail(make_result(latest_version="0.7.0", versions=versions))
        assert detail == "0.7.0 [8 versions: 0.3.0, 0.4.0, 0.5.0, 0.6.0, 0.7.0 ...]"

    def test_short_version_list(self) -> None:
        detail = _detail(make_result(latest_version="1.0.0", versions=["1.0.0"]))
        assert detail == "1.0.0 [1 versions: 1.0.0]"

    def test_nothing_to_show(self) -> None:
        assert _detail(make_result()) == "-"


def test_print_results_summary() -> None:
    results = [make_result("a", latest_version="1.0.0"), make_result("b", found=False, error="Package not found")]
    with console.capture() as capture:
        print_results(results, title="Latest versions (npm)")
    text = capture.get()
    assert "Latest versions (npm)" in text
    assert "2 looked up | 1 found" in text
