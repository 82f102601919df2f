"""Helpers for registry handler tests.

``mock_policy`` builds a ``RequestPolicy`` whose HTTP traffic is served by
``httpx.MockTransport`` from a route table keyed by raw request path (query
string excluded). Route values:

- dict / list: 200 with that JSON body
- str: 200 with that text body
- int: that status with an empty body
- httpx.Response: returned as is
- Exception instance: raised from the transport
- callable(request): called; its return value is interpreted as above

Unknown paths answer 404.
"""

from __future__ import annotations

from typing import Any

import httpx

from dependency_mcp.registry.http_client import RequestPolicy


def _to_response(value: Any, request: httpx.Request) -> httpx.Response:
    if callable(value) and not isinstance(value, (httpx.Response, type)):
        value = value(request)
    if isinstance(value, BaseException):
        raise value
    if isinstance(value, httpx.Response):
        return value
    if isinstance(value, int):
        return httpx.Response(value)
    if isinstance(value, str):
        return httpx.Response(200, text=value)
    return httpx.Response(200, json=value)


def request_path(request: httpx.Request) -> str:
    """Raw path of a request without its query string."""
    return request.url.raw_path.decode("ascii").split("?", 1)[0]


def mock_policy(
    routes: dict[str, Any],
    *,
    calls: list[httpx.Request] | None = None,
    timeout: float = 5.0,
) -> RequestPolicy:
    """Create a RequestPolicy served from ``routes`` with no rate limiting."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        path = request_path(request)
        if path not in routes:
            return httpx.Response(404)
        return _to_response(routes[path], request)

    return RequestPolicy(
        timeout=timeout,
        min_interval=0.0,
        transport=httpx.MockTransport(handler),
    )
