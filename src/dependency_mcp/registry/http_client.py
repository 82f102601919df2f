"""Async HTTP request policy shared by every registry handler.

Wraps ``httpx.AsyncClient`` with standardised timeouts, user-agent headers,
a cooperative client-side rate limiter, and translation of HTTP status codes
and transport failures into the ``RegistryRequestError`` family.

HTTP 404 is not an error here: ``RequestPolicy.request`` returns ``None`` and
the handler reports the package as not found.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from dependency_mcp import __version__
from dependency_mcp.exceptions import (
    HttpError,
    MalformedResponseError,
    NetworkError,
    RateLimitedError,
    RegistryRequestError,
    RequestTimeoutError,
    ServerError,
)

logger = logging.getLogger(__name__)

# Timeout for registry HTTP requests (seconds).
DEFAULT_TIMEOUT: float = 10.0

# Minimum spacing between two requests issued by the same policy (seconds).
MIN_REQUEST_INTERVAL: float = 0.1

# User-Agent sent with every request.
USER_AGENT: str = f"dependency-mcp/{__version__}"

JSON_ACCEPT: str = "application/json"
TEXT_ACCEPT: str = "text/plain"


def _clock() -> float:
    return time.monotonic()


class RequestPolicy:
    """Outbound request policy owned by a single registry handler.

    Each handler holds one long-lived policy, so the rate limiter spaces
    requests per registry rather than across the whole process.

    Args:
        timeout: Per-request timeout in seconds.
        min_interval: Minimum delay between consecutive requests in seconds.
        user_agent: Value of the ``User-Agent`` header.
        transport: Optional httpx transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        min_interval: float = MIN_REQUEST_INTERVAL,
        user_agent: str = USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.min_interval = min_interval
        self.user_agent = user_agent
        self._transport = transport
        self._last_request_time: float = float("-inf")

    async def _throttle(self) -> None:
        """Wait for the next free request slot.

        The slot is reserved before sleeping, so concurrent callers queue up
        one interval apart instead of firing together.
        """
        now = _clock()
        slot = max(now, self._last_request_time + self.min_interval)
        self._last_request_time = slot
        delay = slot - now
        if delay > 0:
            await asyncio.sleep(delay)

    async def request(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        as_text: bool = False,
    ) -> Any:
        """GET a registry URL and decode the response.

        Args:
            url: The URL to fetch.
            params: Optional query parameters.
            as_text: Return the body as text instead of parsed JSON.

        Returns:
            Parsed JSON (dict or list), the body text when ``as_text`` is set,
            or ``None`` when the registry answers 404.

        Raises:
            RateLimitedError: On HTTP 429.
            ServerError: On HTTP 5xx.
            HttpError: On any other non-2xx status.
            NetworkError: When the host cannot be reached.
            RequestTimeoutError: When the timeout is exceeded.
            MalformedResponseError: When a JSON body cannot be decoded.
        """
        await self._throttle()
        headers = {
            "User-Agent": self.user_agent,
            "Accept": TEXT_ACCEPT if as_text else JSON_ACCEPT,
        }
        logger.debug("GET %s params=%s", url, params)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.warning("Timeout fetching %s", url)
            raise RequestTimeoutError("Request timeout") from exc
        except httpx.ConnectError as exc:
            logger.warning("Cannot reach %s: %s", url, exc)
            raise NetworkError("Network error: Unable to reach registry") from exc
        except httpx.RequestError as exc:
            logger.warning("Request error for %s: %s", url, exc)
            raise RegistryRequestError(f"Request failed: {exc}") from exc

        return _decode_response(resp, url, as_text=as_text)


def _decode_response(resp: httpx.Response, url: str, *, as_text: bool) -> Any:
    """Map a response to its payload or to a ``RegistryRequestError``."""
    status = resp.status_code
    if status == 404:
        logger.debug("HTTP 404 from %s", url)
        return None
    if status == 429:
        logger.warning("HTTP 429 from %s", url)
        raise RateLimitedError("Rate limit exceeded. Please try again later.")
    if status >= 500:
        logger.warning("HTTP %d from %s", status, url)
        raise ServerError(
            f"Server error: {status} {resp.reason_phrase}",
            status=status,
            status_text=resp.reason_phrase,
        )
    if not resp.is_success:
        logger.warning("HTTP %d from %s", status, url)
        raise HttpError(
            f"HTTP {status}: {resp.reason_phrase}",
            status=status,
            status_text=resp.reason_phrase,
        )
    if as_text:
        return resp.text
    try:
        return resp.json()
    except ValueError as exc:
        logger.warning("Invalid JSON from %s", url)
        raise MalformedResponseError(f"Invalid JSON response from {url}") from exc
