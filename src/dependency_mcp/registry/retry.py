"""Retry wrapper for registry requests.

``with_retry`` decorates any async fetch function (normally
``RequestPolicy.request``) with bounded retries and a linear backoff of
``base_delay * attempt`` seconds. Only transport failures are retried; a
``None`` result means "not found" and is returned as is.

Usage::

    fetch = with_retry(policy.request, max_retries=3)
    data = await fetch(url, params=params)
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable

from dependency_mcp.exceptions import RegistryRequestError

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES: int = 2
DEFAULT_BASE_DELAY: float = 1.0

Fetch = Callable[..., Awaitable[Any]]


def with_retry(
    fetch: Fetch,
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    base_delay: float = DEFAULT_BASE_DELAY,
) -> Fetch:
    """Wrap ``fetch`` so failed attempts are retried.

    Args:
        fetch: Async callable to wrap.
        max_retries: Total number of attempts, including the first one.
        base_delay: Backoff unit in seconds; attempt *n* waits ``base_delay * n``.

    Returns:
        An async callable with the same signature as ``fetch``. When every
        attempt fails it re-raises the last error unchanged.

    Raises:
        ValueError: If ``max_retries`` is lower than 1.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    @functools.wraps(fetch)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        last_error: RegistryRequestError | None = None
        for attempt in range(1, max_retries + 1):
            try:
                return await fetch(*args, **kwargs)
            except RegistryRequestError as exc:
                last_error = exc
                if attempt < max_retries:
                    delay = base_delay * attempt
                    logger.info(
                        "Attempt %d/%d failed (%s); retrying in %.1fs",
                        attempt, max_retries, exc, delay,
                    )
                    await asyncio.sleep(delay)
        raise last_error  # type: ignore[misc]

    return wrapper
