"""Maven Central handler backed by the Solr search API.

Package names use Maven coordinates, ``groupId:artifactId``. A name without
both parts is answered with an error result, not an exception, and never
reaches the network.

The search endpoint is slow and flaky, so this handler runs with a longer
timeout and wraps its requests in ``with_retry``.
"""

from __future__ import annotations

import logging
from typing import Any

from dependency_mcp.models import PackageResult, Registry
from dependency_mcp.registry.base import RegistryHandler, as_dict, as_list, optional_str
from dependency_mcp.registry.http_client import RequestPolicy
from dependency_mcp.registry.retry import DEFAULT_BASE_DELAY, with_retry

logger = logging.getLogger(__name__)

MAVEN_SEARCH_URL: str = "https://search.maven.org/solrsearch/select"

MAVEN_TIMEOUT: float = 20.0
MAVEN_MAX_RETRIES: int = 3
MAVEN_INFO_ROWS: int = 50

INVALID_COORDINATE_MESSAGE: str = "Invalid format. Use groupId:artifactId"


class MavenHandler(RegistryHandler):
    """Handler for Maven Central.

    Args:
        policy: Request policy; defaults to one with ``MAVEN_TIMEOUT``.
        max_retries: Attempts per request.
        retry_delay: Backoff unit in seconds.
    """

    registry = Registry.MAVEN

    def __init__(
        self,
        policy: RequestPolicy | None = None,
        *,
        max_retries: int = MAVEN_MAX_RETRIES,
        retry_delay: float = DEFAULT_BASE_DELAY,
    ) -> None:
        super().__init__(policy if policy is not None else RequestPolicy(timeout=MAVEN_TIMEOUT))
        self._fetch_with_retry = with_retry(
            self.policy.request, max_retries=max_retries, base_delay=retry_delay
        )

    async def _fetch(self, url: str, **kwargs: Any) -> Any:
        return await self._fetch_with_retry(url, **kwargs)

    async def get_latest_version(self, package_name: str) -> PackageResult:
        coordinate = parse_coordinate(package_name)
        if coordinate is None:
            return self._error(package_name, INVALID_COORDINATE_MESSAGE)
        group_id, artifact_id = coordinate
        docs = await self._search(_query(group_id, artifact_id), rows=1)
        if not docs:
            return self._not_found(package_name)
        return self._success(
            package_name,
            latest_version=_doc_version(docs[0]),
            description=f"Maven artifact: {group_id}:{artifact_id}",
        )

    async def check_version_exists(self, package_name: str, version: str) -> PackageResult:
        coordinate = parse_coordinate(package_name)
        if coordinate is None:
            return self._error(package_name, INVALID_COORDINATE_MESSAGE, version=version)
        group_id, artifact_id = coordinate
        query = f'{_query(group_id, artifact_id)} AND v:"{version}"'
        docs = await self._search(query, rows=1)
        return self._success(package_name, version=version, exists=len(docs) > 0)

    async def get_package_info(self, package_name: str) -> PackageResult:
        coordinate = parse_coordinate(package_name)
        if coordinate is None:
            return self._error(package_name, INVALID_COORDINATE_MESSAGE)
        group_id, artifact_id = coordinate
        docs = await self._search(_query(group_id, artifact_id), rows=MAVEN_INFO_ROWS)
        if not docs:
            return self._not_found(package_name)
        versions = [v for v in (_doc_release(doc) for doc in docs) if v]
        return self._success(
            package_name,
            latest_version=_doc_version(docs[0]),
            description=f"Maven artifact: {group_id}:{artifact_id}",
            versions=list(dict.fromkeys(versions)),
        )

    async def _search(self, query: str, *, rows: int) -> list[dict[str, Any]]:
        """Run a Solr query against the GAV core and return its documents."""
        params = {"q": query, "rows": str(rows), "wt": "json", "core": "gav"}
        data = await self._fetch(MAVEN_SEARCH_URL, params=params)
        if data is None:
            return []
        response = as_dict(as_dict(data).get("response"))
        return [doc for doc in as_list(response.get("docs")) if isinstance(doc, dict)]


def parse_coordinate(package_name: str) -> tuple[str, str] | None:
    """Split ``groupId:artifactId``; return None unless both parts are present."""
    parts = package_name.split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    return parts[0], parts[1]


def _query(group_id: str, artifact_id: str) -> str:
    return f'g:"{group_id}" AND a:"{artifact_id}"'


def _doc_version(doc: dict[str, Any]) -> str | None:
    return optional_str(doc.get("latestVersion") or doc.get("v"))


def _doc_release(doc: dict[str, Any]) -> str | None:
    return optional_str(doc.get("v") or doc.get("latestVersion"))
