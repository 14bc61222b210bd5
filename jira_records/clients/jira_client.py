from __future__ import annotations

import base64
import logging
from typing import Any, Dict, Optional

import httpx

from ..core.config import Settings
from ..core.decoder import decode_query_result
from ..models.query import QueryResult

logger = logging.getLogger(__name__)

# Server/Data Center v2 shape: plain-text description and comment bodies. v3 returns ADF documents.
SEARCH_PATH = "/rest/api/2/search"


class JiraClientError(Exception):
    """Represents an error interacting with the JIRA API."""

    def __init__(self, message: str, status_code: int = 502, details: Any | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class JiraClient:
    """
    Read-only async HTTP client for the JIRA REST API using basic auth (email + API token).

    Only runs JQL searches; responses are decoded into QueryResult records.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        if not settings.jira_configured:
            raise JiraClientError(
                "JIRA_BASE_URL, JIRA_EMAIL and JIRA_API_TOKEN must be set to search Jira",
                status_code=503,
            )
        self.settings = settings
        self.base_url = str(settings.JIRA_BASE_URL).rstrip("/")
        self.timeout = httpx.Timeout(settings.REQUEST_TIMEOUT_SECONDS)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def open(self) -> None:
        if self._client is None:
            auth_header = self._basic_auth_header(self.settings.JIRA_EMAIL, self.settings.JIRA_API_TOKEN)
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Authorization": auth_header, "Accept": "application/json", "Content-Type": "application/json"},
                timeout=self.timeout,
                transport=self._transport,
            )

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "JiraClient":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _basic_auth_header(self, username: str, token: str) -> str:
        raw = f"{username}:{token}".encode("utf-8")
        b64 = base64.b64encode(raw).decode("ascii")
        return f"Basic {b64}"

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            await self.open()
        assert self._client is not None
        return self._client

    async def _post_search(self, jql: str, start_at: int, max_results: int, fields: Optional[list[str]]) -> httpx.Response:
        client = await self._ensure_client()
        payload: Dict[str, Any] = {"jql": jql, "startAt": start_at, "maxResults": max_results}
        if fields is not None:
            payload["fields"] = fields
        resp = await client.post(SEARCH_PATH, json=payload)
        resp.raise_for_status()
        return resp

    async def search(self, jql: str, start_at: int = 0, max_results: int = 50, fields: Optional[list[str]] = None) -> Dict[str, Any]:
        """Run a JQL search and return the raw JSON response."""
        resp = await self._post_search(jql, start_at, max_results, fields)
        return resp.json()

    # PUBLIC_INTERFACE
    async def search_issues(self, jql: str, start_at: int = 0, max_results: int = 50, fields: Optional[list[str]] = None) -> QueryResult:
        """Run a JQL search and decode the response body into a QueryResult."""
        resp = await self._post_search(jql, start_at, max_results, fields)
        result = decode_query_result(resp.content)
        logger.debug("JQL %r returned %d issues", jql, len(result.issues))
        return result
