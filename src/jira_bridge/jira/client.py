"""Async Jira REST API v3 client using httpx."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from jira_bridge.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraTransportError,
    JiraValidationError,
)

logger = logging.getLogger("jira_bridge")

_ERROR_MAP: dict[int, type[JiraAPIError]] = {
    400: JiraValidationError,
    401: JiraAuthenticationError,
    403: JiraPermissionError,
    404: JiraNotFoundError,
}


class IssueTrackerClient(Protocol):
    """What the tools need from a remote issue tracker."""

    async def request(self, method: str, path: str, body: Any = None) -> Any: ...


class JiraClient:
    """Async wrapper around Jira REST API v3."""

    def __init__(
        self,
        base_url: str,
        email: str,
        api_token: str,
        timeout: int = 30,
        ssl_verify: bool | str = True,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/rest/api/3",
            auth=(email, api_token),
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            timeout=timeout,
            verify=ssl_verify,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """Send one request and return the decoded JSON response.

        Returns None for empty responses (e.g. 204 on PUT /issue/{key}).
        Raises a JiraAPIError subclass on HTTP errors and JiraTransportError
        when no response was received.
        """
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Jira API error: method=%s path=%s error=%s", method, path, e)
            raise JiraTransportError(
                f"Jira API {method} {path} failed: {e or type(e).__name__}",
                method=method,
                path=path,
            ) from e

        if response.status_code >= 400:
            self._raise_for_status(response, method, path)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
        body = response.text
        status_text = response.reason_phrase
        logger.error(
            "Jira API error: status=%s statusText=%s method=%s path=%s body=%s",
            response.status_code,
            status_text,
            method,
            path,
            body,
        )
        error_cls = _ERROR_MAP.get(response.status_code, JiraAPIError)
        raise error_cls(
            f"Jira API {method} {path} failed ({response.status_code} {status_text}): {body}",
            status_code=response.status_code,
            status_text=status_text,
            body=body,
            method=method,
            path=path,
        )
