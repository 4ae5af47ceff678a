"""Jira API exception hierarchy."""

from __future__ import annotations


class JiraAPIError(Exception):
    """Base exception for Jira API errors.

    Carries the failed request (method, path) and whatever the server sent back
    so callers can surface the message verbatim.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        status_text: str = "",
        body: str = "",
        method: str = "",
        path: str = "",
    ):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        self.method = method
        self.path = path
        super().__init__(message)


class JiraAuthenticationError(JiraAPIError):
    """Raised when authentication fails (401)."""


class JiraPermissionError(JiraAPIError):
    """Raised when the user lacks permissions (403) or read-only mode blocks writes."""


class JiraNotFoundError(JiraAPIError):
    """Raised when a resource is not found (404)."""


class JiraValidationError(JiraAPIError):
    """Raised when the request payload is invalid (400)."""


class JiraTransportError(JiraAPIError):
    """Raised when the request never got a response (timeout, connection refused)."""
