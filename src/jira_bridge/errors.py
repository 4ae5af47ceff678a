"""Tool-call exception hierarchy.

These are raised before or between remote calls; Jira's own failures live in
jira_bridge.jira.errors.
"""

from __future__ import annotations


class ToolCallError(Exception):
    """Base exception for failures detected by the tool layer itself."""


class MissingArgumentsError(ToolCallError):
    def __init__(self, message: str = "Missing arguments: every tool call requires an argument object."):
        super().__init__(message)


class UnknownToolError(ToolCallError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(ToolCallError):
    """Raised when an argument bag fails validation against the tool's model."""


class TransitionNotFoundError(ToolCallError):
    """Raised when no available transition is named after the requested status."""

    def __init__(self, issue_key: str, status: str):
        self.issue_key = issue_key
        self.status = status
        super().__init__(f'Status "{status}" not found or not available for issue {issue_key}')
