from jira_bridge.jira.adf import adf_to_text
from jira_bridge.jira.client import IssueTrackerClient, JiraClient
from jira_bridge.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraTransportError,
    JiraValidationError,
)

__all__ = [
    "IssueTrackerClient",
    "JiraClient",
    "JiraAPIError",
    "JiraAuthenticationError",
    "JiraNotFoundError",
    "JiraPermissionError",
    "JiraTransportError",
    "JiraValidationError",
    "adf_to_text",
]
