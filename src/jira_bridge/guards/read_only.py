"""Guard that blocks write operations when read-only mode is enabled."""

from jira_bridge.guards.permissions import WRITE_TOOLS
from jira_bridge.jira.errors import JiraPermissionError


def check_read_only(tool_name: str, read_only_mode: bool) -> None:
    """Raise JiraPermissionError if a write tool is called while JIRA_READ_ONLY_MODE is true."""
    if read_only_mode and tool_name in WRITE_TOOLS:
        raise JiraPermissionError(
            f"Write operation {tool_name} blocked: JIRA_READ_ONLY_MODE is enabled.",
            status_code=403,
        )
