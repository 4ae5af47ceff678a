from jira_bridge.guards.permissions import ALL_TOOLS, READ_TOOLS, WRITE_TOOLS
from jira_bridge.guards.read_only import check_read_only

__all__ = [
    "ALL_TOOLS",
    "READ_TOOLS",
    "WRITE_TOOLS",
    "check_read_only",
]
