"""Jira MCP bridge: issue-tracker operations as tools for AI agents."""

from jira_bridge.dispatcher import Dispatcher
from jira_bridge.jira.client import JiraClient
from jira_bridge.results import ToolResult
from jira_bridge.settings import JiraSettings

__all__ = ["Dispatcher", "JiraClient", "JiraSettings", "ToolResult"]
