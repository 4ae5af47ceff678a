"""Tests for the FastMCP glue: catalog tools forward to the Dispatcher."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastmcp.exceptions import ToolError

from jira_bridge.catalog import CATALOG
from jira_bridge.results import ToolResult
from jira_bridge.server import CatalogTool


def _tool(name="get_issue"):
    spec = next(s for s in CATALOG if s.name == name)
    return CatalogTool(name=spec.name, description=spec.description, parameters=spec.input_schema)


@pytest.mark.asyncio
async def test_forwards_arguments_and_returns_text():
    dispatcher = AsyncMock()
    dispatcher.dispatch.return_value = ToolResult.success("Issue PROJ-1 updated successfully")

    with patch("jira_bridge.server.get_dispatcher", return_value=dispatcher):
        result = await _tool("update_issue").run({"issueKey": "PROJ-1"})

    dispatcher.dispatch.assert_awaited_once_with("update_issue", {"issueKey": "PROJ-1"})
    assert result.content[0].text == "Issue PROJ-1 updated successfully"


@pytest.mark.asyncio
async def test_error_result_raises_tool_error():
    dispatcher = AsyncMock()
    dispatcher.dispatch.return_value = ToolResult.failure("Unknown tool: nope")

    with patch("jira_bridge.server.get_dispatcher", return_value=dispatcher):
        with pytest.raises(ToolError, match="Unknown tool: nope"):
            await _tool().run({})
