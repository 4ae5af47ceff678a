"""FastMCP server instance with one tool per catalog entry."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.types import TextContent

from jira_bridge.catalog import CATALOG
from jira_bridge.lifespan import get_dispatcher, lifespan

mcp = FastMCP("jira-bridge", lifespan=lifespan)


class CatalogTool(Tool):
    """A tool whose arguments go to the Dispatcher untouched."""

    async def run(self, arguments: dict[str, Any]) -> MCPToolResult:
        result = await get_dispatcher().dispatch(self.name, arguments)
        if result.is_error:
            # Reported to the client as a result with isError: true.
            raise ToolError(result.text)
        return MCPToolResult(content=[TextContent(type="text", text=result.text)])


def register_tools(server: FastMCP) -> None:
    for spec in CATALOG:
        server.add_tool(
            CatalogTool(name=spec.name, description=spec.description, parameters=spec.input_schema)
        )


register_tools(mcp)
