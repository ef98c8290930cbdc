"""MCP server setup and tool registration for ai-data-suite."""

import json
from typing import Sequence

from mcp.server import Server
from mcp.types import TextContent, Tool

from .config import SuiteConfig
from .dispatch import DispatchEngine

config = SuiteConfig.from_environment()

# Create MCP server
app = Server(config.server_name)

# One engine (and one set of stores) per server process
engine = DispatchEngine(config=config)


@app.list_tools()
async def list_tools() -> list[Tool]:
    """
    List all available tools, in catalog order.

    Returns:
        List of Tool descriptions for MCP
    """
    handlers = engine.handlers
    return [handlers[tool["name"]].get_tool_description() for tool in engine.list_tools()]


@app.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict) -> Sequence[TextContent]:
    """
    Execute a tool with given arguments.

    Args:
        name: Tool name to execute
        arguments: Tool arguments from MCP

    Returns:
        A single TextContent holding the JSON result envelope
    """
    result = engine.invoke(name, arguments)
    return [TextContent(type="text", text=json.dumps(result, indent=2))]
