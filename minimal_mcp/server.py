from __future__ import annotations

from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions
import mcp.types as types

from .config import ServerConfig
from .tools import ToolServer


def build_server(tool_server: ToolServer, config: ServerConfig) -> Server:
    """Register ``tool_server`` on a low-level MCP server."""
    server = Server(config.name, version=config.version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tool_server.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> types.CallToolResult:
        return tool_server.call_tool(name)

    # No resources are served; the handler exists so the capability is advertised.
    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return []

    return server


def initialization_options(server: Server, config: ServerConfig) -> InitializationOptions:
    return InitializationOptions(
        server_name=config.name,
        server_version=config.version,
        capabilities=server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )
