"""Protocol-level tests: the bound server driven by an in-memory MCP client."""
from __future__ import annotations

import mcp.types as types
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from minimal_mcp.config import ServerConfig
from minimal_mcp.server import build_server, initialization_options
from minimal_mcp.tools import EMPTY_INPUT_SCHEMA, RegisteredTool, ToolServer


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig()


def test_capabilities_advertise_tools_and_resources(config):
    options = initialization_options(build_server(ToolServer(), config), config)

    assert options.server_name == "minimal-mcp-server"
    assert options.server_version == config.version
    assert options.capabilities.tools is not None
    assert options.capabilities.resources is not None


@pytest.mark.asyncio
async def test_list_tools_over_protocol(config):
    async with create_connected_server_and_client_session(build_server(ToolServer(), config)) as session:
        result = await session.list_tools()

    assert [t.name for t in result.tools] == ["hello_world"]
    assert result.tools[0].description == "Returns a friendly 'Hello MCP World' message."


@pytest.mark.asyncio
async def test_call_hello_world_over_protocol(config):
    async with create_connected_server_and_client_session(build_server(ToolServer(), config)) as session:
        result = await session.call_tool("hello_world", {})

    assert result.isError is False
    assert result.content == [types.TextContent(type="text", text="Hello MCP World!")]


@pytest.mark.asyncio
async def test_unknown_tool_is_a_result_not_a_protocol_error(config):
    async with create_connected_server_and_client_session(build_server(ToolServer(), config)) as session:
        result = await session.call_tool("goodbye", {})

    assert result.isError is True
    assert result.content[0].text == "Unknown tool: goodbye"


@pytest.mark.asyncio
async def test_failing_tool_is_reported_over_protocol(config):
    def broken() -> str:
        raise ValueError("bad state")

    tool_server = ToolServer([
        RegisteredTool(
            descriptor=types.Tool(name="broken", description="always fails", inputSchema=dict(EMPTY_INPUT_SCHEMA)),
            handler=broken,
        )
    ])
    async with create_connected_server_and_client_session(build_server(tool_server, config)) as session:
        result = await session.call_tool("broken", {})

    assert result.isError is True
    assert result.content[0].text == "Error: bad state"


@pytest.mark.asyncio
async def test_list_resources_is_empty(config):
    async with create_connected_server_and_client_session(build_server(ToolServer(), config)) as session:
        result = await session.list_resources()

    assert result.resources == []
