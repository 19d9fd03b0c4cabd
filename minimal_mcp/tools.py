"""
Tool registry for the minimal MCP server.

A ``ToolServer`` owns the tools the server exposes and maps a tool name to a
``CallToolResult``. Failures never escape ``call_tool``: unknown names and
exceptions raised by a handler are reported back as results with
``isError=True`` so the transport always gets a normal response.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import mcp.types as types

logger = logging.getLogger(__name__)

HELLO_WORLD = "hello_world"
HELLO_WORLD_TEXT = "Hello MCP World!"

# Tools in this server take no arguments.
EMPTY_INPUT_SCHEMA = {"type": "object", "properties": {}}


@dataclass(frozen=True)
class RegisteredTool:
    descriptor: types.Tool
    handler: Callable[[], str]

    @property
    def name(self) -> str:
        return self.descriptor.name


def _text_result(text: str, is_error: bool) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def hello_world() -> str:
    return HELLO_WORLD_TEXT


def default_tools() -> list[RegisteredTool]:
    return [
        RegisteredTool(
            descriptor=types.Tool(
                name=HELLO_WORLD,
                description="Returns a friendly 'Hello MCP World' message.",
                inputSchema=dict(EMPTY_INPUT_SCHEMA),
            ),
            handler=hello_world,
        )
    ]


class ToolServer:
    def __init__(self, tools: Optional[Iterable[RegisteredTool]] = None) -> None:
        self._tools: dict[str, RegisteredTool] = {}
        for tool in default_tools() if tools is None else tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool

    def list_tools(self) -> list[types.Tool]:
        return [tool.descriptor for tool in self._tools.values()]

    def call_tool(self, name: str) -> types.CallToolResult:
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %s", name)
            return _text_result(f"Unknown tool: {name}", is_error=True)
        try:
            return _text_result(tool.handler(), is_error=False)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return _text_result(f"Error: {e}", is_error=True)
