"""Minimal MCP server exposing a single ``hello_world`` tool."""

__version__ = "1.0.0"

from .tools import HELLO_WORLD, RegisteredTool, ToolServer, default_tools  # noqa: E402

__all__ = ["HELLO_WORLD", "RegisteredTool", "ToolServer", "default_tools", "__version__"]
