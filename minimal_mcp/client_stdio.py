"""Smoke client: spawn the server over stdio, list its tools and call hello_world."""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

from mcp import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client
from mcp.types import TextContent

from .tools import HELLO_WORLD

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def default_server_params() -> StdioServerParameters:
    # Same interpreter as the client, so the installed SDK matches
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "minimal_mcp"],
        cwd=str(PROJECT_ROOT),
    )


async def fetch_greeting(server_params: Optional[StdioServerParameters] = None) -> tuple[list[str], str]:
    """Return the advertised tool names and the text of a hello_world call."""
    params = server_params or default_server_params()
    async with stdio_client(params) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            tools = await session.list_tools()
            names = [tool.name for tool in tools.tools]

            call_result = await session.call_tool(name=HELLO_WORLD, arguments={})
            if call_result.isError:
                raise RuntimeError(f"{HELLO_WORLD} reported an error: {call_result.content}")

            texts = [c.text for c in call_result.content if isinstance(c, TextContent)]
            return names, "".join(texts)


async def main() -> int:
    try:
        names, greeting = await fetch_greeting()
    except Exception as e:
        print(f"Error during MCP session: {e}", file=sys.stderr)
        return 1
    print("Available tools:", names)
    print("Server says:", greeting)
    return 0


def entrypoint() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    entrypoint()
