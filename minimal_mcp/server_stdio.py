from __future__ import annotations

import logging

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .config import ServerConfig
from .server import initialization_options

logger = logging.getLogger(__name__)


async def run_stdio(server: Server, config: ServerConfig) -> None:
    # stdio_server() sets up JSON-RPC over the process's stdin/stdout
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Minimal MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            initialization_options(server, config),
        )
    logger.info("stdin closed, server stopped")
