from __future__ import annotations

import logging

import uvicorn
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.routing import Mount

from .config import ServerConfig
from .server import initialization_options

logger = logging.getLogger(__name__)


def create_app(server: Server, config: ServerConfig) -> Starlette:
    sse = SseServerTransport(endpoint=config.sse_path)

    async def messages_asgi(scope, receive, send):
        """
        Single ASGI endpoint for both directions:
          - GET  <sse_path> -> server->client event stream
          - POST <sse_path> -> client->server messages
        """
        if scope["method"] == "GET":
            logger.info("SSE client connected from %s", scope.get("client"))
            async with sse.connect_sse(scope, receive, send) as (r, w):
                await server.run(r, w, initialization_options(server, config))
            logger.info("SSE client disconnected")
        else:  # POST
            await sse.handle_post_message(scope, receive, send)

    return Starlette(routes=[Mount(config.sse_path, app=messages_asgi)])


def run_sse(server: Server, config: ServerConfig) -> None:
    app = create_app(server, config)
    logger.info(
        "Minimal MCP Server running on http://%s:%d%s",
        config.host,
        config.port,
        config.sse_path,
    )
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
