"""
Command-line entry point.

  minimal-mcp-server                      # stdio (default)
  minimal-mcp-server --transport sse --port 8000

Settings come from the environment (see ``ServerConfig.from_env``); flags
given on the command line win. Logs go to stderr because stdout carries the
stdio protocol stream.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import anyio

from . import __version__
from .config import LOG_LEVELS, TRANSPORTS, ServerConfig
from .server import build_server
from .server_sse import run_sse
from .server_stdio import run_stdio
from .tools import ToolServer

logger = logging.getLogger("minimal_mcp")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="minimal-mcp-server",
        description="Minimal MCP server exposing a single 'hello_world' tool.",
    )
    ap.add_argument("--transport", choices=TRANSPORTS, default=None,
                    help="stdio | sse (default: $MCP_TRANSPORT or stdio)")
    ap.add_argument("--host", default=None, help="SSE bind host (default: $MCP_HOST or 127.0.0.1)")
    ap.add_argument("--port", type=int, default=None, help="SSE bind port (default: $PORT or 8000)")
    ap.add_argument("--log-level", choices=LOG_LEVELS, default=None,
                    help="default: $MCP_LOG_LEVEL or INFO")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def run(config: ServerConfig) -> None:
    server = build_server(ToolServer(), config)
    if config.transport == "sse":
        run_sse(server, config)
    else:
        anyio.run(run_stdio, server, config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = ServerConfig.from_env().override(
            transport=args.transport,
            host=args.host,
            port=args.port,
            log_level=args.log_level,
        )
        configure_logging(config.log_level)
        run(config)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        return 0
    except Exception as e:
        print(f"Fatal error running server: {e}", file=sys.stderr)
        return 1
    return 0


def entrypoint() -> None:
    sys.exit(main())
