from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from . import __version__

TRANSPORTS = ("stdio", "sse")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_NAME = "minimal-mcp-server"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ServerConfig:
    name: str = DEFAULT_NAME
    version: str = __version__
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    sse_path: str = "/messages/"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.transport not in TRANSPORTS:
            raise ConfigError(f"transport must be one of {TRANSPORTS}, got {self.transport!r}")
        if not 0 < self.port < 65536:
            raise ConfigError(f"port out of range: {self.port}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"unknown log level: {self.log_level!r}")
        if not self.sse_path.startswith("/"):
            raise ConfigError(f"sse path must start with '/': {self.sse_path!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        # PORT wins over MCP_PORT so hosted platforms can inject it
        raw_port = env.get("PORT", env.get("MCP_PORT", "8000"))
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"port must be an integer, got {raw_port!r}") from None
        return cls(
            name=env.get("MCP_SERVER_NAME", DEFAULT_NAME),
            transport=env.get("MCP_TRANSPORT", "stdio").strip().lower(),
            host=env.get("MCP_HOST", "127.0.0.1"),
            port=port,
            sse_path=env.get("MCP_SSE_PATH", "/messages/"),
            log_level=env.get("MCP_LOG_LEVEL", "INFO").strip().upper(),
        )

    def override(self, **changes: object) -> "ServerConfig":
        """Return a copy with every non-None value in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
