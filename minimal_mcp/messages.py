"""Request kinds understood by a ToolServer, and dispatch over them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

import mcp.types as types

from .tools import ToolServer


class InvalidRequestError(ValueError):
    pass


@dataclass(frozen=True)
class ListToolsRequest:
    pass


@dataclass(frozen=True)
class CallToolRequest:
    name: str


Request = Union[ListToolsRequest, CallToolRequest]
Response = Union[list[types.Tool], types.CallToolResult]


def parse_request(payload: Mapping[str, Any]) -> Request:
    """
    Build a request from a plain mapping.

      {"op": "list"}                 -> ListToolsRequest()
      {"op": "call", "name": "..."}  -> CallToolRequest(name)
    """
    op = payload.get("op")
    if op == "list":
        return ListToolsRequest()
    if op == "call":
        name = payload.get("name")
        if not isinstance(name, str):
            raise InvalidRequestError("'call' requires a string 'name'")
        return CallToolRequest(name=name)
    raise InvalidRequestError(f"Unknown op: {op!r}")


def dispatch(server: ToolServer, request: Request) -> Response:
    if isinstance(request, ListToolsRequest):
        return server.list_tools()
    if isinstance(request, CallToolRequest):
        return server.call_tool(request.name)
    raise TypeError(f"Unsupported request type: {type(request).__name__}")


def to_payload(response: Response) -> Any:
    if isinstance(response, list):
        return [item.model_dump(mode="json", exclude_none=True) for item in response]
    return response.model_dump(mode="json", exclude_none=True)
