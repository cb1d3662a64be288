"""Request envelopes for the two supported dialects.

A decoded JSON value is resolved into one of the variants as soon as it has
been parsed:

  - ``JsonRpcRequest`` when the object carries ``"jsonrpc": "2.0"``
  - ``CustomRequest`` for everything else (the custom MCP envelope)

Field values are kept as decoded; routing compares them against the known
method names, versions and tool names, so a value of the wrong JSON type is
simply one that matches nothing.
"""

from __future__ import annotations

import json
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

JSONRPC_VERSION = "2.0"


class JsonRpcRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    jsonrpc: Literal["2.0"]
    id: Any = None
    method: Any = None
    params: Any = None


class CustomRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    mcp_version: Any = None
    id: Any = None
    method: Any = None
    tool_name: Any = Field(default=None, alias="toolName")
    inputs: Any = None


Request = Union[JsonRpcRequest, CustomRequest]


def is_jsonrpc(raw: Any) -> bool:
    return isinstance(raw, dict) and raw.get("jsonrpc") == JSONRPC_VERSION


def parse_request(raw: Any) -> Request:
    """Resolve a decoded JSON value into its dialect variant.

    Anything that is not a JSON object carries no envelope fields and is read
    as an empty custom request.
    """
    if not isinstance(raw, dict):
        return CustomRequest()
    if is_jsonrpc(raw):
        return JsonRpcRequest.model_validate(raw)
    return CustomRequest.model_validate(raw)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def loads(data: Union[str, bytes]) -> Any:
    """Strict ``json.loads``: the NaN and Infinity literals are refused."""
    return json.loads(data, parse_constant=_reject_constant)
