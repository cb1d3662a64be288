"""Request dispatcher for the JSON-RPC 2.0 and custom MCP dialects.

``dispatch`` takes one decoded JSON value and always returns exactly one
response object in the dialect of the request. Tool and routing failures are
returned in-band as ``error`` payloads; they are never raised to the caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from . import tools
from .errors import McpError, MethodNotFound, ToolExecutionError, VersionMismatch
from .models import JSONRPC_VERSION, CustomRequest, JsonRpcRequest, parse_request

logger = logging.getLogger(__name__)

MCP_VERSION = "0.1.0"

# Reserved JSON-RPC 2.0 error code
METHOD_NOT_FOUND = -32601

TOOL_ERROR_FALLBACK = "An unknown error occurred while executing the tool."


def jsonrpc_response(_id: Any, result: Any = None, error: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    response: Dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "id": _id}
    if error is not None:
        response["error"] = error
    else:
        response["result"] = result
    return response


def custom_response(_id: Any, result: Any = None, error: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    response: Dict[str, Any] = {"mcp_version": MCP_VERSION, "id": _id}
    if error is not None:
        response["error"] = error
    else:
        response["result"] = result
    return response


def custom_error(_id: Any, exc: McpError) -> Dict[str, Any]:
    return custom_response(_id, error={"code": exc.code, "message": str(exc)})


def handle_jsonrpc(request: JsonRpcRequest) -> Dict[str, Any]:
    logger.debug(
        "[JSON-RPC] Received method: %s, id: %s, params: %s",
        request.method, request.id, json.dumps(request.params),
    )
    if request.method == "initialize":
        return jsonrpc_response(request.id, {"capabilities": {}})
    if request.method == "shutdown":
        # The transport decides when to exit
        logger.info("[JSON-RPC shutdown] Received shutdown request. Server will allow exit.")
        return jsonrpc_response(request.id, None)
    return jsonrpc_response(request.id, error={"code": METHOD_NOT_FOUND, "message": "Method not found"})


def execute_tool(tool_name: Any, inputs: Any) -> Dict[str, Any]:
    """Run a registered tool; any failure inside the tool becomes ToolExecutionError."""
    tool = tools.get_tool(tool_name)
    try:
        return tool.execute(inputs)
    except Exception as exc:
        logger.error("Error executing tool %s", tool_name, exc_info=True)
        raise ToolExecutionError(str(exc) or TOOL_ERROR_FALLBACK) from exc


def handle_custom(request: CustomRequest) -> Dict[str, Any]:
    logger.debug(
        "[Custom MCP] Received method: %s, toolName: %s, id: %s, mcp_version: %s",
        request.method, request.tool_name, request.id, request.mcp_version,
    )
    try:
        # An absent version is treated as compatible
        if request.mcp_version and request.mcp_version != MCP_VERSION:
            raise VersionMismatch(request.mcp_version, MCP_VERSION)
        if request.method == "discover":
            logger.debug("[Custom MCP discover] Received discovery request.")
            return custom_response(request.id, {"toolsets": [tools.toolset()]})
        if request.method == "execute":
            logger.debug("[Custom MCP execute] Received execute request for tool: %s", request.tool_name)
            return custom_response(request.id, execute_tool(request.tool_name, request.inputs))
        raise MethodNotFound(request.method)
    except McpError as exc:
        return custom_error(request.id, exc)


def dispatch(raw: Any) -> Dict[str, Any]:
    """Route one decoded request and return its response object."""
    request = parse_request(raw)
    if isinstance(request, JsonRpcRequest):
        response = handle_jsonrpc(request)
    else:
        response = handle_custom(request)
    logger.debug("Sending response: %s", json.dumps(response))
    return response
