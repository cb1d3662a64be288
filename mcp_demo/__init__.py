"""Demo MCP server with two stub tools over stdio and HTTP transports."""

from .dispatcher import MCP_VERSION, dispatch

__all__ = ["MCP_VERSION", "dispatch"]
