"""Stdio transport: one JSON request per line in, one JSON response per line out.

Human readable logging goes to stderr so stdout is purely protocol.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .dispatcher import custom_error, dispatch
from .errors import InvalidRequest, McpError
from .models import loads

logger = logging.getLogger(__name__)


def send(obj: Dict[str, Any], stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write(json.dumps(obj) + "\n")
    stream.flush()


def handle_line(line: str) -> Optional[Dict[str, Any]]:
    """Decode and dispatch one input line. Blank lines produce no response."""
    line = line.strip()
    if not line:
        return None
    logger.debug("Received line: %s", line)
    try:
        msg = loads(line)
    except ValueError as exc:
        logger.error("Failed to parse JSON request: %s", exc)
        return custom_error(None, InvalidRequest("Request must be valid JSON."))
    try:
        return dispatch(msg)
    except Exception:
        logger.error("Error handling request", exc_info=True)
        _id = msg.get("id") if isinstance(msg, dict) else None
        return custom_error(_id, McpError("An internal error occurred while processing the request."))


def serve(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Process lines until end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    logger.info("MCP Service starting in stdio mode... Listening on stdin.")
    for line in stdin:
        response = handle_line(line)
        if response is not None:
            send(response, stdout)
    logger.info("Stdin stream closed. Exiting.")
