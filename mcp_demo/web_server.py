"""HTTP transport for the MCP demo dispatcher, built on FastAPI.

Endpoints:
  POST /mcp      -> body is a request envelope; returns the dispatcher response
  GET  /health   -> {"status": "ok"}
  GET  /         -> static HTML page listing tools and endpoints

Logical errors are carried in-band with status 200. A malformed body yields
400 with a ``BadRequest`` envelope and an unexpected failure 500 with an
``InternalServerError`` envelope.

Run:
  MCP_MODE=http python -m mcp_demo   OR
  uvicorn mcp_demo.web_server:app --reload
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from .config import Settings
from .dispatcher import MCP_VERSION, dispatch
from .log import LEVELS
from .models import loads

logger = logging.getLogger(__name__)

INDEX_HTML = """
<html>
  <head><title>MCP Service API</title></head>
  <body>
    <h1>MCP Service API</h1>
    <p>A Model Context Protocol demo service providing the following tools:</p>
    <ul>
      <li><strong>translateText</strong>: translate text into a target language</li>
      <li><strong>addNumbers</strong>: compute the sum of two numbers</li>
    </ul>
    <h2>API endpoints</h2>
    <ul>
      <li><code>POST /mcp</code> - MCP request endpoint</li>
      <li><code>GET /health</code> - health check endpoint</li>
    </ul>
  </body>
</html>
"""


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"code": code, "message": message}})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings(mode="http")
    app = FastAPI(title="MCP Demo Server", version=MCP_VERSION)
    if settings.enable_cors:
        app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    @app.post("/mcp")
    async def mcp(request: Request):
        body = await request.body()
        try:
            payload = loads(body)
        except ValueError as exc:
            logger.error("Error processing HTTP request: %s", exc)
            return _error(400, "BadRequest", f"Malformed request body: {exc}")
        logger.debug("Received HTTP request: %s", payload)
        try:
            # JSONResponse renders on construction
            return JSONResponse(content=dispatch(payload))
        except Exception as exc:
            logger.error("Error handling MCP request", exc_info=True)
            return _error(500, "InternalServerError", str(exc) or "An internal error occurred while processing the request.")

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def root() -> Any:
        return INDEX_HTML

    return app


app = create_app()


def run(settings: Settings) -> None:
    """Programmatic entrypoint used by ``python -m mcp_demo`` in http mode."""
    logger.info("HTTP MCP Server running at http://%s:%s/", settings.http_host, settings.http_port)
    logger.info("Available endpoints:")
    logger.info("  POST /mcp - MCP request endpoint")
    logger.info("  GET /health - health check endpoint")
    uvicorn.run(create_app(settings), host=settings.http_host, port=settings.http_port, log_level=LEVELS[settings.log_level])
