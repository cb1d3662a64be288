"""Environment configuration.

Values are read once at start-up from the process environment, after
``load_dotenv()`` has merged any ``.env`` file found in the working
directory (existing environment variables win):

  MCP_MODE      stdio | http           (default stdio)
  HTTP_PORT     listen port            (default 3000)
  HTTP_HOST     listen address         (default 0.0.0.0)
  ENABLE_CORS   "true" enables CORS    (default false)
  LOG_LEVEL     debug|info|warn|error  (default info)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError

MODES = ("stdio", "http")
LOG_LEVELS = ("debug", "info", "warn", "error")


@dataclass(frozen=True)
class Settings:
    mode: str = "stdio"
    http_host: str = "0.0.0.0"
    http_port: int = 3000
    enable_cors: bool = False
    log_level: str = "info"

    def override(self, **changes) -> "Settings":
        """Return a copy with the non-None ``changes`` applied and validated."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return _validate(replace(self, **changes))


def _validate(settings: Settings) -> Settings:
    if settings.mode not in MODES:
        raise ConfigError(f"MCP_MODE must be one of {', '.join(MODES)}, got {settings.mode!r}")
    if settings.log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {settings.log_level!r}")
    if not 0 <= settings.http_port <= 65535:
        raise ConfigError(f"HTTP_PORT out of range: {settings.http_port}")
    return settings


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    if environ is None:
        load_dotenv()
        environ = os.environ
    port = environ.get("HTTP_PORT", "3000")
    try:
        http_port = int(port)
    except ValueError as exc:
        raise ConfigError(f"HTTP_PORT must be an integer, got {port!r}") from exc
    return _validate(Settings(
        mode=environ.get("MCP_MODE") or "stdio",
        http_host=environ.get("HTTP_HOST") or "0.0.0.0",
        http_port=http_port,
        enable_cors=environ.get("ENABLE_CORS") == "true",
        log_level=(environ.get("LOG_LEVEL") or "info").lower(),
    ))
