"""Command line entry point: ``python -m mcp_demo`` or ``mcp-demo``."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import LOG_LEVELS, MODES, load_settings
from .errors import ConfigError
from .log import configure_logging

logger = logging.getLogger("mcp_demo")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mcp-demo", description="MCP demo server (stdio or HTTP).")
    parser.add_argument("--mode", choices=MODES, help="transport, overrides MCP_MODE")
    parser.add_argument("--host", help="HTTP listen address, overrides HTTP_HOST")
    parser.add_argument("--port", type=int, help="HTTP listen port, overrides HTTP_PORT")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="overrides LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    try:
        settings = load_settings().override(
            mode=args.mode, http_host=args.host, http_port=args.port, log_level=args.log_level,
        )
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    configure_logging(settings.log_level)
    try:
        if settings.mode == "http":
            from .web_server import run

            run(settings)
        else:
            from .server import serve

            serve()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception:
        logger.critical("Uncaught exception, exiting", exc_info=True)
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
