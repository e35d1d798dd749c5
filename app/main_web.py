"""HTTP server entry point.

    python -m app.main_web [--host H] [--port P] [--data-file PATH] [--base-path /api/mcp]
"""

import argparse
import sys
from typing import List, Optional

import uvicorn

from app.config import Settings
from app.config_docs import get_config_summary
from app.exceptions import ConfigurationError
from app.logger import ConsoleLogger, Logger, session_logger
from app.mcp_server import initialize_components
from app.web_server import BillSigningWebServer

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="bill-signing Web Server - MCP tools and resources over HTTP"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host address to bind to (default: BILL_SIGNING_WEB_HOST or 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port number to listen on (default: BILL_SIGNING_WEB_PORT or 3001)",
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help="JSON document file (default: BILL_SIGNING_DATA_FILE or bundled sample data)",
    )
    parser.add_argument(
        "--base-path",
        type=str,
        default=None,
        help="Mount point of the MCP routes (default: BILL_SIGNING_MCP_BASE_PATH or /api/mcp)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: BILL_SIGNING_LOG_LEVEL or INFO)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env().with_overrides(
            web_host=args.host,
            web_port=args.port,
            data_file=args.data_file,
            mcp_base_path=args.base_path,
            log_level=args.log_level.upper() if args.log_level else None,
        )
    except ConfigurationError as e:
        logger.error("FATAL: Invalid configuration", error=str(e), **e.details)
        sys.exit(1)

    if isinstance(logger, ConsoleLogger):
        logger.set_level(settings.log_level)
    logger.info("Configuration loaded", **get_config_summary(settings))

    try:
        components = initialize_components(settings=settings, logger=logger)
    except ConfigurationError as e:
        logger.error("FATAL: Failed to load documents", error=str(e), **e.details)
        sys.exit(1)

    server = BillSigningWebServer(components)

    try:
        logger.info(
            "Starting web server",
            host=settings.web_host,
            port=settings.web_port,
            base_path=settings.mcp_base_path or "/",
        )
        uvicorn.run(server.app, host=settings.web_host, port=settings.web_port)
        logger.info("Web server shutdown complete")
    except KeyboardInterrupt:
        logger.info("Web server stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Failed to start web server", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
