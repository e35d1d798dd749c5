"""Stdio MCP server entry point.

    python -m app.main_mcp [--data-file PATH] [--log-level LEVEL]

Stdout carries the MCP protocol; every log line goes to stderr.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from app.config import Settings
from app.config_docs import get_config_summary
from app.exceptions import ConfigurationError
from app.logger import ConsoleLogger, Logger, session_logger
from app.mcp_server import create_mcp_server, initialize_components, run_stdio

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="bill-signing MCP Server - document signing tools over stdio"
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help="JSON document file (default: BILL_SIGNING_DATA_FILE or bundled sample data)",
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
            data_file=args.data_file,
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

    server = create_mcp_server(components)
    try:
        logger.info("Starting MCP server", transport="stdio")
        asyncio.run(run_stdio(server))
        logger.info("MCP server shutdown complete")
    except KeyboardInterrupt:
        logger.info("MCP server stopped by user")
    except Exception as e:
        logger.error("MCP server failed", error=str(e), error_type=type(e).__name__)
        sys.exit(1)


if __name__ == "__main__":
    main()
