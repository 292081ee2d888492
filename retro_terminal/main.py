"""
Entry point of the retro terminal MCP server.

Loads `.env`, configures logging and starts FastMCP on the configured transport.
"""

import logging
import os
import sys

from dotenv import load_dotenv

SUPPORTED_TRANSPORTS = ("stdio", "sse", "streamable-http")


def setup_environment() -> bool:
    """
    Loads `.env` into the process environment and configures logging once.

    Returns False when the environment asks for a transport FastMCP cannot serve.
    """
    load_dotenv()

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    transport = os.environ.get("MCP_TRANSPORT", "stdio")
    if transport not in SUPPORTED_TRANSPORTS:
        logging.critical(f"Unsupported MCP_TRANSPORT '{transport}'. Expected one of: {', '.join(SUPPORTED_TRANSPORTS)}")
        return False
    logging.debug("Environment loaded, logging configured.")
    return True


def run_server() -> None:
    """Starts the retro terminal server; exits with status 1 on a bad environment."""
    if not setup_environment():
        sys.exit(1)

    # Settings are read on import, so .env has to be loaded before this point.
    from .server import mcp_app, server_config

    logger = logging.getLogger(__name__)
    logger.info(
        "Retro terminal for %s@%s, transport %s",
        server_config.TERMINAL_USER,
        server_config.TERMINAL_HOSTNAME,
        server_config.MCP_TRANSPORT,
    )
    if server_config.MCP_TRANSPORT != "stdio":
        logger.info("Listening on %s:%s", server_config.MCP_HOST, server_config.MCP_PORT)

    mcp_app.run(transport=server_config.MCP_TRANSPORT)


if __name__ == "__main__":
    run_server()
