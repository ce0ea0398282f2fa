# =============================================================================
# main.py  —  Entry Point for the Authless Tool Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py                       # stdio (for desktop MCP clients)
#   python main.py --transport sse       # SSE endpoint at /sse
#   python main.py --transport http      # streamable HTTP endpoint at /mcp
#
# Flags override the MCP_TRANSPORT / MCP_HOST / MCP_PORT environment
# variables, which in turn can come from a .env file.
# =============================================================================

import argparse
import logging
import os

from dotenv import load_dotenv

# Load .env BEFORE importing the server: the server configures logging at
# import time and every tool reads its settings from the environment.
load_dotenv()

from core import config
from tools.mcp_server import SERVER_NAME, SERVER_VERSION, mcp

logger = logging.getLogger(__name__)

# Our transport names -> FastMCP's
_FASTMCP_TRANSPORTS = {
    "stdio": "stdio",
    "sse": "sse",
    "http": "streamable-http",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"{SERVER_NAME} MCP tool server")
    parser.add_argument(
        "--transport",
        choices=config.TRANSPORTS,
        default=config.mcp_transport(),
        help="How clients connect (default: MCP_TRANSPORT or stdio)",
    )
    parser.add_argument("--host", default=config.mcp_host(), help="Bind address for sse/http")
    parser.add_argument("--port", type=int, default=config.mcp_port(), help="Port for sse/http")
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    # Make the resolved transport visible to the debug_environment tool
    os.environ["MCP_TRANSPORT"] = args.transport

    transport = _FASTMCP_TRANSPORTS[args.transport]
    if args.transport == "stdio":
        logger.info("Starting %s v%s on stdio", SERVER_NAME, SERVER_VERSION)
        mcp.run()
    else:
        logger.info("Starting %s v%s on %s://%s:%s",
                    SERVER_NAME, SERVER_VERSION, args.transport, args.host, args.port)
        mcp.run(transport=transport, host=args.host, port=args.port)


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    run()
