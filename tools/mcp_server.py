# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers every MCP tool the server exposes.  Each tool is a thin
#   wrapper around a core/ function: it declares the input shape, logs the
#   call, and hands back the text the core function produced.
#
# HOW IT WORKS (the flow):
#   1. A client calls a tool by name over MCP (e.g., "get_pokemon_info")
#   2. FastMCP validates the arguments against the type hints below
#   3. The decorated function calls core/ and gets back a string
#   4. The string is returned as the tool's text content
#
# ERROR HANDLING:
#   core/ functions never raise for expected failures (not found, network
#   down, bad payload); they return "Error: ..." text.  Argument type
#   errors are rejected by FastMCP before the function runs.
#
# RUNNING THIS SERVER:
#   a) Via the entry point:  python main.py --transport sse
#   b) Standalone (stdio):   python -m tools.mcp_server
# =============================================================================

import logging
import sys
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from core import config
from core.brand import get_brand_data as _get_brand_data
from core.calculator import add as _add, calculate as _calculate
from core.diagnostics import debug_environment as _debug_environment
from core.pokemon import (
    DEFAULT_MOVE_LIMIT,
    get_move_details as _get_move_details,
    get_pokemon_by_type as _get_pokemon_by_type,
    get_pokemon_evolution as _get_pokemon_evolution,
    get_pokemon_info as _get_pokemon_info,
    get_pokemon_moves as _get_pokemon_moves,
)

SERVER_NAME = "Authless Calculator"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the stdio transport uses STDOUT for the MCP
# message stream.  A log line on stdout would corrupt the protocol.
#
# ANSI colours make tool traffic easy to scan in a terminal:
#   CYAN for requests, YELLOW for status, GREEN for responses.
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_RESPONSE_PREVIEW_CHARS = 200

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send all logs to stderr at the level named by LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, config.log_level(), logging.INFO),
        format="%(asctime)s [MCP] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log a one-line preview of the tool's text in GREEN, then return it."""
    preview = result.replace("\n", " | ")
    if len(preview) > _RESPONSE_PREVIEW_CHARS:
        preview = preview[:_RESPONSE_PREVIEW_CHARS] + "..."
    logger.info(f"{_GREEN}  ← {tool_name} response: {preview}{_RESET}")
    if result.startswith("Error"):
        _log_status(f"{tool_name} reported an error")
    return result


configure_logging()

# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP(SERVER_NAME)


# =============================================================================
# Arithmetic
# =============================================================================
@mcp.tool()
def add(a: float, b: float) -> str:
    """Add two numbers and return the sum."""
    _log_request("add", a=a, b=b)
    return _log_response("add", _add(a, b))


@mcp.tool()
def calculate(
    operation: Literal["add", "subtract", "multiply", "divide"],
    a: float,
    b: float,
) -> str:
    """Perform a basic arithmetic operation on two numbers.

    Division by zero returns an error message instead of a result.
    """
    _log_request("calculate", operation=operation, a=a, b=b)
    return _log_response("calculate", _calculate(operation, a, b))


# =============================================================================
# Pokémon lookups (PokéAPI)
# =============================================================================
@mcp.tool()
def get_pokemon_info(
    name: Annotated[str, Field(description="The name or ID of the Pokemon to look up")],
) -> str:
    """Get basic Pokemon information: id, height, weight, types, base stats and abilities."""
    _log_request("get_pokemon_info", name=name)
    return _log_response("get_pokemon_info", _get_pokemon_info(name))


@mcp.tool()
def get_pokemon_by_type(
    type: Annotated[str, Field(description="The Pokemon type to search for (e.g., fire, water, grass)")],
) -> str:
    """List the first 20 Pokemon of a given type."""
    _log_request("get_pokemon_by_type", type=type)
    return _log_response("get_pokemon_by_type", _get_pokemon_by_type(type))


@mcp.tool()
def get_pokemon_evolution(
    name: Annotated[str, Field(description="The name or ID of the Pokemon to get evolution chain for")],
) -> str:
    """Get the full evolution chain a Pokemon belongs to, in evolution order."""
    _log_request("get_pokemon_evolution", name=name)
    return _log_response("get_pokemon_evolution", _get_pokemon_evolution(name))


@mcp.tool()
def get_pokemon_moves(
    name: Annotated[str, Field(description="The name or ID of the Pokemon to get moves for")],
    limit: Annotated[
        Optional[int],
        Field(description="Maximum number of moves to return (default: 10)"),
    ] = DEFAULT_MOVE_LIMIT,
) -> str:
    """List the moves a Pokemon can learn (1 to 50 of them)."""
    _log_request("get_pokemon_moves", name=name, limit=limit)
    return _log_response("get_pokemon_moves", _get_pokemon_moves(name, limit))


@mcp.tool()
def get_move_details(
    name: Annotated[str, Field(description="The name of the move to get details for")],
) -> str:
    """Get type, power, accuracy, PP, priority, damage class and effect for a move."""
    _log_request("get_move_details", name=name)
    return _log_response("get_move_details", _get_move_details(name))


# =============================================================================
# Webhook & diagnostics
# =============================================================================
@mcp.tool()
def get_brand_data(
    brand: Annotated[str, Field(description="The brand name to look up")],
) -> str:
    """Look up data about a brand through the configured brand webhook."""
    _log_request("get_brand_data", brand=brand)
    return _log_response("get_brand_data", _get_brand_data(brand))


@mcp.tool()
def debug_environment() -> str:
    """Show the server's runtime and configuration (secrets are hidden)."""
    _log_request("debug_environment")
    return _log_response("debug_environment", _debug_environment())


# =============================================================================
# Server entry point
# =============================================================================
# When run directly (python -m tools.mcp_server), serve over stdio.
# main.py offers the SSE and HTTP transports.
# =============================================================================
if __name__ == "__main__":
    mcp.run()
