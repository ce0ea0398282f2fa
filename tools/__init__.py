# =============================================================================
# tools/__init__.py
# =============================================================================
# The FastMCP layer.  tools/mcp_server.py registers one MCP tool per core/
# function; each wrapper declares the input schema (type hints + pydantic
# Field descriptions), logs the call and returns the core function's text.
#
# Tools contain no business logic and never raise for expected failures.
# =============================================================================
