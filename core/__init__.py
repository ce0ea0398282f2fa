# =============================================================================
# core/__init__.py
# =============================================================================
# All tool logic lives here: HTTP calls, payload parsing, text formatting.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  Every public function takes
#   plain arguments and returns the text a tool should reply with, so it
#   can be exercised from a test or a REPL without an MCP client.
# =============================================================================
