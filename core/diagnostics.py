# =============================================================================
# core/diagnostics.py  —  Environment debug report
# =============================================================================
#
# Backs the debug_environment tool: a quick way for whoever is wiring up a
# client to see what the server thinks its configuration is.
#
# Secrets (core.config.SECRET_VARS) are never printed, only "set (hidden)"
# or "not set".
# =============================================================================

import platform
import sys

from core import config


def describe_setting(name: str) -> str:
    """One "- NAME: value" line for the report."""
    if name in config.SECRET_VARS:
        state = "not set" if config.is_default(name) else "set (hidden)"
        return f"- {name}: {state}"
    value = config.get_setting(name)
    if not value:
        return f"- {name}: not set"
    suffix = " (default)" if config.is_default(name) else ""
    return f"- {name}: {value}{suffix}"


def debug_environment() -> str:
    """Runtime and configuration summary as text."""
    return "\n".join([
        "**Environment**",
        f"- Python: {sys.version.split()[0]} ({platform.python_implementation()})",
        f"- Platform: {platform.platform()}",
        f"- Transport: {config.mcp_transport()}",
        "**Configuration:**",
        *[describe_setting(name) for name in config.DEFAULTS],
    ])
