# =============================================================================
# core/config.py  —  Environment-driven configuration
# =============================================================================
#
# Every setting is read from the environment AT CALL TIME (not at import).
# main.py loads a .env file first, so anything defined there shows up here.
# Reading lazily also lets tests flip a setting with monkeypatch.setenv()
# without reloading modules.
#
# SECRETS:
#   Variables in SECRET_VARS are never echoed back by any tool; the
#   debug_environment tool only reports whether they are set.
# =============================================================================

import logging
import os

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
DEFAULTS: dict[str, str] = {
    "POKEAPI_BASE_URL": "https://pokeapi.co/api/v2",
    "HTTP_TIMEOUT_SECONDS": "10",
    "HTTP_USER_AGENT": "authless-tool-server/1.0.0",
    "BRAND_WEBHOOK_URL": "",
    "BRAND_WEBHOOK_TOKEN": "",
    "MCP_TRANSPORT": "stdio",
    "MCP_HOST": "127.0.0.1",
    "MCP_PORT": "8000",
    "LOG_LEVEL": "INFO",
}

SECRET_VARS = {"BRAND_WEBHOOK_TOKEN"}

TRANSPORTS = ("stdio", "sse", "http")


def get_setting(name: str) -> str:
    """Return the raw value of a setting, falling back to its default."""
    value = os.environ.get(name, "").strip()
    return value or DEFAULTS.get(name, "")


def is_default(name: str) -> bool:
    """True when the setting is not overridden in the environment."""
    return not os.environ.get(name, "").strip()


def _get_number(name: str, cast):
    raw = get_setting(name)
    try:
        value = cast(raw)
        if value <= 0:
            raise ValueError(f"{name} must be positive")
        return value
    except ValueError:
        logger.warning("Invalid %s=%r, using default %s", name, raw, DEFAULTS[name])
        return cast(DEFAULTS[name])


def pokeapi_base_url() -> str:
    return get_setting("POKEAPI_BASE_URL").rstrip("/")


def http_timeout() -> float:
    return _get_number("HTTP_TIMEOUT_SECONDS", float)


def http_user_agent() -> str:
    return get_setting("HTTP_USER_AGENT")


def brand_webhook_url() -> str | None:
    return get_setting("BRAND_WEBHOOK_URL") or None


def brand_webhook_token() -> str | None:
    return get_setting("BRAND_WEBHOOK_TOKEN") or None


def mcp_transport() -> str:
    """The transport to serve on.  Unknown values fall back to stdio."""
    transport = get_setting("MCP_TRANSPORT").lower()
    if transport not in TRANSPORTS:
        logger.warning("Unknown MCP_TRANSPORT=%r, using stdio", transport)
        return "stdio"
    return transport


def mcp_host() -> str:
    return get_setting("MCP_HOST")


def mcp_port() -> int:
    return _get_number("MCP_PORT", int)


def log_level() -> str:
    return get_setting("LOG_LEVEL").upper()
