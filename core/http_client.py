# =============================================================================
# core/http_client.py  —  The one place that talks to the network
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs a single HTTP request and decodes the JSON body.  Every tool
#   that calls a third-party API (PokéAPI, the brand webhook) goes through
#   fetch_json(), so timeouts, headers and error mapping live in one spot.
#
# ERROR TAXONOMY:
#   HTTPClientError   the request failed (bad URL, network, timeout, bad encoding)
#   HTTPStatusError   the server answered, but not with a 2xx status
#
#   Tools catch these at their boundary and turn them into readable
#   "Error: ..." strings.  This module never swallows them.
#
# No retries, no caching: each call is one request.
# =============================================================================

import json
import logging
import urllib.error
import urllib.request
from typing import Any

from core import config

logger = logging.getLogger(__name__)


class HTTPClientError(Exception):
    """A request could not be completed or its body could not be decoded."""


class HTTPStatusError(HTTPClientError):
    """The server responded with a non-2xx status."""

    def __init__(self, url: str, status: int, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason
        super().__init__(f"HTTP {status} {reason}".strip() + f" for {url}")


def fetch_json(
    url: str,
    method: str = "GET",
    payload: Any = None,
    headers: dict[str, str] | None = None,
) -> Any:
    """Send one request and return the decoded JSON body.

    Args:
        url: Absolute URL to call.
        method: HTTP verb (GET for lookups, POST for webhooks).
        payload: Optional JSON-serializable body.
        headers: Extra headers, merged over the defaults.

    Returns:
        The decoded JSON value.  A body that is not JSON is returned as a
        plain string, and an empty body as None.

    Raises:
        HTTPStatusError: On a non-2xx response.
        HTTPClientError: On an invalid URL, network failures, timeouts or a
            body that is not UTF-8.
    """
    request_headers = {
        "Accept": "application/json",
        "User-Agent": config.http_user_agent(),
    }
    data = None
    if payload is not None:
        data = json.dumps(payload).encode("utf-8")
        request_headers["Content-Type"] = "application/json"
    if headers:
        request_headers.update(headers)

    logger.debug("%s %s", method, url)
    try:
        req = urllib.request.Request(url, data=data, headers=request_headers, method=method)
        with urllib.request.urlopen(req, timeout=config.http_timeout()) as response:
            body = response.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        raise HTTPStatusError(url, e.code, str(e.reason or "")) from e
    except UnicodeDecodeError as e:
        raise HTTPClientError(f"Response from {url} is not valid UTF-8") from e
    except ValueError as e:
        # urllib rejects URLs without a scheme or host here
        raise HTTPClientError(f"Invalid URL {url!r}: {e}") from e
    except (urllib.error.URLError, TimeoutError, OSError) as e:
        reason = getattr(e, "reason", e)
        raise HTTPClientError(f"Request to {url} failed: {reason}") from e

    if not body.strip():
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        logger.debug("Non-JSON body from %s, returning text", url)
        return body
