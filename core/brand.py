# =============================================================================
# core/brand.py  —  Brand data webhook
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Forwards a brand name to an external webhook (BRAND_WEBHOOK_URL) and
#   turns whatever JSON comes back into readable text.
#
#   Request:   POST {"brand": "<brand>"}
#              Authorization: Bearer <BRAND_WEBHOOK_TOKEN>   (only if set)
#
#   Response rendering:
#     object  -> "- key: value" lines (nested values as compact JSON)
#     list    -> numbered items
#     other   -> the value as text
#
# Like every tool, this never raises: failures come back as "Error: ..." text.
# =============================================================================

import json
import logging
from typing import Any

from core import config
from core.formatting import numbered
from core.http_client import HTTPClientError, HTTPStatusError, fetch_json

logger = logging.getLogger(__name__)


def _render_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def format_brand_data(brand: str, data: Any) -> str:
    """Render a webhook response for display."""
    if data is None:
        return f"No data returned for brand \"{brand}\"."
    if isinstance(data, dict):
        lines = [f"- {key}: {_render_value(value)}" for key, value in data.items()]
    elif isinstance(data, list):
        lines = numbered([_render_value(item) for item in data])
    else:
        return str(data)
    return "\n".join([f"**Brand data for {brand}:**", *lines])


def get_brand_data(brand: str) -> str:
    """Look up a brand via the configured webhook."""
    brand = brand.strip()
    if not brand:
        return "Error: Brand name must not be empty."

    url = config.brand_webhook_url()
    if url is None:
        return "Error: Brand webhook is not configured. Set BRAND_WEBHOOK_URL."

    headers = {}
    token = config.brand_webhook_token()
    if token:
        headers["Authorization"] = f"Bearer {token}"

    try:
        data = fetch_json(url, method="POST", payload={"brand": brand}, headers=headers)
    except HTTPStatusError as e:
        logger.warning("Brand webhook returned HTTP %s for %r", e.status, brand)
        return f"Error: Brand webhook returned HTTP {e.status}."
    except HTTPClientError as e:
        logger.warning("Brand webhook call failed for %r: %s", brand, e)
        return f"Error fetching brand data: {e}"
    return format_brand_data(brand, data)
