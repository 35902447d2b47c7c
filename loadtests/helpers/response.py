"""Response error extraction for load test observability.

Parses storefront API error envelopes into human-readable messages:

    {"success": false, "error": {"code": "...", "message": "...", "details": ...}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except Exception:
        # Not JSON; return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        code = error.get("code", "ERROR")
        return f"{code}: {error.get('message', '')}"

    # Unknown shape; stringify and truncate
    return str(body)[:300]


def envelope_data(response: Response):
    """The ``data`` member of a successful envelope, or ``None``."""
    try:
        body = response.json()
    except Exception:
        return None
    if isinstance(body, dict) and body.get("success"):
        return body.get("data")
    return None
