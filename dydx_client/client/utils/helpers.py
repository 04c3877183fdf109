"""
Request helpers for the dYdX client.

Query-path generation, timestamps and JSON serialisation.
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dydx_client.common import enum_value
from dydx_client.starkex.helpers import to_iso


def generate_query_path(url: str, params: Optional[Dict[str, Any]] = None) -> str:
    """
    Append the defined parameters to ``url`` as a query string.

    ``None`` values are dropped; an empty result leaves the url untouched
    (no trailing ``?``). Values are not percent-encoded so the signed path is
    exactly the transmitted one.

    >>> generate_query_path("orders", {"market": "BTC-USD", "limit": None})
    'orders?market=BTC-USD'
    """
    entries = [(key, value) for key, value in (params or {}).items() if value is not None]
    if not entries:
        return url

    query = "&".join(f"{key}={_query_value(value)}" for key, value in entries)
    return f"{url}?{query}"


def _query_value(value: Any) -> str:
    value = enum_value(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return to_iso(value)
    return str(value)


def iso_now() -> str:
    return to_iso(datetime.now(timezone.utc))


def json_stringify(data: Any) -> str:
    """Compact JSON, the exact form that is signed and sent."""
    return json.dumps(data, separators=(",", ":"))
