"""
HTTP transport helpers.

Builds the shared ``httpx.AsyncClient`` and performs single request/response
round trips for the API modules. Nothing here retries.
"""

from .exceptions import DydxApiError, TransportError
from .http import create_httpx_client, send_request

__all__ = [
    "DydxApiError",
    "TransportError",
    "create_httpx_client",
    "send_request",
]
