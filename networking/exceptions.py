"""Custom exceptions for the HTTP transport."""

from typing import Any, Optional

import httpx


class TransportError(Exception):
    """Base class for errors raised by the HTTP collaborator."""


class DydxApiError(TransportError):
    """
    Raised when the API answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by the server.
        msg: Parsed JSON error body, or the raw text when it is not JSON.
        response: The underlying ``httpx.Response``.
    """

    def __init__(self, response: httpx.Response):
        self.status_code = response.status_code
        self.response = response
        self.msg: Optional[Any]
        try:
            self.msg = response.json()
        except ValueError:
            self.msg = response.text
        super().__init__(f"DydxApiError(status_code={self.status_code}, response={self.msg})")
