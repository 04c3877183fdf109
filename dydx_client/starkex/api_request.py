"""
Canonical value for an API-key authenticated HTTP request.
"""

import hashlib
from dataclasses import dataclass

from starknet_py.hash.utils import pedersen_hash

from dydx_client.common import RequestMethod, enum_value

from .constants import API_REQUEST_HASH_BITS
from .helpers import key_to_int
from .signable import Signable


@dataclass(frozen=True)
class ApiRequest:
    request_path: str
    method: str
    expires_at: str
    body: str
    public_key: str


class SignableApiRequest(Signable):
    """
    Request envelope signed with the API key pair.

    The hash covers the timestamp, method, full request path (with query
    string) and the serialised body, bound to the requester's public key.
    """

    def __init__(
        self,
        network_id: int,
        request_path: str,
        method: str,
        expires_at: str,
        body: str,
        public_key: str,
    ):
        method = enum_value(method)
        if method not in RequestMethod.__members__:
            raise ValueError(f"Unsupported request method: {method}")

        super().__init__(
            network_id,
            ApiRequest(
                request_path=request_path,
                method=method,
                expires_at=expires_at,
                body=body or "",
                public_key=public_key,
            ),
            public_key=public_key,
        )

    def _calculate_hash(self) -> int:
        request: ApiRequest = self._message
        payload = f"{request.expires_at}{request.method}{request.request_path}{request.body}"
        digest = int.from_bytes(hashlib.sha256(payload.encode("utf-8")).digest(), "big")
        message_hash = digest >> (256 - API_REQUEST_HASH_BITS)
        return pedersen_hash(message_hash, key_to_int(request.public_key))
