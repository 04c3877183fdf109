"""Base class for values signed with a STARK key."""

from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from starknet_py.hash.utils import message_signature, verify_message_signature

from .helpers import deserialize_signature, key_to_int, serialize_signature


class Signable(ABC):
    """
    A canonical StarkEx value that can be hashed and signed.

    Subclasses build an immutable message in ``__init__`` and implement
    ``_calculate_hash``. The hash is computed once and cached. ``public_key``
    is the signer's key, used by ``verify_signature`` when none is passed.
    """

    def __init__(self, network_id: int, message: Any, public_key: Optional[Union[str, int]] = None):
        self.network_id = network_id
        self.public_key = public_key
        self._message = message
        self._hash: Optional[int] = None

    @property
    def message(self) -> Any:
        return self._message

    @property
    def hash(self) -> int:
        """Pedersen hash of the message as an int."""
        if self._hash is None:
            self._hash = self._calculate_hash()
        return self._hash

    def sign(self, private_key: Union[str, int]) -> str:
        """
        Sign the message hash with a STARK private key.

        Returns:
            128-character hex signature (r then s).
        """
        r, s = message_signature(self.hash, key_to_int(private_key))
        return serialize_signature(r, s)

    def verify_signature(self, signature: str, public_key: Optional[Union[str, int]] = None) -> bool:
        """
        Check ``signature`` against ``public_key`` or, when omitted, the key given at construction.

        Raises:
            ValueError: If no public key is available.
        """
        if public_key is None:
            public_key = self.public_key
        if public_key is None:
            raise ValueError(f"{type(self).__name__} has no public key to verify against")
        r, s = deserialize_signature(signature)
        return verify_message_signature(self.hash, [r, s], key_to_int(public_key))

    @abstractmethod
    def _calculate_hash(self) -> int:
        """Compute the hash of the message."""
        pass
