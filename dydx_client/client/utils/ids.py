"""
Identifier helpers: client-assigned ids and deterministic user/account ids.
"""

import random
import uuid

# Namespace the API uses to derive user and account ids from Ethereum addresses.
ID_NAMESPACE = uuid.UUID("0f9da948-a6fb-4c45-9edc-4685c3f3317d")

CLIENT_ID_DIGITS = 16


def generate_client_id() -> str:
    """
    Random numeric client id.

    Leading zeros are stripped because the server parses the id as a number.
    No uniqueness check is made; duplicates are rejected server-side.
    """
    while True:
        digits = "".join(random.choices("0123456789", k=CLIENT_ID_DIGITS)).lstrip("0")
        if digits:
            return digits


def get_user_id(address: str) -> str:
    return str(uuid.uuid5(ID_NAMESPACE, address.lower()))


def get_account_id(address: str, account_number: int = 0) -> str:
    """Account id of an Ethereum address; case-insensitive in the address."""
    return str(uuid.uuid5(ID_NAMESPACE, get_user_id(address) + str(account_number)))
