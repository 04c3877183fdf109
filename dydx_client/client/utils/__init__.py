"""
dYdX client utilities package.

- helpers: query paths, timestamps, compact JSON
- ids: client id generation and account id derivation
"""

from .helpers import generate_query_path, iso_now, json_stringify, to_iso
from .ids import generate_client_id, get_account_id, get_user_id

__all__ = [
    "generate_query_path",
    "iso_now",
    "json_stringify",
    "to_iso",
    "generate_client_id",
    "get_account_id",
    "get_user_id",
]
