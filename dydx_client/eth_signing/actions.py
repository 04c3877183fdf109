"""
EIP-712 typed data for Ethereum-signed actions.

Two families:
- off-chain actions (onboarding, STARK key derivation) identified by a fixed
  action string;
- private API actions (API key management) bound to method, path, body and
  timestamp.
"""

from typing import Any, Dict

from dydx_client.common import NETWORK_ID_MAINNET, enum_value

EIP712_DOMAIN_NAME = "dYdX"
EIP712_DOMAIN_VERSION = "1.0"
EIP712_STRUCT_NAME = "dYdX"

EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
]

ONBOARDING_ACTION = "dYdX Onboarding"
STARK_KEY_ACTION = "dYdX STARK Key"
ONLY_SIGN_ON_DOMAIN_MAINNET = "https://trade.dydx.exchange"

# Suffix appended to ECDSA signatures sent to the API.
SIGNATURE_TYPE_NO_PREPEND = "00"


def _typed_data(network_id: int, fields, message: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "types": {
            "EIP712Domain": EIP712_DOMAIN_TYPE,
            EIP712_STRUCT_NAME: fields,
        },
        "domain": {
            "name": EIP712_DOMAIN_NAME,
            "version": EIP712_DOMAIN_VERSION,
            "chainId": network_id,
        },
        "primaryType": EIP712_STRUCT_NAME,
        "message": message,
    }


def build_off_chain_action(network_id: int, action: str) -> Dict[str, Any]:
    """Typed data for an off-chain action; mainnet also pins the signing site."""
    fields = [{"name": "action", "type": "string"}]
    message = {"action": action}
    if network_id == NETWORK_ID_MAINNET:
        fields.append({"name": "onlySignOn", "type": "string"})
        message["onlySignOn"] = ONLY_SIGN_ON_DOMAIN_MAINNET
    return _typed_data(network_id, fields, message)


def build_private_action(
    network_id: int,
    method: str,
    request_path: str,
    body: str,
    timestamp: str,
) -> Dict[str, Any]:
    """Typed data authorising one Ethereum-key authenticated API request."""
    fields = [
        {"name": "method", "type": "string"},
        {"name": "requestPath", "type": "string"},
        {"name": "body", "type": "string"},
        {"name": "timestamp", "type": "string"},
    ]
    message = {
        "method": enum_value(method),
        "requestPath": request_path,
        "body": body,
        "timestamp": timestamp,
    }
    return _typed_data(network_id, fields, message)


def add_signature_type(signature: str) -> str:
    return f"{signature}{SIGNATURE_TYPE_NO_PREPEND}"
