"""
StarkEx constants used to build the canonical order / withdrawal values.
"""

from dydx_client.common import NETWORK_ID_MAINNET, NETWORK_ID_ROPSTEN, Asset

# Resolutions are powers of ten; only the exponent is stored.
COLLATERAL_ASSET_RESOLUTION_EXPONENT = 6

SYNTHETIC_ASSET_RESOLUTION_EXPONENT = {
    Asset.BTC.value: 10,
    Asset.ETH.value: 9,
    Asset.LINK.value: 7,
    Asset.AAVE.value: 8,
    Asset.UNI.value: 7,
    Asset.SUSHI.value: 7,
    Asset.SOL.value: 7,
    Asset.YFI.value: 10,
    Asset.ONEINCH.value: 7,
    Asset.AVAX.value: 7,
    Asset.SNX.value: 7,
    Asset.CRV.value: 6,
    Asset.UMA.value: 7,
    Asset.DOT.value: 7,
    Asset.DOGE.value: 5,
    Asset.MATIC.value: 6,
    Asset.MKR.value: 9,
    Asset.FIL.value: 7,
    Asset.ADA.value: 6,
    Asset.ATOM.value: 7,
    Asset.COMP.value: 8,
    Asset.BCH.value: 8,
    Asset.LTC.value: 8,
    Asset.EOS.value: 6,
    Asset.ALGO.value: 6,
    Asset.ZRX.value: 6,
    Asset.XMR.value: 8,
    Asset.ZEC.value: 8,
    Asset.ENJ.value: 6,
    Asset.ETC.value: 7,
    Asset.XLM.value: 5,
    Asset.TRX.value: 4,
    Asset.XTZ.value: 6,
    Asset.HNT.value: 7,
}

COLLATERAL_ASSET_ID_BY_NETWORK_ID = {
    NETWORK_ID_MAINNET: int("0x02893294412a4c8f915f75892b395ebbf6859ec246ec365c3b1f56f47c3a0a5d", 16),
    NETWORK_ID_ROPSTEN: int("0x02c04d8b650f44092278a7cb1e1028c82025dff622db96c934b611b84cc8de5a", 16),
}

# Synthetic asset ids are the ASCII "<ASSET>-<exponent>" right-padded to 15 bytes.
SYNTHETIC_ASSET_ID_BYTES = 15

# ============ Orders ============

ORDER_TYPE_LIMIT_WITH_FEES = "LIMIT_ORDER_WITH_FEES"
ORDER_PREFIX = 3
ORDER_PADDING_BITS = 17
ORDER_FIELD_BIT_LENGTHS = {
    "asset_id_synthetic": 128,
    "asset_id_collateral": 250,
    "asset_id_fee": 250,
    "quantums_amount": 64,
    "nonce": 32,
    "position_id": 64,
    "expiration_epoch_hours": 32,
}

# ============ Withdrawals ============

WITHDRAWAL_PREFIX = 6
WITHDRAWAL_PADDING_BITS = 49
WITHDRAWAL_FIELD_BIT_LENGTHS = {
    "asset_id": 250,
    "position_id": 64,
    "nonce": 32,
    "quantums_amount": 64,
    "expiration_epoch_hours": 32,
}

# ============ Shared ============

NONCE_UPPER_BOUND_EXCLUSIVE = 1 << ORDER_FIELD_BIT_LENGTHS["nonce"]

# Signatures stay valid a week past the expiration the API enforces.
ORDER_SIGNATURE_EXPIRATION_BUFFER_HOURS = 24 * 7

API_REQUEST_HASH_BITS = 250
