"""
Common constants for the dYdX v3 API.

Shared by the API modules, the StarkEx signing helpers and the on-chain module.
"""

from enum import Enum


# ============ API ============

API_VERSION_PREFIX = "/v3"

API_HOST_MAINNET = "https://api.dydx.exchange"
API_HOST_ROPSTEN = "https://api.stage.dydx.exchange"

NETWORK_ID_MAINNET = 1
NETWORK_ID_ROPSTEN = 3

HEADER_SIGNATURE = "DYDX-SIGNATURE"
HEADER_API_KEY = "DYDX-API-KEY"
HEADER_TIMESTAMP = "DYDX-TIMESTAMP"
HEADER_ETHEREUM_ADDRESS = "DYDX-ETHEREUM-ADDRESS"


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# ============ Trading ============

class Market(str, Enum):
    BTC_USD = "BTC-USD"
    ETH_USD = "ETH-USD"
    LINK_USD = "LINK-USD"
    AAVE_USD = "AAVE-USD"
    UNI_USD = "UNI-USD"
    SUSHI_USD = "SUSHI-USD"
    SOL_USD = "SOL-USD"
    YFI_USD = "YFI-USD"
    ONEINCH_USD = "1INCH-USD"
    AVAX_USD = "AVAX-USD"
    SNX_USD = "SNX-USD"
    CRV_USD = "CRV-USD"
    UMA_USD = "UMA-USD"
    DOT_USD = "DOT-USD"
    DOGE_USD = "DOGE-USD"
    MATIC_USD = "MATIC-USD"
    MKR_USD = "MKR-USD"
    FIL_USD = "FIL-USD"
    ADA_USD = "ADA-USD"
    ATOM_USD = "ATOM-USD"
    COMP_USD = "COMP-USD"
    BCH_USD = "BCH-USD"
    LTC_USD = "LTC-USD"
    EOS_USD = "EOS-USD"
    ALGO_USD = "ALGO-USD"
    ZRX_USD = "ZRX-USD"
    XMR_USD = "XMR-USD"
    ZEC_USD = "ZEC-USD"
    ENJ_USD = "ENJ-USD"
    ETC_USD = "ETC-USD"
    XLM_USD = "XLM-USD"
    TRX_USD = "TRX-USD"
    XTZ_USD = "XTZ-USD"
    HNT_USD = "HNT-USD"


class Asset(str, Enum):
    USDC = "USDC"
    BTC = "BTC"
    ETH = "ETH"
    LINK = "LINK"
    AAVE = "AAVE"
    UNI = "UNI"
    SUSHI = "SUSHI"
    SOL = "SOL"
    YFI = "YFI"
    ONEINCH = "1INCH"
    AVAX = "AVAX"
    SNX = "SNX"
    CRV = "CRV"
    UMA = "UMA"
    DOT = "DOT"
    DOGE = "DOGE"
    MATIC = "MATIC"
    MKR = "MKR"
    FIL = "FIL"
    ADA = "ADA"
    ATOM = "ATOM"
    COMP = "COMP"
    BCH = "BCH"
    LTC = "LTC"
    EOS = "EOS"
    ALGO = "ALGO"
    ZRX = "ZRX"
    XMR = "XMR"
    ZEC = "ZEC"
    ENJ = "ENJ"
    ETC = "ETC"
    XLM = "XLM"
    TRX = "TRX"
    XTZ = "XTZ"
    HNT = "HNT"


COLLATERAL_ASSET = Asset.USDC


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LIMIT = "STOP_LIMIT"
    TRAILING_STOP = "TRAILING_STOP"
    TAKE_PROFIT = "TAKE_PROFIT"


class TimeInForce(str, Enum):
    GTT = "GTT"
    FOK = "FOK"
    IOC = "IOC"


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    OPEN = "OPEN"
    FILLED = "FILLED"
    CANCELED = "CANCELED"
    UNTRIGGERED = "UNTRIGGERED"


class PositionStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    LIQUIDATED = "LIQUIDATED"


class AccountAction(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class CandleResolution(str, Enum):
    ONE_DAY = "1DAY"
    FOUR_HOURS = "4HOURS"
    ONE_HOUR = "1HOUR"
    THIRTY_MINS = "30MINS"
    FIFTEEN_MINS = "15MINS"
    FIVE_MINS = "5MINS"
    ONE_MIN = "1MIN"


def enum_value(value):
    """Plain wire value of an enum member; other values pass through."""
    return value.value if isinstance(value, Enum) else value


def market_to_asset(market: str) -> str:
    """
    Return the synthetic asset traded on a market.

    "BTC-USD" -> "BTC", "1INCH-USD" -> "1INCH"
    """
    value = str(enum_value(market))
    base, _, quote = value.upper().partition("-")
    if not base or quote != "USD":
        raise ValueError(f"Unrecognized market: {value}")
    return base


# ============ On-chain ============

STARKWARE_PERPETUALS_CONTRACT = {
    NETWORK_ID_MAINNET: "0xD54f502e184B6B739d7D27a6410a67dc462D69c8",
    NETWORK_ID_ROPSTEN: "0x014F738EAd8Ec6C50BCD456a971F8B84Cd693BBe",
}

COLLATERAL_TOKEN_ADDRESS = {
    NETWORK_ID_MAINNET: "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    NETWORK_ID_ROPSTEN: "0x8707A5bf4C2842d46B31A405Ba41b858C0F876c4",
}

COLLATERAL_TOKEN_DECIMALS = 6

MAX_UINT_AMOUNT = 2 ** 256 - 1
