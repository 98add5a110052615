from enum import Enum

from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from solders.sysvar import RENT
from spl.token.constants import TOKEN_PROGRAM_ID


class Network(str, Enum):
    LOCALNET = "localnet"
    DEVNET = "devnet"
    MAINNET = "mainnet"


PROGRAM_IDS: dict[Network, Pubkey] = {
    Network.LOCALNET: Pubkey.from_string(
        "BG3HQFJHiNPSivKJpTTGBNbngRKtUgZ5XcURDf9Qz7gU"
    ),
    Network.DEVNET: Pubkey.from_string("BG3HQFJHiNPSivKJpTTGBNbngRKtUgZ5XcURDf9Qz7gU"),
    Network.MAINNET: Pubkey.from_string("ZETAxsqBRek56DhiGXrn75yj2NHU3aYUnxvHXpkf3aD"),
}

# Order book program the exchange delegates matching to.
DEX_PID: dict[Network, Pubkey] = {
    Network.LOCALNET: Pubkey.from_string(
        "5CmWtUihvSrJpaUrpJ3H1jUa9DRjYz4v2xs6c3EgQWMf"
    ),
    Network.DEVNET: Pubkey.from_string("5CmWtUihvSrJpaUrpJ3H1jUa9DRjYz4v2xs6c3EgQWMf"),
    Network.MAINNET: Pubkey.from_string("zDEXqXEG7gAyxb1Kg9mK5fPnUdENCGKzWrM21RMdWRq"),
}

CHAINLINK_PID = Pubkey.from_string("HEvSKofvBgfaexv23kMabbYqxasxU3mQ4ibBMEmJWHny")

RENT_SYSVAR = RENT

MAX_ORDER_TAG_LENGTH = 4
DEFAULT_ORDER_TAG = "SDK"

# Remaining-account ceilings per transaction.
MAX_SETTLEMENT_ACCOUNTS = 20
MAX_SETTLE_ACCOUNTS = 5
MAX_FUNDING_ACCOUNTS = 20
MAX_REBALANCE_ACCOUNTS = 18
MAX_CANCELS_PER_TX = 3
CLEAN_MARKET_LIMIT = 9

NUM_STRIKES = 11
PRODUCTS_PER_EXPIRY = NUM_STRIKES * 2 + 1
TOTAL_EXPIRIES = 5
TOTAL_MARKETS = PRODUCTS_PER_EXPIRY * (TOTAL_EXPIRIES + 1)
PERP_INDEX = TOTAL_MARKETS - 1

PLATFORM_PRECISION = 6

MAX_SEED_LENGTH = 32
MAX_SEEDS = 16

# Order book account sizes, 12 bytes of padding included.
REQUEST_QUEUE_SPACE = 5120 + 12
EVENT_QUEUE_SPACE = 262144 + 12
ORDERBOOK_SIDE_SPACE = 65536 + 12
