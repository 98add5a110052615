from . import actions, batch, instructions, pda, schemas, types
from .assembler import AccountListAssembler
from .assets import Asset, all_assets, asset_to_index, index_to_asset
from .codec import (
    Kind,
    MovementType,
    OrderType,
    Side,
    TreasuryMovementType,
    TriggerDirection,
)
from .config import NetworkConfig, load_network_config
from .constants import Network
from .errors import (
    InvalidInput,
    InvalidSeed,
    InvalidVariant,
    MarketIndexOutOfRange,
    SchemaVersionMismatch,
    UnknownAsset,
    UnknownMarket,
    ZetaClientError,
)
from .models import CancelArgs, Order, OrderOptions, Position
from .router import AssetRouter
from .snapshot import (
    DexMarket,
    ExchangeSnapshot,
    Market,
    PricingState,
    SchemaGeneration,
    SubExchange,
)
from .actions import OrderParams
