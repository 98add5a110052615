from __future__ import annotations
import typing
from dataclasses import dataclass
from solders.pubkey import Pubkey
from .assets import Asset
from .codec import OrderType, Side, TriggerDirection
from .constants import DEFAULT_ORDER_TAG


@dataclass(frozen=True)
class Order:
    market_index: int
    market: Pubkey
    price: int
    size: int
    side: Side
    # Opaque identifier assigned by the order book.
    order_id: int
    # Open orders account that owns the order.
    owner: Pubkey
    client_order_id: int
    tif_offset: int
    asset: Asset


@dataclass(frozen=True)
class Position:
    market_index: int
    market: Pubkey
    size: int
    cost_of_trades: int
    asset: Asset


@dataclass(frozen=True)
class CancelArgs:
    asset: Asset
    market: Pubkey
    order_id: int
    cancel_side: Side


@dataclass(frozen=True)
class OrderOptions:
    order_type: OrderType = OrderType.LIMIT
    client_order_id: typing.Optional[int] = None
    tag: str = DEFAULT_ORDER_TAG
    tif_offset: typing.Optional[int] = None


@dataclass(frozen=True)
class InitializeZetaGroupPricingArgs:
    interest_rate: int
    volatility: typing.List[int]
    option_trade_normalizer: int
    future_trade_normalizer: int
    max_volatility_retreat: int
    max_interest_retreat: int
    min_delta: int
    max_delta: int
    min_interest_rate: int
    max_interest_rate: int
    min_volatility: int
    max_volatility: int


def default_order_options() -> OrderOptions:
    return OrderOptions()


def get_default_trigger_direction(side: Side) -> TriggerDirection:
    if side == Side.BID:
        return TriggerDirection.LESSTHANOREQUAL
    return TriggerDirection.GREATERTHANOREQUAL


def order_equals(a: Order, b: Order, cmp_order_id: bool = False) -> bool:
    """Compare two orders, ignoring the order id unless ``cmp_order_id``."""
    return (
        a.market_index == b.market_index
        and a.market == b.market
        and a.price == b.price
        and a.size == b.size
        and a.side == b.side
        and a.tif_offset == b.tif_offset
        and a.asset == b.asset
        and (not cmp_order_id or a.order_id == b.order_id)
    )


def position_equals(a: Position, b: Position) -> bool:
    return (
        a.market_index == b.market_index
        and a.market == b.market
        and a.size == b.size
        and a.cost_of_trades == b.cost_of_trades
    )
