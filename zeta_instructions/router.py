from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from .assets import Asset
from .constants import PERP_INDEX
from .errors import (
    MarketIndexOutOfRange,
    SchemaVersionMismatch,
    UnknownAsset,
    UnknownMarket,
)
from .snapshot import ExchangeSnapshot, Market, PricingState, SubExchange


class AssetRouter:
    """Asset and market lookups against a single snapshot.

    ``PERP_INDEX`` always addresses the asset's perpetual market; every other
    index addresses the dated market at that position.
    """

    def __init__(self, snapshot: ExchangeSnapshot) -> None:
        self.snapshot = snapshot

    def resolve(self, asset: Asset) -> SubExchange:
        try:
            return self.snapshot.sub_exchanges[asset]
        except (KeyError, ValueError):
            raise UnknownAsset(asset) from None

    def get_zeta_group_address(self, asset: Asset) -> Pubkey:
        return self.resolve(asset).zeta_group

    def get_market(self, asset: Asset, index: int) -> Market:
        sub = self.resolve(asset)
        if index == PERP_INDEX:
            return sub.perp_market
        if not 0 <= index < len(sub.markets):
            raise MarketIndexOutOfRange(asset, index, len(sub.markets))
        return sub.markets[index]

    def get_perp_market(self, asset: Asset) -> Market:
        return self.resolve(asset).perp_market

    def get_market_by_address(self, asset: Asset, address: Pubkey) -> Market:
        self.resolve(asset)
        found = self.snapshot.find_market(address)
        if found is None or found[0] != asset:
            raise UnknownMarket(asset, address)
        return found[1]

    def get_markets(self, asset: Asset) -> typing.Tuple[Market, ...]:
        sub = self.resolve(asset)
        return (*sub.markets, sub.perp_market)

    def get_greeks(self, asset: Asset) -> Pubkey:
        sub = self.resolve(asset)
        if sub.greeks is None:
            raise SchemaVersionMismatch(f"{asset} has no greeks account")
        return sub.greeks

    def get_perp_sync_queue(self, asset: Asset) -> Pubkey:
        sub = self.resolve(asset)
        if sub.perp_sync_queue is None:
            raise SchemaVersionMismatch(f"{asset} has no perp sync queue")
        return sub.perp_sync_queue

    def get_market_node(self, asset: Asset, index: int) -> Pubkey:
        sub = self.resolve(asset)
        if not 0 <= index < len(sub.node_keys):
            raise MarketIndexOutOfRange(asset, index, len(sub.node_keys))
        return sub.node_keys[index]

    def get_pricing(self) -> PricingState:
        pricing = self.snapshot.pricing
        if pricing is None:
            raise SchemaVersionMismatch(
                "Snapshot has no pricing account; use a zeta group instruction"
            )
        return pricing

    def get_pricing_oracles(self, asset: Asset) -> typing.Tuple[Pubkey, Pubkey]:
        """Return the (oracle, backup feed) pair held by the pricing account."""
        self.resolve(asset)
        pricing = self.get_pricing()
        return pricing.oracle_for(asset), pricing.oracle_backup_feed_for(asset)
