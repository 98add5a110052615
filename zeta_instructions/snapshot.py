"""Immutable view of the exchange configuration consumed by the builders.

A snapshot is produced once by whatever loads on-chain state and is then
shared read-only by every builder call. Nothing here performs I/O; the
``derive`` constructors only fill in the fields that are program-derived.
"""
from __future__ import annotations
import typing
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from solders.pubkey import Pubkey
from . import pda
from .assets import Asset, asset_to_index
from .codec import Kind
from .config import NetworkConfig


class SchemaGeneration(IntEnum):
    """Account layout generation of the deployed program.

    ``ZETA_GROUP`` deployments key pricing off a per-asset zeta group and
    greeks account; ``PRICING`` deployments add the unified pricing account.
    """

    ZETA_GROUP = 1
    PRICING = 2


@dataclass(frozen=True)
class DexMarket:
    address: Pubkey
    request_queue: Pubkey
    event_queue: Pubkey
    bids: Pubkey
    asks: Pubkey
    base_vault: Pubkey
    quote_vault: Pubkey
    base_mint: Pubkey
    quote_mint: Pubkey


@dataclass(frozen=True)
class Market:
    index: int
    address: Pubkey
    kind: Kind
    base_vault: Pubkey
    quote_vault: Pubkey
    dex_market: DexMarket

    @classmethod
    def derive(
        cls,
        program_id: Pubkey,
        zeta_group: Pubkey,
        seed_index: int,
        index: int,
        kind: Kind,
        request_queue: Pubkey,
        event_queue: Pubkey,
        bids: Pubkey,
        asks: Pubkey,
    ) -> "Market":
        """Rebuild a market from its seed index and order-book accounts.

        The queue and book accounts are plain keypair accounts created by the
        admin, so they cannot be derived and must be supplied.
        """
        address, _ = pda.get_market_uninitialized(program_id, zeta_group, seed_index)
        base_mint, _ = pda.get_base_mint(program_id, address)
        quote_mint, _ = pda.get_quote_mint(program_id, address)
        dex_market = DexMarket(
            address=address,
            request_queue=request_queue,
            event_queue=event_queue,
            bids=bids,
            asks=asks,
            base_vault=pda.get_serum_vault(program_id, base_mint)[0],
            quote_vault=pda.get_serum_vault(program_id, quote_mint)[0],
            base_mint=base_mint,
            quote_mint=quote_mint,
        )
        return cls(
            index=index,
            address=address,
            kind=kind,
            base_vault=pda.get_zeta_vault(program_id, base_mint)[0],
            quote_vault=pda.get_zeta_vault(program_id, quote_mint)[0],
            dex_market=dex_market,
        )


@dataclass(frozen=True)
class SubExchange:
    asset: Asset
    zeta_group: Pubkey
    oracle: Pubkey
    oracle_backup_feed: Pubkey
    underlying_mint: Pubkey
    markets: typing.Tuple[Market, ...]
    perp_market: Market
    greeks: typing.Optional[Pubkey] = None
    perp_sync_queue: typing.Optional[Pubkey] = None
    node_keys: typing.Tuple[Pubkey, ...] = ()

    @classmethod
    def derive(
        cls,
        program_id: Pubkey,
        asset: Asset,
        underlying_mint: Pubkey,
        oracle: Pubkey,
        oracle_backup_feed: Pubkey,
        markets: typing.Sequence[Market],
        perp_market: Market,
    ) -> "SubExchange":
        zeta_group, _ = pda.get_zeta_group(program_id, underlying_mint)
        return cls(
            asset=asset,
            zeta_group=zeta_group,
            oracle=oracle,
            oracle_backup_feed=oracle_backup_feed,
            underlying_mint=underlying_mint,
            markets=tuple(markets),
            perp_market=perp_market,
            greeks=pda.get_greeks(program_id, zeta_group)[0],
            perp_sync_queue=pda.get_perp_sync_queue(program_id, zeta_group)[0],
            node_keys=tuple(
                pda.get_market_node(program_id, zeta_group, market.index)[0]
                for market in markets
            ),
        )


@dataclass(frozen=True)
class PricingState:
    address: Pubkey
    oracles: typing.Tuple[Pubkey, ...]
    oracle_backup_feeds: typing.Tuple[Pubkey, ...]

    def oracle_for(self, asset: Asset) -> Pubkey:
        return self.oracles[asset_to_index(asset)]

    def oracle_backup_feed_for(self, asset: Asset) -> Pubkey:
        return self.oracle_backup_feeds[asset_to_index(asset)]

    @classmethod
    def derive(
        cls, program_id: Pubkey, sub_exchanges: typing.Iterable[SubExchange]
    ) -> "PricingState":
        """Lay the per-asset oracles out by asset index."""
        by_index = {asset_to_index(sub.asset): sub for sub in sub_exchanges}
        width = max(by_index) + 1 if by_index else 0
        default = Pubkey.default()
        return cls(
            address=pda.get_pricing(program_id)[0],
            oracles=tuple(
                by_index[i].oracle if i in by_index else default for i in range(width)
            ),
            oracle_backup_feeds=tuple(
                by_index[i].oracle_backup_feed if i in by_index else default
                for i in range(width)
            ),
        )


@dataclass(frozen=True)
class ExchangeSnapshot:
    config: NetworkConfig
    state: Pubkey
    serum_authority: Pubkey
    mint_authority: Pubkey
    usdc_mint: Pubkey
    combined_vault: Pubkey
    combined_insurance_vault: Pubkey
    combined_socialized_loss_account: Pubkey
    treasury_wallet: Pubkey
    referrals_rewards_wallet: Pubkey
    admin: Pubkey
    sub_exchanges: typing.Mapping[Asset, SubExchange]
    pricing: typing.Optional[PricingState] = None
    generation: SchemaGeneration = SchemaGeneration.ZETA_GROUP
    num_underlyings: int = 0
    num_flex_underlyings: int = 0
    secondary_admin: typing.Optional[Pubkey] = None
    referrals_admin: typing.Optional[Pubkey] = None
    _market_index: typing.Mapping[Pubkey, typing.Tuple[Asset, Market]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to freeze the mapping and build the index
        object.__setattr__(
            self, "sub_exchanges", MappingProxyType(dict(self.sub_exchanges))
        )
        index: dict[Pubkey, typing.Tuple[Asset, Market]] = {}
        for asset, sub in self.sub_exchanges.items():
            for market in (*sub.markets, sub.perp_market):
                index[market.address] = (asset, market)
        object.__setattr__(self, "_market_index", MappingProxyType(index))

    @property
    def program_id(self) -> Pubkey:
        return self.config.program_id

    @property
    def dex_program_id(self) -> Pubkey:
        return self.config.dex_program_id

    @property
    def oracle_backup_program_id(self) -> Pubkey:
        return self.config.oracle_backup_program_id

    def find_market(
        self, address: Pubkey
    ) -> typing.Optional[typing.Tuple[Asset, Market]]:
        return self._market_index.get(address)

    @property
    def assets(self) -> list[Asset]:
        return sorted(self.sub_exchanges, key=asset_to_index)

    @classmethod
    def derive(
        cls,
        config: NetworkConfig,
        usdc_mint: Pubkey,
        admin: Pubkey,
        sub_exchanges: typing.Iterable[SubExchange],
        generation: SchemaGeneration = SchemaGeneration.ZETA_GROUP,
        secondary_admin: typing.Optional[Pubkey] = None,
        referrals_admin: typing.Optional[Pubkey] = None,
        num_underlyings: typing.Optional[int] = None,
        num_flex_underlyings: int = 0,
    ) -> "ExchangeSnapshot":
        program_id = config.program_id
        subs = {sub.asset: sub for sub in sub_exchanges}
        pricing = None
        if generation >= SchemaGeneration.PRICING:
            pricing = PricingState.derive(program_id, subs.values())
        return cls(
            config=config,
            state=pda.get_state(program_id)[0],
            serum_authority=pda.get_serum_authority(program_id)[0],
            mint_authority=pda.get_mint_authority(program_id)[0],
            usdc_mint=usdc_mint,
            combined_vault=pda.get_combined_vault(program_id)[0],
            combined_insurance_vault=(
                pda.get_zeta_combined_insurance_vault(program_id)[0]
            ),
            combined_socialized_loss_account=(
                pda.get_combined_socialized_loss_account(program_id)[0]
            ),
            treasury_wallet=pda.get_zeta_treasury_wallet(program_id, usdc_mint)[0],
            referrals_rewards_wallet=(
                pda.get_zeta_referrals_rewards_wallet(program_id, usdc_mint)[0]
            ),
            admin=admin,
            sub_exchanges=subs,
            pricing=pricing,
            generation=generation,
            num_underlyings=len(subs) if num_underlyings is None else num_underlyings,
            num_flex_underlyings=num_flex_underlyings,
            secondary_admin=secondary_admin,
            referrals_admin=referrals_admin,
        )
