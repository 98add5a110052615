from __future__ import annotations
import typing
from solders.instruction import AccountMeta
from solders.pubkey import Pubkey
from .assets import Asset
from .codec import Side
from .constants import (
    PRODUCTS_PER_EXPIRY,
    TOKEN_PROGRAM_ID,
)
from .errors import InvalidInput
from .router import AssetRouter
from .snapshot import ExchangeSnapshot, Market, SchemaGeneration


def readonly_meta(pubkey: Pubkey) -> AccountMeta:
    return AccountMeta(pubkey=pubkey, is_signer=False, is_writable=False)


def writable_meta(pubkey: Pubkey) -> AccountMeta:
    return AccountMeta(pubkey=pubkey, is_signer=False, is_writable=True)


def optional_remaining(
    pubkey: typing.Optional[Pubkey],
) -> typing.Optional[list[AccountMeta]]:
    """Trailing whitelist account, present only when the caller has one."""
    if pubkey is None:
        return None
    return [readonly_meta(pubkey)]


def writable_metas(keys: typing.Iterable[Pubkey]) -> list[AccountMeta]:
    return [writable_meta(key) for key in keys]


class AccountListAssembler:
    """Builds the nested account groups shared by several instructions."""

    def __init__(self, router: AssetRouter) -> None:
        self.router = router

    @property
    def snapshot(self) -> ExchangeSnapshot:
        return self.router.snapshot

    def group_oracles(self, asset: Asset) -> dict[str, Pubkey]:
        sub = self.router.resolve(asset)
        return {
            "oracle": sub.oracle,
            "oracle_backup_feed": sub.oracle_backup_feed,
            "oracle_backup_program": self.snapshot.oracle_backup_program_id,
        }

    def pricing_oracles(self, asset: Asset) -> dict[str, Pubkey]:
        oracle, backup = self.router.get_pricing_oracles(asset)
        return {
            "oracle": oracle,
            "oracle_backup_feed": backup,
            "oracle_backup_program": self.snapshot.oracle_backup_program_id,
        }

    def market_accounts(self, market: Market, side: Side) -> dict[str, Pubkey]:
        """Order-book accounts for a place instruction.

        The payer is the quote vault for bids and the base vault for asks.
        """
        dex = market.dex_market
        if side == Side.BID:
            payer = market.quote_vault
        elif side == Side.ASK:
            payer = market.base_vault
        else:
            raise InvalidInput(f"Invalid side: {side!r}")
        return {
            "market": dex.address,
            "request_queue": dex.request_queue,
            "event_queue": dex.event_queue,
            "bids": dex.bids,
            "asks": dex.asks,
            "coin_vault": dex.base_vault,
            "pc_vault": dex.quote_vault,
            "order_payer_token_account": payer,
            "coin_wallet": market.base_vault,
            "pc_wallet": market.quote_vault,
        }

    @staticmethod
    def market_mint(market: Market, side: Side) -> Pubkey:
        dex = market.dex_market
        return dex.quote_mint if side == Side.BID else dex.base_mint

    def cancel_accounts(
        self,
        asset: Asset,
        market: Market,
        margin_account: Pubkey,
        open_orders: Pubkey,
        generation: SchemaGeneration = SchemaGeneration.ZETA_GROUP,
    ) -> dict[str, Pubkey]:
        if generation >= SchemaGeneration.PRICING:
            head = {"pricing": self.router.get_pricing().address}
        else:
            head = {"zeta_group": self.router.get_zeta_group_address(asset)}
        snapshot = self.snapshot
        return {
            **head,
            "state": snapshot.state,
            "margin_account": margin_account,
            "dex_program": snapshot.dex_program_id,
            "serum_authority": snapshot.serum_authority,
            "open_orders": open_orders,
            "market": market.address,
            "bids": market.dex_market.bids,
            "asks": market.dex_market.asks,
            "event_queue": market.dex_market.event_queue,
        }

    def settle_dex_accounts(
        self, market: Market, vault_owner: Pubkey
    ) -> dict[str, Pubkey]:
        snapshot = self.snapshot
        return {
            "state": snapshot.state,
            "market": market.address,
            "zeta_base_vault": market.base_vault,
            "zeta_quote_vault": market.quote_vault,
            "dex_base_vault": market.dex_market.base_vault,
            "dex_quote_vault": market.dex_market.quote_vault,
            "vault_owner": vault_owner,
            "mint_authority": snapshot.mint_authority,
            "serum_authority": snapshot.serum_authority,
            "dex_program": snapshot.dex_program_id,
            "token_program": TOKEN_PROGRAM_ID,
        }

    def perp_book(self, asset: Asset) -> dict[str, Pubkey]:
        perp = self.router.get_perp_market(asset)
        return {
            "perp_market": perp.address,
            "perp_bids": perp.dex_market.bids,
            "perp_asks": perp.dex_market.asks,
        }

    def expiry_node_metas(
        self, asset: Asset, expiry_index: int
    ) -> list[AccountMeta]:
        """Writable market nodes of one expiry, ``PRODUCTS_PER_EXPIRY`` wide."""
        sub = self.router.resolve(asset)
        head = expiry_index * PRODUCTS_PER_EXPIRY
        return writable_metas(sub.node_keys[head : head + PRODUCTS_PER_EXPIRY])
