"""Split bulk operations into transaction-sized instruction groups.

Each ``*_txs`` builder returns ``list[list[Instruction]]``: one inner list per
transaction, in input order. Remaining accounts are chunked with ``split`` so
that no transaction exceeds the per-instruction account ceiling.
"""
from __future__ import annotations
import logging
import typing
from solders.instruction import Instruction
from solders.pubkey import Pubkey
from .actions import maintenance, trading
from .assets import Asset
from .constants import (
    CLEAN_MARKET_LIMIT,
    MAX_CANCELS_PER_TX,
    MAX_FUNDING_ACCOUNTS,
    MAX_REBALANCE_ACCOUNTS,
    MAX_SETTLE_ACCOUNTS,
    MAX_SETTLEMENT_ACCOUNTS,
)
from .errors import InvalidInput
from .models import CancelArgs
from .router import AssetRouter
from .snapshot import ExchangeSnapshot, Market

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")


def split(items: typing.Sequence[T], limit: int) -> list[list[T]]:
    """Cut ``items`` into consecutive chunks of ``limit``; the last may be short."""
    if limit <= 0:
        raise InvalidInput(f"Batch limit must be positive, got {limit}")
    chunks = [list(items[i : i + limit]) for i in range(0, len(items), limit)]
    logger.debug(
        "split %d items into %d chunks of <= %d", len(items), len(chunks), limit
    )
    return chunks


def settle_positions_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    expiry_ts: int,
    margin_accounts: typing.Sequence[Pubkey],
) -> list[list[Instruction]]:
    return [
        [maintenance.settle_positions(snapshot, asset, expiry_ts, chunk)]
        for chunk in split(margin_accounts, MAX_SETTLEMENT_ACCOUNTS)
    ]


def settle_spread_positions_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    expiry_ts: int,
    spread_accounts: typing.Sequence[Pubkey],
) -> list[list[Instruction]]:
    return [
        [maintenance.settle_spread_positions(snapshot, asset, expiry_ts, chunk)]
        for chunk in split(spread_accounts, MAX_SETTLEMENT_ACCOUNTS)
    ]


def settle_positions_halted_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_accounts: typing.Sequence[Pubkey],
    admin: Pubkey,
) -> list[list[Instruction]]:
    return [
        [maintenance.settle_positions_halted(snapshot, asset, chunk, admin)]
        for chunk in split(margin_accounts, MAX_SETTLEMENT_ACCOUNTS)
    ]


def settle_positions_halted_v2_txs(
    snapshot: ExchangeSnapshot,
    margin_accounts: typing.Sequence[Pubkey],
    admin: Pubkey,
) -> list[list[Instruction]]:
    return [
        [maintenance.settle_positions_halted_v2(snapshot, chunk, admin)]
        for chunk in split(margin_accounts, MAX_SETTLEMENT_ACCOUNTS)
    ]


def settle_spread_positions_halted_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    spread_accounts: typing.Sequence[Pubkey],
    admin: Pubkey,
) -> list[list[Instruction]]:
    return [
        [maintenance.settle_spread_positions_halted(snapshot, asset, chunk, admin)]
        for chunk in split(spread_accounts, MAX_SETTLEMENT_ACCOUNTS)
    ]


def settle_dex_funds_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market: Pubkey,
    open_orders: typing.Sequence[Pubkey],
    vault_owner: typing.Optional[Pubkey] = None,
) -> list[list[Instruction]]:
    if vault_owner is None:
        resolved = AssetRouter(snapshot).get_market_by_address(asset, market)
        vault_owner = maintenance.get_vault_owner(snapshot, resolved)
    return [
        [maintenance.settle_dex_funds(snapshot, asset, market, chunk, vault_owner)]
        for chunk in split(open_orders, MAX_SETTLE_ACCOUNTS)
    ]


def apply_perp_funding_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_accounts: typing.Sequence[Pubkey],
) -> list[list[Instruction]]:
    return [
        [maintenance.apply_perp_funding(snapshot, asset, chunk)]
        for chunk in split(margin_accounts, MAX_FUNDING_ACCOUNTS)
    ]


def rebalance_insurance_vault_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_accounts: typing.Sequence[Pubkey],
) -> list[list[Instruction]]:
    return [
        [maintenance.rebalance_insurance_vault(snapshot, asset, chunk)]
        for chunk in split(margin_accounts, MAX_REBALANCE_ACCOUNTS)
    ]


def rebalance_insurance_vault_v2_txs(
    snapshot: ExchangeSnapshot, margin_accounts: typing.Sequence[Pubkey]
) -> list[list[Instruction]]:
    return [
        [maintenance.rebalance_insurance_vault_v2(snapshot, chunk)]
        for chunk in split(margin_accounts, MAX_REBALANCE_ACCOUNTS)
    ]


def clean_zeta_markets_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    markets: typing.Sequence[Market],
    halted: bool = False,
) -> list[list[Instruction]]:
    """Clean expired markets, ``CLEAN_MARKET_LIMIT`` markets per transaction."""
    build = (
        maintenance.clean_zeta_markets_halted
        if halted
        else maintenance.clean_zeta_markets
    )
    return [
        [build(snapshot, asset, chunk)]
        for chunk in split(markets, CLEAN_MARKET_LIMIT)
    ]


def cancel_multiple_orders_txs(
    snapshot: ExchangeSnapshot,
    cancels: typing.Sequence[CancelArgs],
    authority: Pubkey,
    margin_accounts: typing.Mapping[Asset, Pubkey],
    open_orders: typing.Mapping[Pubkey, Pubkey],
    no_error: bool = False,
) -> list[list[Instruction]]:
    """Cancel many orders, ``MAX_CANCELS_PER_TX`` per transaction.

    ``margin_accounts`` is keyed by asset and ``open_orders`` by market
    address. Every cancel is resolved before any instruction is built.
    """
    router = AssetRouter(snapshot)
    build = trading.cancel_order_no_error if no_error else trading.cancel_order
    resolved: list[typing.Tuple[CancelArgs, Market]] = []
    for cancel in cancels:
        market = router.get_market_by_address(cancel.asset, cancel.market)
        if cancel.asset not in margin_accounts:
            raise InvalidInput(f"No margin account supplied for {cancel.asset}")
        if cancel.market not in open_orders:
            raise InvalidInput(f"No open orders account supplied for {cancel.market}")
        resolved.append((cancel, market))
    ixs = [
        build(
            snapshot,
            cancel.asset,
            market.index,
            authority,
            margin_accounts[cancel.asset],
            open_orders[cancel.market],
            cancel.order_id,
            cancel.cancel_side,
        )
        for cancel, market in resolved
    ]
    return split(ixs, MAX_CANCELS_PER_TX)
