"""Crank, pricing, settlement and cleanup builders.

The ``margin_accounts`` / ``spread_accounts`` sequences taken here are sent as
writable remaining accounts. Callers that have more accounts than fit in one
transaction should use the chunked builders in ``zeta_instructions.batch``.
"""
from __future__ import annotations
import logging
import typing
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from .. import instructions, pda
from ..assembler import AccountListAssembler, readonly_meta, writable_metas
from ..assets import Asset, to_program_asset
from ..constants import TOKEN_PROGRAM_ID
from ..router import AssetRouter
from ..snapshot import ExchangeSnapshot, Market
from .common import U8_MAX, U64_MAX, check_range

logger = logging.getLogger(__name__)


def crank_event_queue(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    open_orders: typing.Sequence[Pubkey],
) -> Instruction:
    """Consume fills for ``open_orders`` from the market's event queue."""
    router = AssetRouter(snapshot)
    market = router.get_market(asset, market_index)
    return instructions.crank_event_queue(
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "market": market.address,
            "event_queue": market.dex_market.event_queue,
            "dex_program": snapshot.dex_program_id,
            "serum_authority": snapshot.serum_authority,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(open_orders),
    )


def _check_expiry_index(expiry_index: typing.Optional[int]) -> None:
    if expiry_index is not None:
        check_range("expiry_index", expiry_index, U8_MAX)


def update_pricing(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    expiry_index: typing.Optional[int] = None,
) -> Instruction:
    _check_expiry_index(expiry_index)
    router = AssetRouter(snapshot)
    assembler = AccountListAssembler(router)
    logger.debug("update_pricing %s expiry=%s", asset, expiry_index)
    return instructions.update_pricing(
        {"expiry_index": expiry_index},
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
            **assembler.group_oracles(asset),
            **assembler.perp_book(asset),
        },
        program_id=snapshot.program_id,
    )


def update_pricing_v2(snapshot: ExchangeSnapshot, asset: Asset) -> Instruction:
    router = AssetRouter(snapshot)
    assembler = AccountListAssembler(router)
    logger.debug("update_pricing_v2 %s", asset)
    return instructions.update_pricing_v2(
        {"asset": to_program_asset(asset)},
        {
            "state": snapshot.state,
            "pricing": router.get_pricing().address,
            **assembler.pricing_oracles(asset),
            **assembler.perp_book(asset),
        },
        program_id=snapshot.program_id,
    )


def update_pricing_halted(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    admin: Pubkey,
    expiry_index: typing.Optional[int] = None,
) -> Instruction:
    _check_expiry_index(expiry_index)
    router = AssetRouter(snapshot)
    return instructions.update_pricing_halted(
        {"expiry_index": expiry_index},
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
            "admin": admin,
            **AccountListAssembler(router).perp_book(asset),
        },
        program_id=snapshot.program_id,
    )


def apply_perp_funding(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_accounts: typing.Sequence[Pubkey],
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.apply_perp_funding(
        {
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(margin_accounts),
    )


def retreat_market_nodes(
    snapshot: ExchangeSnapshot, asset: Asset, expiry_index: int
) -> Instruction:
    check_range("expiry_index", expiry_index, U8_MAX)
    router = AssetRouter(snapshot)
    assembler = AccountListAssembler(router)
    return instructions.retreat_market_nodes(
        {"expiry_index": expiry_index},
        {
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
            **assembler.group_oracles(asset),
        },
        program_id=snapshot.program_id,
        remaining_accounts=assembler.expiry_node_metas(asset, expiry_index),
    )


def clean_market_nodes(
    snapshot: ExchangeSnapshot, asset: Asset, expiry_index: int
) -> Instruction:
    check_range("expiry_index", expiry_index, U8_MAX)
    router = AssetRouter(snapshot)
    return instructions.clean_market_nodes(
        {"expiry_index": expiry_index},
        {
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
        },
        program_id=snapshot.program_id,
        remaining_accounts=AccountListAssembler(router).expiry_node_metas(
            asset, expiry_index
        ),
    )


def get_settlement_account(
    snapshot: ExchangeSnapshot, asset: Asset, expiry_ts: int
) -> typing.Tuple[Pubkey, int]:
    check_range("expiry_ts", expiry_ts, U64_MAX)
    sub = AssetRouter(snapshot).resolve(asset)
    return pda.get_settlement(snapshot.program_id, sub.underlying_mint, expiry_ts)


def settle_positions(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    expiry_ts: int,
    margin_accounts: typing.Sequence[Pubkey],
) -> Instruction:
    settlement_account, nonce = get_settlement_account(snapshot, asset, expiry_ts)
    return instructions.settle_positions(
        {"expiry_ts": expiry_ts, "settlement_nonce": nonce},
        {
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "settlement_account": settlement_account,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(margin_accounts),
    )


def settle_spread_positions(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    expiry_ts: int,
    spread_accounts: typing.Sequence[Pubkey],
) -> Instruction:
    settlement_account, nonce = get_settlement_account(snapshot, asset, expiry_ts)
    return instructions.settle_spread_positions(
        {"expiry_ts": expiry_ts, "settlement_nonce": nonce},
        {
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "settlement_account": settlement_account,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(spread_accounts),
    )


def settle_positions_halted(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_accounts: typing.Sequence[Pubkey],
    admin: Pubkey,
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.settle_positions_halted(
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
            "admin": admin,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(margin_accounts),
    )


def settle_positions_halted_v2(
    snapshot: ExchangeSnapshot,
    margin_accounts: typing.Sequence[Pubkey],
    admin: Pubkey,
) -> Instruction:
    return instructions.settle_positions_halted_v2(
        {
            "state": snapshot.state,
            "pricing": AssetRouter(snapshot).get_pricing().address,
            "admin": admin,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(margin_accounts),
    )


def settle_spread_positions_halted(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    spread_accounts: typing.Sequence[Pubkey],
    admin: Pubkey,
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.settle_spread_positions_halted(
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
            "admin": admin,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(spread_accounts),
    )


def market_cleaning_metas(markets: typing.Iterable[Market]) -> list[AccountMeta]:
    """Flatten markets into (market, bids, asks) read-only triples."""
    metas: list[AccountMeta] = []
    for market in markets:
        metas.append(readonly_meta(market.address))
        metas.append(readonly_meta(market.dex_market.bids))
        metas.append(readonly_meta(market.dex_market.asks))
    return metas


def clean_zeta_markets(
    snapshot: ExchangeSnapshot, asset: Asset, markets: typing.Sequence[Market]
) -> Instruction:
    return instructions.clean_zeta_markets(
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
        },
        program_id=snapshot.program_id,
        remaining_accounts=market_cleaning_metas(markets),
    )


def clean_zeta_markets_halted(
    snapshot: ExchangeSnapshot, asset: Asset, markets: typing.Sequence[Market]
) -> Instruction:
    return instructions.clean_zeta_markets_halted(
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
        },
        program_id=snapshot.program_id,
        remaining_accounts=market_cleaning_metas(markets),
    )


def get_vault_owner(snapshot: ExchangeSnapshot, market: Market) -> Pubkey:
    owner, _ = pda.get_serum_vault_owner_and_nonce(
        market.address, snapshot.dex_program_id
    )
    return owner


def settle_dex_funds(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market: Pubkey,
    open_orders: typing.Sequence[Pubkey],
    vault_owner: typing.Optional[Pubkey] = None,
) -> Instruction:
    """Settle order-book balances of ``open_orders`` back into zeta vaults.

    ``vault_owner`` is searched for when not supplied.
    """
    router = AssetRouter(snapshot)
    resolved = router.get_market_by_address(asset, market)
    if vault_owner is None:
        vault_owner = get_vault_owner(snapshot, resolved)
    return instructions.settle_dex_funds(
        AccountListAssembler(router).settle_dex_accounts(resolved, vault_owner),
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(open_orders),
    )


def burn_vault_tokens(
    snapshot: ExchangeSnapshot, asset: Asset, market: Pubkey
) -> list[Instruction]:
    """Burn both zeta vaults of a market, quote vault first."""
    resolved = AssetRouter(snapshot).get_market_by_address(asset, market)
    dex = resolved.dex_market
    return [
        instructions.burn_vault_tokens(
            {
                "state": snapshot.state,
                "mint": mint,
                "vault": vault,
                "serum_authority": snapshot.serum_authority,
                "token_program": TOKEN_PROGRAM_ID,
            },
            program_id=snapshot.program_id,
        )
        for mint, vault in (
            (dex.quote_mint, resolved.quote_vault),
            (dex.base_mint, resolved.base_vault),
        )
    ]


def rebalance_insurance_vault(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_accounts: typing.Sequence[Pubkey],
) -> Instruction:
    return instructions.rebalance_insurance_vault(
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "zeta_vault": snapshot.combined_vault,
            "insurance_vault": snapshot.combined_insurance_vault,
            "treasury_wallet": snapshot.treasury_wallet,
            "socialized_loss_account": snapshot.combined_socialized_loss_account,
            "token_program": TOKEN_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(margin_accounts),
    )


def rebalance_insurance_vault_v2(
    snapshot: ExchangeSnapshot, margin_accounts: typing.Sequence[Pubkey]
) -> Instruction:
    return instructions.rebalance_insurance_vault_v2(
        {
            "state": snapshot.state,
            "pricing": AssetRouter(snapshot).get_pricing().address,
            "zeta_vault": snapshot.combined_vault,
            "insurance_vault": snapshot.combined_insurance_vault,
            "treasury_wallet": snapshot.treasury_wallet,
            "socialized_loss_account": snapshot.combined_socialized_loss_account,
            "token_program": TOKEN_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(margin_accounts),
    )
