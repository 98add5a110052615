"""Order entry, cancellation and liquidation builders.

Every function resolves its accounts from an ``ExchangeSnapshot`` and hands
them to the matching wire builder in ``zeta_instructions.instructions``.
Order arguments are validated before any account is resolved.
"""
from __future__ import annotations
import logging
import typing
from dataclasses import dataclass
from solders.instruction import Instruction
from solders.pubkey import Pubkey
from .. import instructions, pda
from ..assembler import AccountListAssembler, optional_remaining
from ..assets import Asset
from ..codec import OrderType, Side, to_program_order_type, to_program_side
from ..constants import (
    DEFAULT_ORDER_TAG,
    MAX_ORDER_TAG_LENGTH,
    RENT_SYSVAR,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from ..errors import InvalidInput
from ..models import OrderOptions
from ..router import AssetRouter
from ..snapshot import ExchangeSnapshot, SchemaGeneration
from .common import U16_MAX, U64_MAX, U128_MAX, absent_if_zero, check_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderParams:
    """Caller-facing order arguments.

    ``client_order_id`` and ``tif_offset`` are optional; ``0`` is accepted as
    a synonym for "not set" and is never written to the wire as a literal.
    """

    price: int
    size: int
    side: Side
    order_type: OrderType = OrderType.LIMIT
    client_order_id: typing.Optional[int] = None
    tag: str = DEFAULT_ORDER_TAG
    tif_offset: typing.Optional[int] = None

    @classmethod
    def from_options(
        cls, price: int, size: int, side: Side, options: OrderOptions
    ) -> "OrderParams":
        return cls(
            price=price,
            size=size,
            side=side,
            order_type=options.order_type,
            client_order_id=options.client_order_id,
            tag=options.tag,
            tif_offset=options.tif_offset,
        )


def validate_order(params: OrderParams) -> None:
    if len(params.tag) > MAX_ORDER_TAG_LENGTH:
        raise InvalidInput(f"Tag is too long! Max length = {MAX_ORDER_TAG_LENGTH}")
    check_range("price", params.price, U64_MAX)
    check_range("size", params.size, U64_MAX)
    if params.client_order_id is not None:
        check_range("client_order_id", params.client_order_id, U64_MAX)
    if params.tif_offset is not None:
        check_range("tif_offset", params.tif_offset, U16_MAX)
    if params.side not in (Side.BID, Side.ASK):
        raise InvalidInput(f"Invalid side: {params.side!r}")
    to_program_order_type(params.order_type)


def _order_args(params: OrderParams) -> dict[str, typing.Any]:
    return {
        "price": params.price,
        "size": params.size,
        "side": to_program_side(params.side),
        "order_type": to_program_order_type(params.order_type),
        "client_order_id": absent_if_zero(params.client_order_id),
        "tag": params.tag,
    }


def _dated_order_accounts(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    side: Side,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
) -> dict[str, typing.Any]:
    router = AssetRouter(snapshot)
    assembler = AccountListAssembler(router)
    sub = router.resolve(asset)
    market = router.get_market(asset, market_index)
    return {
        "state": snapshot.state,
        "zeta_group": sub.zeta_group,
        "margin_account": margin_account,
        "authority": authority,
        "dex_program": snapshot.dex_program_id,
        "token_program": TOKEN_PROGRAM_ID,
        "serum_authority": snapshot.serum_authority,
        "greeks": router.get_greeks(asset),
        "open_orders": open_orders,
        "rent": RENT_SYSVAR,
        "market_accounts": assembler.market_accounts(market, side),
        **assembler.group_oracles(asset),
        "market_node": router.get_market_node(asset, market_index),
        "market_mint": assembler.market_mint(market, side),
        "mint_authority": snapshot.mint_authority,
    }


def place_order_v3(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    params: OrderParams,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None,
) -> Instruction:
    validate_order(params)
    accounts = _dated_order_accounts(
        snapshot,
        asset,
        market_index,
        params.side,
        margin_account,
        authority,
        open_orders,
    )
    logger.debug("place_order_v3 %s[%d] %s", asset, market_index, params.side.name)
    return instructions.place_order_v3(
        _order_args(params),
        accounts,
        program_id=snapshot.program_id,
        remaining_accounts=optional_remaining(whitelist_trading_fees_account),
    )


def place_order_v4(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    params: OrderParams,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None,
) -> Instruction:
    validate_order(params)
    accounts = _dated_order_accounts(
        snapshot,
        asset,
        market_index,
        params.side,
        margin_account,
        authority,
        open_orders,
    )
    logger.debug("place_order_v4 %s[%d] %s", asset, market_index, params.side.name)
    return instructions.place_order_v4(
        {**_order_args(params), "tif_offset": absent_if_zero(params.tif_offset)},
        accounts,
        program_id=snapshot.program_id,
        remaining_accounts=optional_remaining(whitelist_trading_fees_account),
    )


def _perp_order_accounts(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    side: Side,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
) -> dict[str, typing.Any]:
    router = AssetRouter(snapshot)
    assembler = AccountListAssembler(router)
    sub = router.resolve(asset)
    market = router.get_perp_market(asset)
    return {
        "state": snapshot.state,
        "zeta_group": sub.zeta_group,
        "margin_account": margin_account,
        "authority": authority,
        "dex_program": snapshot.dex_program_id,
        "token_program": TOKEN_PROGRAM_ID,
        "serum_authority": snapshot.serum_authority,
        "greeks": router.get_greeks(asset),
        "open_orders": open_orders,
        "rent": RENT_SYSVAR,
        "market_accounts": assembler.market_accounts(market, side),
        **assembler.group_oracles(asset),
        "market_mint": assembler.market_mint(market, side),
        "mint_authority": snapshot.mint_authority,
        "perp_sync_queue": router.get_perp_sync_queue(asset),
    }


def place_perp_order(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    params: OrderParams,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None,
) -> Instruction:
    validate_order(params)
    accounts = _perp_order_accounts(
        snapshot, asset, params.side, margin_account, authority, open_orders
    )
    logger.debug("place_perp_order %s %s", asset, params.side.name)
    return instructions.place_perp_order(
        _order_args(params),
        accounts,
        program_id=snapshot.program_id,
        remaining_accounts=optional_remaining(whitelist_trading_fees_account),
    )


def place_perp_order_v2(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    params: OrderParams,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None,
) -> Instruction:
    validate_order(params)
    accounts = _perp_order_accounts(
        snapshot, asset, params.side, margin_account, authority, open_orders
    )
    logger.debug("place_perp_order_v2 %s %s", asset, params.side.name)
    return instructions.place_perp_order_v2(
        {**_order_args(params), "tif_offset": absent_if_zero(params.tif_offset)},
        accounts,
        program_id=snapshot.program_id,
        remaining_accounts=optional_remaining(whitelist_trading_fees_account),
    )


def place_perp_order_v3(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    params: OrderParams,
    margin_account: Pubkey,
    authority: Pubkey,
    open_orders: Pubkey,
    whitelist_trading_fees_account: typing.Optional[Pubkey] = None,
) -> Instruction:
    validate_order(params)
    router = AssetRouter(snapshot)
    assembler = AccountListAssembler(router)
    pricing = router.get_pricing()
    market = router.get_perp_market(asset)
    accounts = {
        "state": snapshot.state,
        "pricing": pricing.address,
        "margin_account": margin_account,
        "authority": authority,
        "dex_program": snapshot.dex_program_id,
        "token_program": TOKEN_PROGRAM_ID,
        "serum_authority": snapshot.serum_authority,
        "open_orders": open_orders,
        "rent": RENT_SYSVAR,
        "market_accounts": assembler.market_accounts(market, params.side),
        **assembler.group_oracles(asset),
        "market_mint": assembler.market_mint(market, params.side),
        "mint_authority": snapshot.mint_authority,
        "perp_sync_queue": router.get_perp_sync_queue(asset),
    }
    logger.debug("place_perp_order_v3 %s %s", asset, params.side.name)
    return instructions.place_perp_order_v3(
        {**_order_args(params), "tif_offset": absent_if_zero(params.tif_offset)},
        accounts,
        program_id=snapshot.program_id,
        remaining_accounts=optional_remaining(whitelist_trading_fees_account),
    )


def _check_order_id(order_id: int) -> None:
    check_range("order_id", order_id, U128_MAX)


def _cancel_accounts(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    margin_account: Pubkey,
    open_orders: Pubkey,
    generation: SchemaGeneration = SchemaGeneration.ZETA_GROUP,
) -> dict[str, Pubkey]:
    router = AssetRouter(snapshot)
    market = router.get_market(asset, market_index)
    return AccountListAssembler(router).cancel_accounts(
        asset, market, margin_account, open_orders, generation
    )


def cancel_order(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    authority: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
    order_id: int,
    side: Side,
) -> Instruction:
    _check_order_id(order_id)
    return instructions.cancel_order(
        {"side": to_program_side(side), "order_id": order_id},
        {
            "authority": authority,
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def cancel_order_v2(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    authority: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
    order_id: int,
    side: Side,
) -> Instruction:
    _check_order_id(order_id)
    return instructions.cancel_order_v2(
        {"side": to_program_side(side), "order_id": order_id},
        {
            "authority": authority,
            "cancel_accounts": _cancel_accounts(
                snapshot,
                asset,
                market_index,
                margin_account,
                open_orders,
                SchemaGeneration.PRICING,
            ),
        },
        program_id=snapshot.program_id,
    )


def cancel_order_no_error(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    authority: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
    order_id: int,
    side: Side,
) -> Instruction:
    _check_order_id(order_id)
    return instructions.cancel_order_no_error(
        {"side": to_program_side(side), "order_id": order_id},
        {
            "authority": authority,
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def cancel_all_market_orders(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    authority: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
) -> Instruction:
    return instructions.cancel_all_market_orders(
        {
            "authority": authority,
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def cancel_order_by_client_order_id(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    authority: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
    client_order_id: int,
) -> Instruction:
    check_range("client_order_id", client_order_id, U64_MAX)
    return instructions.cancel_order_by_client_order_id(
        {"client_order_id": client_order_id},
        {
            "authority": authority,
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def cancel_order_by_client_order_id_no_error(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    authority: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
    client_order_id: int,
) -> Instruction:
    check_range("client_order_id", client_order_id, U64_MAX)
    return instructions.cancel_order_by_client_order_id_no_error(
        {"client_order_id": client_order_id},
        {
            "authority": authority,
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def cancel_expired_order(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    margin_account: Pubkey,
    open_orders: Pubkey,
    order_id: int,
    side: Side,
) -> Instruction:
    _check_order_id(order_id)
    return instructions.cancel_expired_order(
        {"side": to_program_side(side), "order_id": order_id},
        {
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def cancel_order_halted(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    margin_account: Pubkey,
    open_orders: Pubkey,
    order_id: int,
    side: Side,
) -> Instruction:
    _check_order_id(order_id)
    return instructions.cancel_order_halted(
        {"side": to_program_side(side), "order_id": order_id},
        {
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def force_cancel_order_by_order_id(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    margin_account: Pubkey,
    open_orders: Pubkey,
    order_id: int,
    side: Side,
) -> Instruction:
    _check_order_id(order_id)
    router = AssetRouter(snapshot)
    return instructions.force_cancel_order_by_order_id(
        {"side": to_program_side(side), "order_id": order_id},
        {
            "greeks": router.get_greeks(asset),
            **AccountListAssembler(router).group_oracles(asset),
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def force_cancel_orders(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    margin_account: Pubkey,
    open_orders: Pubkey,
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.force_cancel_orders(
        {
            "greeks": router.get_greeks(asset),
            **AccountListAssembler(router).group_oracles(asset),
            "cancel_accounts": _cancel_accounts(
                snapshot, asset, market_index, margin_account, open_orders
            ),
        },
        program_id=snapshot.program_id,
    )


def prune_expired_tif_orders(
    snapshot: ExchangeSnapshot, asset: Asset, market_index: int
) -> Instruction:
    market = AssetRouter(snapshot).get_market(asset, market_index)
    return instructions.prune_expired_tif_orders(
        {
            "dex_program": snapshot.dex_program_id,
            "state": snapshot.state,
            "serum_authority": snapshot.serum_authority,
            "market": market.address,
            "bids": market.dex_market.bids,
            "asks": market.dex_market.asks,
            "event_queue": market.dex_market.event_queue,
        },
        program_id=snapshot.program_id,
    )


def initialize_open_orders(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market: Pubkey,
    user: Pubkey,
    authority: Pubkey,
    margin_account: Pubkey,
) -> typing.Tuple[Instruction, Pubkey]:
    """Return the instruction together with the new open orders address."""
    router = AssetRouter(snapshot)
    zeta_group = router.get_zeta_group_address(asset)
    open_orders, _ = pda.get_open_orders(
        snapshot.program_id, snapshot.dex_program_id, market, user
    )
    open_orders_map, _ = pda.get_open_orders_map(snapshot.program_id, open_orders)
    ix = instructions.initialize_open_orders(
        {
            "state": snapshot.state,
            "zeta_group": zeta_group,
            "dex_program": snapshot.dex_program_id,
            "system_program": SYSTEM_PROGRAM_ID,
            "open_orders": open_orders,
            "margin_account": margin_account,
            "authority": authority,
            "payer": authority,
            "market": market,
            "rent": RENT_SYSVAR,
            "serum_authority": snapshot.serum_authority,
            "open_orders_map": open_orders_map,
        },
        program_id=snapshot.program_id,
    )
    return ix, open_orders


def close_open_orders(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market: Pubkey,
    user: Pubkey,
    margin_account: Pubkey,
    open_orders: Pubkey,
) -> Instruction:
    zeta_group = AssetRouter(snapshot).get_zeta_group_address(asset)
    open_orders_map, map_nonce = pda.get_open_orders_map(
        snapshot.program_id, open_orders
    )
    return instructions.close_open_orders(
        {"map_nonce": map_nonce},
        {
            "state": snapshot.state,
            "zeta_group": zeta_group,
            "dex_program": snapshot.dex_program_id,
            "open_orders": open_orders,
            "margin_account": margin_account,
            "authority": user,
            "market": market,
            "serum_authority": snapshot.serum_authority,
            "open_orders_map": open_orders_map,
        },
        program_id=snapshot.program_id,
    )


def liquidate(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    liquidator: Pubkey,
    liquidator_margin_account: Pubkey,
    market: Pubkey,
    liquidated_margin_account: Pubkey,
    size: int,
) -> Instruction:
    check_range("size", size, U64_MAX)
    router = AssetRouter(snapshot)
    sub = router.resolve(asset)
    return instructions.liquidate(
        {"size": size},
        {
            "state": snapshot.state,
            "liquidator": liquidator,
            "liquidator_margin_account": liquidator_margin_account,
            "greeks": router.get_greeks(asset),
            **AccountListAssembler(router).group_oracles(asset),
            "market": market,
            "zeta_group": sub.zeta_group,
            "liquidated_margin_account": liquidated_margin_account,
        },
        program_id=snapshot.program_id,
    )


def liquidate_v2(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    liquidator: Pubkey,
    liquidator_margin_account: Pubkey,
    market: Pubkey,
    liquidated_margin_account: Pubkey,
    size: int,
) -> Instruction:
    check_range("size", size, U64_MAX)
    router = AssetRouter(snapshot)
    return instructions.liquidate_v2(
        {"size": size},
        {
            "state": snapshot.state,
            "liquidator": liquidator,
            "liquidator_margin_account": liquidator_margin_account,
            "pricing": router.get_pricing().address,
            **AccountListAssembler(router).pricing_oracles(asset),
            "market": market,
            "liquidated_margin_account": liquidated_margin_account,
        },
        program_id=snapshot.program_id,
    )
