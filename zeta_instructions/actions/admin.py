"""Administrative builders: exchange bootstrap, parameter updates and halts.

Every function that the program requires an admin signature for takes an
optional ``admin``; when omitted the snapshot's admin is used.
"""
from __future__ import annotations
import logging
import typing
from dataclasses import asdict
from solders.instruction import Instruction
from solders.pubkey import Pubkey
from solders.system_program import CreateAccountParams, create_account
from .. import instructions, pda, types
from ..assembler import AccountListAssembler
from ..assets import Asset, to_program_asset
from ..codec import TreasuryMovementType, to_program_treasury_movement_type
from ..constants import (
    EVENT_QUEUE_SPACE,
    ORDERBOOK_SIDE_SPACE,
    RENT_SYSVAR,
    REQUEST_QUEUE_SPACE,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from ..errors import InvalidInput
from ..models import InitializeZetaGroupPricingArgs
from ..router import AssetRouter
from ..snapshot import ExchangeSnapshot
from .common import U16_MAX, U64_MAX, check_range

logger = logging.getLogger(__name__)

VOLATILITY_NODES = 5


def _admin(snapshot: ExchangeSnapshot, admin: typing.Optional[Pubkey]) -> Pubkey:
    return snapshot.admin if admin is None else admin


def initialize_combined_insurance_vault(
    snapshot: ExchangeSnapshot, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    vault, nonce = pda.get_zeta_combined_insurance_vault(snapshot.program_id)
    return instructions.initialize_combined_insurance_vault(
        {"nonce": nonce},
        {
            "state": snapshot.state,
            "insurance_vault": vault,
            "token_program": TOKEN_PROGRAM_ID,
            "usdc_mint": snapshot.usdc_mint,
            "admin": _admin(snapshot, admin),
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def initialize_combined_vault(
    snapshot: ExchangeSnapshot, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    vault, nonce = pda.get_combined_vault(snapshot.program_id)
    return instructions.initialize_combined_vault(
        {"nonce": nonce},
        {
            "state": snapshot.state,
            "vault": vault,
            "token_program": TOKEN_PROGRAM_ID,
            "usdc_mint": snapshot.usdc_mint,
            "admin": _admin(snapshot, admin),
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def initialize_combined_socialized_loss_account(
    snapshot: ExchangeSnapshot, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    account, nonce = pda.get_combined_socialized_loss_account(snapshot.program_id)
    return instructions.initialize_combined_socialized_loss_account(
        {"nonce": nonce},
        {
            "state": snapshot.state,
            "socialized_loss_account": account,
            "token_program": TOKEN_PROGRAM_ID,
            "usdc_mint": snapshot.usdc_mint,
            "admin": _admin(snapshot, admin),
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def initialize_zeta_state(
    snapshot: ExchangeSnapshot,
    params: types.StateParams,
    secondary_admin: Pubkey,
    referrals_admin: Pubkey,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    """Create the state account; the three authority nonces are derived here."""
    program_id = snapshot.program_id
    state, state_nonce = pda.get_state(program_id)
    serum_authority, serum_nonce = pda.get_serum_authority(program_id)
    mint_authority, mint_auth_nonce = pda.get_mint_authority(program_id)
    args = types.InitializeStateArgs(
        state_nonce=state_nonce,
        serum_nonce=serum_nonce,
        mint_auth_nonce=mint_auth_nonce,
        **asdict(params),
    )
    return instructions.initialize_zeta_state(
        {"args": args},
        {
            "state": state,
            "mint_authority": mint_authority,
            "serum_authority": serum_authority,
            "treasury_wallet": snapshot.treasury_wallet,
            "referrals_admin": referrals_admin,
            "referrals_rewards_wallet": snapshot.referrals_rewards_wallet,
            "rent": RENT_SYSVAR,
            "system_program": SYSTEM_PROGRAM_ID,
            "token_program": TOKEN_PROGRAM_ID,
            "usdc_mint": snapshot.usdc_mint,
            "admin": _admin(snapshot, admin),
            "secondary_admin": secondary_admin,
        },
        program_id=program_id,
    )


def initialize_zeta_treasury_wallet(
    snapshot: ExchangeSnapshot, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    return instructions.initialize_zeta_treasury_wallet(
        {
            "state": snapshot.state,
            "treasury_wallet": snapshot.treasury_wallet,
            "rent": RENT_SYSVAR,
            "system_program": SYSTEM_PROGRAM_ID,
            "token_program": TOKEN_PROGRAM_ID,
            "usdc_mint": snapshot.usdc_mint,
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def initialize_zeta_referrals_rewards_wallet(
    snapshot: ExchangeSnapshot, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    return instructions.initialize_zeta_referrals_rewards_wallet(
        {
            "state": snapshot.state,
            "referrals_rewards_wallet": snapshot.referrals_rewards_wallet,
            "rent": RENT_SYSVAR,
            "system_program": SYSTEM_PROGRAM_ID,
            "token_program": TOKEN_PROGRAM_ID,
            "usdc_mint": snapshot.usdc_mint,
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def initialize_zeta_pricing(
    snapshot: ExchangeSnapshot,
    perp_args: types.UpdatePerpParametersArgs,
    margin_args: types.UpdateMarginParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    pricing, _ = pda.get_pricing(snapshot.program_id)
    args = types.InitializeZetaPricingArgs(
        min_funding_rate_percent=perp_args.min_funding_rate_percent,
        max_funding_rate_percent=perp_args.max_funding_rate_percent,
        perp_impact_cash_delta=perp_args.perp_impact_cash_delta,
        margin_initial=margin_args.future_margin_initial,
        margin_maintenance=margin_args.future_margin_maintenance,
    )
    return instructions.initialize_zeta_pricing(
        {"args": args},
        {
            "state": snapshot.state,
            "pricing": pricing,
            "admin": _admin(snapshot, admin),
            "system_program": SYSTEM_PROGRAM_ID,
            "token_program": TOKEN_PROGRAM_ID,
            "rent": RENT_SYSVAR,
        },
        program_id=snapshot.program_id,
    )


def initialize_zeta_group(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    underlying_mint: Pubkey,
    oracle: Pubkey,
    oracle_backup_feed: Pubkey,
    pricing_args: InitializeZetaGroupPricingArgs,
    perp_args: types.UpdatePerpParametersArgs,
    margin_args: types.UpdateMarginParametersArgs,
    expiry_args: types.UpdateZetaGroupExpiryArgs,
    perps_only: bool = False,
    flex_underlying: bool = False,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    """Create a new zeta group for ``asset``.

    The underlying account is indexed by the snapshot's current underlying
    count, or by its flex underlying count when ``flex_underlying`` is set.
    """
    program_id = snapshot.program_id
    zeta_group, zeta_group_nonce = pda.get_zeta_group(program_id, underlying_mint)
    if flex_underlying:
        underlying, underlying_nonce = pda.get_flex_underlying(
            program_id, snapshot.num_flex_underlyings
        )
    else:
        underlying, underlying_nonce = pda.get_underlying(
            program_id, snapshot.num_underlyings
        )
    greeks, greeks_nonce = pda.get_greeks(program_id, zeta_group)
    perp_sync_queue, perp_sync_queue_nonce = pda.get_perp_sync_queue(
        program_id, zeta_group
    )
    vault, vault_nonce = pda.get_vault(program_id, zeta_group)
    insurance_vault, insurance_vault_nonce = pda.get_zeta_insurance_vault(
        program_id, zeta_group
    )
    socialized_loss_account, socialized_loss_account_nonce = (
        pda.get_socialized_loss_account(program_id, zeta_group)
    )
    args = types.InitializeZetaGroupArgs(
        perps_only=perps_only,
        flex_underlying=flex_underlying,
        asset_override=to_program_asset(asset),
        zeta_group_nonce=zeta_group_nonce,
        underlying_nonce=underlying_nonce,
        greeks_nonce=greeks_nonce,
        vault_nonce=vault_nonce,
        insurance_vault_nonce=insurance_vault_nonce,
        socialized_loss_account_nonce=socialized_loss_account_nonce,
        perp_sync_queue_nonce=perp_sync_queue_nonce,
        **asdict(pricing_args),
        **asdict(margin_args),
        **asdict(expiry_args),
        **asdict(perp_args),
    )
    logger.debug("initialize_zeta_group %s zeta_group=%s", asset, zeta_group)
    return instructions.initialize_zeta_group(
        {"args": args},
        {
            "state": snapshot.state,
            "admin": _admin(snapshot, admin),
            "system_program": SYSTEM_PROGRAM_ID,
            "underlying_mint": underlying_mint,
            "zeta_program": program_id,
            "oracle": oracle,
            "oracle_backup_feed": oracle_backup_feed,
            "oracle_backup_program": snapshot.oracle_backup_program_id,
            "zeta_group": zeta_group,
            "greeks": greeks,
            "perp_sync_queue": perp_sync_queue,
            "underlying": underlying,
            "vault": vault,
            "insurance_vault": insurance_vault,
            "socialized_loss_account": socialized_loss_account,
            "token_program": TOKEN_PROGRAM_ID,
            "usdc_mint": snapshot.usdc_mint,
            "rent": RENT_SYSVAR,
        },
        program_id=program_id,
    )


def initialize_perp_sync_queue(
    snapshot: ExchangeSnapshot, asset: Asset, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    zeta_group = AssetRouter(snapshot).get_zeta_group_address(asset)
    perp_sync_queue, nonce = pda.get_perp_sync_queue(snapshot.program_id, zeta_group)
    return instructions.initialize_perp_sync_queue(
        {"nonce": nonce},
        {
            "admin": _admin(snapshot, admin),
            "zeta_program": snapshot.program_id,
            "state": snapshot.state,
            "perp_sync_queue": perp_sync_queue,
            "zeta_group": zeta_group,
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def initialize_market_indexes(
    snapshot: ExchangeSnapshot, asset: Asset, admin: typing.Optional[Pubkey] = None
) -> typing.Tuple[Instruction, Pubkey]:
    zeta_group = AssetRouter(snapshot).get_zeta_group_address(asset)
    market_indexes, nonce = pda.get_market_indexes(snapshot.program_id, zeta_group)
    ix = instructions.initialize_market_indexes(
        {"nonce": nonce},
        {
            "state": snapshot.state,
            "market_indexes": market_indexes,
            "admin": _admin(snapshot, admin),
            "system_program": SYSTEM_PROGRAM_ID,
            "zeta_group": zeta_group,
        },
        program_id=snapshot.program_id,
    )
    return ix, market_indexes


def add_market_indexes(
    snapshot: ExchangeSnapshot, asset: Asset, market_indexes: Pubkey
) -> Instruction:
    return instructions.add_market_indexes(
        {
            "market_indexes": market_indexes,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
        },
        program_id=snapshot.program_id,
    )


def initialize_market_strikes(snapshot: ExchangeSnapshot, asset: Asset) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.initialize_market_strikes(
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            **AccountListAssembler(router).group_oracles(asset),
        },
        program_id=snapshot.program_id,
    )


def initialize_market_node(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    index: int,
    payer: typing.Optional[Pubkey] = None,
) -> Instruction:
    router = AssetRouter(snapshot)
    zeta_group = router.get_zeta_group_address(asset)
    market_node, nonce = pda.get_market_node(snapshot.program_id, zeta_group, index)
    return instructions.initialize_market_node(
        {"args": types.InitializeMarketNodeArgs(nonce=nonce, index=index)},
        {
            "zeta_group": zeta_group,
            "market_node": market_node,
            "greeks": router.get_greeks(asset),
            "payer": _admin(snapshot, payer),
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def initialize_zeta_market_txs(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    seed_index: int,
    request_queue: Pubkey,
    event_queue: Pubkey,
    bids: Pubkey,
    asks: Pubkey,
    market_indexes: Pubkey,
    rent_exempt_lamports: typing.Callable[[int], int],
    payer: typing.Optional[Pubkey] = None,
    admin: typing.Optional[Pubkey] = None,
) -> typing.Tuple[list[Instruction], list[Instruction]]:
    """Return the two transaction groups that bring a market online.

    The first creates the four order-book accounts under the DEX program,
    sized for the DEX and funded by ``payer`` with
    ``rent_exempt_lamports(space)``; they must be signed by their own
    keypairs. The second initializes the market and is signed by ``admin``.
    Both default to the snapshot admin.
    """
    program_id = snapshot.program_id
    dex_program_id = snapshot.dex_program_id
    zeta_group = AssetRouter(snapshot).get_zeta_group_address(asset)
    admin = _admin(snapshot, admin)
    payer = admin if payer is None else payer
    market, market_nonce = pda.get_market_uninitialized(
        program_id, zeta_group, seed_index
    )
    vault_owner, vault_signer_nonce = pda.get_serum_vault_owner_and_nonce(
        market, dex_program_id
    )
    base_mint, base_mint_nonce = pda.get_base_mint(program_id, market)
    quote_mint, quote_mint_nonce = pda.get_quote_mint(program_id, market)
    zeta_base_vault, zeta_base_vault_nonce = pda.get_zeta_vault(program_id, base_mint)
    zeta_quote_vault, zeta_quote_vault_nonce = pda.get_zeta_vault(
        program_id, quote_mint
    )
    dex_base_vault, dex_base_vault_nonce = pda.get_serum_vault(program_id, base_mint)
    dex_quote_vault, dex_quote_vault_nonce = pda.get_serum_vault(
        program_id, quote_mint
    )

    create_accounts = [
        create_account(
            CreateAccountParams(
                from_pubkey=payer,
                to_pubkey=account,
                lamports=rent_exempt_lamports(space),
                space=space,
                owner=dex_program_id,
            )
        )
        for account, space in (
            (request_queue, REQUEST_QUEUE_SPACE),
            (event_queue, EVENT_QUEUE_SPACE),
            (bids, ORDERBOOK_SIDE_SPACE),
            (asks, ORDERBOOK_SIDE_SPACE),
        )
    ]
    args = types.InitializeMarketArgs(
        index=market_index,
        market_nonce=market_nonce,
        base_mint_nonce=base_mint_nonce,
        quote_mint_nonce=quote_mint_nonce,
        zeta_base_vault_nonce=zeta_base_vault_nonce,
        zeta_quote_vault_nonce=zeta_quote_vault_nonce,
        dex_base_vault_nonce=dex_base_vault_nonce,
        dex_quote_vault_nonce=dex_quote_vault_nonce,
        vault_signer_nonce=vault_signer_nonce,
    )
    init_market = instructions.initialize_zeta_market(
        {"args": args},
        {
            "state": snapshot.state,
            "market_indexes": market_indexes,
            "zeta_group": zeta_group,
            "admin": admin,
            "market": market,
            "request_queue": request_queue,
            "event_queue": event_queue,
            "bids": bids,
            "asks": asks,
            "base_mint": base_mint,
            "quote_mint": quote_mint,
            "zeta_base_vault": zeta_base_vault,
            "zeta_quote_vault": zeta_quote_vault,
            "dex_base_vault": dex_base_vault,
            "dex_quote_vault": dex_quote_vault,
            "vault_owner": vault_owner,
            "mint_authority": snapshot.mint_authority,
            "serum_authority": snapshot.serum_authority,
            "dex_program": dex_program_id,
            "system_program": SYSTEM_PROGRAM_ID,
            "token_program": TOKEN_PROGRAM_ID,
            "rent": RENT_SYSVAR,
        },
        program_id=program_id,
    )
    logger.debug("initialize_zeta_market %s[%d] market=%s", asset, market_index, market)
    return create_accounts, [init_market]


def initialize_market_tif_epoch_cycle(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    market_index: int,
    epoch_length: int,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    check_range("epoch_length", epoch_length, U16_MAX)
    market = AssetRouter(snapshot).get_market(asset, market_index)
    return instructions.initialize_market_tif_epoch_cycle(
        {"epoch_length": epoch_length},
        {
            "state": snapshot.state,
            "admin": _admin(snapshot, admin),
            "market": market.address,
            "serum_authority": snapshot.serum_authority,
            "dex_program": snapshot.dex_program_id,
        },
        program_id=snapshot.program_id,
    )


def modify_asset(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    new_asset: Asset,
    new_oracle: Pubkey,
    new_backup_oracle: Pubkey,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.modify_asset(
        {"asset": to_program_asset(new_asset)},
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
            "new_oracle": new_oracle,
            "new_backup_oracle": new_backup_oracle,
            "oracle_backup_program": snapshot.oracle_backup_program_id,
        },
        program_id=snapshot.program_id,
    )


def update_pricing_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdatePricingParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_pricing_parameters(
        {"args": args},
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_margin_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdateMarginParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    router = AssetRouter(snapshot)
    router.resolve(asset)
    return instructions.update_margin_parameters(
        {"args": args, "asset": to_program_asset(asset)},
        {
            "state": snapshot.state,
            "pricing": router.get_pricing().address,
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_perp_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdatePerpParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    router = AssetRouter(snapshot)
    router.resolve(asset)
    return instructions.update_perp_parameters(
        {"args": args, "asset": to_program_asset(asset)},
        {
            "state": snapshot.state,
            "pricing": router.get_pricing().address,
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_zeta_group_margin_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdateMarginParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_zeta_group_margin_parameters(
        {"args": args, "asset": to_program_asset(asset)},
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_zeta_group_perp_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdatePerpParametersArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_zeta_group_perp_parameters(
        {"args": args, "asset": to_program_asset(asset)},
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_zeta_group_expiry_parameters(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdateZetaGroupExpiryArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_zeta_group_expiry_parameters(
        {"args": args},
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def toggle_zeta_group_perps_only(
    snapshot: ExchangeSnapshot, asset: Asset, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    return instructions.toggle_zeta_group_perps_only(
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_volatility_nodes(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    nodes: typing.Sequence[int],
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    if len(nodes) != VOLATILITY_NODES:
        raise InvalidInput(
            f"Expected {VOLATILITY_NODES} volatility nodes, got {len(nodes)}"
        )
    for node in nodes:
        check_range("node", node, U64_MAX)
    router = AssetRouter(snapshot)
    return instructions.update_volatility_nodes(
        {"nodes": list(nodes)},
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_zeta_pricing_pubkeys(
    snapshot: ExchangeSnapshot,
    args: types.UpdateZetaPricingPubkeysArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_zeta_pricing_pubkeys(
        {"args": args},
        {
            "state": snapshot.state,
            "pricing": AssetRouter(snapshot).get_pricing().address,
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_zeta_state(
    snapshot: ExchangeSnapshot,
    params: types.StateParams,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_zeta_state(
        {"args": params},
        {"state": snapshot.state, "admin": _admin(snapshot, admin)},
        program_id=snapshot.program_id,
    )


def update_admin(
    snapshot: ExchangeSnapshot,
    new_admin: Pubkey,
    secondary: bool = False,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    """Hand over the primary admin, or the secondary one if ``secondary``."""
    accounts = {
        "state": snapshot.state,
        "admin": _admin(snapshot, admin),
        "new_admin": new_admin,
    }
    if secondary:
        return instructions.update_secondary_admin(
            accounts, program_id=snapshot.program_id
        )
    return instructions.update_admin(accounts, program_id=snapshot.program_id)


def update_referrals_admin(
    snapshot: ExchangeSnapshot,
    new_referrals_admin: Pubkey,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_referrals_admin(
        {
            "state": snapshot.state,
            "admin": _admin(snapshot, admin),
            "new_admin": new_referrals_admin,
        },
        program_id=snapshot.program_id,
    )


def halt_zeta_group(
    snapshot: ExchangeSnapshot, asset: Asset, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.halt_zeta_group(
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "greeks": router.get_greeks(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def unhalt_zeta_group(
    snapshot: ExchangeSnapshot, asset: Asset, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.unhalt_zeta_group(
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
            "greeks": router.get_greeks(asset),
        },
        program_id=snapshot.program_id,
    )


def update_halt_state(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdateHaltStateArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.update_halt_state(
        {"args": args},
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_volatility(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdateVolatilityArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.update_volatility(
        {"args": args},
        {
            "state": snapshot.state,
            "greeks": router.get_greeks(asset),
            "zeta_group": router.get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def update_interest_rate(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.UpdateInterestRateArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.update_interest_rate(
        {"args": args},
        {
            "state": snapshot.state,
            "greeks": router.get_greeks(asset),
            "zeta_group": router.get_zeta_group_address(asset),
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def expire_series_override(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    settlement_account: Pubkey,
    args: types.ExpireSeriesOverrideArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    router = AssetRouter(snapshot)
    return instructions.expire_series_override(
        {"args": args},
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "settlement_account": settlement_account,
            "admin": _admin(snapshot, admin),
            "system_program": SYSTEM_PROGRAM_ID,
            "greeks": router.get_greeks(asset),
        },
        program_id=snapshot.program_id,
    )


def override_expiry(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    args: types.OverrideExpiryArgs,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    return instructions.override_expiry(
        {"args": args},
        {
            "state": snapshot.state,
            "admin": _admin(snapshot, admin),
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
        },
        program_id=snapshot.program_id,
    )


def toggle_market_maker(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    user: Pubkey,
    is_market_maker: bool,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    zeta_group = AssetRouter(snapshot).get_zeta_group_address(asset)
    margin_account, _ = pda.get_margin_account(snapshot.program_id, zeta_group, user)
    return instructions.toggle_market_maker(
        {"is_market_maker": is_market_maker},
        {
            "state": snapshot.state,
            "admin": _admin(snapshot, admin),
            "margin_account": margin_account,
        },
        program_id=snapshot.program_id,
    )


def initialize_whitelist_deposit_account(
    snapshot: ExchangeSnapshot, user: Pubkey, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    account, nonce = pda.get_user_whitelist_deposit_account(snapshot.program_id, user)
    return instructions.initialize_whitelist_deposit_account(
        {"nonce": nonce},
        {
            "whitelist_deposit_account": account,
            "admin": _admin(snapshot, admin),
            "user": user,
            "system_program": SYSTEM_PROGRAM_ID,
            "state": snapshot.state,
        },
        program_id=snapshot.program_id,
    )


def initialize_whitelist_insurance_account(
    snapshot: ExchangeSnapshot, user: Pubkey, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    account, nonce = pda.get_user_whitelist_insurance_account(
        snapshot.program_id, user
    )
    return instructions.initialize_whitelist_insurance_account(
        {"nonce": nonce},
        {
            "whitelist_insurance_account": account,
            "admin": _admin(snapshot, admin),
            "user": user,
            "system_program": SYSTEM_PROGRAM_ID,
            "state": snapshot.state,
        },
        program_id=snapshot.program_id,
    )


def initialize_whitelist_trading_fees_account(
    snapshot: ExchangeSnapshot, user: Pubkey, admin: typing.Optional[Pubkey] = None
) -> Instruction:
    account, nonce = pda.get_user_whitelist_trading_fees_account(
        snapshot.program_id, user
    )
    return instructions.initialize_whitelist_trading_fees_account(
        {"nonce": nonce},
        {
            "whitelist_trading_fees_account": account,
            "admin": _admin(snapshot, admin),
            "user": user,
            "system_program": SYSTEM_PROGRAM_ID,
            "state": snapshot.state,
        },
        program_id=snapshot.program_id,
    )


def collect_treasury_funds(
    snapshot: ExchangeSnapshot,
    collection_token_account: Pubkey,
    amount: int,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    check_range("amount", amount, U64_MAX)
    return instructions.collect_treasury_funds(
        {"amount": amount},
        {
            "state": snapshot.state,
            "treasury_wallet": snapshot.treasury_wallet,
            "collection_token_account": collection_token_account,
            "token_program": TOKEN_PROGRAM_ID,
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )


def treasury_movement(
    snapshot: ExchangeSnapshot,
    movement_type: TreasuryMovementType,
    amount: int,
    admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    check_range("amount", amount, U64_MAX)
    return instructions.treasury_movement(
        {
            "treasury_movement_type": to_program_treasury_movement_type(
                movement_type
            ),
            "amount": amount,
        },
        {
            "state": snapshot.state,
            "insurance_vault": snapshot.combined_insurance_vault,
            "treasury_wallet": snapshot.treasury_wallet,
            "referrals_rewards_wallet": snapshot.referrals_rewards_wallet,
            "token_program": TOKEN_PROGRAM_ID,
            "admin": _admin(snapshot, admin),
        },
        program_id=snapshot.program_id,
    )
