"""Account lifecycle and collateral movement builders."""
from __future__ import annotations
import logging
import typing
from solders.instruction import Instruction
from solders.pubkey import Pubkey
from .. import instructions, pda, types
from ..assembler import AccountListAssembler, optional_remaining
from ..assets import Asset
from ..codec import MovementType, to_program_movement_type
from ..constants import SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID
from ..router import AssetRouter
from ..snapshot import ExchangeSnapshot
from .common import U64_MAX, check_range

logger = logging.getLogger(__name__)


def initialize_margin_account(
    snapshot: ExchangeSnapshot, asset: Asset, user: Pubkey
) -> typing.Tuple[Instruction, Pubkey]:
    zeta_group = AssetRouter(snapshot).get_zeta_group_address(asset)
    margin_account, _ = pda.get_margin_account(snapshot.program_id, zeta_group, user)
    ix = instructions.initialize_margin_account(
        {
            "zeta_group": zeta_group,
            "margin_account": margin_account,
            "authority": user,
            "payer": user,
            "zeta_program": snapshot.program_id,
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )
    return ix, margin_account


def close_margin_account(
    snapshot: ExchangeSnapshot, asset: Asset, user: Pubkey, margin_account: Pubkey
) -> Instruction:
    return instructions.close_margin_account(
        {
            "margin_account": margin_account,
            "authority": user,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
        },
        program_id=snapshot.program_id,
    )


def initialize_spread_account(
    snapshot: ExchangeSnapshot, asset: Asset, user: Pubkey
) -> typing.Tuple[Instruction, Pubkey]:
    zeta_group = AssetRouter(snapshot).get_zeta_group_address(asset)
    spread_account, _ = pda.get_spread_account(snapshot.program_id, zeta_group, user)
    ix = instructions.initialize_spread_account(
        {
            "zeta_group": zeta_group,
            "spread_account": spread_account,
            "authority": user,
            "payer": user,
            "zeta_program": snapshot.program_id,
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )
    return ix, spread_account


def close_spread_account(
    snapshot: ExchangeSnapshot, asset: Asset, user: Pubkey, spread_account: Pubkey
) -> Instruction:
    return instructions.close_spread_account(
        {
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "spread_account": spread_account,
            "authority": user,
        },
        program_id=snapshot.program_id,
    )


def initialize_insurance_deposit_account(
    snapshot: ExchangeSnapshot, user: Pubkey, whitelist_insurance_account: Pubkey
) -> typing.Tuple[Instruction, Pubkey]:
    account, nonce = pda.get_user_insurance_deposit_account(snapshot.program_id, user)
    ix = instructions.initialize_insurance_deposit_account(
        {"nonce": nonce},
        {
            "insurance_deposit_account": account,
            "payer": user,
            "authority": user,
            "system_program": SYSTEM_PROGRAM_ID,
            "whitelist_insurance_account": whitelist_insurance_account,
        },
        program_id=snapshot.program_id,
    )
    return ix, account


def deposit(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    amount: int,
    margin_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
    whitelist_deposit_account: typing.Optional[Pubkey] = None,
) -> Instruction:
    check_range("amount", amount, U64_MAX)
    router = AssetRouter(snapshot)
    zeta_group = router.get_zeta_group_address(asset)
    program_id = snapshot.program_id
    logger.debug("deposit %s amount=%d", asset, amount)
    return instructions.deposit(
        {"amount": amount},
        {
            "zeta_group": zeta_group,
            "margin_account": margin_account,
            "vault": snapshot.combined_vault,
            "user_token_account": user_token_account,
            "socialized_loss_account": snapshot.combined_socialized_loss_account,
            "authority": authority,
            "token_program": TOKEN_PROGRAM_ID,
            "state": snapshot.state,
            "greeks": router.get_greeks(asset),
        },
        program_id=program_id,
        remaining_accounts=optional_remaining(whitelist_deposit_account),
    )


def deposit_v2(
    snapshot: ExchangeSnapshot,
    amount: int,
    margin_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
    whitelist_deposit_account: typing.Optional[Pubkey] = None,
) -> Instruction:
    check_range("amount", amount, U64_MAX)
    pricing = AssetRouter(snapshot).get_pricing()
    logger.debug("deposit_v2 amount=%d", amount)
    return instructions.deposit_v2(
        {"amount": amount},
        {
            "pricing": pricing.address,
            "margin_account": margin_account,
            "vault": snapshot.combined_vault,
            "user_token_account": user_token_account,
            "socialized_loss_account": snapshot.combined_socialized_loss_account,
            "authority": authority,
            "token_program": TOKEN_PROGRAM_ID,
            "state": snapshot.state,
        },
        program_id=snapshot.program_id,
        remaining_accounts=optional_remaining(whitelist_deposit_account),
    )


def withdraw(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    amount: int,
    margin_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
) -> Instruction:
    check_range("amount", amount, U64_MAX)
    router = AssetRouter(snapshot)
    zeta_group = router.get_zeta_group_address(asset)
    program_id = snapshot.program_id
    return instructions.withdraw(
        {"amount": amount},
        {
            "state": snapshot.state,
            "zeta_group": zeta_group,
            "vault": snapshot.combined_vault,
            "margin_account": margin_account,
            "user_token_account": user_token_account,
            "token_program": TOKEN_PROGRAM_ID,
            "authority": authority,
            "greeks": router.get_greeks(asset),
            **AccountListAssembler(router).group_oracles(asset),
            "socialized_loss_account": snapshot.combined_socialized_loss_account,
        },
        program_id=program_id,
    )


def withdraw_v2(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    amount: int,
    margin_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
) -> Instruction:
    check_range("amount", amount, U64_MAX)
    router = AssetRouter(snapshot)
    return instructions.withdraw_v2(
        {"amount": amount},
        {
            "state": snapshot.state,
            "pricing": router.get_pricing().address,
            "vault": snapshot.combined_vault,
            "margin_account": margin_account,
            "user_token_account": user_token_account,
            "token_program": TOKEN_PROGRAM_ID,
            "authority": authority,
            **AccountListAssembler(router).group_oracles(asset),
            "socialized_loss_account": snapshot.combined_socialized_loss_account,
        },
        program_id=snapshot.program_id,
    )


def deposit_insurance_vault(
    snapshot: ExchangeSnapshot,
    amount: int,
    insurance_deposit_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
) -> Instruction:
    check_range("amount", amount, U64_MAX)
    return instructions.deposit_insurance_vault(
        {"amount": amount},
        {
            "state": snapshot.state,
            "insurance_vault": snapshot.combined_insurance_vault,
            "insurance_deposit_account": insurance_deposit_account,
            "user_token_account": user_token_account,
            "zeta_vault": snapshot.combined_vault,
            "socialized_loss_account": snapshot.combined_socialized_loss_account,
            "authority": authority,
            "token_program": TOKEN_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def withdraw_insurance_vault(
    snapshot: ExchangeSnapshot,
    percentage_amount: int,
    insurance_deposit_account: Pubkey,
    user_token_account: Pubkey,
    authority: Pubkey,
) -> Instruction:
    check_range("percentage_amount", percentage_amount, U64_MAX)
    return instructions.withdraw_insurance_vault(
        {"percentage_amount": percentage_amount},
        {
            "state": snapshot.state,
            "insurance_vault": snapshot.combined_insurance_vault,
            "insurance_deposit_account": insurance_deposit_account,
            "user_token_account": user_token_account,
            "authority": authority,
            "token_program": TOKEN_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def position_movement(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_account: Pubkey,
    spread_account: Pubkey,
    authority: Pubkey,
    movement_type: MovementType,
    movements: typing.Sequence[types.PositionMovementArg],
) -> Instruction:
    """Move positions between a margin account and its spread account."""
    router = AssetRouter(snapshot)
    return instructions.position_movement(
        {
            "movement_type": to_program_movement_type(movement_type),
            "movements": list(movements),
        },
        {
            "state": snapshot.state,
            "zeta_group": router.get_zeta_group_address(asset),
            "margin_account": margin_account,
            "spread_account": spread_account,
            "authority": authority,
            "greeks": router.get_greeks(asset),
            **AccountListAssembler(router).group_oracles(asset),
        },
        program_id=snapshot.program_id,
    )


def transfer_excess_spread_balance(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_account: Pubkey,
    spread_account: Pubkey,
    authority: Pubkey,
) -> Instruction:
    return instructions.transfer_excess_spread_balance(
        {
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "margin_account": margin_account,
            "spread_account": spread_account,
            "authority": authority,
        },
        program_id=snapshot.program_id,
    )


def edit_delegated_pubkey(
    snapshot: ExchangeSnapshot,
    asset: Asset,
    margin_account: Pubkey,
    authority: Pubkey,
    new_key: Pubkey,
) -> Instruction:
    return instructions.edit_delegated_pubkey(
        {"new_key": new_key},
        {
            "state": snapshot.state,
            "zeta_group": AssetRouter(snapshot).get_zeta_group_address(asset),
            "margin_account": margin_account,
            "token_program": TOKEN_PROGRAM_ID,
            "authority": authority,
        },
        program_id=snapshot.program_id,
    )
