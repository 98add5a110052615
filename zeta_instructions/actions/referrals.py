from __future__ import annotations
import typing
from solders.instruction import Instruction
from solders.pubkey import Pubkey
from .. import instructions, pda, types
from ..assembler import writable_metas
from ..constants import SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID
from ..errors import InvalidInput
from ..snapshot import ExchangeSnapshot


def refer_user(
    snapshot: ExchangeSnapshot, user: Pubkey, referrer: Pubkey
) -> Instruction:
    program_id = snapshot.program_id
    referrer_account, _ = pda.get_referrer_account_address(program_id, referrer)
    referral_account, _ = pda.get_referral_account_address(program_id, user)
    return instructions.refer_user(
        {
            "user": user,
            "referrer_account": referrer_account,
            "referral_account": referral_account,
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=program_id,
    )


def initialize_referrer_account(
    snapshot: ExchangeSnapshot, referrer: Pubkey
) -> Instruction:
    referrer_account, _ = pda.get_referrer_account_address(
        snapshot.program_id, referrer
    )
    return instructions.initialize_referrer_account(
        {
            "referrer": referrer,
            "referrer_account": referrer_account,
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=snapshot.program_id,
    )


def initialize_referrer_alias(
    snapshot: ExchangeSnapshot, referrer: Pubkey, alias: str
) -> Instruction:
    program_id = snapshot.program_id
    referrer_account, _ = pda.get_referrer_account_address(program_id, referrer)
    referrer_alias, _ = pda.get_referrer_alias_address(program_id, alias)
    return instructions.initialize_referrer_alias(
        {"alias": alias},
        {
            "referrer": referrer,
            "referrer_alias": referrer_alias,
            "referrer_account": referrer_account,
            "system_program": SYSTEM_PROGRAM_ID,
        },
        program_id=program_id,
    )


def set_referrals_rewards(
    snapshot: ExchangeSnapshot,
    args: typing.Sequence[types.SetReferralsRewardsArgs],
    referrals_admin: typing.Optional[Pubkey] = None,
) -> Instruction:
    """Credit pending rewards; each referrer account is passed writable."""
    if referrals_admin is None:
        referrals_admin = snapshot.referrals_admin
    if referrals_admin is None:
        raise InvalidInput("No referrals admin supplied or set on the snapshot")
    return instructions.set_referrals_rewards(
        {"args": list(args)},
        {"state": snapshot.state, "referrals_admin": referrals_admin},
        program_id=snapshot.program_id,
        remaining_accounts=writable_metas(arg.referrals_account_key for arg in args),
    )


def claim_referrals_rewards(
    snapshot: ExchangeSnapshot,
    user_referrals_account: Pubkey,
    user_token_account: Pubkey,
    user: Pubkey,
) -> Instruction:
    return instructions.claim_referrals_rewards(
        {
            "state": snapshot.state,
            "referrals_rewards_wallet": snapshot.referrals_rewards_wallet,
            "user_referrals_account": user_referrals_account,
            "user_token_account": user_token_account,
            "token_program": TOKEN_PROGRAM_ID,
            "user": user,
        },
        program_id=snapshot.program_id,
    )
