from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID


class InitializeZetaReferralsRewardsWalletAccounts(typing.TypedDict):
    state: Pubkey
    referrals_rewards_wallet: Pubkey
    rent: Pubkey
    system_program: Pubkey
    token_program: Pubkey
    usdc_mint: Pubkey
    admin: Pubkey


def initialize_zeta_referrals_rewards_wallet(
    accounts: InitializeZetaReferralsRewardsWalletAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(
            pubkey=accounts["referrals_rewards_wallet"],
            is_signer=False,
            is_writable=True,
        ),
        AccountMeta(pubkey=accounts["rent"], is_signer=False, is_writable=False),
        AccountMeta(
            pubkey=accounts["system_program"], is_signer=False, is_writable=False
        ),
        AccountMeta(
            pubkey=accounts["token_program"], is_signer=False, is_writable=False
        ),
        AccountMeta(pubkey=accounts["usdc_mint"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["admin"], is_signer=True, is_writable=True),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"\xf5\xe5\xdfx\x07\x86\xf7\xf8"
    encoded_args = b""
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
