from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID


class RebalanceInsuranceVaultV2Accounts(typing.TypedDict):
    state: Pubkey
    pricing: Pubkey
    zeta_vault: Pubkey
    insurance_vault: Pubkey
    treasury_wallet: Pubkey
    socialized_loss_account: Pubkey
    token_program: Pubkey


def rebalance_insurance_vault_v2(
    accounts: RebalanceInsuranceVaultV2Accounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["pricing"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["zeta_vault"], is_signer=False, is_writable=True),
        AccountMeta(
            pubkey=accounts["insurance_vault"], is_signer=False, is_writable=True
        ),
        AccountMeta(
            pubkey=accounts["treasury_wallet"], is_signer=False, is_writable=True
        ),
        AccountMeta(
            pubkey=accounts["socialized_loss_account"],
            is_signer=False,
            is_writable=True,
        ),
        AccountMeta(
            pubkey=accounts["token_program"], is_signer=False, is_writable=False
        ),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"\xb8\xee\xfe\\\xa4\xc7\xc9g"
    encoded_args = b""
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
