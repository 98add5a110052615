from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID


class SettlePositionsHaltedV2Accounts(typing.TypedDict):
    state: Pubkey
    pricing: Pubkey
    admin: Pubkey


def settle_positions_halted_v2(
    accounts: SettlePositionsHaltedV2Accounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["pricing"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["admin"], is_signer=True, is_writable=False),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"\x06\xb5\xcf\xf9\xadpY\xe6"
    encoded_args = b""
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
