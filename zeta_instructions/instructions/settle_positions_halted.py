from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID


class SettlePositionsHaltedAccounts(typing.TypedDict):
    state: Pubkey
    zeta_group: Pubkey
    greeks: Pubkey
    admin: Pubkey


def settle_positions_halted(
    accounts: SettlePositionsHaltedAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["zeta_group"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["greeks"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["admin"], is_signer=True, is_writable=False),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"\xaa\x93\x8b\xa3\x13h\xa7M"
    encoded_args = b""
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
