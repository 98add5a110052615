from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID


class SettleSpreadPositionsHaltedAccounts(typing.TypedDict):
    state: Pubkey
    zeta_group: Pubkey
    greeks: Pubkey
    admin: Pubkey


def settle_spread_positions_halted(
    accounts: SettleSpreadPositionsHaltedAccounts,
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
    identifier = b"\x9e\x95\x9b\xba\x84\x0c:\""
    encoded_args = b""
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
