from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
from ..program_id import PROGRAM_ID


class ApplyPerpFundingAccounts(typing.TypedDict):
    zeta_group: Pubkey
    greeks: Pubkey


def apply_perp_funding(
    accounts: ApplyPerpFundingAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["zeta_group"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["greeks"], is_signer=False, is_writable=False),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"\x17R\xe1\xde\xdbz\xe6\xfb"
    encoded_args = b""
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
