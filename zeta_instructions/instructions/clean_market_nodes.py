from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
import borsh_construct as borsh
from ..program_id import PROGRAM_ID


class CleanMarketNodesArgs(typing.TypedDict):
    expiry_index: int


layout = borsh.CStruct("expiry_index" / borsh.U8)


class CleanMarketNodesAccounts(typing.TypedDict):
    zeta_group: Pubkey
    greeks: Pubkey


def clean_market_nodes(
    args: CleanMarketNodesArgs,
    accounts: CleanMarketNodesAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["zeta_group"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["greeks"], is_signer=False, is_writable=True),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"9#\x86\xa2\x14\xd67\xe3"
    encoded_args = layout.build(
        {
            "expiry_index": args["expiry_index"],
        }
    )
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
