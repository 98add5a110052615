from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
import borsh_construct as borsh
from ..program_id import PROGRAM_ID


class UpdateVolatilityNodesArgs(typing.TypedDict):
    nodes: list[int]


layout = borsh.CStruct("nodes" / borsh.U64[5])


class UpdateVolatilityNodesAccounts(typing.TypedDict):
    state: Pubkey
    zeta_group: Pubkey
    greeks: Pubkey
    admin: Pubkey


def update_volatility_nodes(
    args: UpdateVolatilityNodesArgs,
    accounts: UpdateVolatilityNodesAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["zeta_group"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["greeks"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["admin"], is_signer=True, is_writable=False),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"d\xaa\xc4\"H\xe4\xdb\xec"
    encoded_args = layout.build(
        {
            "nodes": list(args["nodes"]),
        }
    )
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
