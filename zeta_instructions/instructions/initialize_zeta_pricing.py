from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
import borsh_construct as borsh
from .. import types
from ..program_id import PROGRAM_ID


class InitializeZetaPricingArgs(typing.TypedDict):
    args: types.initialize_zeta_pricing_args.InitializeZetaPricingArgs


layout = borsh.CStruct(
    "args" / types.initialize_zeta_pricing_args.InitializeZetaPricingArgs.layout
)


class InitializeZetaPricingAccounts(typing.TypedDict):
    state: Pubkey
    pricing: Pubkey
    admin: Pubkey
    system_program: Pubkey
    token_program: Pubkey
    rent: Pubkey


def initialize_zeta_pricing(
    args: InitializeZetaPricingArgs,
    accounts: InitializeZetaPricingAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["pricing"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["admin"], is_signer=True, is_writable=True),
        AccountMeta(
            pubkey=accounts["system_program"], is_signer=False, is_writable=False
        ),
        AccountMeta(
            pubkey=accounts["token_program"], is_signer=False, is_writable=False
        ),
        AccountMeta(pubkey=accounts["rent"], is_signer=False, is_writable=False),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"#\xd1\xb4\x1d\xf5\xc7}\x10"
    encoded_args = layout.build(
        {
            "args": args["args"].to_encodable(),
        }
    )
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
