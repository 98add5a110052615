from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
import borsh_construct as borsh
from .. import types
from ..program_id import PROGRAM_ID


class ExpireSeriesOverrideArgs(typing.TypedDict):
    args: types.expire_series_override_args.ExpireSeriesOverrideArgs


layout = borsh.CStruct(
    "args" / types.expire_series_override_args.ExpireSeriesOverrideArgs.layout
)


class ExpireSeriesOverrideAccounts(typing.TypedDict):
    state: Pubkey
    zeta_group: Pubkey
    settlement_account: Pubkey
    admin: Pubkey
    system_program: Pubkey
    greeks: Pubkey


def expire_series_override(
    args: ExpireSeriesOverrideArgs,
    accounts: ExpireSeriesOverrideAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["zeta_group"], is_signer=False, is_writable=True),
        AccountMeta(
            pubkey=accounts["settlement_account"], is_signer=False, is_writable=True
        ),
        AccountMeta(pubkey=accounts["admin"], is_signer=True, is_writable=True),
        AccountMeta(
            pubkey=accounts["system_program"], is_signer=False, is_writable=False
        ),
        AccountMeta(pubkey=accounts["greeks"], is_signer=False, is_writable=True),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"h\x16\"{V\xe0\x82F"
    encoded_args = layout.build(
        {
            "args": args["args"].to_encodable(),
        }
    )
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
