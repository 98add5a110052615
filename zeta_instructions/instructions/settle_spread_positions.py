from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
import borsh_construct as borsh
from ..program_id import PROGRAM_ID


class SettleSpreadPositionsArgs(typing.TypedDict):
    expiry_ts: int
    settlement_nonce: int


layout = borsh.CStruct("expiry_ts" / borsh.U64, "settlement_nonce" / borsh.U8)


class SettleSpreadPositionsAccounts(typing.TypedDict):
    zeta_group: Pubkey
    settlement_account: Pubkey


def settle_spread_positions(
    args: SettleSpreadPositionsArgs,
    accounts: SettleSpreadPositionsAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["zeta_group"], is_signer=False, is_writable=False),
        AccountMeta(
            pubkey=accounts["settlement_account"], is_signer=False, is_writable=False
        ),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"SC\xd6\xcae!MA"
    encoded_args = layout.build(
        {
            "expiry_ts": args["expiry_ts"],
            "settlement_nonce": args["settlement_nonce"],
        }
    )
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
