from __future__ import annotations
import typing
from solders.pubkey import Pubkey
from solders.instruction import Instruction, AccountMeta
import borsh_construct as borsh
from ..program_id import PROGRAM_ID


class UpdatePricingHaltedArgs(typing.TypedDict):
    expiry_index: typing.Optional[int]


layout = borsh.CStruct("expiry_index" / borsh.Option(borsh.U8))


class UpdatePricingHaltedAccounts(typing.TypedDict):
    state: Pubkey
    zeta_group: Pubkey
    greeks: Pubkey
    admin: Pubkey
    perp_market: Pubkey
    perp_bids: Pubkey
    perp_asks: Pubkey


def update_pricing_halted(
    args: UpdatePricingHaltedArgs,
    accounts: UpdatePricingHaltedAccounts,
    program_id: Pubkey = PROGRAM_ID,
    remaining_accounts: typing.Optional[typing.List[AccountMeta]] = None,
) -> Instruction:
    keys: list[AccountMeta] = [
        AccountMeta(pubkey=accounts["state"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["zeta_group"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["greeks"], is_signer=False, is_writable=True),
        AccountMeta(pubkey=accounts["admin"], is_signer=True, is_writable=False),
        AccountMeta(pubkey=accounts["perp_market"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["perp_bids"], is_signer=False, is_writable=False),
        AccountMeta(pubkey=accounts["perp_asks"], is_signer=False, is_writable=False),
    ]
    if remaining_accounts is not None:
        keys += remaining_accounts
    identifier = b"\x03Gm\xf1\xa5\x0e&\x13"
    encoded_args = layout.build(
        {
            "expiry_index": args["expiry_index"],
        }
    )
    data = identifier + encoded_args
    return Instruction(program_id, data, keys)
