import pytest
from solders.pubkey import Pubkey

from zeta_instructions import pda, types
from zeta_instructions.actions import collateral
from zeta_instructions.assets import Asset
from zeta_instructions.codec import MovementType
from zeta_instructions.errors import InvalidInput, SchemaVersionMismatch
from zeta_instructions.instructions.deposit import layout as deposit_layout
from zeta_instructions.instructions.position_movement import (
    layout as position_movement_layout,
)


def test_initialize_margin_account(snapshot, user):
    ix, margin_account = collateral.initialize_margin_account(
        snapshot, Asset.BTC, user
    )
    zeta_group = snapshot.sub_exchanges[Asset.BTC].zeta_group
    assert margin_account == pda.get_margin_account(
        snapshot.program_id, zeta_group, user
    )[0]
    assert [meta.pubkey for meta in ix.accounts[:2]] == [zeta_group, margin_account]
    signers = {meta.pubkey for meta in ix.accounts if meta.is_signer}
    assert signers == {user}


def test_margin_and_spread_accounts_differ(snapshot, user):
    _, margin_account = collateral.initialize_margin_account(snapshot, Asset.SOL, user)
    _, spread_account = collateral.initialize_spread_account(snapshot, Asset.SOL, user)
    assert margin_account != spread_account


def test_deposit_uses_combined_accounts(snapshot, user):
    ix = collateral.deposit(
        snapshot, Asset.SOL, 1_000_000, Pubkey.new_unique(), Pubkey.new_unique(), user
    )
    keys = [meta.pubkey for meta in ix.accounts]
    assert snapshot.combined_vault in keys
    assert snapshot.combined_socialized_loss_account in keys
    assert deposit_layout.parse(ix.data[8:]).amount == 1_000_000


def test_deposit_whitelist_is_optional(snapshot, user):
    args = (snapshot, Asset.SOL, 5, Pubkey.new_unique(), Pubkey.new_unique(), user)
    plain = collateral.deposit(*args)
    whitelist = Pubkey.new_unique()
    whitelisted = collateral.deposit(*args, whitelist_deposit_account=whitelist)
    assert whitelisted.accounts[:-1] == plain.accounts
    assert whitelisted.accounts[-1].pubkey == whitelist


@pytest.mark.parametrize("amount", [-1, 2**64, 1.5])
def test_invalid_amount(snapshot, user, amount):
    with pytest.raises(InvalidInput):
        collateral.withdraw(
            snapshot, Asset.SOL, amount, Pubkey.new_unique(), Pubkey.new_unique(), user
        )


def test_withdraw_v2_requires_pricing(snapshot, pricing_snapshot, user):
    args = (Asset.BTC, 10, Pubkey.new_unique(), Pubkey.new_unique(), user)
    with pytest.raises(SchemaVersionMismatch):
        collateral.withdraw_v2(snapshot, *args)
    ix = collateral.withdraw_v2(pricing_snapshot, *args)
    keys = [meta.pubkey for meta in ix.accounts]
    assert pricing_snapshot.pricing.address in keys
    assert pricing_snapshot.sub_exchanges[Asset.BTC].oracle in keys


def test_position_movement(snapshot, user):
    movements = [
        types.PositionMovementArg(index=0, size=10),
        types.PositionMovementArg(index=3, size=-4),
    ]
    ix = collateral.position_movement(
        snapshot,
        Asset.SOL,
        Pubkey.new_unique(),
        Pubkey.new_unique(),
        user,
        MovementType.LOCK,
        movements,
    )
    decoded = position_movement_layout.parse(ix.data[8:])
    assert [(m.index, m.size) for m in decoded.movements] == [(0, 10), (3, -4)]


def test_insurance_deposit_account(snapshot, user):
    whitelist = Pubkey.new_unique()
    ix, account = collateral.initialize_insurance_deposit_account(
        snapshot, user, whitelist
    )
    assert account == pda.get_user_insurance_deposit_account(
        snapshot.program_id, user
    )[0]
    assert ix.accounts[0].pubkey == account
    assert ix.accounts[-1].pubkey == whitelist
