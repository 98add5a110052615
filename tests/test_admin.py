import pytest
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID

from zeta_instructions import pda, types
from zeta_instructions.actions import admin as admin_actions
from zeta_instructions.actions import referrals
from zeta_instructions.assets import Asset
from zeta_instructions.codec import TreasuryMovementType
from zeta_instructions.constants import (
    EVENT_QUEUE_SPACE,
    ORDERBOOK_SIDE_SPACE,
    REQUEST_QUEUE_SPACE,
)
from zeta_instructions.errors import InvalidInput, SchemaVersionMismatch
from zeta_instructions.router import AssetRouter


def signers(ix):
    return [meta.pubkey for meta in ix.accounts if meta.is_signer]


def test_admin_defaults_to_snapshot_admin(snapshot, admin):
    ix = admin_actions.halt_zeta_group(snapshot, Asset.SOL)
    assert signers(ix) == [admin]
    other = Pubkey.new_unique()
    assert signers(admin_actions.halt_zeta_group(snapshot, Asset.SOL, other)) == [
        other
    ]


def test_update_admin_secondary(snapshot, admin):
    new_admin = Pubkey.new_unique()
    primary = admin_actions.update_admin(snapshot, new_admin)
    secondary = admin_actions.update_admin(snapshot, new_admin, secondary=True)
    assert primary.accounts == secondary.accounts
    assert primary.data != secondary.data
    assert signers(primary) == [admin, new_admin]


@pytest.mark.parametrize("count", [4, 6])
def test_volatility_nodes_count(snapshot, count):
    with pytest.raises(InvalidInput):
        admin_actions.update_volatility_nodes(snapshot, Asset.SOL, [1] * count)


def test_volatility_nodes(snapshot):
    ix = admin_actions.update_volatility_nodes(snapshot, Asset.SOL, [1, 2, 3, 4, 5])
    assert ix.data[8:] == b"".join(n.to_bytes(8, "little") for n in range(1, 6))


def test_margin_parameters_by_generation(snapshot, pricing_snapshot):
    args = types.UpdateMarginParametersArgs(
        future_margin_initial=15_000_000, future_margin_maintenance=7_500_000
    )
    old = admin_actions.update_zeta_group_margin_parameters(snapshot, Asset.SOL, args)
    assert old.accounts[1].pubkey == snapshot.sub_exchanges[Asset.SOL].zeta_group
    with pytest.raises(SchemaVersionMismatch):
        admin_actions.update_margin_parameters(snapshot, Asset.SOL, args)
    new = admin_actions.update_margin_parameters(pricing_snapshot, Asset.SOL, args)
    assert new.data[8:] == old.data[8:]


def test_initialize_market_indexes(snapshot):
    ix, market_indexes = admin_actions.initialize_market_indexes(snapshot, Asset.BTC)
    zeta_group = snapshot.sub_exchanges[Asset.BTC].zeta_group
    address, nonce = pda.get_market_indexes(snapshot.program_id, zeta_group)
    assert market_indexes == address
    assert ix.data[8:] == bytes([nonce])


def test_initialize_zeta_market_txs(snapshot, admin):
    requested = []

    def rent(space):
        requested.append(space)
        return space * 2

    queues = [Pubkey.new_unique() for _ in range(4)]
    market_indexes = Pubkey.new_unique()
    create_accounts, init_market = admin_actions.initialize_zeta_market_txs(
        snapshot, Asset.SOL, 0, 0, *queues, market_indexes, rent
    )
    assert requested == [
        REQUEST_QUEUE_SPACE,
        EVENT_QUEUE_SPACE,
        ORDERBOOK_SIDE_SPACE,
        ORDERBOOK_SIDE_SPACE,
    ]
    assert [ix.program_id for ix in create_accounts] == [SYSTEM_PROGRAM_ID] * 4
    assert [ix.accounts[1].pubkey for ix in create_accounts] == queues
    assert all(ix.accounts[0].pubkey == admin for ix in create_accounts)

    (ix,) = init_market
    market = AssetRouter(snapshot).get_market(Asset.SOL, 0)
    keys = [meta.pubkey for meta in ix.accounts]
    assert keys[4] == market.address
    assert keys[5:9] == queues
    assert keys[11:15] == [
        market.base_vault,
        market.quote_vault,
        market.dex_market.base_vault,
        market.dex_market.quote_vault,
    ]


def test_initialize_zeta_market_txs_payer_is_not_admin(snapshot, admin):
    payer = Pubkey.new_unique()
    queues = [Pubkey.new_unique() for _ in range(4)]
    create_accounts, (init_market,) = admin_actions.initialize_zeta_market_txs(
        snapshot,
        Asset.SOL,
        0,
        0,
        *queues,
        Pubkey.new_unique(),
        lambda space: space,
        payer=payer,
    )
    assert all(ix.accounts[0].pubkey == payer for ix in create_accounts)
    assert init_market.accounts[3].pubkey == admin
    assert signers(init_market) == [admin]


def test_toggle_market_maker_derives_margin_account(snapshot, user):
    ix = admin_actions.toggle_market_maker(snapshot, Asset.SOL, user, True)
    zeta_group = snapshot.sub_exchanges[Asset.SOL].zeta_group
    margin_account, _ = pda.get_margin_account(snapshot.program_id, zeta_group, user)
    assert margin_account in [meta.pubkey for meta in ix.accounts]


def test_treasury_movement(snapshot):
    ix = admin_actions.treasury_movement(
        snapshot, TreasuryMovementType.TO_TREASURY_FROM_INSURANCE, 1_000
    )
    keys = [meta.pubkey for meta in ix.accounts]
    assert snapshot.combined_insurance_vault in keys
    assert snapshot.treasury_wallet in keys
    with pytest.raises(InvalidInput):
        admin_actions.treasury_movement(
            snapshot, TreasuryMovementType.TO_TREASURY_FROM_INSURANCE, -1
        )


def test_refer_user(snapshot, user):
    referrer = Pubkey.new_unique()
    ix = referrals.refer_user(snapshot, user, referrer)
    keys = [meta.pubkey for meta in ix.accounts]
    assert keys[1] == pda.get_referrer_account_address(snapshot.program_id, referrer)[0]
    assert keys[2] == pda.get_referral_account_address(snapshot.program_id, user)[0]


def test_set_referrals_rewards(snapshot):
    rewards = [
        types.SetReferralsRewardsArgs(
            referrals_account_key=Pubkey.new_unique(),
            pending_rewards=100,
            overwrite=False,
        )
        for _ in range(2)
    ]
    with pytest.raises(InvalidInput):
        referrals.set_referrals_rewards(snapshot, rewards)
    referrals_admin = Pubkey.new_unique()
    ix = referrals.set_referrals_rewards(snapshot, rewards, referrals_admin)
    assert [meta.pubkey for meta in ix.accounts[-2:]] == [
        arg.referrals_account_key for arg in rewards
    ]
    assert all(meta.is_writable for meta in ix.accounts[-2:])
