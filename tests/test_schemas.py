import hashlib

import pytest
from solders.pubkey import Pubkey

from zeta_instructions import schemas, types
from zeta_instructions.actions.trading import OrderParams
from zeta_instructions.assets import Asset
from zeta_instructions.codec import Side
from zeta_instructions.constants import PERP_INDEX
from zeta_instructions.errors import SchemaVersionMismatch
from zeta_instructions.snapshot import SchemaGeneration


def discriminator(name):
    return hashlib.sha256(f"global:{name}".encode()).digest()[:8]


@pytest.fixture
def order_accounts():
    return Pubkey.new_unique(), Pubkey.new_unique(), Pubkey.new_unique()


def test_dated_markets_use_place_order_v4(snapshot, pricing_snapshot, order_accounts):
    params = OrderParams(100, 1, Side.BID)
    for snap in (snapshot, pricing_snapshot):
        variant = schemas.infer_place_order(snap, Asset.SOL, 0, params, *order_accounts)
        assert isinstance(variant, schemas.PlaceOrderV4)


def test_perp_variant_follows_generation(snapshot, pricing_snapshot, order_accounts):
    params = OrderParams(100, 1, Side.ASK)
    old = schemas.infer_place_order(
        snapshot, Asset.BTC, PERP_INDEX, params, *order_accounts
    )
    new = schemas.infer_place_order(
        pricing_snapshot, Asset.BTC, PERP_INDEX, params, *order_accounts
    )
    assert isinstance(old, schemas.PlacePerpOrderV2)
    assert isinstance(new, schemas.PlacePerpOrderV3)
    assert old.build(snapshot).data[:8] == discriminator("place_perp_order_v2")
    assert new.build(pricing_snapshot).data[:8] == discriminator(
        "place_perp_order_v3"
    )


def test_explicit_variant_is_never_upgraded(pricing_snapshot, user):
    variant = schemas.Deposit(
        Asset.SOL, 1_000_000, Pubkey.new_unique(), Pubkey.new_unique(), user
    )
    ix = variant.build(pricing_snapshot)
    assert ix.data[:8] == discriminator(variant.kind)
    assert ix.accounts[0].pubkey == pricing_snapshot.sub_exchanges[Asset.SOL].zeta_group


def test_pricing_variant_on_zeta_group_snapshot(snapshot):
    with pytest.raises(SchemaVersionMismatch):
        schemas.UpdatePricingV2(Asset.SOL).build(snapshot)


@pytest.mark.parametrize(
    "infer, args, old, new",
    [
        (
            schemas.infer_update_pricing,
            (Asset.SOL,),
            schemas.UpdatePricing,
            schemas.UpdatePricingV2,
        ),
        (
            schemas.infer_rebalance_insurance_vault,
            (Asset.SOL, [Pubkey.default()]),
            schemas.RebalanceInsuranceVault,
            schemas.RebalanceInsuranceVaultV2,
        ),
        (
            schemas.infer_settle_positions_halted,
            (Asset.BTC, [Pubkey.default()], Pubkey.default()),
            schemas.SettlePositionsHalted,
            schemas.SettlePositionsHaltedV2,
        ),
        (
            schemas.infer_withdraw,
            (Asset.SOL, 5, Pubkey.default(), Pubkey.default(), Pubkey.default()),
            schemas.Withdraw,
            schemas.WithdrawV2,
        ),
        (
            schemas.infer_update_margin_parameters,
            (Asset.SOL, types.UpdateMarginParametersArgs(1, 2)),
            schemas.UpdateZetaGroupMarginParameters,
            schemas.UpdateMarginParameters,
        ),
    ],
)
def test_inferred_variant(snapshot, pricing_snapshot, infer, args, old, new):
    assert isinstance(infer(snapshot, *args), old)
    assert isinstance(infer(pricing_snapshot, *args), new)
    assert old.generation == SchemaGeneration.ZETA_GROUP
    assert new.generation == SchemaGeneration.PRICING


def test_variant_builds_match_kind(snapshot, pricing_snapshot):
    margin_accounts = (Pubkey.new_unique(), Pubkey.new_unique())
    old = schemas.infer_rebalance_insurance_vault(snapshot, Asset.SOL, margin_accounts)
    new = schemas.infer_rebalance_insurance_vault(
        pricing_snapshot, Asset.SOL, margin_accounts
    )
    old_ix = old.build(snapshot)
    new_ix = new.build(pricing_snapshot)
    assert old_ix.data[:8] == discriminator(old.kind)
    assert new_ix.data[:8] == discriminator(new.kind)
    assert [m.pubkey for m in old_ix.accounts[-2:]] == list(margin_accounts)
    assert [m.pubkey for m in new_ix.accounts[-2:]] == list(margin_accounts)


def test_variants_are_immutable():
    variant = schemas.UpdatePricing(Asset.SOL, 2)
    with pytest.raises(AttributeError):
        variant.expiry_index = 3
