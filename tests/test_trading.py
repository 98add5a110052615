import dataclasses
import hashlib

import pytest
from solders.pubkey import Pubkey

from zeta_instructions import pda
from zeta_instructions.actions import trading
from zeta_instructions.actions.trading import OrderParams
from zeta_instructions.assets import Asset
from zeta_instructions.codec import OrderType, Side
from zeta_instructions.constants import PERP_INDEX, TOKEN_PROGRAM_ID
from zeta_instructions.errors import (
    InvalidInput,
    MarketIndexOutOfRange,
    SchemaVersionMismatch,
    UnknownAsset,
)
from zeta_instructions.instructions.cancel_order import layout as cancel_layout
from zeta_instructions.instructions.place_order_v3 import layout as v3_layout
from zeta_instructions.instructions.place_order_v4 import layout as v4_layout
from zeta_instructions.models import OrderOptions
from zeta_instructions.router import AssetRouter

# position of order_payer_token_account in the place order key list
PAYER_INDEX = 17


def discriminator(name):
    return hashlib.sha256(f"global:{name}".encode()).digest()[:8]


@pytest.fixture
def accounts():
    return {
        "margin_account": Pubkey.new_unique(),
        "authority": Pubkey.new_unique(),
        "open_orders": Pubkey.new_unique(),
    }


def place_v4(snapshot, accounts, params, asset=Asset.SOL, index=0, **kwargs):
    return trading.place_order_v4(
        snapshot,
        asset,
        index,
        params,
        accounts["margin_account"],
        accounts["authority"],
        accounts["open_orders"],
        **kwargs,
    )


def test_btc_bid_end_to_end(snapshot, accounts):
    params = OrderParams(price=21_000_000_000, size=500_000, side=Side.BID)
    ix = place_v4(snapshot, accounts, params, asset=Asset.BTC, index=3)
    market = AssetRouter(snapshot).get_market(Asset.BTC, 3)

    assert ix.program_id == snapshot.program_id
    assert ix.data[:8] == discriminator("place_order_v4")
    assert ix.accounts[PAYER_INDEX].pubkey == market.quote_vault
    assert ix.accounts[PAYER_INDEX].is_writable
    assert ix.accounts[10].pubkey == market.dex_market.address
    signers = [meta.pubkey for meta in ix.accounts if meta.is_signer]
    assert signers == [accounts["authority"]]

    decoded = v4_layout.parse(ix.data[8:])
    assert decoded.price == 21_000_000_000
    assert decoded.size == 500_000
    assert decoded.tag == "SDK"


def test_market_mint_follows_side(snapshot, accounts):
    market = AssetRouter(snapshot).get_market(Asset.SOL, 1)
    bid = place_v4(snapshot, accounts, OrderParams(100, 1, Side.BID), index=1)
    ask = place_v4(snapshot, accounts, OrderParams(100, 1, Side.ASK), index=1)
    assert bid.accounts[-2].pubkey == market.dex_market.quote_mint
    assert ask.accounts[-2].pubkey == market.dex_market.base_mint


@pytest.mark.parametrize(
    "builder, market_index, payer_index",
    [
        (trading.place_order_v3, 1, PAYER_INDEX),
        (trading.place_order_v4, 1, PAYER_INDEX),
        (trading.place_perp_order, None, PAYER_INDEX),
        (trading.place_perp_order_v2, None, PAYER_INDEX),
        # no greeks account
        (trading.place_perp_order_v3, None, PAYER_INDEX - 1),
    ],
)
@pytest.mark.parametrize("side", [Side.BID, Side.ASK])
def test_payer_follows_side(
    snapshot, pricing_snapshot, accounts, builder, market_index, payer_index, side
):
    router = AssetRouter(snapshot)
    params = OrderParams(100, 1, side)
    owner = (
        accounts["margin_account"],
        accounts["authority"],
        accounts["open_orders"],
    )
    if market_index is None:
        market = router.get_perp_market(Asset.SOL)
        target = snapshot
        if builder is trading.place_perp_order_v3:
            target = pricing_snapshot
        ix = builder(target, Asset.SOL, params, *owner)
    else:
        market = router.get_market(Asset.SOL, market_index)
        ix = builder(snapshot, Asset.SOL, market_index, params, *owner)
    expected = market.quote_vault if side == Side.BID else market.base_vault
    assert ix.accounts[payer_index].pubkey == expected
    assert ix.accounts[payer_index].is_writable


def test_v3_and_v4_share_the_account_layout(snapshot, accounts):
    params = OrderParams(100, 1, Side.ASK)
    v3 = trading.place_order_v3(
        snapshot,
        Asset.SOL,
        2,
        params,
        accounts["margin_account"],
        accounts["authority"],
        accounts["open_orders"],
    )
    v4 = place_v4(snapshot, accounts, params, index=2)
    assert v3.accounts == v4.accounts
    assert v3.data[:8] == discriminator("place_order_v3")
    assert "tif_offset" not in v3_layout.parse(v3.data[8:])


@pytest.mark.parametrize(
    "client_order_id, expected", [(None, None), (0, None), (7, 7)]
)
def test_zero_client_order_id_is_absent(snapshot, accounts, client_order_id, expected):
    params = OrderParams(100, 1, Side.BID, client_order_id=client_order_id)
    decoded = v4_layout.parse(place_v4(snapshot, accounts, params).data[8:])
    assert decoded.client_order_id == expected


@pytest.mark.parametrize("tif_offset, expected", [(None, None), (0, None), (42, 42)])
def test_zero_tif_offset_is_absent(snapshot, accounts, tif_offset, expected):
    params = OrderParams(100, 1, Side.BID, tif_offset=tif_offset)
    decoded = v4_layout.parse(place_v4(snapshot, accounts, params).data[8:])
    assert decoded.tif_offset == expected


def test_whitelist_account_is_trailing_and_optional(snapshot, accounts):
    params = OrderParams(100, 1, Side.BID)
    plain = place_v4(snapshot, accounts, params)
    whitelist = Pubkey.new_unique()
    with_whitelist = place_v4(
        snapshot, accounts, params, whitelist_trading_fees_account=whitelist
    )
    assert len(with_whitelist.accounts) == len(plain.accounts) + 1
    assert with_whitelist.accounts[:-1] == plain.accounts
    assert with_whitelist.accounts[-1].pubkey == whitelist
    assert not with_whitelist.accounts[-1].is_writable
    assert whitelist not in [meta.pubkey for meta in plain.accounts]


def test_long_tag_fails_before_resolution(snapshot, accounts, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("resolved accounts for an invalid order")

    monkeypatch.setattr(trading, "AssetRouter", fail)
    monkeypatch.setattr(pda, "derive", fail)
    params = OrderParams(100, 1, Side.BID, tag="ABCDE")
    with pytest.raises(InvalidInput, match="Tag is too long! Max length = 4"):
        place_v4(snapshot, accounts, params)
    with pytest.raises(InvalidInput):
        trading.place_perp_order_v2(
            snapshot,
            Asset.SOL,
            params,
            accounts["margin_account"],
            accounts["authority"],
            accounts["open_orders"],
        )


def test_invalid_order_type_fails_before_resolution(snapshot, accounts, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("resolved accounts for an invalid order")

    monkeypatch.setattr(trading, "AssetRouter", fail)
    monkeypatch.setattr(pda, "derive", fail)
    params = OrderParams(100, 1, Side.BID, order_type=99)
    with pytest.raises(InvalidInput, match="Invalid order type"):
        place_v4(snapshot, accounts, params)
    with pytest.raises(InvalidInput):
        trading.validate_order(params)


def test_tag_is_checked_before_unknown_asset(snapshot, accounts):
    params = OrderParams(100, 1, Side.BID, tag="TOOLONG")
    with pytest.raises(InvalidInput):
        place_v4(snapshot, accounts, params, asset=Asset.ARB)


@pytest.mark.parametrize(
    "params",
    [
        OrderParams(-1, 1, Side.BID),
        OrderParams(2**64, 1, Side.BID),
        OrderParams(100, 1, Side.BID, tif_offset=2**16),
        OrderParams(100, 1, Side.BID, client_order_id=-5),
        OrderParams(100, True, Side.BID),
    ],
)
def test_out_of_range_arguments(params):
    with pytest.raises(InvalidInput):
        trading.validate_order(params)


def test_unknown_asset_and_market_index(snapshot, accounts):
    params = OrderParams(100, 1, Side.BID)
    with pytest.raises(UnknownAsset):
        place_v4(snapshot, accounts, params, asset=Asset.ETH)
    with pytest.raises(MarketIndexOutOfRange):
        place_v4(snapshot, accounts, params, index=9)


def test_from_options():
    options = OrderOptions(
        order_type=OrderType.POSTONLY, client_order_id=3, tag="mm", tif_offset=10
    )
    params = OrderParams.from_options(5, 6, Side.ASK, options)
    assert params == OrderParams(
        5, 6, Side.ASK, OrderType.POSTONLY, client_order_id=3, tag="mm", tif_offset=10
    )


def test_every_option_reaches_order_params():
    option_fields = {f.name for f in dataclasses.fields(OrderOptions)}
    param_fields = {f.name for f in dataclasses.fields(OrderParams)}
    assert option_fields <= param_fields


def test_perp_order_uses_perp_market(snapshot, accounts):
    ix = trading.place_perp_order_v2(
        snapshot,
        Asset.BTC,
        OrderParams(100, 1, Side.ASK),
        accounts["margin_account"],
        accounts["authority"],
        accounts["open_orders"],
    )
    perp = AssetRouter(snapshot).get_perp_market(Asset.BTC)
    keys = [meta.pubkey for meta in ix.accounts]
    assert perp.dex_market.address in keys
    assert perp.base_vault in keys
    assert keys[-1] == snapshot.sub_exchanges[Asset.BTC].perp_sync_queue


def test_perp_order_v3_needs_pricing(snapshot, pricing_snapshot, accounts):
    args = (
        Asset.SOL,
        OrderParams(100, 1, Side.BID),
        accounts["margin_account"],
        accounts["authority"],
        accounts["open_orders"],
    )
    with pytest.raises(SchemaVersionMismatch):
        trading.place_perp_order_v3(snapshot, *args)
    ix = trading.place_perp_order_v3(pricing_snapshot, *args)
    assert ix.accounts[1].pubkey == pricing_snapshot.pricing.address
    assert ix.data[:8] == discriminator("place_perp_order_v3")


def test_cancel_order_layout(snapshot, accounts):
    market = AssetRouter(snapshot).get_market(Asset.SOL, 1)
    ix = trading.cancel_order(
        snapshot,
        Asset.SOL,
        1,
        accounts["authority"],
        accounts["margin_account"],
        accounts["open_orders"],
        order_id=2**100,
        side=Side.ASK,
    )
    keys = [meta.pubkey for meta in ix.accounts]
    assert keys == [
        accounts["authority"],
        snapshot.sub_exchanges[Asset.SOL].zeta_group,
        snapshot.state,
        accounts["margin_account"],
        snapshot.dex_program_id,
        snapshot.serum_authority,
        accounts["open_orders"],
        market.address,
        market.dex_market.bids,
        market.dex_market.asks,
        market.dex_market.event_queue,
    ]
    assert ix.accounts[0].is_signer
    assert cancel_layout.parse(ix.data[8:]).order_id == 2**100


def test_cancel_order_v2_keys_off_pricing(pricing_snapshot, accounts):
    ix = trading.cancel_order_v2(
        pricing_snapshot,
        Asset.BTC,
        PERP_INDEX,
        accounts["authority"],
        accounts["margin_account"],
        accounts["open_orders"],
        order_id=1,
        side=Side.BID,
    )
    assert ix.accounts[1].pubkey == pricing_snapshot.pricing.address
    assert ix.data[:8] == discriminator("cancel_order_v2")


def test_initialize_open_orders_returns_derived_address(snapshot, user):
    market = AssetRouter(snapshot).get_market(Asset.SOL, 0)
    margin_account = Pubkey.new_unique()
    ix, open_orders = trading.initialize_open_orders(
        snapshot, Asset.SOL, market.address, user, user, margin_account
    )
    expected, _ = pda.get_open_orders(
        snapshot.program_id, snapshot.dex_program_id, market.address, user
    )
    assert open_orders == expected
    assert open_orders in [meta.pubkey for meta in ix.accounts]


def test_liquidate_v2_uses_pricing_oracles(pricing_snapshot, user):
    market = AssetRouter(pricing_snapshot).get_market(Asset.BTC, 0)
    ix = trading.liquidate_v2(
        pricing_snapshot,
        Asset.BTC,
        user,
        Pubkey.new_unique(),
        market.address,
        Pubkey.new_unique(),
        10,
    )
    pricing = pricing_snapshot.pricing
    keys = [meta.pubkey for meta in ix.accounts]
    assert keys[3] == pricing.address
    assert keys[4:6] == [pricing.oracles[1], pricing.oracle_backup_feeds[1]]
    assert TOKEN_PROGRAM_ID not in keys
