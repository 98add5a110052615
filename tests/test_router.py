import dataclasses

import pytest
from solders.pubkey import Pubkey

from zeta_instructions import pda
from zeta_instructions.assets import Asset
from zeta_instructions.codec import Kind
from zeta_instructions.constants import PERP_INDEX
from zeta_instructions.errors import (
    MarketIndexOutOfRange,
    SchemaVersionMismatch,
    UnknownAsset,
    UnknownMarket,
)
from zeta_instructions.router import AssetRouter

from .conftest import DATED_MARKETS


def test_resolve(snapshot, sub_exchanges):
    router = AssetRouter(snapshot)
    assert router.resolve(Asset.SOL) is snapshot.sub_exchanges[Asset.SOL]
    assert router.get_zeta_group_address(Asset.BTC) == sub_exchanges[1].zeta_group


def test_unloaded_asset_does_not_default(snapshot):
    router = AssetRouter(snapshot)
    with pytest.raises(UnknownAsset):
        router.resolve(Asset.ETH)
    with pytest.raises(UnknownAsset):
        router.get_market(Asset.ETH, 0)


def test_market_by_index(snapshot):
    router = AssetRouter(snapshot)
    for index in range(DATED_MARKETS):
        market = router.get_market(Asset.SOL, index)
        assert market.index == index
        assert market.kind == Kind.FUTURE


def test_perp_index_addresses_the_perp_market(snapshot):
    router = AssetRouter(snapshot)
    perp = router.get_market(Asset.BTC, PERP_INDEX)
    assert perp is router.get_perp_market(Asset.BTC)
    assert perp.kind == Kind.PERP


@pytest.mark.parametrize("index", [-1, DATED_MARKETS, PERP_INDEX - 1])
def test_market_index_out_of_range(snapshot, index):
    with pytest.raises(MarketIndexOutOfRange) as excinfo:
        AssetRouter(snapshot).get_market(Asset.SOL, index)
    assert excinfo.value.count == DATED_MARKETS


def test_market_by_address(snapshot):
    router = AssetRouter(snapshot)
    market = router.get_market(Asset.BTC, 2)
    assert router.get_market_by_address(Asset.BTC, market.address) is market
    # a market belongs to exactly one asset
    with pytest.raises(UnknownMarket):
        router.get_market_by_address(Asset.SOL, market.address)
    with pytest.raises(UnknownMarket):
        router.get_market_by_address(Asset.BTC, Pubkey.new_unique())


def test_get_markets_ends_with_perp(snapshot):
    markets = AssetRouter(snapshot).get_markets(Asset.SOL)
    assert len(markets) == DATED_MARKETS + 1
    assert markets[-1].kind == Kind.PERP


def test_greeks_and_nodes_are_derived(snapshot, network_config):
    router = AssetRouter(snapshot)
    zeta_group = router.get_zeta_group_address(Asset.SOL)
    assert router.get_greeks(Asset.SOL) == pda.get_greeks(
        network_config.program_id, zeta_group
    )[0]
    assert router.get_market_node(Asset.SOL, 1) == pda.get_market_node(
        network_config.program_id, zeta_group, 1
    )[0]
    with pytest.raises(MarketIndexOutOfRange):
        router.get_market_node(Asset.SOL, DATED_MARKETS)


def test_missing_greeks(snapshot):
    sub = dataclasses.replace(snapshot.sub_exchanges[Asset.SOL], greeks=None)
    stripped = dataclasses.replace(
        snapshot, sub_exchanges={**snapshot.sub_exchanges, Asset.SOL: sub}
    )
    with pytest.raises(SchemaVersionMismatch):
        AssetRouter(stripped).get_greeks(Asset.SOL)


def test_pricing_requires_pricing_generation(snapshot, pricing_snapshot):
    with pytest.raises(SchemaVersionMismatch):
        AssetRouter(snapshot).get_pricing()
    assert AssetRouter(pricing_snapshot).get_pricing() is pricing_snapshot.pricing


def test_pricing_oracles_by_asset_index(pricing_snapshot, sub_exchanges):
    router = AssetRouter(pricing_snapshot)
    sol, btc = sub_exchanges
    assert router.get_pricing_oracles(Asset.SOL) == (
        sol.oracle,
        sol.oracle_backup_feed,
    )
    assert router.get_pricing_oracles(Asset.BTC) == (
        btc.oracle,
        btc.oracle_backup_feed,
    )


def test_snapshot_is_read_only(snapshot):
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.admin = Pubkey.new_unique()
    with pytest.raises(TypeError):
        snapshot.sub_exchanges[Asset.ETH] = snapshot.sub_exchanges[Asset.SOL]
