"""
Shared fixtures: a small two-asset exchange snapshot.

Every non-derived address comes from ``Pubkey.new_unique()``, so the
snapshot is stable within a test session and needs no network access.
"""

import pytest
from solders.pubkey import Pubkey

from zeta_instructions import pda
from zeta_instructions.assets import Asset
from zeta_instructions.codec import Kind
from zeta_instructions.config import NetworkConfig
from zeta_instructions.constants import PERP_INDEX, Network
from zeta_instructions.snapshot import (
    ExchangeSnapshot,
    Market,
    SchemaGeneration,
    SubExchange,
)

DATED_MARKETS = 4


def make_market(program_id, zeta_group, seed_index, index, kind):
    return Market.derive(
        program_id,
        zeta_group,
        seed_index,
        index,
        kind,
        request_queue=Pubkey.new_unique(),
        event_queue=Pubkey.new_unique(),
        bids=Pubkey.new_unique(),
        asks=Pubkey.new_unique(),
    )


def make_sub_exchange(program_id, asset):
    underlying_mint = Pubkey.new_unique()
    zeta_group, _ = pda.get_zeta_group(program_id, underlying_mint)
    markets = [
        make_market(program_id, zeta_group, i, i, Kind.FUTURE)
        for i in range(DATED_MARKETS)
    ]
    perp = make_market(program_id, zeta_group, PERP_INDEX, PERP_INDEX, Kind.PERP)
    return SubExchange.derive(
        program_id,
        asset,
        underlying_mint,
        oracle=Pubkey.new_unique(),
        oracle_backup_feed=Pubkey.new_unique(),
        markets=markets,
        perp_market=perp,
    )


@pytest.fixture(scope="session")
def network_config():
    return NetworkConfig.for_network(Network.DEVNET)


@pytest.fixture(scope="session")
def sub_exchanges(network_config):
    return [
        make_sub_exchange(network_config.program_id, asset)
        for asset in (Asset.SOL, Asset.BTC)
    ]


@pytest.fixture(scope="session")
def admin():
    return Pubkey.new_unique()


@pytest.fixture(scope="session")
def snapshot(network_config, sub_exchanges, admin):
    """Zeta group generation: no pricing account."""
    return ExchangeSnapshot.derive(
        network_config,
        usdc_mint=Pubkey.new_unique(),
        admin=admin,
        sub_exchanges=sub_exchanges,
    )


@pytest.fixture(scope="session")
def pricing_snapshot(network_config, sub_exchanges, admin):
    return ExchangeSnapshot.derive(
        network_config,
        usdc_mint=Pubkey.new_unique(),
        admin=admin,
        sub_exchanges=sub_exchanges,
        generation=SchemaGeneration.PRICING,
    )


@pytest.fixture
def user():
    return Pubkey.new_unique()
