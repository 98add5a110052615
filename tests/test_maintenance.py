import pytest
from solders.pubkey import Pubkey

from zeta_instructions.actions import maintenance
from zeta_instructions.assets import Asset
from zeta_instructions.constants import PRODUCTS_PER_EXPIRY
from zeta_instructions.errors import InvalidInput, SchemaVersionMismatch
from zeta_instructions.instructions.update_pricing import layout as pricing_layout
from zeta_instructions.router import AssetRouter


def test_crank_event_queue(snapshot):
    open_orders = [Pubkey.new_unique() for _ in range(3)]
    ix = maintenance.crank_event_queue(snapshot, Asset.SOL, 2, open_orders)
    market = AssetRouter(snapshot).get_market(Asset.SOL, 2)
    assert ix.accounts[2].pubkey == market.address
    assert ix.accounts[3].pubkey == market.dex_market.event_queue
    assert [meta.pubkey for meta in ix.accounts[6:]] == open_orders
    assert all(meta.is_writable for meta in ix.accounts[6:])


@pytest.mark.parametrize("expiry_index", [None, 0, 4])
def test_update_pricing_expiry_index(snapshot, expiry_index):
    ix = maintenance.update_pricing(snapshot, Asset.BTC, expiry_index)
    assert pricing_layout.parse(ix.data[8:]).expiry_index == expiry_index
    perp = AssetRouter(snapshot).get_perp_market(Asset.BTC)
    assert [meta.pubkey for meta in ix.accounts[-3:]] == [
        perp.address,
        perp.dex_market.bids,
        perp.dex_market.asks,
    ]


def test_update_pricing_expiry_index_range(snapshot):
    with pytest.raises(InvalidInput):
        maintenance.update_pricing(snapshot, Asset.BTC, 256)


def test_update_pricing_v2(snapshot, pricing_snapshot):
    with pytest.raises(SchemaVersionMismatch):
        maintenance.update_pricing_v2(snapshot, Asset.SOL)
    ix = maintenance.update_pricing_v2(pricing_snapshot, Asset.SOL)
    assert ix.accounts[1].pubkey == pricing_snapshot.pricing.address


def test_retreat_market_nodes(snapshot):
    ix = maintenance.retreat_market_nodes(snapshot, Asset.SOL, 0)
    nodes = snapshot.sub_exchanges[Asset.SOL].node_keys[:PRODUCTS_PER_EXPIRY]
    assert [meta.pubkey for meta in ix.accounts[5:]] == list(nodes)


def test_settlement_account_depends_on_expiry(snapshot):
    first = maintenance.get_settlement_account(snapshot, Asset.SOL, 1_700_000_000)
    second = maintenance.get_settlement_account(snapshot, Asset.SOL, 1_700_086_400)
    assert first != second
    with pytest.raises(InvalidInput):
        maintenance.get_settlement_account(snapshot, Asset.SOL, -1)


def test_settle_dex_funds(snapshot):
    market = AssetRouter(snapshot).get_market(Asset.SOL, 0)
    open_orders = [Pubkey.new_unique(), Pubkey.new_unique()]
    ix = maintenance.settle_dex_funds(snapshot, Asset.SOL, market.address, open_orders)
    keys = [meta.pubkey for meta in ix.accounts]
    assert keys[1:6] == [
        market.address,
        market.base_vault,
        market.quote_vault,
        market.dex_market.base_vault,
        market.dex_market.quote_vault,
    ]
    assert keys[6] == maintenance.get_vault_owner(snapshot, market)
    assert keys[-2:] == open_orders


def test_burn_vault_tokens_quote_first(snapshot):
    market = AssetRouter(snapshot).get_market(Asset.BTC, 0)
    quote, base = maintenance.burn_vault_tokens(snapshot, Asset.BTC, market.address)
    assert quote.accounts[1].pubkey == market.dex_market.quote_mint
    assert quote.accounts[2].pubkey == market.quote_vault
    assert base.accounts[1].pubkey == market.dex_market.base_mint
    assert base.accounts[2].pubkey == market.base_vault


def test_market_cleaning_metas():
    assert maintenance.market_cleaning_metas([]) == []


def test_settle_positions_halted_v2(snapshot, pricing_snapshot, admin):
    margin_accounts = [Pubkey.new_unique()]
    with pytest.raises(SchemaVersionMismatch):
        maintenance.settle_positions_halted_v2(snapshot, margin_accounts, admin)
    ix = maintenance.settle_positions_halted_v2(
        pricing_snapshot, margin_accounts, admin
    )
    assert ix.accounts[-1].pubkey == margin_accounts[0]
    assert admin in [meta.pubkey for meta in ix.accounts if meta.is_signer]
