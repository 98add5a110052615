import pytest
from solders.pubkey import Pubkey

from zeta_instructions import batch
from zeta_instructions.actions import maintenance
from zeta_instructions.assets import Asset
from zeta_instructions.codec import Side
from zeta_instructions.constants import (
    CLEAN_MARKET_LIMIT,
    MAX_CANCELS_PER_TX,
    MAX_SETTLE_ACCOUNTS,
    MAX_SETTLEMENT_ACCOUNTS,
    PERP_INDEX,
)
from zeta_instructions.errors import InvalidInput, UnknownMarket
from zeta_instructions.models import CancelArgs
from zeta_instructions.router import AssetRouter

EXPIRY_TS = 1_700_000_000


def keys(count):
    return [Pubkey.new_unique() for _ in range(count)]


@pytest.mark.parametrize(
    "count, limit, sizes",
    [
        (0, 5, []),
        (5, 5, [5]),
        (12, 5, [5, 5, 2]),
        (3, 20, [3]),
    ],
)
def test_split(count, limit, sizes):
    items = list(range(count))
    chunks = batch.split(items, limit)
    assert [len(chunk) for chunk in chunks] == sizes
    assert [item for chunk in chunks for item in chunk] == items


def test_split_keeps_duplicates():
    assert batch.split([1, 1, 2, 1], 3) == [[1, 1, 2], [1]]


@pytest.mark.parametrize("limit", [0, -1])
def test_split_rejects_non_positive_limit(limit):
    with pytest.raises(InvalidInput):
        batch.split([1, 2], limit)


def remaining(ix, fixed):
    return [meta.pubkey for meta in ix.accounts[fixed:]]


def test_settle_positions_txs(snapshot):
    margin_accounts = keys(2 * MAX_SETTLEMENT_ACCOUNTS + 1)
    txs = batch.settle_positions_txs(snapshot, Asset.SOL, EXPIRY_TS, margin_accounts)
    assert [len(tx) for tx in txs] == [1, 1, 1]
    settled = [key for tx in txs for key in remaining(tx[0], 2)]
    assert settled == margin_accounts
    settlement, _ = maintenance.get_settlement_account(snapshot, Asset.SOL, EXPIRY_TS)
    assert all(tx[0].accounts[1].pubkey == settlement for tx in txs)
    assert all(meta.is_writable for tx in txs for meta in tx[0].accounts[2:])


def test_settle_dex_funds_txs(snapshot):
    market = AssetRouter(snapshot).get_market(Asset.BTC, 1)
    open_orders = keys(MAX_SETTLE_ACCOUNTS * 3)
    txs = batch.settle_dex_funds_txs(snapshot, Asset.BTC, market.address, open_orders)
    assert len(txs) == 3
    fixed = len(txs[0][0].accounts) - MAX_SETTLE_ACCOUNTS
    assert [key for tx in txs for key in remaining(tx[0], fixed)] == open_orders
    vault_owner = maintenance.get_vault_owner(snapshot, market)
    assert all(vault_owner in [m.pubkey for m in tx[0].accounts] for tx in txs)


def test_settle_dex_funds_unknown_market(snapshot):
    with pytest.raises(UnknownMarket):
        batch.settle_dex_funds_txs(snapshot, Asset.BTC, Pubkey.new_unique(), keys(1))


def test_empty_batch_builds_nothing(snapshot):
    assert batch.apply_perp_funding_txs(snapshot, Asset.SOL, []) == []


def test_clean_zeta_markets_txs(snapshot):
    markets = AssetRouter(snapshot).get_markets(Asset.SOL) * 3
    txs = batch.clean_zeta_markets_txs(snapshot, Asset.SOL, markets)
    assert len(txs) == 2
    cleaned = [key for tx in txs for key in remaining(tx[0], 2)]
    assert len(cleaned) == 3 * len(markets)
    assert cleaned[:3] == [
        markets[0].address,
        markets[0].dex_market.bids,
        markets[0].dex_market.asks,
    ]
    assert len(txs[0][0].accounts) == 2 + 3 * CLEAN_MARKET_LIMIT
    assert not any(meta.is_writable for tx in txs for meta in tx[0].accounts[2:])


def test_clean_zeta_markets_halted_txs(snapshot):
    markets = AssetRouter(snapshot).get_markets(Asset.BTC)
    halted = batch.clean_zeta_markets_txs(snapshot, Asset.BTC, markets, halted=True)
    regular = batch.clean_zeta_markets_txs(snapshot, Asset.BTC, markets)
    assert halted[0][0].accounts == regular[0][0].accounts
    assert halted[0][0].data != regular[0][0].data


@pytest.fixture
def cancel_setup(snapshot):
    router = AssetRouter(snapshot)
    sol_market = router.get_market(Asset.SOL, 0)
    btc_perp = router.get_market(Asset.BTC, PERP_INDEX)
    cancels = [
        CancelArgs(Asset.SOL, sol_market.address, order_id, Side.BID)
        for order_id in range(4)
    ] + [CancelArgs(Asset.BTC, btc_perp.address, 99, Side.ASK)]
    margin_accounts = {Asset.SOL: Pubkey.new_unique(), Asset.BTC: Pubkey.new_unique()}
    open_orders = {
        sol_market.address: Pubkey.new_unique(),
        btc_perp.address: Pubkey.new_unique(),
    }
    return cancels, margin_accounts, open_orders


def test_cancel_multiple_orders_txs(snapshot, user, cancel_setup):
    cancels, margin_accounts, open_orders = cancel_setup
    txs = batch.cancel_multiple_orders_txs(
        snapshot, cancels, user, margin_accounts, open_orders
    )
    assert [len(tx) for tx in txs] == [MAX_CANCELS_PER_TX, 2]
    last = txs[-1][-1]
    assert last.accounts[3].pubkey == margin_accounts[Asset.BTC]
    assert last.accounts[6].pubkey == open_orders[cancels[-1].market]


def test_cancel_multiple_orders_no_error(snapshot, user, cancel_setup):
    cancels, margin_accounts, open_orders = cancel_setup
    strict = batch.cancel_multiple_orders_txs(
        snapshot, cancels, user, margin_accounts, open_orders
    )
    lenient = batch.cancel_multiple_orders_txs(
        snapshot, cancels, user, margin_accounts, open_orders, no_error=True
    )
    assert strict[0][0].accounts == lenient[0][0].accounts
    assert strict[0][0].data[:8] != lenient[0][0].data[:8]


def test_cancel_multiple_orders_missing_open_orders(snapshot, user, cancel_setup):
    cancels, margin_accounts, _ = cancel_setup
    with pytest.raises(InvalidInput):
        batch.cancel_multiple_orders_txs(snapshot, cancels, user, margin_accounts, {})
