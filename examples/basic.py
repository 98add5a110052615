import json
import os

from solders.keypair import Keypair
from solders.message import Message
from solders.pubkey import Pubkey

from zeta_instructions import (
    Asset,
    ExchangeSnapshot,
    Kind,
    Market,
    OrderParams,
    Side,
    SubExchange,
    load_network_config,
    pda,
)
from zeta_instructions.actions import collateral, trading
from zeta_instructions.constants import PERP_INDEX


def load_keypair() -> Keypair:
    path = os.environ.get("USER_KEYPAIR")
    if path is None:
        return Keypair()
    with open(path, "r") as f:
        secret = json.load(f)
    return Keypair.from_bytes(bytes(secret))


def sol_sub_exchange(program_id: Pubkey, underlying_mint: Pubkey) -> SubExchange:
    # queue and book accounts normally come from the loaded market state
    zeta_group, _ = pda.get_zeta_group(program_id, underlying_mint)

    def market(seed_index: int, kind: Kind) -> Market:
        return Market.derive(
            program_id,
            zeta_group,
            seed_index,
            seed_index,
            kind,
            request_queue=Pubkey.new_unique(),
            event_queue=Pubkey.new_unique(),
            bids=Pubkey.new_unique(),
            asks=Pubkey.new_unique(),
        )

    return SubExchange.derive(
        program_id,
        Asset.SOL,
        underlying_mint,
        oracle=Pubkey.new_unique(),
        oracle_backup_feed=Pubkey.new_unique(),
        markets=[market(0, Kind.FUTURE)],
        perp_market=market(PERP_INDEX, Kind.PERP),
    )


def main() -> None:
    kp = load_keypair()
    config = load_network_config()
    snapshot = ExchangeSnapshot.derive(
        config,
        usdc_mint=Pubkey.new_unique(),
        admin=Pubkey.new_unique(),
        sub_exchanges=[sol_sub_exchange(config.program_id, Pubkey.new_unique())],
    )

    init_margin, margin_account = collateral.initialize_margin_account(
        snapshot, Asset.SOL, kp.pubkey()
    )
    perp = snapshot.sub_exchanges[Asset.SOL].perp_market
    init_open_orders, open_orders = trading.initialize_open_orders(
        snapshot, Asset.SOL, perp.address, kp.pubkey(), kp.pubkey(), margin_account
    )
    order = trading.place_perp_order_v2(
        snapshot,
        Asset.SOL,
        OrderParams(price=20_000_000, size=1_000, side=Side.BID, tif_offset=30),
        margin_account,
        kp.pubkey(),
        open_orders,
    )
    message = Message([init_margin, init_open_orders, order], kp.pubkey())
    print(margin_account, open_orders)
    print(message)


main()
