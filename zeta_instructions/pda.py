"""Program-derived address schemes used by the Zeta program.

Each ``get_*`` function returns the ``(address, nonce)`` pair produced by
``Pubkey.find_program_address`` for a fixed prefix followed by the scheme's
variable seeds. Integer seeds are little-endian and fixed-width: indices are a
single byte, expiry timestamps eight bytes.
"""
from __future__ import annotations
import logging
import typing
from solders.pubkey import Pubkey
from .constants import MAX_SEED_LENGTH, MAX_SEEDS
from .errors import InvalidSeed

logger = logging.getLogger(__name__)

Seed = typing.Union[bytes, str, Pubkey]
PDA = typing.Tuple[Pubkey, int]


def _seed_bytes(seed: Seed) -> bytes:
    if isinstance(seed, Pubkey):
        return bytes(seed)
    if isinstance(seed, str):
        return seed.encode("utf-8")
    return bytes(seed)


def _int_seed(value: int, width: int) -> bytes:
    try:
        return int(value).to_bytes(width, "little")
    except OverflowError:
        raise InvalidSeed(
            f"Integer seed {value} does not fit in {width} byte(s)"
        ) from None


def u8(value: int) -> bytes:
    return _int_seed(value, 1)


def u64(value: int) -> bytes:
    return _int_seed(value, 8)


def validate_seeds(seeds: typing.Sequence[Seed]) -> list[bytes]:
    encoded = [_seed_bytes(seed) for seed in seeds]
    if len(encoded) > MAX_SEEDS:
        raise InvalidSeed(f"Too many seeds: {len(encoded)} > {MAX_SEEDS}")
    for seed in encoded:
        if len(seed) > MAX_SEED_LENGTH:
            raise InvalidSeed(
                f"Seed of {len(seed)} bytes exceeds the {MAX_SEED_LENGTH} byte limit"
            )
    return encoded


def derive(program_id: Pubkey, seeds: typing.Sequence[Seed]) -> PDA:
    """Find the first off-curve address for ``seeds`` under ``program_id``.

    The nonce search is the runtime's own: bump seeds are tried from 255
    downwards, so equal inputs always give an equal ``(address, nonce)``.
    """
    encoded = validate_seeds(seeds)
    # the bump byte is appended as one more seed
    if len(encoded) == MAX_SEEDS:
        raise InvalidSeed(f"No room for a bump seed after {MAX_SEEDS} seeds")
    address, nonce = Pubkey.find_program_address(encoded, program_id)
    logger.debug("derived %s (nonce %d) under %s", address, nonce, program_id)
    return address, nonce


def get_state(program_id: Pubkey) -> PDA:
    return derive(program_id, [b"state"])


def get_pricing(program_id: Pubkey) -> PDA:
    return derive(program_id, [b"zeta-pricing"])


def get_serum_authority(program_id: Pubkey) -> PDA:
    return derive(program_id, [b"serum"])


def get_mint_authority(program_id: Pubkey) -> PDA:
    return derive(program_id, [b"mint-auth"])


def get_zeta_group(program_id: Pubkey, underlying_mint: Pubkey) -> PDA:
    return derive(program_id, [b"zeta-group", underlying_mint])


def get_underlying(program_id: Pubkey, underlying_index: int) -> PDA:
    return derive(program_id, [b"underlying", u8(underlying_index)])


def get_flex_underlying(program_id: Pubkey, underlying_index: int) -> PDA:
    return derive(program_id, [b"flex-underlying", u8(underlying_index)])


def get_greeks(program_id: Pubkey, zeta_group: Pubkey) -> PDA:
    return derive(program_id, [b"greeks", zeta_group])


def get_perp_sync_queue(program_id: Pubkey, zeta_group: Pubkey) -> PDA:
    return derive(program_id, [b"perp-sync-queue", zeta_group])


def get_vault(program_id: Pubkey, zeta_group: Pubkey) -> PDA:
    return derive(program_id, [b"vault", zeta_group])


def get_zeta_insurance_vault(program_id: Pubkey, zeta_group: Pubkey) -> PDA:
    return derive(program_id, [b"zeta-insurance-vault", zeta_group])


def get_socialized_loss_account(program_id: Pubkey, zeta_group: Pubkey) -> PDA:
    return derive(program_id, [b"socialized-loss", zeta_group])


def get_combined_vault(program_id: Pubkey) -> PDA:
    return derive(program_id, [b"combined-vault"])


def get_zeta_combined_insurance_vault(program_id: Pubkey) -> PDA:
    return derive(program_id, [b"combined-insurance-vault"])


def get_combined_socialized_loss_account(program_id: Pubkey) -> PDA:
    return derive(program_id, [b"combined-socialized-loss"])


def get_market_uninitialized(
    program_id: Pubkey, zeta_group: Pubkey, seed_index: int
) -> PDA:
    return derive(program_id, [b"market", zeta_group, u8(seed_index)])


def get_base_mint(program_id: Pubkey, market: Pubkey) -> PDA:
    return derive(program_id, [b"base-mint", market])


def get_quote_mint(program_id: Pubkey, market: Pubkey) -> PDA:
    return derive(program_id, [b"quote-mint", market])


def get_zeta_vault(program_id: Pubkey, mint: Pubkey) -> PDA:
    return derive(program_id, [b"zeta-vault", mint])


def get_serum_vault(program_id: Pubkey, mint: Pubkey) -> PDA:
    return derive(program_id, [b"serum-vault", mint])


def get_market_node(program_id: Pubkey, zeta_group: Pubkey, index: int) -> PDA:
    return derive(program_id, [b"market-node", zeta_group, u8(index)])


def get_market_indexes(program_id: Pubkey, zeta_group: Pubkey) -> PDA:
    return derive(program_id, [b"market-indexes", zeta_group])


def get_margin_account(program_id: Pubkey, zeta_group: Pubkey, user: Pubkey) -> PDA:
    return derive(program_id, [b"margin", zeta_group, user])


def get_spread_account(program_id: Pubkey, zeta_group: Pubkey, user: Pubkey) -> PDA:
    return derive(program_id, [b"spread", zeta_group, user])


def get_cross_margin_account(
    program_id: Pubkey, user: Pubkey, subaccount_index: int
) -> PDA:
    return derive(program_id, [b"cross-margin", user, u8(subaccount_index)])


def get_open_orders(
    program_id: Pubkey, dex_program_id: Pubkey, market: Pubkey, user: Pubkey
) -> PDA:
    return derive(program_id, [b"open-orders", dex_program_id, market, user])


def get_open_orders_map(program_id: Pubkey, open_orders: Pubkey) -> PDA:
    return derive(program_id, [b"open-orders-map", open_orders])


def get_settlement(
    program_id: Pubkey, underlying_mint: Pubkey, expiration_ts: int
) -> PDA:
    return derive(program_id, [b"settlement", underlying_mint, u64(expiration_ts)])


def get_user_insurance_deposit_account(program_id: Pubkey, user: Pubkey) -> PDA:
    return derive(program_id, [b"user-insurance-deposit", user])


def get_user_whitelist_deposit_account(program_id: Pubkey, user: Pubkey) -> PDA:
    return derive(program_id, [b"whitelist-deposit", user])


def get_user_whitelist_insurance_account(program_id: Pubkey, user: Pubkey) -> PDA:
    return derive(program_id, [b"whitelist-insurance", user])


def get_user_whitelist_trading_fees_account(
    program_id: Pubkey, user: Pubkey
) -> PDA:
    return derive(program_id, [b"whitelist-trading-fees", user])


def get_zeta_treasury_wallet(program_id: Pubkey, mint: Pubkey) -> PDA:
    return derive(program_id, [b"zeta-treasury-wallet", mint])


def get_zeta_referrals_rewards_wallet(program_id: Pubkey, mint: Pubkey) -> PDA:
    return derive(program_id, [b"zeta-referrals-rewards-wallet", mint])


def get_referrer_account_address(program_id: Pubkey, referrer: Pubkey) -> PDA:
    return derive(program_id, [b"referrer", referrer])


def get_referral_account_address(program_id: Pubkey, user: Pubkey) -> PDA:
    return derive(program_id, [b"referral", user])


def get_referrer_alias_address(program_id: Pubkey, alias: str) -> PDA:
    return derive(program_id, [b"referrer-alias", alias])


def get_serum_vault_owner_and_nonce(
    market: Pubkey, dex_program_id: Pubkey
) -> PDA:
    """Search the order-book vault signer.

    Unlike the other schemes the DEX signs with a u64 nonce appended to the
    market address, tried upwards from zero until the hash is off-curve.
    """
    market_bytes = bytes(market)
    for nonce in range(256):
        try:
            owner = Pubkey.create_program_address(
                [market_bytes, u64(nonce)], dex_program_id
            )
        except ValueError:
            continue
        return owner, nonce
    raise InvalidSeed(f"Unable to find a vault signer nonce for {market}")
